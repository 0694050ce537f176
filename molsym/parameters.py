from __future__ import annotations

import os
from typing import Any, Dict

from molsym import ParameterError

default_parameters: Dict[str, Any] = {
    'tolerance': 1e-6,  # absolute, per cartesian component
    'decimals': 6,  # rounding of distances for the octahedron test
    'grouping': 'sorted',
    'axes': 'z',
    'inversion': 'literal',
    'trivial_rotation': True}

choices = {
    'grouping': ['sorted', 'input'],
    'axes': ['z', 'general'],
    'inversion': ['literal', 'textbook']}


def update_dict(default: Dict[str, Any],
                value: Dict[str, Any] | None) -> Dict[str, Any]:
    dct = default.copy()
    if value is not None:
        unknown = value.keys() - default.keys()
        if unknown:
            raise ParameterError(
                f'Unknown parameter(s): {", ".join(sorted(unknown))}')
        dct.update(value)
    return dct


def get_parameters(**kwargs) -> Dict[str, Any]:
    """Defaults updated with $MOLSYM_TOLERANCE and keyword arguments."""
    default = default_parameters.copy()
    tolerance = os.environ.get('MOLSYM_TOLERANCE')
    if tolerance:
        default['tolerance'] = float(tolerance)

    params = update_dict(default, kwargs)

    for key, values in choices.items():
        if params[key] not in values:
            raise ValueError(f'Bad value for {key}: {params[key]!r}.  '
                             f'Must be one of {values}')
    if not params['tolerance'] > 0.0:
        raise ValueError(f'Tolerance must be positive: {params["tolerance"]}')
    params['decimals'] = int(params['decimals'])
    params['trivial_rotation'] = bool(params['trivial_rotation'])
    return params
