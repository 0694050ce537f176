# Copyright (C) 2003  CAMP
# Please see the accompanying LICENSE file for further information.

"""Main molsym module."""

__version__ = '0.1.0'
__ase_version_required__ = '3.22.1'

__all__ = ['Atom', 'classify_molecule', 'check_symmetry',
           'MoleculeClassifier', 'Classification',
           'GeometryError', 'ParameterError']


class GeometryError(ValueError):
    """Coordinates that can not be analysed (wrong shape, NaN or Inf)."""


class ParameterError(KeyError):
    pass


from molsym.atoms import Atom  # noqa: E402
from molsym.point_groups.group import Classification  # noqa: E402
from molsym.point_groups.check import (MoleculeClassifier,  # noqa: E402
                                       check_symmetry, classify_molecule)
