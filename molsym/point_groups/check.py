from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, List, Optional, Tuple, Union

import numpy as np

from molsym import GeometryError
from molsym.atoms import AtomLike, group_by_element
from molsym.logger import Logger
from molsym.parameters import get_parameters
from molsym.point_groups.group import C, D, O, OTHER, S, T, Classification
from molsym.point_groups.inversion import has_inversion_center
from molsym.point_groups.mirror import mirror_planes
from molsym.point_groups.rotation import search_rotations
from molsym.point_groups.shapes import is_octahedral, is_tetrahedral
from molsym.typing import Array2D

TXT = Union[str, Path, IO[str], None]


class MoleculeClassifier:
    def __init__(self, txt: TXT = None, **kwargs):
        """Simplified point-group classification.

        Atoms are split into element groups.  Each group is tested for
        being a regular tetrahedron (T) or octahedron (O).  Otherwise the
        highest rotation fold n is combined with the inversion (Sn) and
        mirror-plane (Dn) tests; Cn if neither holds.  The first element
        group with a result classifies the molecule.

        txt: str, Path, file object or None
            Log output ('-' means stdout, None means no output).

        Keyword arguments (see molsym.parameters.default_parameters):

        tolerance: float
            Absolute tolerance for comparing positions.
        decimals: int
            Distances are rounded to this many decimals in the
            octahedron test.
        grouping: 'sorted' or 'input'
            Order of element groups.
        axes: 'z' or 'general'
            Rotation search (see molsym.point_groups.rotation).
        inversion: 'literal' or 'textbook'
            Inversion test (see molsym.point_groups.inversion).
        trivial_rotation: bool
            Accept the identity (fold 1) as a rotation.  If False, groups
            with only the identity get no classification.
        """
        self.parameters = get_parameters(**kwargs)
        self.log = Logger(txt)
        self.tol = self.parameters['tolerance']

    def __repr__(self) -> str:
        args = ', '.join(f'{key}={value!r}'
                         for key, value in self.parameters.items())
        return f'MoleculeClassifier({args})'

    def check_symmetry(self, coords: Array2D) -> Optional[Classification]:
        """Classify one element group.  None if nothing was found."""
        coords = np.asarray(coords, dtype=float)
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise GeometryError(f'Expected (n, 3) coordinates, '
                                f'got shape {coords.shape}')
        p = self.parameters

        if is_tetrahedral(coords, self.tol):
            self.log('tetrahedron')
            return T
        if is_octahedral(coords, p['decimals']):
            self.log('octahedron')
            return O

        rotations = search_rotations(coords, self.tol, p['axes'])
        planes = mirror_planes(coords, self.tol)
        center = has_inversion_center(coords, self.tol, p['inversion'])
        self.log(folds=sorted(rotations.folds),
                 planes=', '.join(planes) or 'none',
                 center='yes' if center else 'no')

        if not rotations.found:
            return None
        if rotations.trivial and not p['trivial_rotation']:
            self.log('only the identity: ignored')
            return None

        order = rotations.order
        if center:
            return S(order)
        if planes:
            return D(order)
        return C(order)

    def group_results(self, atoms: Iterable[AtomLike]
                      ) -> List[Tuple[str, Optional[Classification]]]:
        """(element, classification or None) for all element groups."""
        groups = group_by_element(atoms, self.parameters['grouping'])
        self.log(**self.parameters)
        results = []
        for symbol, coords in groups.items():
            with self.log.indent(f'{symbol}: {len(coords)} atom(s)'):
                result = self.check_symmetry(coords)
                self.log(result=result)
            results.append((symbol, result))
        return results

    def classify(self, atoms: Iterable[AtomLike]) -> Classification:
        """Classification of the first element group that has one."""
        return self.select(self.group_results(atoms))

    def select(self, results: List[Tuple[str, Optional[Classification]]]
               ) -> Classification:
        """First classification in a group_results() list, else Other."""
        found = [(symbol, result)
                 for symbol, result in results
                 if result is not None]
        if not found:
            self.log('Point group: Other')
            return OTHER
        symbol, result = found[0]
        self.log(f'Point group: {result} (from {symbol})')
        return result


def check_symmetry(coords: Array2D, **kwargs) -> Optional[Classification]:
    return MoleculeClassifier(**kwargs).check_symmetry(coords)


def classify_molecule(atoms: Iterable[AtomLike],
                      **kwargs) -> Classification:
    """Classify atoms given as Atom objects or (symbol, position) pairs."""
    return MoleculeClassifier(**kwargs).classify(atoms)
