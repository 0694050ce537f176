"""Atoms and element groups."""
from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Sequence, Union

import numpy as np

from molsym import GeometryError
from molsym.typing import Array2D, Position

GROUP_ORDERS = ['sorted', 'input']


class Atom(NamedTuple):
    """Element label and cartesian position."""
    element: str
    coordinates: Position

    @classmethod
    def from_position(cls, element: str, position: Sequence[float]) -> Atom:
        x, y, z = (float(c) for c in position)
        return cls(str(element), (x, y, z))


AtomLike = Union[Atom, Sequence]


def as_atoms(atoms: Iterable[AtomLike]) -> List[Atom]:
    """Convert (symbol, position) pairs to Atom objects."""
    result = []
    for atom in atoms:
        symbol, position = atom
        if len(position) != 3:
            raise GeometryError(
                f'{symbol}: expected 3 coordinates, got {len(position)}')
        if not isinstance(atom, Atom):
            atom = Atom.from_position(symbol, position)
        result.append(atom)
    return result


def group_by_element(atoms: Iterable[AtomLike],
                     order: str = 'sorted') -> Dict[str, Array2D]:
    """Partition atoms into per-element (n, 3) coordinate arrays.

    Rows keep the input order of the atoms.  The groups are ordered
    lexicographically by element (``order='sorted'``) or by first
    appearance (``order='input'``).
    """
    if order not in GROUP_ORDERS:
        raise ValueError(f'Unknown group order: {order!r}.  '
                         f'Must be one of {GROUP_ORDERS}')

    positions: Dict[str, List[Position]] = {}
    for atom in as_atoms(atoms):
        positions.setdefault(atom.element, []).append(atom.coordinates)

    symbols = list(positions)
    if order == 'sorted':
        symbols.sort()

    groups = {}
    for symbol in symbols:
        coords = np.array(positions[symbol], dtype=float)
        if coords.shape != (len(positions[symbol]), 3):
            raise GeometryError(f'Bad coordinates for {symbol}: '
                                f'shape {coords.shape}')
        if not np.isfinite(coords).all():
            raise GeometryError(f'Non-finite coordinates for {symbol}')
        groups[symbol] = coords
    return groups


def atoms_from_ase(atoms) -> List[Atom]:
    """Convert an ase.Atoms object."""
    return [Atom.from_position(symbol, position)
            for symbol, position in zip(atoms.get_chemical_symbols(),
                                        atoms.positions)]


def read_atoms(filename, index=-1, format: str = None) -> List[Atom]:
    """Read a structure file with ase.io.read()."""
    from ase.io import read
    return atoms_from_ase(read(filename, index=index, format=format))
