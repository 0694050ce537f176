"""Simplified point-group classification.

Element groups are matched against regular tetrahedra and octahedra,
searched for rotation axes and tested for mirror planes and an
inversion center.
"""

from .group import KINDS, Classification
from .check import MoleculeClassifier, check_symmetry, classify_molecule

__all__ = ['Classification', 'MoleculeClassifier', 'check_symmetry',
           'classify_molecule', 'kinds']

kinds = KINDS
