"""Classification object."""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

AXIAL_KINDS = ['C', 'D', 'S']
KINDS = AXIAL_KINDS + ['T', 'O', 'Other']


class Classification(NamedTuple):
    """Simplified point group.

    kind is one of C, D, S (with a rotation order), T (tetrahedral),
    O (octahedral) or Other.
    """
    kind: str
    order: Optional[int] = None

    @classmethod
    def create(cls, kind: str, order: int = None) -> Classification:
        if kind not in KINDS:
            raise ValueError(f'Unknown kind: {kind!r}')
        if kind in AXIAL_KINDS:
            if order is None or int(order) < 1:
                raise ValueError(f'{kind}n needs an order >= 1, got {order}')
            order = int(order)
        elif order is not None:
            raise ValueError(f'{kind} takes no order')
        return cls(kind, order)

    def __str__(self) -> str:
        if self.order is None:
            return self.kind
        return f'{self.kind}{self.order}'


def C(order: int) -> Classification:
    return Classification.create('C', order)


def D(order: int) -> Classification:
    return Classification.create('D', order)


def S(order: int) -> Classification:
    return Classification.create('S', order)


T = Classification('T')
O = Classification('O')  # noqa: E741
OTHER = Classification('Other')


def parse(text: str) -> Classification:
    """Inverse of str(classification).

    >>> parse('D3')
    Classification(kind='D', order=3)
    """
    m = re.fullmatch(r'([CDS])(\d+)|(T|O|Other)', text.strip())
    if m is None:
        raise ValueError(f'Not a classification: {text!r}')
    if m.group(3):
        return Classification(m.group(3))
    return Classification.create(m.group(1), int(m.group(2)))
