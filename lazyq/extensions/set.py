from __future__ import annotations
import typing
from .. import operators
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    equality-based set operations. elements must be hashable.
    distinct, union and except_ consume their inputs as soon as they are
    called; intersect waits for the first pull.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self) -> 'Enumerable[T]':
        """return distinct elements, in order of first appearance"""
        return operators.distinct(self._enumerable)

    def union(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the union of two sequences (distinct elements)."""
        return operators.union(self._enumerable, other)

    def intersect(self, other: Iterable[T]) -> 'Enumerable[T]':
        """
        return elements of `other` that also occur in this sequence, each once.
        order follows `other`.
        """
        return operators.intersect(self._enumerable, other)

    def except_(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return elements from the first sequence not in the second (set difference)."""
        return operators.except_(self._enumerable, other)
