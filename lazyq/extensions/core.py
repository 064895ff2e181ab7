from __future__ import annotations
import typing
from .. import operators
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    """
    lazy operators. every method returns a new enumerable and leaves the
    source untouched until that enumerable is iterated.
    """
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        return operators.where(self, predicate)

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        return operators.select(self, selector)

    def select_with_index(self: 'Enumerable[T]', selector: IndexedSelector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        return operators.select_with_index(self, selector)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        return operators.select_many(self, selector)

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        return operators.of_type(self, type_filter)

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order"""
        return operators.concat(self, other)

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        return operators.append(self, element)

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        return operators.prepend(self, element)

    def default_if_empty(self: 'Enumerable[T]', default_value: Optional[T] = None) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        return operators.default_if_empty(self, default_value)

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        return operators.take(self, count)

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        return operators.take_while(self, predicate)

    def take_while_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        return operators.take_while_with_index(self, predicate)

    def take_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the last 'count' elements"""
        return operators.take_last(self, count)

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        return operators.skip(self, count)

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        return operators.skip_while(self, predicate)

    def skip_while_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        return operators.skip_while_with_index(self, predicate)

    def skip_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the last 'count' elements"""
        return operators.skip_last(self, count)

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """
        inverts the order of the elements in a sequence.
        only available when the enumerable was built over a random-access
        container (or is itself a reversed one); raises PreconditionError
        otherwise.
        """
        return operators.reverse(self)
