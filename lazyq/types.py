from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
IndexedPredicate = Callable[[T, int], bool]
Selector = Callable[[T], U]
IndexedSelector = Callable[[T, int], U]
KeySelector = Callable[[T], K]

# returns what to walk each time a sequence is enumerated
IterableFactory = Callable[[], Iterable[T]]
