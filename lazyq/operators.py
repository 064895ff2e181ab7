"""
sequence operators as free functions.

every function takes its source sequence(s) first and either returns a new
`Enumerable` (lazy and buffering operators) or a single value (terminal
operators). arguments are always checked at call time; enumeration of the
source is deferred for everything except the terminal operators and the
set-building operators distinct / union / except_.

no operator assumes its source can be enumerated twice: each input is walked
at most once per enumeration of the result.
"""
from __future__ import annotations

import operator
import typing
from collections import deque
from collections.abc import Mapping, Set as AbstractSet, Sequence as SequenceABC
from itertools import islice, takewhile, dropwhile
from .types import *
from .cursor import cursor
from .log import get_logger
from .errors import (
    InvalidArgumentError, EmptySequenceError, CardinalityError, PreconditionError
)

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

logger = get_logger(__name__)

# marks "no element found" so that None stays a legal element
_MISSING = object()

__all__ = [
    # lazy / streaming
    "select", "select_with_index", "select_many", "where", "of_type",
    "concat", "append", "prepend", "default_if_empty",
    "take", "take_while", "take_while_with_index",
    "skip", "skip_while", "skip_while_with_index",
    # buffering
    "distinct", "union", "intersect", "except_",
    "take_last", "skip_last", "reverse",
    # terminal
    "first", "first_or_default", "last", "last_or_default",
    "single", "single_or_default", "any_", "all_", "count",
]


# --- argument checks ---

def _require(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(name)


def _require_callable(func: Any, name: str) -> None:
    _require(func, name)
    if not callable(func):
        raise InvalidArgumentError(name, f"expected a callable, got {type(func).__name__}")


def _require_count(value: Any, name: str = "count") -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(name, f"expected an integer, got {type(value).__name__}") from None


# --- result construction ---

def _lazy(data_func: IterableFactory[U], source: Any = None) -> 'Enumerable[U]':
    from .enumerable import Enumerable
    return Enumerable(data_func, source=source, owns_iterators=True)


def _nothing() -> 'Enumerable[Any]':
    return _lazy(lambda: (), source=())


def _owned(items: Iterable[T]) -> 'Enumerable[T]':
    """expose a private snapshot of an operator-owned buffer"""
    snapshot = tuple(items)
    return _lazy(lambda: snapshot, source=snapshot)


def _buffer(source: Iterable[T]) -> Dict[T, None]:
    """collect the distinct elements of a source, keeping first-seen order"""
    with cursor(source) as e:
        return dict.fromkeys(e)


# --- lazy / streaming operators ---

def select(source: Iterable[T], selector: Selector[T, U]) -> 'Enumerable[U]':
    """project each element to a new form"""
    _require(source, "source")
    _require_callable(selector, "selector")

    def select_iterator():
        with cursor(source) as e:
            yield from map(selector, e)

    return _lazy(select_iterator)


def select_with_index(source: Iterable[T], selector: IndexedSelector[T, U]) -> 'Enumerable[U]':
    """project each element to a new form, passing its zero-based position"""
    _require(source, "source")
    _require_callable(selector, "selector")

    def select_with_index_iterator():
        with cursor(source) as e:
            for index, item in enumerate(e):
                yield selector(item, index)

    return _lazy(select_with_index_iterator)


def select_many(source: Iterable[T], selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
    """project each element to a sequence and flatten the results"""
    _require(source, "source")
    _require_callable(selector, "selector")

    def select_many_iterator():
        with cursor(source) as e:
            for item in e:
                with cursor(selector(item)) as inner:
                    yield from inner

    return _lazy(select_many_iterator)


def where(source: Iterable[T], predicate: Predicate[T]) -> 'Enumerable[T]':
    """filter elements based on a predicate"""
    _require(source, "source")
    _require_callable(predicate, "predicate")

    def where_iterator():
        with cursor(source) as e:
            yield from filter(predicate, e)

    return _lazy(where_iterator)


def of_type(source: Iterable[Any], type_filter: Type[U]) -> 'Enumerable[U]':
    """keep only elements that are instances of type_filter"""
    _require(type_filter, "type_filter")
    return where(source, lambda item: isinstance(item, type_filter))


def concat(first: Iterable[T], second: Iterable[T]) -> 'Enumerable[T]':
    """
    all of `first`, then all of `second`.
    `second` is not touched until `first` is exhausted.
    """
    _require(first, "first")
    _require(second, "second")

    def concat_iterator():
        with cursor(first) as e:
            yield from e
        with cursor(second) as e:
            yield from e

    return _lazy(concat_iterator)


def append(source: Iterable[T], element: T) -> 'Enumerable[T]':
    """appends a value to the end of the sequence"""
    _require(source, "source")
    return concat(source, (element,))


def prepend(source: Iterable[T], element: T) -> 'Enumerable[T]':
    """adds a value to the beginning of the sequence"""
    _require(source, "source")
    return concat((element,), source)


def default_if_empty(source: Iterable[T], default_value: Optional[T] = None) -> 'Enumerable[T]':
    """the source, or a singleton of default_value if the source yields nothing"""
    _require(source, "source")

    def default_iterator():
        with cursor(source) as e:
            head = next(e, _MISSING)
            if head is _MISSING:
                yield default_value
                return
            yield head
            yield from e

    return _lazy(default_iterator)


def take(source: Iterable[T], count: int) -> 'Enumerable[T]':
    """
    the first `count` elements.
    never pulls more than `count` elements; for count <= 0 the source is not
    enumerated at all.
    """
    _require(source, "source")
    count = _require_count(count)
    if count <= 0:
        return _nothing()

    def take_iterator():
        with cursor(source) as e:
            yield from islice(e, count)

    return _lazy(take_iterator)


def take_while(source: Iterable[T], predicate: Predicate[T]) -> 'Enumerable[T]':
    """take elements while predicate is true; stops for good at the first failure"""
    _require(source, "source")
    _require_callable(predicate, "predicate")

    def take_while_iterator():
        with cursor(source) as e:
            yield from takewhile(predicate, e)

    return _lazy(take_while_iterator)


def take_while_with_index(source: Iterable[T], predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
    _require(source, "source")
    _require_callable(predicate, "predicate")

    def take_while_with_index_iterator():
        with cursor(source) as e:
            for index, item in enumerate(e):
                if not predicate(item, index):
                    return
                yield item

    return _lazy(take_while_with_index_iterator)


def skip(source: Iterable[T], count: int) -> 'Enumerable[T]':
    """drop the first `count` elements (each still costs one pull), emit the rest"""
    _require(source, "source")
    count = _require_count(count)

    def skip_iterator():
        with cursor(source) as e:
            if count > 0:
                yield from islice(e, count, None)
            else:
                yield from e

    return _lazy(skip_iterator)


def skip_while(source: Iterable[T], predicate: Predicate[T]) -> 'Enumerable[T]':
    """drop the leading run satisfying predicate, then emit everything after it"""
    _require(source, "source")
    _require_callable(predicate, "predicate")

    def skip_while_iterator():
        with cursor(source) as e:
            yield from dropwhile(predicate, e)

    return _lazy(skip_while_iterator)


def skip_while_with_index(source: Iterable[T], predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
    _require(source, "source")
    _require_callable(predicate, "predicate")

    def skip_while_with_index_iterator():
        with cursor(source) as e:
            for index, item in enumerate(e):
                if not predicate(item, index):
                    yield item
                    # predicate is never consulted again
                    yield from e
                    return

    return _lazy(skip_while_with_index_iterator)


# --- buffering operators ---

def distinct(source: Iterable[T]) -> 'Enumerable[T]':
    """
    unique elements of the source, compared by equality (elements must be
    hashable). the source is consumed immediately; the result enumerates a
    private snapshot in first-appearance order.
    """
    _require(source, "source")
    unique = _buffer(source)
    logger.debug(f"distinct buffered {len(unique)} unique elements")
    return _owned(unique)


def union(first: Iterable[T], second: Iterable[T]) -> 'Enumerable[T]':
    """set union of both sequences; each element appears once"""
    _require(first, "first")
    _require(second, "second")
    unique = _buffer(first)
    with cursor(second) as e:
        for item in e:
            unique.setdefault(item)
    logger.debug(f"union buffered {len(unique)} unique elements")
    return _owned(unique)


def intersect(first: Iterable[T], second: Iterable[T]) -> 'Enumerable[T]':
    """
    elements of `second` that also occur in `first`, each emitted once.

    the working set is built from `first` at the first pull; `second` is then
    streamed, and an element leaves the working set as it is emitted, so a
    repeat in `second` is not emitted again.
    """
    _require(first, "first")
    _require(second, "second")

    def intersect_iterator():
        with cursor(first) as e:
            working = set(e)
        logger.debug(f"intersect buffered {len(working)} candidate elements")
        with cursor(second) as e:
            for item in e:
                if item in working:
                    working.remove(item)
                    yield item

    return _lazy(intersect_iterator)


def except_(first: Iterable[T], second: Iterable[T]) -> 'Enumerable[T]':
    """
    distinct elements of `first` that do not occur in `second`.
    duplicates in `first` collapse: one match in `second` removes them all.
    """
    _require(first, "first")
    _require(second, "second")
    working = _buffer(first)
    with cursor(second) as e:
        for item in e:
            working.pop(item, None)
    logger.debug(f"except_ kept {len(working)} elements")
    return _owned(working)


def take_last(source: Iterable[T], count: int) -> 'Enumerable[T]':
    """the final `count` elements in source order"""
    _require(source, "source")
    count = _require_count(count)
    if count <= 0:
        return _nothing()

    def take_last_iterator():
        with cursor(source) as e:
            # fill, then evict the oldest once full
            queue = deque(e, maxlen=count)
        logger.debug(f"take_last buffered {len(queue)} of at most {count} elements")
        while queue:
            yield queue.popleft()

    return _lazy(take_last_iterator)


def skip_last(source: Iterable[T], count: int) -> 'Enumerable[T]':
    """
    everything except the final `count` elements.
    an element is emitted only once `count` further elements are known to
    follow it, so at most `count` elements are held back at any time.
    """
    _require(source, "source")
    count = _require_count(count)
    if count <= 0:
        return skip(source, 0)

    def skip_last_iterator():
        queue = deque()
        with cursor(source) as e:
            for item in e:
                if len(queue) == count:
                    yield queue.popleft()
                queue.append(item)

    return _lazy(skip_last_iterator)


class _ReversedView(SequenceABC):
    """read-only reversed index view over a random-access container"""

    def __init__(self, container):
        self._container = container

    def __len__(self) -> int:
        return len(self._container)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        size = len(self._container)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("index out of range")
        return self._container[size - 1 - index]

    def __repr__(self) -> str:
        return f"_ReversedView({self._container!r})"


def _random_access(source: Any) -> Any:
    from .enumerable import Enumerable
    container = source._source if isinstance(source, Enumerable) else source
    if (container is None
            or isinstance(container, (Mapping, AbstractSet))
            or not hasattr(container, '__len__')
            or not hasattr(container, '__getitem__')):
        logger.debug(f"reverse rejected source of type {type(source).__name__}")
        raise PreconditionError("reverse", source, "a sized source with positional access")
    return container


def reverse(source: Iterable[T]) -> 'Enumerable[T]':
    """
    elements from last index to first.

    only defined for sources that report their length and support positional
    access (lists, tuples, ranges, strings, enumerables built from one of
    those, or the result of another reverse). length is read when enumeration
    starts. the result is itself random-access, so it can be reversed again.
    """
    _require(source, "source")
    container = _random_access(source)

    def reverse_iterator():
        for index in range(len(container) - 1, -1, -1):
            yield container[index]

    return _lazy(reverse_iterator, source=_ReversedView(container))


# --- terminal operators ---

def _first(source: Iterable[T], predicate: Optional[Predicate[T]]) -> Any:
    with cursor(source) as e:
        for item in e:
            if predicate is None or predicate(item):
                return item
    return _MISSING


def _last(source: Iterable[T], predicate: Optional[Predicate[T]]) -> Any:
    result = _MISSING
    with cursor(source) as e:
        for item in e:
            if predicate is None or predicate(item):
                result = item
    return result


def _single(source: Iterable[T], predicate: Optional[Predicate[T]]) -> Any:
    result = _MISSING
    with cursor(source) as e:
        for item in e:
            if predicate is None or predicate(item):
                if result is not _MISSING:
                    logger.debug("single found more than one matching element")
                    raise CardinalityError("sequence contains more than one matching element", found=2)
                result = item
    return result


def _check_terminal(source: Any, predicate: Any) -> None:
    _require(source, "source")
    if predicate is not None:
        _require_callable(predicate, "predicate")


def first(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """get first element (matching predicate, if given)"""
    _check_terminal(source, predicate)
    result = _first(source, predicate)
    if result is _MISSING:
        if predicate is None:
            raise EmptySequenceError("sequence contains no elements")
        raise EmptySequenceError("no element satisfies the condition")
    return result


def first_or_default(source: Iterable[T], predicate: Optional[Predicate[T]] = None,
                     default: Optional[T] = None) -> Optional[T]:
    """get first element or default"""
    _check_terminal(source, predicate)
    result = _first(source, predicate)
    return default if result is _MISSING else result


def last(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """get last element; always walks the whole source"""
    _check_terminal(source, predicate)
    result = _last(source, predicate)
    if result is _MISSING:
        if predicate is None:
            raise EmptySequenceError("sequence contains no elements")
        raise EmptySequenceError("no element satisfies the condition")
    return result


def last_or_default(source: Iterable[T], predicate: Optional[Predicate[T]] = None,
                    default: Optional[T] = None) -> Optional[T]:
    _check_terminal(source, predicate)
    result = _last(source, predicate)
    return default if result is _MISSING else result


def single(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """get the only element (matching predicate), erroring if not exactly one"""
    _check_terminal(source, predicate)
    result = _single(source, predicate)
    if result is _MISSING:
        logger.debug("single found no matching element")
        raise CardinalityError("sequence contains no matching elements", found=0)
    return result


def single_or_default(source: Iterable[T], predicate: Optional[Predicate[T]] = None,
                      default: Optional[T] = None) -> Optional[T]:
    """
    the only element (matching predicate), or default when there is none.
    more than one match is always an error, with or without a predicate.
    """
    _check_terminal(source, predicate)
    result = _single(source, predicate)
    return default if result is _MISSING else result


def any_(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> bool:
    """true at the first matching element; without a predicate, true if non-empty"""
    _check_terminal(source, predicate)
    return _first(source, predicate) is not _MISSING


def all_(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """false at the first non-matching element; vacuously true when empty"""
    _require(source, "source")
    _require_callable(predicate, "predicate")
    with cursor(source) as e:
        for item in e:
            if not predicate(item):
                return False
    return True


def count(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> int:
    """count elements (matching predicate); always a full traversal"""
    _check_terminal(source, predicate)
    with cursor(source) as e:
        if predicate is None:
            return sum(1 for _ in e)
        return sum(1 for x in e if predicate(x))
