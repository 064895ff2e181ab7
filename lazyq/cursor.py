from contextlib import contextmanager
from .types import *


def _caller_owned(iterator: Iterator[Any], source: Any) -> bool:
    # follow enumerables down to what they were built from; one that does not
    # open its own iterators hands out whatever its caller gave it
    while iterator is not source:
        if getattr(source, '_owns_iterators', True):
            return False
        if source._source is None:
            return True
        source = source._source
    return True


@contextmanager
def cursor(source: Iterable[T]) -> Iterator[Iterator[T]]:
    """
    scoped enumeration of a source.

    yields a fresh iterator over `source` and closes it when the scope ends,
    whether the enumeration completed, raised, or was abandoned by the
    consumer (generator close). closing propagates down a pipeline of
    enumerables, so every handle acquired during enumeration is released.

    when the iterator is one the caller handed in (the source itself, or the
    object under any number of enumerables wrapping it) nothing new was
    acquired: the caller may keep pulling from it after a partial
    enumeration, so it is left open.
    """
    iterator = iter(source)
    borrowed = _caller_owned(iterator, source)
    try:
        yield iterator
    finally:
        if not borrowed:
            close = getattr(iterator, 'close', None)
            if close is not None:
                close()
