import typing
from itertools import repeat as itertools_repeat
from .types import *
from .errors import InvalidArgumentError

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    wrap an iterable without copying it.
    the result can be enumerated again exactly when `data` can: a list wraps
    as a re-enumerable sequence, a generator as a single-pass one.
    """
    from .enumerable import Enumerable
    if data is None:
        raise InvalidArgumentError("data")
    return Enumerable(lambda: data, source=data)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    numbers = range(start, start + max(count, 0))
    return Enumerable(lambda: numbers, source=numbers)

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item; count=None repeats forever"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: itertools_repeat(item))
    return Enumerable(lambda: itertools_repeat(item, max(count, 0)))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (), source=())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """
    call generator_func once per pulled element.
    count=None produces an infinite sequence, so pair it with take().
    """
    from .enumerable import Enumerable
    if generator_func is None:
        raise InvalidArgumentError("generator_func")

    def generate_data():
        produced = 0
        while count is None or produced < count:
            yield generator_func()
            produced += 1

    return Enumerable(generate_data, owns_iterators=True)

# --- aliases ---
lazyq = from_iterable
P = from_iterable
