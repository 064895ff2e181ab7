from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .errors import InvalidArgumentError

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a fresh enumeration"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: IterableFactory[T], source: Any = None,
                 owns_iterators: bool = False):
        """
        init with a function returning the iterable to walk; it is called (and
        iter() applied to its result) once per enumeration.
        `source` optionally names the container the iterator walks, which lets
        operators needing random access (reverse) reach it.
        `owns_iterators` says data_func opens a new iterator on every call,
        which may then be closed when an enumeration ends. otherwise whatever
        data_func hands back belongs to the caller and is left open.
        """
        if data_func is None:
            raise InvalidArgumentError("data_func")
        self._data_func = data_func
        self._source = source
        self._owns_iterators = owns_iterators

    def __iter__(self) -> Iterator[T]:
        # nothing is cached: each enumeration re-derives its cursor
        return iter(self._data_func())

    # no __len__ on purpose: list(enumerable) would call it and walk the
    # source twice

    def __repr__(self) -> str:
        backing = type(self._source).__name__ if self._source is not None else "lazy"
        return f"{type(self).__name__}({backing})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazily evaluated, linq-inspired sequence over any python iterable."""
    def __init__(self, data_func: IterableFactory[T], source: Any = None,
                 owns_iterators: bool = False):
        super().__init__(data_func, source, owns_iterators)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.to = TerminalAccessor(self)
