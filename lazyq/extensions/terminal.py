from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from .. import operators
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """operations that enumerate the sequence now and return a value"""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._enumerable))

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._enumerable))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self._enumerable))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        return operators.count(self._enumerable, predicate)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        return operators.any_(self._enumerable, predicate)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return operators.all_(self._enumerable, predicate)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        return operators.first(self._enumerable, predicate)

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        return operators.first_or_default(self._enumerable, predicate, default)

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        return operators.last(self._enumerable, predicate)

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        return operators.last_or_default(self._enumerable, predicate, default)

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        return operators.single(self._enumerable, predicate)

    def single_or_default(self, predicate: Optional[Predicate[T]] = None,
                          default: Optional[T] = None) -> Optional[T]:
        """get single element or default, erroring if more than one"""
        return operators.single_or_default(self._enumerable, predicate, default)
