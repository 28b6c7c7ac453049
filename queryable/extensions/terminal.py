from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..errors import MissingReducerError

if typing.TYPE_CHECKING:
    from ..enumerable import Queryable

# distinguishes "no element" from an element that happens to be None
_MISSING = object()


class _TerminalOperations(Generic[T]):
    def reduce(self, seed_or_reducer: Any, reducer: Optional[Reducer[U, T]] = None) -> Any:
        """
        folds the sequence left to right, one reducer call per element.
        reduce(reducer): the first element seeds the accumulator, the reducer starts at index 1.
        reduce(seed, reducer): the accumulator starts at seed, the reducer starts at index 0.
        without a seed an empty sequence reduces to None.
        """
        has_seed = reducer is not None
        if not has_seed:
            reducer = seed_or_reducer
        if not callable(reducer):
            raise MissingReducerError("missing reducer function")
        reducer = with_index(reducer, 3)

        iterator = iter(self)
        if has_seed:
            accumulator, start = seed_or_reducer, 0
        else:
            accumulator, start = next(iterator, _MISSING), 1
            if accumulator is _MISSING:
                return None

        for index, item in enumerate(iterator, start):
            accumulator = reducer(accumulator, item, index)
        return accumulator

    def some(self) -> bool:
        """true when the sequence yields at least one element"""
        return next(iter(self), _MISSING) is not _MISSING

    def empty(self) -> bool:
        """true when the sequence yields nothing"""
        return not self.some()

    def first(self, default: Optional[T] = None) -> Optional[T]:
        """get first element, or default when there is none"""
        item = next(iter(self), _MISSING)
        return default if item is _MISSING else item

    def last(self, default: Optional[T] = None) -> Optional[T]:
        """get last element, or default when there is none"""
        item = _MISSING
        for item in self:
            pass
        return default if item is _MISSING else item

    def to_array(self) -> List[T]:
        """materialize into a new list"""
        return list(self)

    def to_numpy(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.to_array())

    def to_series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.to_array())

    def to_frame(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.to_array())
