from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Queryable, NumericQueryable

# --- stages ---
# a stage holds its upstream sequence and operation; each pass gets its own cursor


class _FilterCursor(Iterator[T]):
    def __init__(self, upstream: Iterator[T], predicate: Callable[[T, int], bool]):
        self._upstream = upstream
        self._predicate = predicate
        self._index = 0

    def __next__(self) -> T:
        while True:
            item = next(self._upstream)
            index = self._index
            self._index += 1
            if self._predicate(item, index):
                return item


class FilterStage(Generic[T]):
    """keeps the upstream elements the predicate accepts, in order"""

    def __init__(self, upstream: Iterable[T], predicate: Callable[[T, int], bool]):
        self._upstream = upstream
        self._predicate = predicate

    def __iter__(self) -> Iterator[T]:
        return _FilterCursor(iter(self._upstream), self._predicate)


class _MapCursor(Iterator[U]):
    def __init__(self, upstream: Iterator[T], selector: Callable[[T, int], U]):
        self._upstream = upstream
        self._selector = selector
        self._index = 0

    def __next__(self) -> U:
        item = next(self._upstream)
        index = self._index
        self._index += 1
        return self._selector(item, index)


class MapStage(Generic[T, U]):
    """projects every upstream element through the selector"""

    def __init__(self, upstream: Iterable[T], selector: Callable[[T, int], U]):
        self._upstream = upstream
        self._selector = selector

    def __iter__(self) -> Iterator[U]:
        return _MapCursor(iter(self._upstream), self._selector)


# --- operations ---

class _CoreOperations(Generic[T]):
    def filter(self, predicate: Predicate[T]):
        """filter elements based on a predicate taking (element) or (element, index)"""
        # element type is unchanged, so a numeric handle stays numeric
        return type(self)(FilterStage(self, with_index(predicate, 2)))

    def map(self, selector: Selector[T, U]) -> 'Queryable[U]':
        """project each element to a new form; the result is never promoted to numeric"""
        from ..enumerable import Queryable
        return Queryable(MapStage(self, with_index(selector, 2)))

    def as_numeric(self) -> 'NumericQueryable':
        """
        treats the current sequence as numeric, enabling sum().
        this does not inspect the elements. use it only when the chain is known to yield numbers.
        """
        from ..enumerable import NumericQueryable
        return NumericQueryable(self)
