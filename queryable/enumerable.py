from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.join import _JoinOperations
from .extensions.terminal import _TerminalOperations
from .extensions.numeric import _NumericOperations

# --- abstract base class ---

class IQueryable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a fresh pass over the sequence"""
        pass

# --- base query handle ---

class _BaseQueryable(IQueryable[T]):
    def __init__(self, source: Iterable[T]):
        """init with an adapted source or a stage; nothing is pulled here"""
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

# --- query handles ---

class Queryable(
    _BaseQueryable[T],
    _CoreOperations[T],
    _JoinOperations[T],
    _TerminalOperations[T]
):
    """a lazily evaluated, immutable query over a repeatable sequence."""
    pass


class NumericQueryable(
    _BaseQueryable[Number],
    _CoreOperations[Number],
    _JoinOperations[Number],
    _TerminalOperations[Number],
    _NumericOperations
):
    """a query known to yield numbers, which additionally offers sum()."""
    pass
