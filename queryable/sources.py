import logging
from collections import abc
from .types import *
from .errors import NotIterableError

logger = logging.getLogger(__name__)


# --- source adapters ---

class IterableSource(Generic[T]):
    """wraps a repeatable iterable (list, tuple, range, custom __iter__)"""

    def __init__(self, iterable: Iterable[T]):
        self._iterable = iterable

    def __iter__(self) -> Iterator[T]:
        return iter(self._iterable)

    def __repr__(self) -> str:
        return f"IterableSource({type(self._iterable).__name__})"


class FactorySource(Generic[T]):
    """calls a zero-argument function on every pass and iterates what it returns"""

    def __init__(self, data_func: Callable[[], Iterable[T]]):
        self._data_func = data_func

    def __iter__(self) -> Iterator[T]:
        return iter(self._data_func())

    def __repr__(self) -> str:
        return f"FactorySource({getattr(self._data_func, '__name__', 'callable')})"


class ReplayableSource(Generic[T]):
    """
    turns a one-shot iterator into a repeatable sequence.
    elements are buffered as they are first pulled, so every pass sees the same
    elements no matter how passes interleave. nothing is read ahead of demand.
    """

    def __init__(self, iterator: Iterator[T]):
        self._iterator = iterator
        self._buffer: List[T] = []
        self._is_exhausted = False

    def _pull(self) -> bool:
        """buffer one more element from the shared iterator, false once exhausted"""
        if self._is_exhausted:
            return False
        try:
            self._buffer.append(next(self._iterator))
        except StopIteration:
            self._is_exhausted = True
            logger.debug("single-pass source exhausted after %d elements", len(self._buffer))
            return False
        return True

    def __iter__(self) -> Iterator[T]:
        position = 0
        while True:
            if position < len(self._buffer):
                yield self._buffer[position]
                position += 1
            elif not self._pull():
                return

    def __repr__(self) -> str:
        state = "exhausted" if self._is_exhausted else "open"
        return f"ReplayableSource(buffered={len(self._buffer)}, {state})"


# --- adapter entry point ---

def as_source(obj: Any) -> Iterable[Any]:
    """adapt any supported value into a sequence that can produce a fresh iterator on demand"""
    from .enumerable import IQueryable

    if isinstance(obj, IQueryable):
        return obj
    # classified by protocol; iter() is not called until a pass starts
    if isinstance(obj, abc.Iterator):
        # an iterator hands itself back from iter(), so a second pass would find it drained
        logger.debug("buffering single-pass source %s", type(obj).__name__)
        return ReplayableSource(obj)
    if isinstance(obj, abc.Iterable):
        return IterableSource(obj)
    if callable(obj):
        return FactorySource(obj)
    # old-style sequences iterate through __getitem__
    if hasattr(type(obj), "__getitem__"):
        return IterableSource(obj)
    raise NotIterableError(f"'{type(obj).__name__}' object is not iterable")
