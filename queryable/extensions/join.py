from __future__ import annotations
import typing
from ..types import *
from ..sources import as_source

if typing.TYPE_CHECKING:
    from ..enumerable import Queryable


class _JoinCursor(Iterator[R]):
    def __init__(self, outer: Iterator[T], inner_source: Iterable[U],
                 predicate: JoinPredicate[T, U], selector: JoinSelector[T, U, R]):
        self._outer = outer
        self._inner_source = inner_source
        self._predicate = predicate
        self._selector = selector
        self._outer_item = None
        self._inner: Optional[Iterator[U]] = None

    def __next__(self) -> R:
        while True:
            if self._inner is None:
                self._outer_item = next(self._outer)
                # the whole inner sequence is walked again for every outer element
                self._inner = iter(self._inner_source)
            for inner_item in self._inner:
                if self._predicate(self._outer_item, inner_item):
                    return self._selector(self._outer_item, inner_item)
            self._inner = None


class JoinStage(Generic[T, U, R]):
    """nested-loop join: every outer element against the full inner sequence, both in order"""

    def __init__(self, outer: Iterable[T], inner: Iterable[U],
                 predicate: JoinPredicate[T, U], selector: JoinSelector[T, U, R]):
        self._outer = outer
        self._inner = inner
        self._predicate = predicate
        self._selector = selector

    def __iter__(self) -> Iterator[R]:
        return _JoinCursor(iter(self._outer), self._inner, self._predicate, self._selector)


class _JoinOperations(Generic[T]):
    def join(self, inner: Iterable[U], predicate: JoinPredicate[T, U],
             selector: JoinSelector[T, U, R]) -> 'Queryable[R]':
        """
        lazily pairs every element with every inner element satisfying predicate(outer, inner)
        and yields selector(outer, inner). o(outer * inner) per full pass, no key lookup.
        """
        from ..enumerable import Queryable
        return Queryable(JoinStage(self, as_source(inner), predicate, selector))
