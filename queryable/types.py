import inspect
import numbers
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    List, Type
)

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')

# predicates and selectors may take the element alone or the element and its index
Predicate = Union[Callable[[T], bool], Callable[[T, int], bool]]
Selector = Union[Callable[[T], U], Callable[[T, int], U]]
JoinPredicate = Callable[[T, U], bool]
JoinSelector = Callable[[T, U], R]
Reducer = Union[Callable[[U, T], U], Callable[[U, T, int], U]]

# everything is_numeric accepts: int, float, complex, Decimal, Fraction, numpy scalars
Number = numbers.Number


def _positional_arity(func: Callable) -> int:
    """number of positional parameters the callback can take an index through"""
    # constructors (int, str, user classes) only ever receive the element
    if isinstance(func, type):
        return 0
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 0
    positional = [p for p in params
                  if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    # python-level callbacks may declare the index as optional (lambda x, i=0: ...);
    # optional builtin parameters (str.strip's chars) are never the index
    if inspect.isfunction(func) or inspect.ismethod(func):
        return len(positional)
    return sum(1 for p in positional if p.default is inspect.Parameter.empty)


def with_index(func: Callable, full_arity: int) -> Callable:
    """
    normalizes a callback so it can always be called with full_arity arguments.
    callbacks with fewer positional parameters have the trailing index dropped.
    a bare *args callback counts as taking only the element, so undecorated wrappers keep working.
    """
    if _positional_arity(func) >= full_arity:
        return func
    if full_arity == 2:
        return lambda item, index: func(item)
    return lambda accumulator, item, index: func(accumulator, item)
