from __future__ import annotations
import numbers
import numpy as np
from ..types import *


def is_numeric(value: Any) -> bool:
    """numbers.Number instances, numpy scalars included, except booleans"""
    return isinstance(value, numbers.Number) and not isinstance(value, (bool, np.bool_))


def is_numeric_type(element_type: Type) -> bool:
    """the same check against a type witness instead of a value"""
    return (isinstance(element_type, type)
            and issubclass(element_type, numbers.Number)
            and not issubclass(element_type, (bool, np.bool_)))


class _NumericOperations:
    def sum(self) -> Number:
        """add every element to 0, visiting each exactly once"""
        total = 0
        for value in self:
            total += value
        return total
