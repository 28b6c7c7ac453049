import logging
import typing
from .types import *
from .sources import as_source
from .extensions.numeric import is_numeric, is_numeric_type

if typing.TYPE_CHECKING:
    from .enumerable import Queryable, NumericQueryable

logger = logging.getLogger(__name__)


def is_numeric_sequence(source: Iterable[Any]) -> bool:
    """
    scans the whole sequence once. an empty sequence is not treated as numeric.
    the scan consumes a pass, so the source must be repeatable (as_source guarantees that).
    """
    seen_any = False
    for item in source:
        if not is_numeric(item):
            return False
        seen_any = True
    return seen_any


def from_iterable(data: Any, element_type: Optional[Type] = None) -> Union['Queryable[T]', 'NumericQueryable']:
    """
    create a query handle from any iterable, iterator, handle or zero-argument data function.
    numeric sources get a NumericQueryable (with sum). pass element_type to skip the scan.
    """
    from .enumerable import Queryable, NumericQueryable
    source = as_source(data)

    if element_type is not None:
        numeric = is_numeric_type(element_type)
        logger.debug("element type %s given, numeric=%s", getattr(element_type, '__name__', element_type), numeric)
    else:
        numeric = is_numeric_sequence(source)
        logger.debug("scanned %r, numeric=%s", source, numeric)

    # wrap the source itself, not the iterator the scan used up
    return NumericQueryable(source) if numeric else Queryable(source)


def from_range(start: int, count: int) -> 'NumericQueryable':
    """create numeric handle over start, start + 1, ... (count elements)"""
    return from_iterable(range(start, start + count), element_type=int)


def empty() -> 'Queryable[Any]':
    """create empty handle"""
    from .enumerable import Queryable
    return Queryable(as_source(()))

# --- aliases ---
query = from_iterable
Q = from_iterable
