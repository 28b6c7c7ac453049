r"""
'     ___  _   _  ___ _ __ _   _  __ _| |__ | | ___
'    / _ \| | | |/ _ \ '__| | | |/ _` | '_ \| |/ _ \
'   | (_) | |_| |  __/ |  | |_| | (_| | |_) | |  __/
'    \__\_\\__,_|\___|_|   \__, |\__,_|_.__/|_|\___|
'                          |___/
"""
import logging

# expose the query handles
from .enumerable import IQueryable, Queryable, NumericQueryable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    empty,
    query,
    Q,
    is_numeric_sequence
)

# expose the source adapters
from .sources import (
    as_source,
    IterableSource,
    FactorySource,
    ReplayableSource
)

# expose the errors
from .errors import (
    QueryError,
    MissingReducerError,
    NotIterableError
)

# the library never configures logging; applications attach their own handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "IQueryable",
    "Queryable",
    "NumericQueryable",
    "from_iterable",
    "from_range",
    "empty",
    "query",
    "Q",
    "is_numeric_sequence",
    "as_source",
    "IterableSource",
    "FactorySource",
    "ReplayableSource",
    "QueryError",
    "MissingReducerError",
    "NotIterableError"
]
