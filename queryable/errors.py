class QueryError(Exception):
    """base class for errors raised by queryable itself"""
    pass


class MissingReducerError(QueryError, TypeError):
    """reduce was called without a callable reducer"""
    pass


class NotIterableError(QueryError, TypeError):
    """a value handed to the source adapter cannot produce an iterator"""
    pass
