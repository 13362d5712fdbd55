"""Errors raised by SelectQuery.

All errors derive from :class:`QueryError` and from the builtin
exception closest to their meaning, so that callers can catch
either of them::

    try:
        query.offset(10)
    except ValueError:
        ...

Errors are always raised synchronously by the call that
caused them and never leave a :class:`selectquery.Query`
in an inconsistent state, as queries are never modified.
"""

__all__ = (
    "QueryError",
    "ValidationError",
    "RangeError",
    "UnknownOperatorError",
    "AggregationTypeError",
)


class QueryError(Exception):
    """Base class of all the errors raised by SelectQuery."""

    pass


class ValidationError(QueryError, ValueError):
    """The collection provided to a query is not a sequence of records."""

    pass


class RangeError(QueryError, ValueError):
    """A limit or offset is outside of the accepted range."""

    pass


class UnknownOperatorError(QueryError, ValueError):
    """The comparison operator is not one of the supported operators."""

    pass


class AggregationTypeError(QueryError, TypeError):
    """A value being aggregated is not of a type the aggregation supports."""

    pass
