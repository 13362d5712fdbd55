"""Fluent query API built on top of the selectquery compute nodes.

The :class:`Query` object is the entry point of SelectQuery.
It wraps a list of records that were already loaded in memory,
for example rows fetched from a database, parsed from a JSON
document or read from a :class:`pyarrow.Table`, and
allows to filter, paginate, project and aggregate them
by chaining methods::

    Query(users).where("age", ">=", 18).select("id", "name").limit(10).get()

Every method that transforms the records returns a new
:class:`Query` leaving the original one untouched,
so intermediate queries can be safely reused::

    adults = Query(users).where("age", ">=", 18)
    admins = adults.where("role", "===", "Admin").count()
    first_page = adults.paginate(1, 20).get()
"""

from .query import Query

__all__ = ("Query",)
