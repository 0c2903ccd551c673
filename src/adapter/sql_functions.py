"""SQL functions used by the repositories

``casefold(expr)`` folds case for Unicode text. PostgreSQL's ``lower()``
already does; SQLite's only folds ASCII, so on SQLite it renders as a
``casefold()`` function backed by ``str.casefold`` and registered on every
connection with ``register_sqlite_functions``.
"""

from sqlalchemy import String, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement


class casefold(FunctionElement):
    type = String()
    inherit_cache = True


@compiles(casefold)
def _compile_casefold(element, compiler, **kw):
    return "lower(%s)" % compiler.process(element.clauses, **kw)


@compiles(casefold, "sqlite")
def _compile_casefold_sqlite(element, compiler, **kw):
    return "casefold(%s)" % compiler.process(element.clauses, **kw)


def _casefold(value):
    if value is None:
        return None
    return str(value).casefold()


def _on_sqlite_connect(dbapi_connection, connection_record):
    dbapi_connection.create_function("casefold", 1, _casefold)


def register_sqlite_functions(engine: Engine) -> None:
    """Install Python-backed SQL functions on each new SQLite connection"""
    if engine.dialect.name != "sqlite":
        return
    if not event.contains(engine, "connect", _on_sqlite_connect):
        event.listen(engine, "connect", _on_sqlite_connect)
