import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

from cashier.config import Settings, get_settings
from cashier.core.constants import BARCODE_INDEX, PRODUCTS_TABLE


app_settings: Settings = get_settings()

_SQLITE_BUSY_TIMEOUT_SECONDS = 30
_SQLITE_BUSY_TIMEOUT_MS = _SQLITE_BUSY_TIMEOUT_SECONDS * 1000


def _is_sqlite_memory(url) -> bool:
    database = url.database
    if database in (None, "", ":memory:"):
        return True
    return url.query.get("mode") == "memory"


def build_engine(database_url: str):
    url = make_url(database_url)
    sqlite = url.get_backend_name() == "sqlite"
    memory = sqlite and _is_sqlite_memory(url)

    connect_args = {}
    engine_kwargs: dict[str, object] = dict(pool_pre_ping=True)
    if sqlite:
        connect_args = {"check_same_thread": False, "timeout": _SQLITE_BUSY_TIMEOUT_SECONDS}
        if memory:
            engine_kwargs.update(poolclass=StaticPool)

    new_engine = create_engine(database_url, connect_args=connect_args, **engine_kwargs)

    if sqlite:
        @event.listens_for(new_engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute(f"PRAGMA busy_timeout={_SQLITE_BUSY_TIMEOUT_MS}")
                if not memory:
                    try:
                        cursor.execute("PRAGMA journal_mode=WAL")
                        cursor.execute("PRAGMA synchronous=NORMAL")
                    except sqlite3.DatabaseError:
                        pass
            finally:
                cursor.close()

    return new_engine


engine = build_engine(app_settings.DATABASE_URL)


def _escape_sqlite_identifier(value: str) -> str:
    return value.replace('"', '""')


def _get_sqlite_columns(conn, table_name: str):
    escaped_table = _escape_sqlite_identifier(table_name)
    # noinspection SqlNoDataSourceInspection
    result = conn.exec_driver_sql(
        f'PRAGMA table_info("{escaped_table}")'
    ).mappings()
    return {row["name"] for row in result}


def ensure_barcode_index(conn) -> None:
    """Create the barcode lookup index if it does not exist yet.

    Must run before any barcode query; idempotent.
    """
    # noinspection SqlNoDataSourceInspection
    conn.exec_driver_sql(
        f"CREATE INDEX IF NOT EXISTS {BARCODE_INDEX} ON {PRODUCTS_TABLE}(barcode)"
    )


def ensure_sqlite_schema(bind=None):
    bind = bind or engine
    if bind.url.get_backend_name() != "sqlite":
        return
    with bind.connect() as conn:
        with conn.begin():
            if _get_sqlite_columns(conn, PRODUCTS_TABLE):
                ensure_barcode_index(conn)
