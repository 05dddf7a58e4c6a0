from cashier.database.base import Base
from cashier.database.engine import engine, ensure_barcode_index, ensure_sqlite_schema
from cashier.database.session import SessionLocal

__all__ = ["Base", "engine", "ensure_barcode_index", "ensure_sqlite_schema", "SessionLocal"]
