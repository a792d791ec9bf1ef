"""Database layer for barakainvest application."""

from barakainvest.database.base import Database
from barakainvest.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
