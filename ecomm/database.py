"""Connection to the shop's MySQL database."""

from __future__ import annotations

from types import TracebackType
from typing import Any

import pymysql

HOST = "localhost"
PORT = 3306
USER = "root"
PASSWORD = "password"
DATABASE = "ecomm"


class DatabaseError(Exception):
    """Raised when the database cannot be opened or closed."""


class Database:
    """Owns one open database connection; usable as a context manager."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def close(self) -> None:
        """Close the underlying connection."""
        try:
            self.connection.close()
        except pymysql.MySQLError as exc:
            raise DatabaseError(f"error closing database: {exc}") from exc

    def __enter__(self) -> Database:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def new_database() -> Database:
    """Open the shop database with its fixed connection settings."""
    try:
        connection = pymysql.connect(
            host=HOST,
            port=PORT,
            user=USER,
            password=PASSWORD,
            database=DATABASE,
            autocommit=True,
        )
    except pymysql.MySQLError as exc:
        raise DatabaseError(f"error opening database: {exc}") from exc
    return Database(connection)