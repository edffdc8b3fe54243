from unittest import mock

import pymysql
import pytest

from ecomm.database import Database, DatabaseError, new_database


def test_new_database_connects_with_fixed_settings():
    with mock.patch("pymysql.connect") as connect:
        db = new_database()
    assert db.connection is connect.return_value
    kwargs = connect.call_args.kwargs
    assert kwargs["host"] == "localhost"
    assert kwargs["port"] == 3306
    assert kwargs["user"] == "root"
    assert kwargs["database"] == "ecomm"
    assert kwargs["autocommit"] is True


def test_new_database_wraps_connection_errors():
    failure = pymysql.err.OperationalError(2003, "cannot connect")
    with mock.patch("pymysql.connect", side_effect=failure):
        with pytest.raises(DatabaseError, match="error opening database"):
            new_database()


def test_close_closes_connection():
    connection = mock.MagicMock()
    Database(connection).close()
    assert connection.close.call_count == 1


def test_close_wraps_errors():
    connection = mock.MagicMock()
    connection.close.side_effect = pymysql.err.Error("already closed")
    with pytest.raises(DatabaseError, match="error closing database"):
        Database(connection).close()


def test_context_manager_closes_on_exit():
    connection = mock.MagicMock()
    with Database(connection) as db:
        assert db.connection is connection
        assert connection.close.call_count == 0
    assert connection.close.call_count == 1


def test_context_manager_does_not_swallow_errors():
    connection = mock.MagicMock()
    with pytest.raises(RuntimeError):
        with Database(connection):
            raise RuntimeError("boom")
    assert connection.close.call_count == 1