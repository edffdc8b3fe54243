"""MySQL-backed storage of products and orders."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import fields
from typing import Any, TypeVar

import pymysql

from ecomm.models import Order, OrderItem, Product

T = TypeVar("T")

_PRODUCT_COLUMNS = (
    "name",
    "image",
    "category",
    "description",
    "rating",
    "num_reviews",
    "price",
    "count_in_stock",
)
_ORDER_COLUMNS = ("payment_method", "tax_price", "shipping_price", "total_price", "user_id")
_ORDER_ITEM_COLUMNS = ("name", "quantity", "image", "price", "product_id", "order_id")


def _insert_sql(table: str, columns: Sequence[str]) -> str:
    names = ", ".join(columns)
    values = ", ".join(f"%({name})s" for name in columns)
    return f"INSERT INTO {table} ({names}) VALUES ({values})"


INSERT_PRODUCT = _insert_sql("products", _PRODUCT_COLUMNS)
SELECT_PRODUCT = "SELECT * FROM products WHERE id=%s"
SELECT_PRODUCTS = "SELECT * FROM products"
UPDATE_PRODUCT = (
    "UPDATE products SET name=%(name)s, image=%(image)s, category=%(category)s, "
    "description=%(description)s, rating=%(rating)s, num_reviews=%(num_reviews)s, "
    "price=%(price)s, count_in_stock=%(count_in_stock)s, updated_at=%(updated_at)s "
    "WHERE id=%(id)s"
)
DELETE_PRODUCT = "DELETE FROM products WHERE id=%s"
INSERT_ORDER = _insert_sql("orders", _ORDER_COLUMNS)
INSERT_ORDER_ITEM = _insert_sql("order_items", _ORDER_ITEM_COLUMNS)
SELECT_ORDER = "SELECT * FROM orders WHERE id=%s"
SELECT_ORDERS = "SELECT * FROM orders"
SELECT_ORDER_ITEMS = "SELECT * FROM order_items WHERE order_id=%s"
DELETE_ORDER_ITEMS = "DELETE FROM order_items WHERE order_id=%s"
DELETE_ORDER = "DELETE FROM orders WHERE id=%s"


class StorerError(Exception):
    """Raised when a storage operation fails."""


def _params(record: Any, names: Sequence[str]) -> dict[str, Any]:
    return {name: getattr(record, name) for name in names}


def _from_row(cls: type[T], columns: Sequence[str], row: Sequence[Any]) -> T:
    known = {f.name for f in fields(cls) if f.metadata.get("column", True)}
    record = dict(zip(columns, row))
    unknown = sorted(set(record) - known)
    if unknown:
        raise StorerError(f"missing destination name {unknown[0]}")
    return cls(**record)


class MySQLStorer:
    """Reads and writes products and orders over a DB-API connection."""

    def __init__(self, connection: Any) -> None:
        self._conn = connection

    def _exec(self, sql: str, params: Any = None) -> int | None:
        with self._conn.cursor() as cur:
            cur.execute(sql, params)
            return cur.lastrowid

    def _query(self, sql: str, params: Any = None) -> tuple[list[str], list[Sequence[Any]]]:
        with self._conn.cursor() as cur:
            cur.execute(sql, params)
            columns = [d[0] for d in cur.description or ()]
            return columns, list(cur.fetchall())

    def _insert(self, sql: str, params: dict[str, Any], what: str) -> int:
        try:
            row_id = self._exec(sql, params)
        except pymysql.MySQLError as exc:
            raise StorerError(f"error inserting {what}: {exc}") from exc
        if row_id is None:
            raise StorerError("error getting last insert ID")
        return row_id

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        try:
            self._conn.begin()
        except pymysql.MySQLError as exc:
            raise StorerError(f"error starting transaction: {exc}") from exc
        try:
            yield
        except Exception as exc:
            try:
                self._conn.rollback()
            except pymysql.MySQLError as rb_exc:
                raise StorerError(f"error rolling back transaction: {rb_exc}") from rb_exc
            raise StorerError(f"error in transaction: {exc}") from exc
        try:
            self._conn.commit()
        except pymysql.MySQLError as exc:
            raise StorerError(f"error committing transaction: {exc}") from exc

    def create_product(self, product: Product) -> Product:
        """Insert a product and give it the new row's id."""
        product.id = self._insert(INSERT_PRODUCT, _params(product, _PRODUCT_COLUMNS), "product")
        return product

    def get_product(self, product_id: int) -> Product:
        """Return the product with the given id."""
        try:
            columns, rows = self._query(SELECT_PRODUCT, (product_id,))
        except pymysql.MySQLError as exc:
            raise StorerError(f"error getting product: {exc}") from exc
        if not rows:
            raise StorerError("error getting product: no rows in result set")
        return _from_row(Product, columns, rows[0])

    def list_products(self) -> list[Product]:
        """Return every product."""
        try:
            columns, rows = self._query(SELECT_PRODUCTS)
        except pymysql.MySQLError as exc:
            raise StorerError(f"error listing products: {exc}") from exc
        return [_from_row(Product, columns, row) for row in rows]

    def update_product(self, product: Product) -> Product:
        """Write every field of the product back to its row."""
        params = _params(product, (*_PRODUCT_COLUMNS, "updated_at", "id"))
        try:
            self._exec(UPDATE_PRODUCT, params)
        except pymysql.MySQLError as exc:
            raise StorerError(f"error updating product: {exc}") from exc
        return product

    def delete_product(self, product_id: int) -> None:
        """Delete the product with the given id."""
        try:
            self._exec(DELETE_PRODUCT, (product_id,))
        except pymysql.MySQLError as exc:
            raise StorerError(f"error deleting product: {exc}") from exc

    def create_order(self, order: Order) -> Order:
        """Insert an order and its items in one transaction."""
        try:
            with self._transaction():
                try:
                    order.id = self._insert(
                        INSERT_ORDER, _params(order, _ORDER_COLUMNS), "order"
                    )
                except StorerError as exc:
                    raise StorerError(f"error creating order: {exc}") from exc
                for item in order.items:
                    item.order_id = order.id
                    try:
                        item.id = self._insert(
                            INSERT_ORDER_ITEM, _params(item, _ORDER_ITEM_COLUMNS), "order item"
                        )
                    except StorerError as exc:
                        raise StorerError(f"error creating order item: {exc}") from exc
        except StorerError as exc:
            raise StorerError(f"error creating order: {exc}") from exc
        return order

    def _order_items(self, order_id: int) -> list[OrderItem]:
        try:
            columns, rows = self._query(SELECT_ORDER_ITEMS, (order_id,))
        except pymysql.MySQLError as exc:
            raise StorerError(f"error getting order items: {exc}") from exc
        return [_from_row(OrderItem, columns, row) for row in rows]

    def get_order(self, order_id: int) -> Order:
        """Return the order with the given id, with its items."""
        try:
            columns, rows = self._query(SELECT_ORDER, (order_id,))
        except pymysql.MySQLError as exc:
            raise StorerError(f"error getting order: {exc}") from exc
        if not rows:
            raise StorerError("error getting order: no rows in result set")
        order = _from_row(Order, columns, rows[0])
        order.items = self._order_items(order_id)
        return order

    def list_orders(self) -> list[Order]:
        """Return every order, each with its items."""
        try:
            columns, rows = self._query(SELECT_ORDERS)
        except pymysql.MySQLError as exc:
            raise StorerError(f"error listing order: {exc}") from exc
        orders = [_from_row(Order, columns, row) for row in rows]
        for order in orders:
            order.items = self._order_items(order.id)
        return orders

    def delete_order(self, order_id: int) -> None:
        """Delete an order and its items in one transaction."""
        try:
            with self._transaction():
                try:
                    self._exec(DELETE_ORDER_ITEMS, (order_id,))
                except pymysql.MySQLError as exc:
                    raise StorerError(f"error deleting order items: {exc}") from exc
                try:
                    self._exec(DELETE_ORDER, (order_id,))
                except pymysql.MySQLError as exc:
                    raise StorerError(f"error deleting order {exc}") from exc
        except StorerError as exc:
            raise StorerError(f"error deleting order: {exc}") from exc