"""Service layer between the HTTP handlers and the storage."""

from __future__ import annotations

from ecomm.models import Product
from ecomm.storer import MySQLStorer


class Server:
    """Carries product operations through to the storer."""

    def __init__(self, storer: MySQLStorer) -> None:
        self.storer = storer

    def create_product(self, product: Product) -> Product:
        """Store a new product."""
        return self.storer.create_product(product)

    def get_product(self, product_id: int) -> Product:
        """Fetch one product by id."""
        return self.storer.get_product(product_id)

    def update_product(self, product: Product) -> Product:
        """Write a changed product back."""
        return self.storer.update_product(product)

    def delete_product(self, product_id: int) -> None:
        """Remove a product by id."""
        self.storer.delete_product(product_id)

    def list_products(self) -> list[Product]:
        """Fetch every product."""
        return self.storer.list_products()