"""Records stored by the shop: products, orders, order items and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class OrderStatus(str, Enum):
    """Where an order is in its life."""

    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


@dataclass
class Product:
    """A product row of the ``products`` table."""

    id: int = 0
    name: str = ""
    image: str = ""
    category: str = ""
    description: str = ""
    rating: int = 0
    num_reviews: int = 0
    price: float = 0.0
    count_in_stock: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class OrderItem:
    """A line of an order, a row of the ``order_items`` table."""

    id: int = 0
    name: str = ""
    quantity: int = 0
    image: str = ""
    price: float = 0.0
    product_id: int = 0
    order_id: int = 0


@dataclass
class Order:
    """An order row of the ``orders`` table, together with its items."""

    id: int = 0
    payment_method: str = ""
    tax_price: float = 0.0
    shipping_price: float = 0.0
    total_price: float = 0.0
    user_id: int = 0
    status: OrderStatus | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[OrderItem] = field(default_factory=list, metadata={"column": False})

    def __post_init__(self) -> None:
        if self.status is not None and not isinstance(self.status, OrderStatus):
            self.status = OrderStatus(self.status)


@dataclass
class User:
    """A user row of the ``users`` table."""

    id: int = 0
    name: str = ""
    email: str = ""
    password: str = ""
    is_admin: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None