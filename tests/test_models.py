from datetime import datetime

import pytest

from ecomm.models import Order, OrderItem, OrderStatus, Product, User


def test_order_status_coerced_from_string():
    order = Order(status="shipped")
    assert order.status is OrderStatus.SHIPPED


def test_order_status_string_values():
    assert Order(status="pending").status == "pending"
    assert Order(status="delivered").status == "delivered"


def test_order_status_rejects_unknown_value():
    with pytest.raises(ValueError):
        Order(status="lost")


def test_order_status_defaults_to_none():
    assert Order().status is None


def test_order_items_not_shared_between_instances():
    first = Order()
    second = Order()
    first.items.append(OrderItem(name="test product"))
    assert second.items == []
    assert len(first.items) == 1


def test_product_defaults_are_zero_values():
    product = Product()
    assert product.id == 0
    assert product.name == ""
    assert product.price == 0.0
    assert product.updated_at is None


def test_product_keeps_given_fields():
    stamp = datetime(2024, 1, 2, 3, 4, 5)
    product = Product(name="test product", price=99.99, count_in_stock=10, created_at=stamp)
    assert product.name == "test product"
    assert product.price == 99.99
    assert product.count_in_stock == 10
    assert product.created_at == stamp


def test_user_fields():
    user = User(name="tester", email="tester@example.com", is_admin=True)
    assert user.email == "tester@example.com"
    assert user.is_admin is True
    assert user.password == ""