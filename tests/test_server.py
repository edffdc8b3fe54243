import pytest

from ecomm.models import Product
from ecomm.server import Server
from ecomm.storer import StorerError


class RecordingStorer:
    def __init__(self):
        self.calls = []
        self.products = {}

    def create_product(self, product):
        self.calls.append(("create", product))
        product.id = len(self.products) + 1
        self.products[product.id] = product
        return product

    def get_product(self, product_id):
        self.calls.append(("get", product_id))
        try:
            return self.products[product_id]
        except KeyError:
            raise StorerError("error getting product: no rows in result set") from None

    def update_product(self, product):
        self.calls.append(("update", product))
        self.products[product.id] = product
        return product

    def delete_product(self, product_id):
        self.calls.append(("delete", product_id))
        self.products.pop(product_id, None)

    def list_products(self):
        self.calls.append(("list",))
        return list(self.products.values())


@pytest.fixture
def storer():
    return RecordingStorer()


def test_create_then_get_round_trip(storer):
    server = Server(storer)
    created = server.create_product(Product(name="test product", price=100.0))
    assert created.id == 1
    assert server.get_product(1) is created
    assert storer.calls == [("create", created), ("get", 1)]


def test_get_missing_propagates_error(storer):
    with pytest.raises(StorerError):
        Server(storer).get_product(7)


def test_update_passes_product(storer):
    server = Server(storer)
    product = server.create_product(Product(name="test product"))
    product.name = "new test product"
    updated = server.update_product(product)
    assert updated.name == "new test product"
    assert storer.calls[-1] == ("update", product)


def test_delete_and_list(storer):
    server = Server(storer)
    server.create_product(Product(name="a"))
    server.create_product(Product(name="b"))
    server.delete_product(1)
    assert [p.name for p in server.list_products()] == ["b"]
    assert ("delete", 1) in storer.calls