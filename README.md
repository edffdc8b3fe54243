# ecomm

Storage for a shop's product catalogue and customer orders in a MySQL
database, with a small service layer for product operations.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

- `ecomm.models`: the records as dataclasses: `Product`, `Order`,
  `OrderItem`, `User`, and the `OrderStatus` enum (`pending`, `shipped`,
  `delivered`).
- `ecomm.database`: `new_database()` opens a connection to the `ecomm`
  database on `localhost:3306` with fixed settings and returns a
  `Database`, which can be used as a context manager and closes the
  connection on exit. Failures raise `DatabaseError`.
- `ecomm.storer`: `MySQLStorer` takes a DB-API connection and reads and
  writes the `products`, `orders` and `order_items` tables. Failures
  raise `StorerError`.
- `ecomm.server`: `Server` wraps a `MySQLStorer` and passes product
  operations through to it.

## Using it

```python
from ecomm.database import new_database
from ecomm.models import Order, OrderItem, Product
from ecomm.server import Server
from ecomm.storer import MySQLStorer, StorerError

with new_database() as db:
    storer = MySQLStorer(db.connection)

    product = storer.create_product(Product(name="Desk lamp", price=29.99))
    print(product.id)

    server = Server(storer)
    for item in server.list_products():
        print(item.name, item.price)

    order = storer.create_order(
        Order(
            payment_method="card",
            total_price=29.99,
            items=[OrderItem(name="Desk lamp", quantity=1, price=29.99,
                             product_id=product.id)],
        )
    )
    print(storer.get_order(order.id).items)

    try:
        storer.get_product(999)
    except StorerError as err:
        print(err)
```

### Products

`create_product` inserts a product and sets its `id` from the new row.
`get_product` returns one product by id and raises `StorerError` if there
is none. `list_products` returns every product. `update_product` writes
every field of the product, including `updated_at`, back to its row.
`delete_product` removes a product by id.

### Orders

`create_order` inserts an order and then each of its items in one
transaction, setting the ids of the order and its items and each item's
`order_id`. If any insert fails the transaction is rolled back and
`StorerError` is raised. `get_order` returns an order with its items;
`list_orders` returns every order, each with its items. `delete_order`
removes an order's items and then the order itself in one transaction.

Rows read back are mapped onto the dataclasses by column name; a column
that the record has no field for raises `StorerError`.

## What it does not do

The package has no HTTP endpoints and no command to start a server: it
provides the records, the database connection, the storage layer and
the `Server` service object, for use from your own code.