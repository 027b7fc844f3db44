import pytest

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.sql_store import SqlStore


@pytest.fixture
def sql_store(tmp_path):
    store = SqlStore.from_url(f"sqlite:///{tmp_path / 'storefront.db'}", timeout=10.0)
    store.create_schema()
    yield store
    store.dispose()


@pytest.fixture
def catalog(sql_store):
    """Three products: two on sale, one retired."""
    products = [
        Product(id=None, name="Creed Aventus", price=Money.of("1000000"), stock_quantity=5,
                image_urls=["/img/aventus.jpg"]),
        Product(id=None, name="Dior Sauvage", price=Money.of("3500000"), stock_quantity=10),
        Product(id=None, name="Chanel No 5 (retired)", price=Money.of("4000000"),
                stock_quantity=3, is_active=False),
    ]

    def seed(uow):
        for product in products:
            uow.products.save(product)

    sql_store.run_in_transaction(seed)
    return products
