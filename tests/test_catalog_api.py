"""HTTP tests for the product endpoints."""

from typing import List

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog.application import (
    IProductDataService,
    IProductService,
    ProductService,
)
from src.catalog.domain import Product
from src.catalog.infrastructure import SQLAlchemyProductDataService
from src.catalog.interfaces import get_product_service
from src.infrastructure.database import get_session


class NullProductService(IProductService):
    """Returns no result at all, to reach the defensive branches."""

    async def add_product(self, request):
        return None

    async def get_products(self):
        return None


class DisconnectedDataService(IProductDataService):
    async def add_product(self, product: Product) -> Product:
        raise OperationalError("INSERT INTO products", {}, ConnectionError("connection lost"))

    async def get_products(self) -> List[Product]:
        raise OperationalError("SELECT products", {}, ConnectionError("connection lost"))


def add(client: TestClient, **body):
    return client.post("/products/addproduct", json=body)


class TestAddProduct:
    """POST /products/addproduct"""

    def test_add_product(self, client):
        response = add(client, name="Desk", description="Standing desk", price=399.99)

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Desk"
        assert data["description"] == "Standing desk"
        assert data["price"] == "399.99"
        assert isinstance(data["id"], int)
        assert data["id"] > 0

    def test_description_may_be_omitted(self, client):
        response = add(client, name="Desk", price=10)

        assert response.status_code == 200
        assert response.json()["description"] is None

    def test_sequential_adds_get_distinct_ids(self, client):
        first = add(client, name="A", price=1).json()
        second = add(client, name="B", price=2).json()

        assert first["id"] != second["id"]

    def test_client_supplied_id_is_ignored(self, client):
        first = add(client, name="A", price=1).json()
        second = add(client, id=first["id"], name="B", price=2).json()

        assert second["id"] != first["id"]

    def test_empty_name_is_accepted(self, client):
        """Values are not validated; an empty name is stored as-is."""
        response = add(client, name="", price=-5)

        assert response.status_code == 200
        assert response.json()["name"] == ""
        assert response.json()["price"] == "-5.00"

    def test_missing_field_is_rejected_by_framework(self, client):
        response = client.post("/products/addproduct", json={"description": "no name"})

        assert response.status_code == 422

    def test_no_result_returns_400(self, app, client):
        app.dependency_overrides[get_product_service] = lambda: NullProductService()

        response = add(client, name="Desk", price=1)

        assert response.status_code == 400


class TestGetProducts:
    """GET /products/getproducts"""

    def test_empty_catalog_returns_empty_list(self, client):
        response = client.get("/products/getproducts")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_every_added_product(self, client):
        added = [
            add(client, name="P1", description="first", price=1.5).json(),
            add(client, name="P2", price=2).json(),
            add(client, name="P3", description="third", price=3.25).json(),
        ]

        response = client.get("/products/getproducts")

        assert response.status_code == 200
        listed = sorted(response.json(), key=lambda p: p["id"])
        assert listed == sorted(added, key=lambda p: p["id"])

    def test_no_result_returns_404(self, app, client):
        app.dependency_overrides[get_product_service] = lambda: NullProductService()

        response = client.get("/products/getproducts")

        assert response.status_code == 404


class TestPricePrecision:
    """Full-width NUMERIC(18, 2) prices keep every digit through add and list."""

    FULL_WIDTH = "1234567890123456.78"

    def test_json_number_round_trips_exactly(self, client):
        response = client.post(
            "/products/addproduct",
            content='{"name": "Big", "price": %s}' % self.FULL_WIDTH,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        assert response.json()["price"] == self.FULL_WIDTH

        [listed] = client.get("/products/getproducts").json()
        assert listed["price"] == self.FULL_WIDTH

    def test_json_string_round_trips_exactly(self, client):
        response = add(client, name="Big", price=self.FULL_WIDTH)

        assert response.status_code == 200
        assert response.json()["price"] == self.FULL_WIDTH

        [listed] = client.get("/products/getproducts").json()
        assert listed["price"] == self.FULL_WIDTH

    def test_extra_fraction_digits_are_rounded_to_cents(self, client):
        response = client.post(
            "/products/addproduct",
            content='{"name": "Pen", "price": 0.125}',
            headers={"Content-Type": "application/json"},
        )

        assert response.json()["price"] == "0.13"
        assert client.get("/products/getproducts").json()[0]["price"] == "0.13"


class TestStorageFailure:
    """Storage errors surface as 500 and leave the service usable."""

    @pytest.fixture
    def failing_client(self, app):
        failures = {"remaining": 1}

        async def flaky_product_service(session: AsyncSession = Depends(get_session)):
            if failures["remaining"]:
                failures["remaining"] -= 1
                return ProductService(DisconnectedDataService())
            return ProductService(SQLAlchemyProductDataService(session))

        app.dependency_overrides[get_product_service] = flaky_product_service
        with TestClient(app, raise_server_exceptions=False) as client:
            yield client

    def test_failed_add_does_not_corrupt_later_operations(self, failing_client):
        failed = add(failing_client, name="Lost", price=1)

        assert failed.status_code == 500
        assert failed.json()["detail"] == "Internal server error"

        ok = add(failing_client, name="Kept", price=2)
        assert ok.status_code == 200

        listed = failing_client.get("/products/getproducts").json()
        assert [p["name"] for p in listed] == ["Kept"]
