"""Tests for health check endpoints."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from order_taking.application.place_order import PlaceOrderWorkflow, get_place_order_workflow
from order_taking.infrastructure.catalog import ProductCatalog, get_product_catalog
from order_taking.main import app


@pytest.fixture
def catalog() -> ProductCatalog:
    """Catalog with two products."""
    return ProductCatalog({"W1234": 1000, "G123": 450})


@pytest.fixture
def client(catalog: ProductCatalog, workflow: PlaceOrderWorkflow) -> Iterator[TestClient]:
    """Create test client with the catalog and workflow overridden."""
    app.dependency_overrides[get_product_catalog] = lambda: catalog
    app.dependency_overrides[get_place_order_workflow] = lambda: workflow
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "order-taking"
    assert "version" in data


def test_readiness_check(client: TestClient) -> None:
    """A stocked catalog and a wired workflow are ready."""
    response = client.get("/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["product_count"] == 2
    assert data["address_service"].startswith("AddressCheckingService")


def test_readiness_with_empty_catalog(client: TestClient) -> None:
    """An empty catalog cannot price anything, so the service is not ready."""
    app.dependency_overrides[get_product_catalog] = lambda: ProductCatalog({})

    response = client.get("/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"
    assert response.json()["product_count"] == 0
