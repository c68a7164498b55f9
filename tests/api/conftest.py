"""Shared fixtures for API tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from order_taking.application.place_order import PlaceOrderWorkflow, get_place_order_workflow
from order_taking.main import app


@pytest.fixture
def client(workflow: PlaceOrderWorkflow) -> Iterator[TestClient]:
    """Test client whose workflow uses mock collaborators."""
    app.dependency_overrides[get_place_order_workflow] = lambda: workflow
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def order_payload() -> dict:
    """A valid order request body."""
    return {
        "order_id": "ORD-100",
        "customer_info": {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email_address": "ada@example.com",
        },
        "shipping_address": "1 Main St, Springfield, 12345",
        "billing_address": "1 Main St, Springfield, 12345",
        "lines": [
            {"order_line_id": "L1", "product_code": "W1234", "quantity": 2},
            {"order_line_id": "L2", "product_code": "W5678", "quantity": 3},
        ],
    }
