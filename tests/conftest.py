import pytest
from fastapi.testclient import TestClient

from customer_registry.main import app
from customer_registry.models import seed_customers
from customer_registry.repository import InMemoryCustomerRepository
from customer_registry.routes import get_customer_repo


@pytest.fixture()
def repo():
    return InMemoryCustomerRepository(seed_customers())


@pytest.fixture()
def client(repo):
    app.dependency_overrides[get_customer_repo] = lambda: repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
