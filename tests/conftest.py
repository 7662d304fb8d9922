"""Shared test fixtures and configuration."""
import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from app.main import create_app
from app.core.config import Settings
from app.services.dishes.models import Dish
from app.services.dishes.repository import DishRepository
from app.services.orders.repository import OrderRepository
from app.services.pipeline.context import RequestContext
from app.services.storage.in_memory import InMemoryStore
from app.services.storage.seed import load_seed_data


@pytest.fixture
def test_seed_path():
    """Return path to test seed YAML file."""
    return Path(__file__).parent / "fixtures" / "test_seed.yaml"


@pytest.fixture
def test_settings():
    """Settings for an empty application."""
    return Settings(load_seed_data=False, log_level="DEBUG")


@pytest.fixture
def seeded_settings(test_seed_path):
    """Settings for an application preloaded from the test seed file."""
    return Settings(load_seed_data=True, seed_data_file=str(test_seed_path), log_level="DEBUG")


@pytest.fixture
def test_client(test_settings):
    """Create FastAPI test client over empty repositories."""
    client = TestClient(create_app(test_settings))
    yield client


@pytest.fixture
def seeded_client(seeded_settings):
    """Create FastAPI test client over the test seed data."""
    client = TestClient(create_app(seeded_settings))
    yield client


@pytest.fixture
def dish_repository(test_seed_path):
    """Dish repository with the test seed dishes."""
    dishes, _ = load_seed_data(str(test_seed_path))
    return DishRepository(InMemoryStore("dishes", dishes))


@pytest.fixture
def order_repository(test_seed_path):
    """Order repository with the test seed orders."""
    _, orders = load_seed_data(str(test_seed_path))
    return OrderRepository(InMemoryStore("orders", orders))


@pytest.fixture
def make_context():
    """Factory for pipeline contexts."""
    def _make_context(entity_name="Order", data=None, params=None, values=None):
        return RequestContext(
            entity_name=entity_name,
            data=data or {},
            params=params or {},
            values=values or {},
        )
    return _make_context


@pytest.fixture
def valid_dish_data():
    """A complete dish payload."""
    return {
        "name": "Taco",
        "description": "Spicy",
        "price": 5,
        "image_url": "x",
    }


@pytest.fixture
def valid_order_data():
    """A complete order payload."""
    return {
        "deliverTo": "A",
        "mobileNumber": "1",
        "dishes": [{"dishId": "d1", "quantity": 2}],
    }


@pytest.fixture
def sample_dish():
    """A standalone dish model."""
    return Dish(
        id="sample",
        name="Soup",
        description="Tomato soup",
        price=4,
        image_url="https://example.com/soup.jpg",
    )
