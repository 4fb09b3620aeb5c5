"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import AsyncMock, Mock

# Tests run against the in-memory database
os.environ.pop("SUPABASE_URL", None)
os.environ.pop("SUPABASE_SERVICE_ROLE_KEY", None)
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "adminpassword")
os.environ.setdefault("ADMIN_EMAIL", "admin@kira.com")


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client (query builders chain, execute() is awaited)"""
    client = Mock()

    # Mock table operations
    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.insert.return_value = table_mock
    table_mock.update.return_value = table_mock
    table_mock.delete.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.order.return_value = table_mock
    table_mock.limit.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock

    return client


@pytest.fixture
def memory_db():
    """Fresh in-memory database installed as the singleton"""
    from core.auth.session import clear_web_sessions
    from core.services.database import MemoryDatabase, set_database

    db = MemoryDatabase()
    set_database(db)
    clear_web_sessions()
    yield db
    set_database(None)
    clear_web_sessions()


@pytest.fixture
def client(memory_db):
    """Test client bound to the in-memory database"""
    from fastapi.testclient import TestClient
    from api.index import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    """Authorization header of the seeded admin"""
    response = client.post(
        "/api/auth/login", json={"username": "admin", "password": "adminpassword"}
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def customer_headers(client):
    """Authorization header of a freshly registered customer"""
    response = client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "alice@example.com", "password": "secret123"},
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def sample_product():
    """Sample product data"""
    return {
        "id": 1,
        "name": "Silk Scarf",
        "description": "Hand-dyed silk",
        "price": "19.99",
        "image_url": "/img/scarf.png",
        "category": "Accessories",
    }
