"""Tests for environment configuration"""
from core import config


def test_defaults(monkeypatch):
    for name in ("ORDER_API_BASE_URL", "CHECKOUT_TIMEOUT_SECONDS", "SESSION_TTL_DAYS", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    assert config.get_order_api_base_url() == "http://localhost:8000/api"
    assert config.get_checkout_timeout() == 30.0
    assert config.get_session_ttl_days() == 7
    assert config.get_cors_origins() == ["*"]


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ORDER_API_BASE_URL", "https://shop.example.com/api/")
    monkeypatch.setenv("CHECKOUT_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("CART_STORAGE_DIR", str(tmp_path))
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    assert config.get_order_api_base_url() == "https://shop.example.com/api"
    assert config.get_checkout_timeout() == 5.0
    assert config.get_cart_storage_dir() == tmp_path
    assert config.get_cors_origins() == ["https://a.example", "https://b.example"]


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("CHECKOUT_TIMEOUT_SECONDS", "-1")
    monkeypatch.setenv("SESSION_TTL_DAYS", "soon")

    assert config.get_checkout_timeout() == 30.0
    assert config.get_session_ttl_days() == 7
