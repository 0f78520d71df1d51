"""App factory, root routes, fallback handler and port selection."""

import pytest
from httpx import ASGITransport, AsyncClient

from core import config
from core.db import _sanitize_database_url
from main import create_app


async def test_root_says_hello(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json() == {"message": "Hello World!"}


async def test_health(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


async def test_unexpected_store_error_hits_fallback_handler(client, store):
    # GET has no mapping for store failures; the catch-all turns it into a 500.
    store.failing.add("find_all")
    res = await client.get("/dogs")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}


async def test_injected_store_backs_the_routes(store):
    other = type(store)()
    await other.create({"name": "Fido", "age": 2, "description": "calm", "breed": "pug"})
    app = create_app(repository=other)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        res = await c.get("/dogs")
    assert [d["name"] for d in res.json()] == ["Fido"]
    assert store.rows == {}


def test_sslmode_is_stripped_from_database_url():
    url = "postgresql://u:p@db:5432/dogs?sslmode=require&application_name=api"
    assert _sanitize_database_url(url) == "postgresql://u:p@db:5432/dogs?application_name=api"


def test_listen_port_defaults_to_3000(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    assert config.listen_port() == 3000


def test_listen_port_uses_3001_in_test_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.delenv("PORT", raising=False)
    assert config.listen_port() == 3001


def test_explicit_port_wins(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("PORT", "8080")
    assert config.listen_port() == 8080


def test_database_url_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError):
        config.database_url()
