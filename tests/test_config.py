"""Settings — defaults, env coercion and URL normalization."""

from boatyard.config import Settings
from boatyard.core.domain_types import StoreBackend


def test_defaults_use_embedded_database():
    settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///./boatyard.db")
    assert settings.store_backend == StoreBackend.DATABASE
    assert settings.auth_username == "admin"
    assert settings.database_create_schema is True


def test_postgres_url_gets_asyncpg_driver():
    settings = Settings(_env_file=None, database_url="postgresql://u:p@db:5432/boats")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/boats"


def test_env_vars_configure_principals_and_store(monkeypatch):
    monkeypatch.setenv("AUTH_USERNAME", "captain")
    monkeypatch.setenv("AUTH_PASSWORD", "s3cret")
    monkeypatch.setenv("AUTH_USERS", '{"skipper": "ahoy"}')
    monkeypatch.setenv("STORE_BACKEND", "memory")
    monkeypatch.setenv("PORT", "9090")
    settings = Settings(_env_file=None)
    assert settings.auth_username == "captain"
    assert settings.auth_password == "s3cret"
    assert settings.auth_users == {"skipper": "ahoy"}
    assert settings.store_backend == StoreBackend.MEMORY
    assert settings.port == 9090
