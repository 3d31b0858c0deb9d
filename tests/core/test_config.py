"""Settings: database URL resolution."""

from pm_api.config import DEFAULT_DATABASE_URL, Settings


def test_postgres_url_gets_asyncpg_driver():
    s = Settings(_env_file=None, database_url="postgresql://u:p@db:5432/pm")
    assert s.database_url == "postgresql+asyncpg://u:p@db:5432/pm"


def test_url_assembled_from_postgres_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    s = Settings(
        _env_file=None, postgres_user="pm", postgres_password="secret",
        postgres_host="db",
    )
    assert s.database_url == "postgresql+asyncpg://pm:secret@db:5432/postgres"


def test_default_url_without_credentials(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("POSTGRES_USER", raising=False)
    monkeypatch.delenv("POSTGRES_PASSWORD", raising=False)
    assert Settings(_env_file=None).database_url == DEFAULT_DATABASE_URL


def test_sqlite_url_untouched():
    s = Settings(_env_file=None, database_url="sqlite+aiosqlite:///pm.db")
    assert s.database_url == "sqlite+aiosqlite:///pm.db"


def test_http_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings(_env_file=None).port == 3000
