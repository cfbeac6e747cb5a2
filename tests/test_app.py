"""
tests/test_app.py — Application surface and settings.

  GET /        → 200 with entry-point links
  GET /health  → 200 with the database status

Settings: DATABASE_URI override, PostgreSQL URL assembly, CORS origin parsing.
"""

from app.core.config import Settings


async def test_root_lists_entry_points(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["api"] == "/api"
    assert data["docs"] == "/api/docs"


async def test_health_reports_database(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "services": {"database": "healthy"}}


def test_database_uri_overrides_postgres_url():
    settings = Settings(DATABASE_URI="sqlite+aiosqlite:///./dev.db")
    assert settings.DATABASE_URL == "sqlite+aiosqlite:///./dev.db"


def test_postgres_url_built_from_parts():
    settings = Settings(
        DATABASE_URI=None,
        DB_USER="game",
        DB_PASSWORD="secret",
        DB_HOST="db",
        DB_PORT=5433,
        DB_NAME="social",
    )
    assert settings.DATABASE_URL == "postgresql+asyncpg://game:secret@db:5433/social"


def test_cors_origins_from_comma_list():
    settings = Settings(BACKEND_CORS_ORIGINS="http://localhost:3000, http://game.local")
    assert settings.BACKEND_CORS_ORIGINS == ["http://localhost:3000", "http://game.local"]


def test_cors_origins_from_json_list():
    settings = Settings(BACKEND_CORS_ORIGINS='["http://localhost:3000"]')
    assert settings.BACKEND_CORS_ORIGINS == ["http://localhost:3000"]
