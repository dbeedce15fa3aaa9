"""Application Lifespan — startup seeds before serving, shutdown disposes the engine.

Invariants:
    - Seed rows exist by the time the first request is served
    - SEED_ON_STARTUP=false leaves the table untouched
    - A broken database does not abort startup; readiness reports 503
"""

from httpx import ASGITransport, AsyncClient

import employee_api.infrastructure.database as db_module
from employee_api.config import Settings
from employee_api.main import create_app


def _settings(tmp_path, **overrides) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'lifespan.db'}",
        log_format="text",
        **overrides,
    )


async def test_startup_seeds_before_first_request(tmp_path):
    app = create_app(_settings(tmp_path))

    async with app.router.lifespan_context(app):
        assert app.state.seeded is True
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as client:
            res = await client.get("/employees")
            ready = await client.get("/health/ready")

    assert [e["name"] for e in res.json()] == ["wojtek", "admin", "test"]
    assert ready.status_code == 200
    assert db_module.db_manager is None


async def test_startup_without_seeding(tmp_path):
    app = create_app(_settings(tmp_path, seed_on_startup=False))

    async with app.router.lifespan_context(app):
        assert app.state.seeded is True
        assert db_module.db_manager is not None


async def test_startup_survives_unreachable_database(tmp_path):
    settings = _settings(tmp_path)
    settings.database_url_override = (
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nested' / 'x.db'}"
    )
    app = create_app(settings)

    async with app.router.lifespan_context(app):
        assert app.state.seeded is False
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as client:
            ready = await client.get("/health/ready")

    assert ready.status_code == 503
