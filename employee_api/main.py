"""Employee API — FastAPI application entry point and composition root.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and seeded in the lifespan, before traffic is accepted

Design Decisions:
    - create_app() builds settings, routers, and handlers once and wires them
      explicitly; module-level `app` exists only for `uvicorn employee_api.main:app`
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Seeding awaited inside the lifespan: uvicorn does not accept connections until
      startup completes (ADR: readiness gate instead of fire-and-forget seeding)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api.api.error_handlers import register_error_handlers
from employee_api.api.routes import employees, health
from employee_api.config import Settings, get_settings
from employee_api.infrastructure.database import close_db, init_db
from employee_api.infrastructure.observability import setup_logging
from employee_api.services.seeder import seed_employees

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        app.state.seeded = not settings.seed_on_startup
        if settings.seed_on_startup:
            app.state.seeded = await seed_employees(
                db_manager.engine, db_manager.session,
            )
            if not app.state.seeded:
                logger.warning("Starting without seed data; readiness will report 503")
        logger.info("Employee API started")
        yield
        logger.info("Employee API shutting down")
        await close_db()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Composition root — build the FastAPI app for the given settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Employee API", version="1.0.0", lifespan=_build_lifespan(settings),
    )
    app.state.seeded = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(employees.router)

    register_error_handlers(app)
    return app


app = create_app()
