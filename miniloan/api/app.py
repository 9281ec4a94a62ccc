"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from miniloan.api.deps import build_service
from miniloan.api.routes import loans, users
from miniloan.config import Settings, settings as default_settings
from miniloan.data.memory import InMemoryStore
from miniloan.logging import setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an app with its own empty store. Logging is configured on startup."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        yield

    app = FastAPI(
        title=settings.app_name,
        description="Installment loan amortization schedules and summaries",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = InMemoryStore()
    app.state.loan_service = build_service(app.state.store)

    app.include_router(users.router)
    app.include_router(loans.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
