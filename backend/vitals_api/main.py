import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from vitals_api.config import Settings, get_settings
from vitals_api.database import Database
from vitals_api.exceptions import register_exception_handlers
from vitals_api.middleware.request_logging import RequestLoggingMiddleware
from vitals_api.routers import auth as auth_router
from vitals_api.routers import patients

logger = logging.getLogger(__name__)

SERVICE_NAME = "patient-vitals-api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: connect and create tables
    db = Database(app.state.settings)
    await db.create_all()
    app.state.db = db
    logger.info("Database ready")
    yield
    # Shutdown
    await db.dispose()
    logger.info("Database connection closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Missing required settings raise here, before serving."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Patient Vitals API",
        description="API documentation for Patient Vitals Management System",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api-docs",
        redoc_url=None,
        openapi_url="/api-docs/openapi.json",
    )
    app.state.settings = settings

    # Last added runs outermost: CORS wraps the logging/error middleware.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(patients.router, prefix="/api/patients", tags=["Patients"])

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root():
        return "API is running"

    @app.get("/api/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "service": SERVICE_NAME}

    return app
