"""Main FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gradetrack.api.v1.router import api_router
from gradetrack.core.config import settings
from gradetrack.core.database import SessionLocal, engine, init_db
from gradetrack.core.exceptions import AppException, InternalError
from gradetrack.middleware.logging import RequestLoggingMiddleware
from gradetrack.services.exam import ExamStore
from gradetrack.services.persistence import ExamPersistence
from gradetrack.services.seed import SEED_EXAMS
from gradetrack.services.storage import KeyValueStorage

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Suppress noisy SQLAlchemy logs
logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def build_store() -> ExamStore:
    """Create the exam store on top of the configured key-value storage."""
    persistence = ExamPersistence(KeyValueStorage(SessionLocal), key=settings.STORAGE_KEY)
    return ExamStore(
        persistence,
        seed=SEED_EXAMS if settings.SEED_ON_EMPTY else (),
        id_prefix=settings.EXAM_ID_PREFIX,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    if getattr(app.state, "store", None) is None:
        init_db()
        app.state.store = build_store()
    app.state.store.initialize()
    yield
    logger.info("Shutting down application")
    engine.dispose()


def create_application(store: ExamStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    A pre-built ``store`` is used as-is instead of the configured one.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""
Grade Track API - create, edit, grade, filter and export exams.

## Error Handling

All errors follow a standard format:
```json
{
  "success": false,
  "error": {
    "code": "ERROR_CODE",
    "message": "Human readable message",
    "details": {}
  }
}
```
        """,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    if store is not None:
        app.state.store = store

    app.add_middleware(RequestLoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={
                "success": False,
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"errors": jsonable_errors(exc)},
                },
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception")
        error = InternalError()
        return JSONResponse(
            status_code=error.status_code,
            content=error.detail,
        )

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Request validation errors without the raw input or exception context."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


# Create app instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gradetrack.main:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.DEBUG,
    )
