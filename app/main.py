from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import ProgrammingError, OperationalError, IntegrityError
from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.core.logging import configure_logging
from app.api.routes import health, emotions
from app.schemas.common import DatabaseError, ErrorResponse
import logging

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_AUTO_CREATE:
        from app.db.init_db import init_db
        from app.db.session import engine
        init_db(engine)
    yield

def _error(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())

def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG, lifespan=lifespan)
    logger = logging.getLogger(__name__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"], allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.warning("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
        return _error(404, ErrorResponse(error=str(exc), detail=str(exc), error_code=exc.error_code))

    @app.exception_handler(ProgrammingError)
    async def programming_error_handler(request: Request, exc: ProgrammingError):
        logger.error("Database programming error: %s", exc)
        # missing table/column means migrations were not applied
        if "does not exist" in str(exc):
            return _error(503, DatabaseError(
                error="Database schema mismatch detected",
                detail="The application schema is out of sync with the database. Please contact support.",
                error_code="SCHEMA_MISMATCH",
            ))
        return _error(500, DatabaseError(error="Database query error", detail="There was an error executing the database query"))

    @app.exception_handler(OperationalError)
    async def operational_error_handler(request: Request, exc: OperationalError):
        logger.error("Database operational error: %s", exc)
        return _error(503, DatabaseError(
            error="Database connection error",
            detail="Unable to connect to the database. Please try again later.",
            error_code="DATABASE_CONNECTION_ERROR",
        ))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.error("Database integrity error: %s", exc)
        return _error(400, DatabaseError(
            error="Data integrity violation",
            detail="The operation violates database constraints",
            error_code="DATA_INTEGRITY_ERROR",
        ))

    # routes
    app.include_router(health.router)
    app.include_router(emotions.router)
    return app

app = create_app()
