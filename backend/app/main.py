import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import database
from .api import candidates as candidates_api
from .config import FRONTEND_ORIGINS, PORT
from .utils.error_handlers import AppError, create_error_response, get_error_message
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

SERVICE_NAME = "Candidate Management System API"
WELCOME_MESSAGE = f"Welcome to the {SERVICE_NAME}"


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    database.init_db()
    logger.info("Server running at port %s", PORT)
    yield
    database.dispose_db()
    logger.info("Connection pool drained, shutting down")


def _format_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        msg = err.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or get_error_message("validation_error")


def _allowed_origins() -> list[str]:
    if FRONTEND_ORIGINS == "*":
        return ["*"]
    return [o.strip() for o in FRONTEND_ORIGINS.split(",") if o.strip()]


def create_app() -> FastAPI:
    application = FastAPI(title=SERVICE_NAME, lifespan=lifespan)

    application.include_router(candidates_api.router)

    @application.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return create_error_response(exc.status_code, exc.message)

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return create_error_response(exc.status_code, str(exc.detail))

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _format_request_errors(exc)
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
        return create_error_response(400, message)

    @application.exception_handler(OperationalError)
    async def sqlalchemy_operational_error_handler(request: Request, exc: OperationalError):
        """Handle database operational errors."""
        logger.exception("Database OperationalError: %s", exc)
        return create_error_response(503, get_error_message("database_error"))

    @application.exception_handler(SQLAlchemyError)
    async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
        """Handle database errors that escaped the service layer."""
        logger.exception("Database SQLAlchemyError: %s", exc)
        root = getattr(exc, "orig", None)
        return create_error_response(500, str(root) if root else str(exc))

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors globally."""
        logger.exception("Unhandled exception: %s", exc)
        return create_error_response(500, get_error_message("server_error"))

    @application.get("/")
    def welcome():
        return {"message": WELCOME_MESSAGE}

    @application.get("/health")
    def health_check():
        """Health check endpoint with a store round trip."""
        try:
            with database.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning("Health check: database unreachable: %s", e)
            return create_error_response(503, get_error_message("database_error"))
        return {
            "status": "Backend running",
            "service": SERVICE_NAME,
            "database": "connected",
        }

    origins = _allowed_origins()
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return application


app = create_app()
