"""Taskboard FastAPI application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskboard import models  # noqa: F401  registers the mappers on Base.metadata
from taskboard.api.v1 import tasks
from taskboard.config import Settings, settings
from taskboard.database import Base, engine
from taskboard.errors import BadRequestError, TaskServiceError

logger = logging.getLogger(__name__)


def configure_logging(app_settings: Settings) -> None:
    level = logging.DEBUG if app_settings.DEBUG else getattr(logging, app_settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=app_settings.LOG_FORMAT)


def task_service_error_handler(request: Request, exc: TaskServiceError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=headers,
    )


def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.info("Rejected %s %s: %d validation errors", request.method, request.url.path, len(errors))
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg')}" if location else BadRequestError.default_message
    return JSONResponse(
        status_code=BadRequestError.status_code,
        content={"detail": message, "code": BadRequestError.code},
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


def create_app(app_settings: Settings = settings) -> FastAPI:
    configure_logging(app_settings)

    application = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(TaskServiceError, task_service_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)

    application.include_router(tasks.router, prefix="/api/v1/tasks", tags=["tasks"])

    @application.get("/health", include_in_schema=False)
    def health():
        return {"status": "ok", "app": app_settings.APP_NAME, "version": app_settings.APP_VERSION}

    return application


app = create_app()
