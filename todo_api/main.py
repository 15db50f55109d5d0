import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.exc import OperationalError

from todo_api.common.exceptions import (
    InvalidIdentifierException,
    invalid_identifier_handler,
    unexpected_exception_handler,
    redis_connection_exception_handler,
    database_connection_exception_handler,
    validation_exception_handler,
    service_unavailable_response,
    internal_error_response,
    validation_error_response,
)
from todo_api.common.opentelemetry import setup_opentelemetry
from todo_api.common.redis import create_redis_client
from todo_api.config import get_settings
from todo_api.todos.router import router as todos_router
from todo_api.todos.store.backend import get_todo_store_backend
from todo_api.healthcheck.router import router as health_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.redis_client = (
        create_redis_client(settings.REDIS_URL)
        if settings.TODO_STORE_BACKEND == "redis"
        else None
    )
    app.state.todo_store = get_todo_store_backend(app.state.redis_client, settings)
    logger.info(f"Using {settings.TODO_STORE_BACKEND} todo store")
    yield
    if app.state.redis_client:
        app.state.redis_client.close()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **service_unavailable_response,
        **internal_error_response,
        **validation_error_response,
    },
    version=settings.TODO_API_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings.OTEL_SERVICE_NAME, settings.TODO_API_VERSION, app)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(InvalidIdentifierException)(invalid_identifier_handler)
app.exception_handler(RedisConnectionError)(redis_connection_exception_handler)
app.exception_handler(OperationalError)(database_connection_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(todos_router)
