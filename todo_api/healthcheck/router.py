from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import create_engine, text

from todo_api.config import Settings, get_settings
from todo_api.common.redis import RedisClient, get_redis_client

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "redis": {"status": "ok"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "redis": {"status": "error", "message": "Connection error"},
                    }
                }
            },
        },
    },
)
def healthcheck(
    settings: Settings = Depends(get_settings),
    redis_client: RedisClient | None = Depends(get_redis_client),
) -> JSONResponse:
    health_status: dict[str, Any] = {"api": {"status": "ok"}}
    has_error = False

    if settings.TODO_STORE_BACKEND == "redis":
        health_status["redis"] = {"status": "ok"}
        try:
            if redis_client is None:
                raise Exception("Redis client is not initialized")
            redis_client.ping()
        except Exception as e:
            health_status["redis"].update({"status": "error", "message": str(e)})
            has_error = True

    if settings.TODO_STORE_BACKEND == "postgres":
        health_status["postgres"] = {"status": "ok"}
        try:
            engine = create_engine(settings.POSTGRES_URL)
            try:
                with engine.connect() as connection:
                    result = connection.execute(text("SELECT 1")).scalar()
                    if result != 1:
                        raise Exception("Postgres health check failed")
            finally:
                engine.dispose()
        except Exception as e:
            health_status["postgres"].update({"status": "error", "message": str(e)})
            has_error = True

    if has_error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
