from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.exc import OperationalError

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    TODO = "Todo"


# Exceptions
class InvalidIdentifierException(Exception):
    def __init__(self, resource_type: ResourceType, identifier: str):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(f"Invalid {self.resource_type.lower()} id '{identifier}'")


# Exception handlers
def invalid_identifier_handler(request: Request, exc: InvalidIdentifierException):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc), "message": str(exc)},
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred"},
    )


def redis_connection_exception_handler(request: Request, exc: RedisConnectionError):
    logger.error(f"Failed to connect to Redis: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service unavailable"},
    )


def database_connection_exception_handler(request: Request, exc: OperationalError):
    logger.error(f"Failed to reach the database: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service unavailable"},
    )


def validation_exception_handler(request: Request, exc: RequestValidationError):
    def loc_to_dot_sep(loc: tuple[Any, ...]) -> str:
        """Convert a tuple of location parts to a dot-separated string"""
        path = ""
        for i, x in enumerate(loc):
            if isinstance(x, str):
                if i > 0:
                    path += "."
                path += x
            elif isinstance(x, int):
                path += f"[{x}]"
            else:
                raise TypeError("Unexpected type")
        return path

    def process_error(error: dict[str, Any]) -> dict[str, Any]:
        processed = {
            "type": error["type"],
            "loc": loc_to_dot_sep(error["loc"]),
            "msg": error["msg"],
        }
        if "input" in error:
            processed["input"] = error["input"]
        return processed

    errors = [process_error(error) for error in exc.errors()]
    logger.error(f"Request validation failed: {errors}")

    message = "; ".join(f"{error['loc']}: {error['msg']}" for error in errors)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation error",
            "message": message,
            "errors": errors,
        },
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def invalid_identifier_response(resource_type: ResourceType) -> ResponseDict:
    return {
        400: {
            "description": f"Invalid {resource_type.value.lower()} id",
            "content": {
                "application/json": {
                    "example": {
                        "detail": f"Invalid {resource_type.value.lower()} id 'example'",
                        "message": f"Invalid {resource_type.value.lower()} id 'example'",
                    }
                }
            },
        }
    }


service_unavailable_response: ResponseDict = {
    503: {
        "description": "Service unavailable",
        "content": {"application/json": {"example": {"detail": "Service unavailable"}}},
    }
}

internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {
            "application/json": {"example": {"detail": "An unexpected error occurred"}}
        },
    }
}

validation_error_response: ResponseDict = {
    422: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Validation error",
                    "message": "body.category: Field required",
                    "errors": [
                        {
                            "type": "missing",
                            "loc": "body.category",
                            "msg": "Field required",
                            "input": {"text": "Buy milk"},
                        }
                    ],
                }
            }
        },
    }
}
