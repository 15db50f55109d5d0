import uvicorn

from todo_api.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "todo_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
