import uvicorn

from infrastructure.config import load_settings
from infrastructure.logging_setup import setup_logging


def run() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    print(
        f"Starting server at http://{settings.host}:{settings.port} "
        f"(ORM: {settings.orm}, Reload: {settings.reload})"
    )

    uvicorn.run(
        "backend_fastapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
        log_config=None,
    )


if __name__ == "__main__":
    run()
