import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_fastapi.api.routes.tasks import router as tasks_router
from backend_fastapi.api.schemas import MessageResponse
from core.domain.ports.task_repository import TaskRepository
from infrastructure.config import Settings, load_settings
from infrastructure.container import build_task_repository

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    repository: TaskRepository | None = None,
) -> FastAPI:
    """
    Construye la aplicación.

    Si no se pasa `repository`, el store configurado se abre en el arranque
    (lifespan); si falla, la aplicación no llega a arrancar.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if getattr(app.state, "task_repository", None) is None:
            app.state.task_repository = build_task_repository(settings)
        yield

    app = FastAPI(title="Task Management API", lifespan=lifespan)
    app.state.task_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_payload_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(f"Payload inválido en {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request payload"},
        )

    @app.get("/", response_model=MessageResponse, tags=["root"])
    def root() -> MessageResponse:
        return MessageResponse(message="Hello, This is Task Management Api")

    app.include_router(tasks_router)
    return app


app = create_app()
