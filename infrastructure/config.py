import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True, slots=True)
class Settings:
    database_url: str = "sqlite:///task.db"
    orm: str = "peewee"
    host: str = "127.0.0.1"
    port: int = 8080
    reload: bool = False
    log_level: str = "info"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = field(default_factory=lambda: ["*"])


def load_settings(env_file: str | None = None) -> Settings:
    """
    Lee la configuración de las variables de entorno (y del `.env`, si existe).

    Las variables ya definidas en el entorno tienen prioridad sobre el `.env`.
    """
    load_dotenv(env_file)
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///task.db"),
        orm=os.getenv("ORM", "peewee").strip().lower(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
        reload=_as_bool(os.getenv("RELOAD", "false")),
        log_level=os.getenv("LOG_LEVEL", "info").strip().lower(),
        cors_origins=_as_list(os.getenv("CORS_ORIGINS", "*")),
        cors_allow_credentials=_as_bool(os.getenv("CORS_ALLOW_CREDENTIALS", "true")),
        cors_allow_methods=_as_list(os.getenv("CORS_ALLOW_METHODS", "*")),
        cors_allow_headers=_as_list(os.getenv("CORS_ALLOW_HEADERS", "*")),
    )
