from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

DEFAULT_DATABASE_URL = "sqlite:///task.db"


class Base(DeclarativeBase):
    pass


def create_db_engine(database_url: str = DEFAULT_DATABASE_URL) -> Engine:
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # Una única conexión compartida para que la BDD en memoria sobreviva
        # entre sesiones e hilos.
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    # Registra el modelo en Base.metadata antes de crear tablas.
    from infrastructure.sqlalchemy.model import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
