from peewee import Database, SqliteDatabase
from playhouse.db_url import connect

DEFAULT_DATABASE_URL = "sqlite:///task.db"


def create_database(database_url: str = DEFAULT_DATABASE_URL) -> Database:
    """
    Crea la conexión de peewee a partir de una URL (`sqlite:///...`,
    `postgresql://...`).
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # peewee abre una conexión por hilo; en memoria cada una sería una BDD
        # vacía, así que se comparte una sola entre todos los hilos.
        return SqliteDatabase(
            ":memory:", thread_safe=False, check_same_thread=False
        )
    return connect(database_url)
