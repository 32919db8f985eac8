import logging
from datetime import date

from peewee import Database, PeeweeException, SqliteDatabase

from core.domain.errors import StoreFailureError
from core.domain.models.task import Task, format_due_date, parse_due_date
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel

logger = logging.getLogger(__name__)

# AUTOINCREMENT evita que SQLite reutilice ids de filas borradas.
_SQLITE_SCHEMA = """
CREATE TABLE IF NOT EXISTS "MANAGEMENT" (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT,
    due_date DATE,
    status TEXT
)
"""


def _to_db(value: date | None) -> str | None:
    # Se guarda como texto canónico YYYY-MM-DD.
    return format_due_date(value) if value is not None else None


def _to_domain(model: TaskModel) -> Task:
    due_date = model.due_date
    # DateField devuelve el texto sin convertir si no reconoce el formato.
    if isinstance(due_date, str):
        due_date = parse_due_date(due_date)
    return Task(
        id=model.id,
        title=model.title,
        description=model.description or "",
        due_date=due_date if isinstance(due_date, date) else None,
        status=model.status or "",
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self, database: Database) -> None:
        self._db = database
        self._db.bind([TaskModel])
        self._db.connect(reuse_if_open=True)
        if isinstance(self._db, SqliteDatabase):
            self._db.execute_sql(_SQLITE_SCHEMA)
        else:
            self._db.create_tables([TaskModel], safe=True)

    def add(self, task: Task) -> Task:
        try:
            model = TaskModel.create(
                title=task.title,
                description=task.description,
                due_date=_to_db(task.due_date),
                status=task.status,
            )
        except PeeweeException as e:
            logger.error(f"Error insertando tarea: {e}")
            raise StoreFailureError("Failed to create task") from e
        return Task(
            id=model.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            status=task.status,
        )

    def get(self, task_id: int) -> Task | None:
        try:
            model = TaskModel.get_or_none(TaskModel.id == task_id)
            return _to_domain(model) if model is not None else None
        except (PeeweeException, ValueError) as e:
            logger.error(f"Error leyendo tarea {task_id}: {e}")
            raise StoreFailureError("Failed to retrieve task") from e

    def update(self, task: Task) -> Task | None:
        try:
            with self._db.atomic():
                if TaskModel.get_or_none(TaskModel.id == task.id) is None:
                    return None
                (
                    TaskModel.update(
                        title=task.title,
                        description=task.description,
                        due_date=_to_db(task.due_date),
                        status=task.status,
                    )
                    .where(TaskModel.id == task.id)
                    .execute()
                )
                return _to_domain(TaskModel.get(TaskModel.id == task.id))
        except (PeeweeException, ValueError) as e:
            logger.error(f"Error actualizando tarea {task.id}: {e}")
            raise StoreFailureError("Failed to update task") from e

    def list(self) -> list[Task]:
        try:
            return [
                _to_domain(model)
                for model in TaskModel.select().order_by(TaskModel.id)
            ]
        except (PeeweeException, ValueError) as e:
            logger.error(f"Error listando tareas: {e}")
            raise StoreFailureError("Failed to retrieve tasks") from e

    def delete(self, task_id: int) -> bool:
        try:
            deleted = TaskModel.delete().where(TaskModel.id == task_id).execute()
        except PeeweeException as e:
            logger.error(f"Error eliminando tarea {task_id}: {e}")
            raise StoreFailureError("Failed to delete task") from e
        return deleted > 0
