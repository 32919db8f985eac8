import logging

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.config import Settings

logger = logging.getLogger(__name__)

SUPPORTED_ORMS = ("peewee", "sqlalchemy")


def build_task_repository(settings: Settings) -> TaskRepository:
    """
    Abre el store configurado y crea el esquema si no existe.

    Cualquier error aquí es fatal: el proceso no debe arrancar sin store.
    """
    if settings.orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )
        from infrastructure.sqlalchemy.session.db import create_db_engine

        repository: TaskRepository = SqlAlchemyTaskRepository(
            create_db_engine(settings.database_url)
        )
    elif settings.orm == "peewee":
        from infrastructure.peewee.repository.task_repository import (
            PeeweeTaskRepository,
        )
        from infrastructure.peewee.session.db import create_database

        repository = PeeweeTaskRepository(create_database(settings.database_url))
    else:
        raise ValueError(
            f"ORM no soportado: {settings.orm!r} (opciones: {', '.join(SUPPORTED_ORMS)})"
        )

    logger.info(f"Store listo (orm={settings.orm})")
    return repository


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_get_task_use_case(repository: TaskRepository) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)
