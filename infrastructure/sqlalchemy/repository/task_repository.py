import logging

from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import SQLAlchemyError

from core.domain.errors import StoreFailureError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import create_session_factory, init_db

logger = logging.getLogger(__name__)


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        description=task_model.description or "",
        due_date=task_model.due_date,
        status=task_model.status or "",
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, engine: Engine) -> None:
        init_db(engine)
        self._session_factory = create_session_factory(engine)

    def add(self, task: Task) -> Task:
        session = self._session_factory()
        try:
            task_model = TaskModel(
                title=task.title,
                description=task.description,
                due_date=task.due_date,
                status=task.status,
            )
            session.add(task_model)
            session.commit()
            return _to_domain(task_model)
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Error insertando tarea: {e}")
            raise StoreFailureError("Failed to create task") from e
        finally:
            session.close()

    def get(self, task_id: int) -> Task | None:
        session = self._session_factory()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Error leyendo tarea {task_id}: {e}")
            raise StoreFailureError("Failed to retrieve task") from e
        finally:
            session.close()

    def update(self, task: Task) -> Task | None:
        session = self._session_factory()
        try:
            with session.begin():
                task_model = session.get(TaskModel, task.id, with_for_update=True)
                if task_model is None:
                    return None
                task_model.title = task.title
                task_model.description = task.description
                task_model.due_date = task.due_date
                task_model.status = task.status
                session.flush()
                session.refresh(task_model)
                return _to_domain(task_model)
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Error actualizando tarea {task.id}: {e}")
            raise StoreFailureError("Failed to update task") from e
        finally:
            session.close()

    def list(self) -> list[Task]:
        session = self._session_factory()
        try:
            task_models = session.scalars(select(TaskModel).order_by(TaskModel.id))
            return [_to_domain(task_model) for task_model in task_models]
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Error listando tareas: {e}")
            raise StoreFailureError("Failed to retrieve tasks") from e
        finally:
            session.close()

    def delete(self, task_id: int) -> bool:
        session = self._session_factory()
        try:
            result = session.execute(delete(TaskModel).where(TaskModel.id == task_id))
            session.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Error eliminando tarea {task_id}: {e}")
            raise StoreFailureError("Failed to delete task") from e
        finally:
            session.close()
