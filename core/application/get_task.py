import logging

from core.domain.errors import StoreFailureError, TaskNotFoundError
from core.domain.models.task import Task, parse_task_id
from core.domain.ports.task_repository import TaskRepository


class GetTaskUseCase:
    def __init__(
        self, repository: TaskRepository, logger: logging.Logger | None = None
    ) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, task_id: int | str) -> Task:
        self._logger.info(f"Buscando tarea con id {task_id}")

        parsed_id = parse_task_id(task_id)
        if parsed_id is None:
            raise TaskNotFoundError(task_id)

        # Un fallo de lectura se reporta como "no encontrada".
        try:
            task = self._repository.get(parsed_id)
        except StoreFailureError as e:
            self._logger.warning(f"Error leyendo la tarea {parsed_id}: {e}")
            raise TaskNotFoundError(task_id) from e

        if task is None:
            raise TaskNotFoundError(task_id)

        self._logger.debug(f"Tarea recuperada: {task}")
        return task
