import logging

from core.domain.errors import TaskNotFoundError
from core.domain.models.task import parse_task_id
from core.domain.ports.task_repository import TaskRepository


class DeleteTaskUseCase:
    def __init__(
        self, repository: TaskRepository, logger: logging.Logger | None = None
    ) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, task_id: int | str) -> None:
        parsed_id = parse_task_id(task_id)
        if parsed_id is None or not self._repository.delete(parsed_id):
            raise TaskNotFoundError(task_id)
        self._logger.info(f"Tarea {parsed_id} eliminada")
