import logging

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class ListTasksUseCase:
    def __init__(
        self, repository: TaskRepository, logger: logging.Logger | None = None
    ) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> list[Task]:
        tasks = self._repository.list()
        self._logger.debug(f"{len(tasks)} tareas listadas")
        return tasks
