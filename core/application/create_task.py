import logging
from dataclasses import dataclass

from core.domain.errors import InvalidTaskInputError
from core.domain.models.task import Task, parse_due_date
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class CreateTaskCommand:
    title: str
    due_date: str
    description: str = ""
    status: str = ""


class CreateTaskUseCase:
    def __init__(
        self, repository: TaskRepository, logger: logging.Logger | None = None
    ) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, cmd: CreateTaskCommand) -> Task:
        try:
            due_date = parse_due_date(cmd.due_date)
        except ValueError:
            raise InvalidTaskInputError("Invalid due_date format")

        task = self._repository.add(
            Task(
                id=None,
                title=cmd.title,
                description=cmd.description,
                due_date=due_date,
                status=cmd.status,
            )
        )
        self._logger.info(f"Tarea {task.id} creada")
        return task
