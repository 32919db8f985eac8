import logging
from dataclasses import dataclass

from core.domain.errors import InvalidTaskInputError, TaskNotFoundError
from core.domain.models.task import Task, parse_due_date, parse_task_id
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str
    due_date: str
    description: str = ""
    status: str = ""


class UpdateTaskUseCase:
    """
    Reemplaza todos los campos mutables de una tarea existente.

    No hay semántica PATCH: los campos ausentes toman su valor por defecto.
    """

    def __init__(
        self, repository: TaskRepository, logger: logging.Logger | None = None
    ) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, task_id: int | str, cmd: UpdateTaskCommand) -> Task:
        try:
            due_date = parse_due_date(cmd.due_date)
        except ValueError:
            raise InvalidTaskInputError("Invalid due_date format")

        parsed_id = parse_task_id(task_id)
        if parsed_id is None:
            raise TaskNotFoundError(task_id)

        updated = self._repository.update(
            Task(
                id=parsed_id,
                title=cmd.title,
                description=cmd.description,
                due_date=due_date,
                status=cmd.status,
            )
        )
        if updated is None:
            raise TaskNotFoundError(task_id)

        self._logger.info(f"Tarea {parsed_id} actualizada")
        return updated
