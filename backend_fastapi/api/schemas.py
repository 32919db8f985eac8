from datetime import date

from pydantic import BaseModel

from core.domain.models.task import Task


class TaskPayload(BaseModel):
    """Cuerpo de POST y PUT. Un `id` en el cuerpo se ignora."""

    title: str
    description: str | None = None
    due_date: str
    status: str | None = None


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str
    due_date: date | None
    status: str

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            status=task.status,
        )


class MessageResponse(BaseModel):
    message: str
