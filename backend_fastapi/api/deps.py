from fastapi import Request

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import (
    get_create_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
    get_update_task_use_case,
)


def task_repository(request: Request) -> TaskRepository:
    return request.app.state.task_repository


def create_task_use_case(request: Request) -> CreateTaskUseCase:
    return get_create_task_use_case(task_repository(request))


def get_task_use_case(request: Request) -> GetTaskUseCase:
    return get_get_task_use_case(task_repository(request))


def update_task_use_case(request: Request) -> UpdateTaskUseCase:
    return get_update_task_use_case(task_repository(request))


def delete_task_use_case(request: Request) -> DeleteTaskUseCase:
    return get_delete_task_use_case(task_repository(request))


def list_tasks_use_case(request: Request) -> ListTasksUseCase:
    return get_list_tasks_use_case(task_repository(request))
