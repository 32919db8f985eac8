from fastapi import APIRouter, Depends, HTTPException, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import MessageResponse, TaskPayload, TaskResponse
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import ErrorKind, StoreFailureError, TaskError

router = APIRouter(prefix="/MANAGEMENT", tags=["tasks"])

_STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _http_error(error: TaskError) -> HTTPException:
    return HTTPException(status_code=_STATUS_BY_KIND[error.kind], detail=error.message)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def create_task(
    payload: TaskPayload,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskResponse:
    """
    Crea una nueva tarea. El id lo asigna la base de datos.

    - **title**: Título de la tarea.
    - **description**: Descripción opcional.
    - **due_date**: Fecha límite `YYYY-MM-DD`.
    - **status**: Estado libre (por ejemplo `open`).
    """
    cmd = CreateTaskCommand(
        title=payload.title,
        description=payload.description or "",
        due_date=payload.due_date,
        status=payload.status or "",
    )
    try:
        return TaskResponse.from_domain(use_case.execute(cmd))
    except TaskError as e:
        raise _http_error(e) from e


@router.get(
    "",
    response_model=list[TaskResponse] | MessageResponse,
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskResponse] | MessageResponse:
    """
    Obtiene todas las tareas. Si no hay ninguna devuelve un mensaje
    en lugar de una lista vacía.
    """
    try:
        tasks = use_case.execute()
    except StoreFailureError as e:
        raise _http_error(e) from e

    if not tasks:
        return MessageResponse(message="No tasks found")
    return [TaskResponse.from_domain(task) for task in tasks]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Obtener una tarea",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    try:
        return TaskResponse.from_domain(use_case.execute(task_id))
    except TaskError as e:
        raise _http_error(e) from e


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Editar una tarea existente",
)
def update_task(
    task_id: str,
    payload: TaskPayload,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskResponse:
    """
    Reemplaza todos los campos de una tarea existente.

    - **task_id**: id de la tarea a modificar.
    """
    cmd = UpdateTaskCommand(
        title=payload.title,
        description=payload.description or "",
        due_date=payload.due_date,
        status=payload.status or "",
    )
    try:
        return TaskResponse.from_domain(use_case.execute(task_id, cmd))
    except TaskError as e:
        raise _http_error(e) from e


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> MessageResponse:
    try:
        use_case.execute(task_id)
    except TaskError as e:
        raise _http_error(e) from e
    return MessageResponse(message="Task deleted successfully")
