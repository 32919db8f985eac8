from enum import Enum


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


class TaskError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidTaskInputError(TaskError):
    kind = ErrorKind.INVALID_INPUT


class TaskNotFoundError(TaskError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, task_id: object) -> None:
        super().__init__("Task not found")
        self.task_id = task_id


class StoreFailureError(TaskError):
    kind = ErrorKind.STORE_FAILURE
