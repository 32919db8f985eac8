from abc import ABC, abstractmethod

from core.domain.models.task import Task


class TaskRepository(ABC):
    """
    Puerto de persistencia de tareas.

    Las implementaciones envuelven los errores del driver en
    `StoreFailureError`.
    """

    @abstractmethod
    def list(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def add(self, task: Task) -> Task:
        """Inserta la tarea y la devuelve con el id asignado por el store."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, task: Task) -> Task | None:
        """
        Sobrescribe la fila `task.id` y devuelve la fila releída.

        La comprobación de existencia, la escritura y la relectura se hacen
        en una sola transacción. Devuelve None si la fila no existe.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """Devuelve False si no se borró ninguna fila."""
        raise NotImplementedError
