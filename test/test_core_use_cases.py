import logging
import unittest
from datetime import date

from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import (
    ErrorKind,
    InvalidTaskInputError,
    StoreFailureError,
    TaskNotFoundError,
)
from core.domain.models.task import Task, parse_due_date, parse_task_id

from fakes import InMemoryTaskRepository


class DueDateParsingTests(unittest.TestCase):
    def test_fecha_valida(self) -> None:
        self.assertEqual(parse_due_date("2025-03-10"), date(2025, 3, 10))

    def test_fecha_imposible(self) -> None:
        with self.assertRaises(ValueError):
            parse_due_date("2024-13-40")

    def test_fecha_no_canonica(self) -> None:
        for value in ("2025-3-10", "10/03/2025", "2025-03-10T00:00:00", ""):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_due_date(value)

    def test_parse_task_id(self) -> None:
        self.assertEqual(parse_task_id("42"), 42)
        self.assertEqual(parse_task_id(7), 7)
        self.assertIsNone(parse_task_id("abc"))
        self.assertEqual(parse_task_id("-3"), -3)
        self.assertEqual(parse_task_id(str(2**63 - 1)), 2**63 - 1)

    def test_parse_task_id_rechaza_formas_no_canonicas(self) -> None:
        for value in ("1_0", "+5", " 5 ", "5 ", "", "1.0", "\u0661", "0x10"):
            with self.subTest(value=value):
                self.assertIsNone(parse_task_id(value))

    def test_parse_task_id_fuera_de_rango(self) -> None:
        for value in ("99999999999999999999", str(2**63), str(-(2**63) - 1)):
            with self.subTest(value=value):
                self.assertIsNone(parse_task_id(value))
        self.assertIsNone(parse_task_id(2**64))


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()

    def _create(self, title: str = "Buy milk") -> Task:
        return CreateTaskUseCase(self.repo).execute(
            CreateTaskCommand(
                title=title,
                description="2%",
                due_date="2025-03-10",
                status="open",
            )
        )

    def test_crear_tarea_asigna_id_y_guarda(self) -> None:
        task = self._create()

        self.assertEqual(task.id, 1)
        self.assertEqual(task.title, "Buy milk")
        self.assertEqual(task.description, "2%")
        self.assertEqual(task.due_date, date(2025, 3, 10))
        self.assertEqual(task.status, "open")
        self.assertEqual(self.repo.get(task.id), task)

    def test_ids_unicos(self) -> None:
        ids = {self._create(f"t{i}").id for i in range(5)}
        self.assertEqual(len(ids), 5)
        self.assertTrue(all(task_id > 0 for task_id in ids))

    def test_crear_con_fecha_invalida_no_persiste(self) -> None:
        use_case = CreateTaskUseCase(self.repo)

        with self.assertRaises(InvalidTaskInputError) as ctx:
            use_case.execute(CreateTaskCommand(title="x", due_date="2024-13-40"))

        self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_INPUT)
        self.assertEqual(ctx.exception.message, "Invalid due_date format")
        self.assertEqual(self.repo.list(), [])

    def test_crear_propaga_fallo_del_store(self) -> None:
        self.repo.fail_with = "boom"

        with self.assertRaises(StoreFailureError):
            self._create()

    def test_obtener_tarea(self) -> None:
        task = self._create()

        self.assertEqual(GetTaskUseCase(self.repo).execute(str(task.id)), task)

    def test_obtener_tarea_inexistente(self) -> None:
        use_case = GetTaskUseCase(self.repo)

        for task_id in ("99", "abc"):
            with self.subTest(task_id=task_id):
                with self.assertRaises(TaskNotFoundError):
                    use_case.execute(task_id)

    def test_obtener_con_fallo_de_lectura_es_not_found(self) -> None:
        self.repo.fail_with = "boom"

        with self.assertRaises(TaskNotFoundError):
            GetTaskUseCase(self.repo).execute(1)

    def test_obtener_registra_en_logger_inyectado(self) -> None:
        task = self._create()
        logger = logging.getLogger("test.get_task")

        with self.assertLogs(logger, level="INFO") as logs:
            GetTaskUseCase(self.repo, logger=logger).execute(task.id)

        self.assertIn(f"Buscando tarea con id {task.id}", logs.output[0])

    def test_editar_tarea_reemplaza_todos_los_campos(self) -> None:
        task = self._create()

        updated = UpdateTaskUseCase(self.repo).execute(
            str(task.id),
            UpdateTaskCommand(
                title="Buy bread",
                description="",
                due_date="2025-04-01",
                status="done",
            ),
        )

        self.assertEqual(updated.id, task.id)
        self.assertEqual(updated.title, "Buy bread")
        self.assertEqual(updated.description, "")
        self.assertEqual(updated.due_date, date(2025, 4, 1))
        self.assertEqual(updated.status, "done")
        self.assertEqual(GetTaskUseCase(self.repo).execute(task.id), updated)

    def test_editar_tarea_inexistente_no_persiste(self) -> None:
        use_case = UpdateTaskUseCase(self.repo)

        with self.assertRaises(TaskNotFoundError):
            use_case.execute(5, UpdateTaskCommand(title="x", due_date="2025-01-01"))

        self.assertEqual(self.repo.list(), [])

    def test_editar_con_fecha_invalida(self) -> None:
        task = self._create()

        with self.assertRaises(InvalidTaskInputError):
            UpdateTaskUseCase(self.repo).execute(
                task.id, UpdateTaskCommand(title="x", due_date="mañana")
            )

        self.assertEqual(self.repo.get(task.id), task)

    def test_eliminar_tarea(self) -> None:
        task = self._create()
        use_case = DeleteTaskUseCase(self.repo)

        use_case.execute(str(task.id))

        with self.assertRaises(TaskNotFoundError):
            GetTaskUseCase(self.repo).execute(task.id)
        with self.assertRaises(TaskNotFoundError):
            use_case.execute(str(task.id))

    def test_eliminar_con_fallo_del_store(self) -> None:
        task = self._create()
        self.repo.fail_with = "boom"

        with self.assertRaises(StoreFailureError):
            DeleteTaskUseCase(self.repo).execute(task.id)

    def test_listar_tareas(self) -> None:
        use_case = ListTasksUseCase(self.repo)
        self.assertEqual(use_case.execute(), [])

        for i in range(3):
            self._create(f"t{i}")

        tasks = use_case.execute()
        self.assertEqual([t.title for t in tasks], ["t0", "t1", "t2"])

    def test_listar_acepta_logger_inyectado(self) -> None:
        self._create()
        logger = logging.getLogger("test.list_tasks")

        with self.assertLogs(logger, level="DEBUG") as logs:
            tasks = ListTasksUseCase(self.repo, logger=logger).execute()

        self.assertEqual(len(tasks), 1)
        self.assertIn("1 tareas listadas", logs.output[0])


if __name__ == "__main__":
    unittest.main()
