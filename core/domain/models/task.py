import re
from dataclasses import dataclass
from datetime import date, datetime

DUE_DATE_FORMAT = "%Y-%m-%d"

_TASK_ID_PATTERN = re.compile(r"-?[0-9]+")
# Rango de INTEGER en SQLite (entero con signo de 64 bits).
_MIN_TASK_ID = -(2**63)
_MAX_TASK_ID = 2**63 - 1


@dataclass(slots=True)
class Task:
    id: int | None
    title: str
    description: str = ""
    due_date: date | None = None
    status: str = ""


def parse_due_date(value: str) -> date:
    """
    Parsea una fecha estricta `YYYY-MM-DD`.

    Solo se acepta la forma canónica (mes y día con dos dígitos), de modo que
    la fecha se devuelve exactamente como se guardó.

    Raises:
        ValueError: si el texto no es una fecha válida en ese formato.
    """
    parsed = datetime.strptime(value, DUE_DATE_FORMAT).date()
    if parsed.strftime(DUE_DATE_FORMAT) != value:
        raise ValueError(f"{value!r} no está en formato canónico YYYY-MM-DD")
    return parsed


def format_due_date(value: date | None) -> str:
    if value is None:
        return ""
    return value.strftime(DUE_DATE_FORMAT)


def parse_task_id(value: int | str) -> int | None:
    """
    Convierte el identificador de la ruta.

    Solo se aceptan dígitos ASCII con un `-` opcional y dentro del rango de
    64 bits del store; cualquier otra cosa devuelve None (no existe la fila).
    """
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and _TASK_ID_PATTERN.fullmatch(value):
        parsed = int(value)
    else:
        return None
    if not _MIN_TASK_ID <= parsed <= _MAX_TASK_ID:
        return None
    return parsed
