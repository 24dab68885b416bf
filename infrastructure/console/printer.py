from typing import Callable, Iterable

from core.domain.models.task import Task

EMPTY_LISTING = "(no tasks)"


def print_tasks(
    label: str, tasks: Iterable[Task], emit: Callable[[str], None] = print
) -> None:
    """
    Imprime una etiqueta seguida de una línea por tarea.

    Args:
        label: Encabezado de la sección, precedido por una línea en blanco.
        tasks: Tareas en el orden en que se mostrarán.
        emit:  Función de salida (por defecto `print`).
    """
    emit(f"\n{label}")
    tasks = list(tasks)
    if not tasks:
        emit(EMPTY_LISTING)
        return
    for task in tasks:
        emit(f" - {task.format()}")
