import logging
import threading
from typing import Iterator

from core.domain.models.task import Task
from core.domain.result import Completed, MarkDoneResult, NotFound

logger = logging.getLogger(__name__)


class TaskList:
    """
    Colección ordenada de tareas de una sesión.

    La lista es dueña de sus `Task`: los accesores devuelven copias del
    contenedor, pero los elementos son las mismas instancias. Los ids se
    asignan en orden de creación empezando en 1 y nunca se reutilizan.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def add_task(self, description: str) -> Task:
        with self._lock:
            task = Task(id=self._next_id, description=description)
            self._next_id += 1
            self._tasks.append(task)
        logger.debug(f"Tarea #{task.id} creada: {description!r}")
        return task

    def find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def try_mark_done(self, task_id: int) -> MarkDoneResult:
        """
        Marca la tarea `task_id` como completada sin lanzar excepciones.

        Returns:
            `Completed(task)` si existe, `NotFound(task_id)` si no.
            En el segundo caso la colección no se modifica.
        """
        with self._lock:
            task = self.find(task_id)
            if task is None:
                logger.debug(f"Tarea #{task_id} no encontrada")
                return NotFound(task_id)
            task.mark_done()
        logger.info(f"Tarea #{task_id} completada")
        return Completed(task)

    def mark_done(self, task_id: int) -> None:
        """Igual que `try_mark_done`, pero lanza `TaskNotFoundError` si no existe."""
        self.try_mark_done(task_id).unwrap()

    def get_all(self) -> list[Task]:
        return list(self._tasks)

    def get_incomplete(self) -> list[Task]:
        return [t for t in self._tasks if not t.done]

    def get_complete(self) -> list[Task]:
        return [t for t in self._tasks if t.done]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.get_all())
