"""
Resultado explícito de marcar una tarea como completada.

El llamador recibe `Completed` o `NotFound` y decide qué hacer con cada caso,
sin depender de una excepción que cruce capas. `unwrap()` permite volver al
estilo con excepciones cuando se prefiere.
"""

from dataclasses import dataclass

from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task


@dataclass(frozen=True, slots=True)
class Completed:
    task: Task

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Task:
        return self.task


@dataclass(frozen=True, slots=True)
class NotFound:
    task_id: int

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Task:
        raise TaskNotFoundError(self.task_id)

    def error(self) -> TaskNotFoundError:
        return TaskNotFoundError(self.task_id)


MarkDoneResult = Completed | NotFound
