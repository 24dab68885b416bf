from dataclasses import dataclass

from core.domain.models.task_list import TaskList
from core.domain.result import MarkDoneResult


@dataclass(slots=True)
class MarkTaskDoneCommand:
    id: int


class MarkTaskDoneUseCase:
    def __init__(self, task_list: TaskList) -> None:
        self._task_list = task_list

    def execute(self, cmd: MarkTaskDoneCommand) -> MarkDoneResult:
        return self._task_list.try_mark_done(cmd.id)
