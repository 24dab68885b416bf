from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.models.task_list import TaskList


@dataclass(slots=True)
class AddTaskCommand:
    description: str


class AddTaskUseCase:
    def __init__(self, task_list: TaskList) -> None:
        self._task_list = task_list

    def execute(self, cmd: AddTaskCommand) -> Task:
        return self._task_list.add_task(cmd.description)
