from dataclasses import dataclass
from enum import Enum

from core.domain.models.task import Task
from core.domain.models.task_list import TaskList


class TaskFilter(Enum):
    ALL = "all"
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


@dataclass(slots=True)
class ListTasksCommand:
    filter: TaskFilter = TaskFilter.ALL


class ListTasksUseCase:
    def __init__(self, task_list: TaskList) -> None:
        self._task_list = task_list

    def execute(self, cmd: ListTasksCommand | None = None) -> list[Task]:
        task_filter = cmd.filter if cmd is not None else TaskFilter.ALL
        if task_filter is TaskFilter.INCOMPLETE:
            return self._task_list.get_incomplete()
        if task_filter is TaskFilter.COMPLETE:
            return self._task_list.get_complete()
        return self._task_list.get_all()
