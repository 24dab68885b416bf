from core.application.add_task import AddTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.mark_task_done import MarkTaskDoneUseCase
from core.domain.models.task_list import TaskList

_task_list: TaskList | None = None


def get_task_list() -> TaskList:
    """
    Obtiene la lista de tareas de la sesión (Singleton por proceso).
    """
    global _task_list
    if _task_list is None:
        _task_list = TaskList()
    return _task_list


def reset_task_list() -> None:
    global _task_list
    _task_list = None


def _resolve(task_list: TaskList | None) -> TaskList:
    # TaskList vacía es falsy
    return get_task_list() if task_list is None else task_list


def get_add_task_use_case(task_list: TaskList | None = None) -> AddTaskUseCase:
    return AddTaskUseCase(task_list=_resolve(task_list))


def get_mark_task_done_use_case(
    task_list: TaskList | None = None,
) -> MarkTaskDoneUseCase:
    return MarkTaskDoneUseCase(task_list=_resolve(task_list))


def get_list_tasks_use_case(task_list: TaskList | None = None) -> ListTasksUseCase:
    return ListTasksUseCase(task_list=_resolve(task_list))
