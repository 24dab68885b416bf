import logging
import os
import sys

from dotenv import load_dotenv

from core.application.add_task import AddTaskCommand
from core.application.list_tasks import ListTasksCommand, TaskFilter
from core.application.mark_task_done import MarkTaskDoneCommand
from core.domain.models.task_list import TaskList
from core.domain.result import NotFound
from core.utils.recursion import countdown, sum_to
from infrastructure.console.printer import print_tasks
from infrastructure.container import (
    get_add_task_use_case,
    get_list_tasks_use_case,
    get_mark_task_done_use_case,
    get_task_list,
)

load_dotenv()

logger = logging.getLogger(__name__)

DEMO_TASKS = (
    "Build logging system for CLI app",
    "Implement recursive utility function",
    "Prepare project documentation for release",
)
DEMO_DONE_ID = 2
COUNTDOWN_FROM = 5
SUM_UP_TO = 10
DEFAULT_LOG_LEVEL = "WARNING"


def _configure_logging() -> None:
    log_level = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    valid = isinstance(logging.getLevelName(log_level), int)
    logging.basicConfig(
        level=log_level if valid else DEFAULT_LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not valid:
        logger.warning(f"LOG_LEVEL inválido {log_level!r}, usando {DEFAULT_LOG_LEVEL}")


def run(task_list: TaskList | None = None, done_id: int = DEMO_DONE_ID) -> int:
    print("===== TurboTS Demo =====")

    if task_list is None:
        task_list = get_task_list()
    add_task = get_add_task_use_case(task_list)
    list_tasks = get_list_tasks_use_case(task_list)
    mark_done = get_mark_task_done_use_case(task_list)

    for description in DEMO_TASKS:
        add_task.execute(AddTaskCommand(description=description))

    print_tasks("All tasks:", list_tasks.execute())

    result = mark_done.execute(MarkTaskDoneCommand(id=done_id))
    if isinstance(result, NotFound):
        print(f"Error marking task complete: {result.error()}", file=sys.stderr)
    else:
        print_tasks(
            "Completed tasks:",
            list_tasks.execute(ListTasksCommand(filter=TaskFilter.COMPLETE)),
        )
        print_tasks(
            "Incomplete tasks:",
            list_tasks.execute(ListTasksCommand(filter=TaskFilter.INCOMPLETE)),
        )

    print(f"\n--- Recursive countdown from {COUNTDOWN_FROM} ---")
    countdown(COUNTDOWN_FROM)

    print("\n--- Recursive sum demo ---")
    total = sum_to(SUM_UP_TO)
    print(f"Sum of numbers from 1 to {SUM_UP_TO} is: {total}")

    print("\n===== End of TurboTS Demo =====")
    print("")
    return 0


def main() -> int:
    _configure_logging()
    logger.debug("Iniciando demo de tareas")
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
