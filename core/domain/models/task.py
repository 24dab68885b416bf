from dataclasses import dataclass

PENDING_MARK = "[ ]"
DONE_MARK = "[x]"


@dataclass(slots=True)
class Task:
    id: int
    description: str
    done: bool = False

    def mark_done(self) -> None:
        self.done = True

    def format(self) -> str:
        status = DONE_MARK if self.done else PENDING_MARK
        return f"{status} (#{self.id}) {self.description}"

    def __str__(self) -> str:
        return self.format()
