import pytest

from core.domain.models.task import Task


class TestTask:
    """Suite de tests para el modelo Task."""

    def test_nueva_tarea_esta_pendiente(self):
        task = Task(id=1, description="Escribir docs")

        assert task.done is False

    def test_mark_done_es_idempotente(self):
        task = Task(id=1, description="Escribir docs")

        task.mark_done()
        task.mark_done()

        assert task.done is True

    @pytest.mark.parametrize(
        "done, expected",
        [
            (False, "[ ] (#3) Preparar release"),
            (True, "[x] (#3) Preparar release"),
        ],
    )
    def test_format(self, done, expected):
        task = Task(id=3, description="Preparar release", done=done)

        assert task.format() == expected
        assert str(task) == expected

    def test_format_con_descripcion_vacia(self):
        assert Task(id=7, description="").format() == "[ ] (#7) "
