import sys

import pytest

from core.utils.recursion import countdown, recursive_countdown, recursive_sum, sum_to


@pytest.mark.parametrize("func", [sum_to, recursive_sum])
@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (5, 15), (10, 55), (-3, 0)])
def test_suma(func, n, expected):
    assert func(n) == expected


@pytest.mark.parametrize("func", [countdown, recursive_countdown])
def test_countdown_negativo_no_emite(func):
    lines = []
    func(-1, lines.append)

    assert lines == []


@pytest.mark.parametrize("func", [countdown, recursive_countdown])
def test_countdown_cero_emite_una_linea(func):
    lines = []
    func(0, lines.append)

    assert lines == ["Countdown: 0"]


def test_countdown_emite_n_mas_uno_lineas_descendentes():
    lines = []
    countdown(5, lines.append)

    assert lines == [f"Countdown: {n}" for n in (5, 4, 3, 2, 1, 0)]


def test_countdown_imprime_por_defecto(capsys):
    countdown(2)

    assert capsys.readouterr().out == "Countdown: 2\nCountdown: 1\nCountdown: 0\n"


def test_versiones_iterativas_soportan_entradas_grandes():
    n = sys.getrecursionlimit() * 2
    lines = []

    countdown(n, lines.append)

    assert len(lines) == n + 1
    assert sum_to(n) == n * (n + 1) // 2
