"""
Cuenta regresiva y suma de 1 a n.

`recursive_countdown` y `recursive_sum` son las versiones de libro, con un
caso base explícito. `countdown` y `sum_to` producen exactamente lo mismo con
un bucle, así que no dependen del límite de recursión del intérprete.
"""

from typing import Callable

Emit = Callable[[str], None]


def _line(n: int) -> str:
    return f"Countdown: {n}"


def recursive_countdown(n: int, emit: Emit = print) -> None:
    if n < 0:
        return
    emit(_line(n))
    recursive_countdown(n - 1, emit)


def recursive_sum(n: int) -> int:
    if n <= 0:
        return 0
    return n + recursive_sum(n - 1)


def countdown(n: int, emit: Emit = print) -> None:
    """Emite una línea por cada valor de n a 0. Nada si n < 0."""
    for value in range(n, -1, -1):
        emit(_line(value))


def sum_to(n: int) -> int:
    """Suma 1 + 2 + ... + n (0 si n <= 0)."""
    total = 0
    for value in range(1, n + 1):
        total += value
    return total
