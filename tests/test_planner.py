# --------------------------------------------------------------
# File: test_planner.py
# Description: Pruebas del cálculo de filas y relleno de la tabla.
# --------------------------------------------------------------

import pytest

from core.errors import InvalidColumnCountError
from core.planner import plan_dimensions


@pytest.mark.parametrize(
    "length, cols, expected",
    [
        (7, 3, (3, 2)),
        (6, 3, (2, 0)),
        (10, 3, (4, 2)),
        (1, 5, (1, 4)),
        (0, 4, (0, 0)),
    ],
)
def test_plan_dimensions(length, cols, expected):
    """Comprueba filas y relleno para distintas longitudes.

    Args:
        length (int): Longitud del texto en claro.
        cols (int): Número de columnas.
        expected (tuple): Filas y relleno esperados.

    Returns:
        None: Las aserciones comparan el resultado calculado.
    """
    assert plan_dimensions(length, cols) == expected


@pytest.mark.parametrize("cols", [0, -1, -9])
def test_plan_rejects_non_positive_columns(cols):
    """Garantiza que un número de columnas no positivo se rechace."""
    with pytest.raises(InvalidColumnCountError):
        plan_dimensions(5, cols)


def test_padded_length_is_multiple_of_columns():
    """El texto rellenado siempre ocupa la tabla completa."""
    for cols in range(1, 10):
        for length in range(0, 40):
            rows, padding = plan_dimensions(length, cols)
            assert rows * cols == length + padding
            assert 0 <= padding < cols


def test_plan_rejects_negative_length():
    """Una longitud negativa no tiene sentido."""
    with pytest.raises(ValueError):
        plan_dimensions(-1, 3)
