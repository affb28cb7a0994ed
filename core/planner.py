# --------------------------------------------------------------
# File: planner.py
# Description: Cálculo de filas y relleno de la tabla de transposición.
# --------------------------------------------------------------
"""Dimensiones de la tabla a partir de la longitud del texto y la clave."""

from typing import Tuple

from core.errors import InvalidColumnCountError


def plan_dimensions(plaintext_length: int, num_cols: int) -> Tuple[int, int]:
    """Calcula el número de filas y los caracteres de relleno necesarios.

    Args:
        plaintext_length (int): Longitud del texto en claro sin relleno.
        num_cols (int): Número de columnas (longitud de la clave).

    Returns:
        Tuple[int, int]: Número de filas y longitud del relleno.

    Raises:
        InvalidColumnCountError: Si ``num_cols`` es cero o negativo.

    """

    if num_cols <= 0:
        raise InvalidColumnCountError(f"Column count must be positive, got {num_cols}.")
    if plaintext_length < 0:
        raise ValueError("Plaintext length cannot be negative.")

    remainder = plaintext_length % num_cols
    padding_length = 0 if remainder == 0 else num_cols - remainder
    # El numerador siempre es múltiplo de num_cols.
    num_rows = (plaintext_length + padding_length) // num_cols
    return num_rows, padding_length
