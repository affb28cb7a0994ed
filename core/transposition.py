# --------------------------------------------------------------
# File: transposition.py
# Description: Cifrado y descifrado por transposición columnar (tabular).
# --------------------------------------------------------------
"""Motor del cifrado de transposición tabular.

El texto se escribe fila a fila en una tabla de ``num_rows x num_cols`` y se
lee columna a columna en el orden que indica la clave. Todas las funciones son
puras: cada llamada construye su propia tabla y no imprime ni registra nada.
"""

from __future__ import annotations

from typing import List, Sequence

from core.errors import LengthMismatchError, PaddingExceedsLengthError

PAD_CHAR = "z"

Grid = List[List[str]]


def build_grid(text: str, num_cols: int, num_rows: int) -> Grid:
    """Rellena una tabla fila a fila con los caracteres de ``text``.

    Args:
        text (str): Texto ya rellenado de longitud ``num_cols * num_rows``.
        num_cols (int): Columnas de la tabla.
        num_rows (int): Filas de la tabla.

    Returns:
        Grid: Lista de filas; la posición (fila, columna) contiene
        ``text[fila * num_cols + columna]``.

    """

    return [list(text[row * num_cols:(row + 1) * num_cols]) for row in range(num_rows)]


def read_rows(grid: Grid) -> str:
    """Lee la tabla fila a fila, de izquierda a derecha."""

    return "".join("".join(row) for row in grid)


def split_groups(ciphertext: str, num_cols: int, num_rows: int) -> List[str]:
    """Divide el ciphertext en ``num_cols`` grupos contiguos de ``num_rows`` caracteres."""

    return [ciphertext[i * num_rows:(i + 1) * num_rows] for i in range(num_cols)]


def pad_plaintext(plaintext: str, padding_length: int) -> str:
    """Añade ``padding_length`` caracteres de relleno al final del texto."""

    return plaintext + PAD_CHAR * padding_length


def encrypt(
    plaintext: str,
    key: Sequence[int],
    num_cols: int,
    num_rows: int,
    padding_length: int,
) -> str:
    """Cifra ``plaintext`` leyendo las columnas de la tabla en el orden de la clave.

    Args:
        plaintext (str): Texto en claro sin relleno.
        key (Sequence[int]): Permutación validada de 1..num_cols.
        num_cols (int): Columnas calculadas por la validación de la clave.
        num_rows (int): Filas calculadas por ``plan_dimensions``.
        padding_length (int): Relleno calculado por ``plan_dimensions``.

    Returns:
        str: Ciphertext con la misma longitud que el texto rellenado.

    Raises:
        ValueError: Si los parámetros no corresponden al texto recibido.

    """

    padded = pad_plaintext(plaintext, padding_length)
    if len(padded) != num_cols * num_rows:
        raise ValueError(
            f"Padded length {len(padded)} does not match {num_rows}x{num_cols} grid."
        )

    grid = build_grid(padded, num_cols, num_rows)
    columns = []
    for target_column in key:
        columns.append("".join(row[target_column - 1] for row in grid))
    return "".join(columns)


def decrypt(
    ciphertext: str,
    key: Sequence[int],
    num_cols: int,
    num_rows: int,
    padding_length: int,
) -> str:
    """Reconstruye la tabla desde los grupos del ciphertext y elimina el relleno.

    Args:
        ciphertext (str): Texto cifrado por ``encrypt``.
        key (Sequence[int]): La misma clave usada al cifrar.
        num_cols (int): Columnas de la tabla.
        num_rows (int): Filas de la tabla.
        padding_length (int): Relleno añadido durante el cifrado.

    Returns:
        str: Texto en claro original.

    Raises:
        LengthMismatchError: Si la longitud no es ``num_cols * num_rows``.
        PaddingExceedsLengthError: Si el relleno supera el texto reconstruido.

    """

    if len(ciphertext) != num_cols * num_rows:
        raise LengthMismatchError(
            f"Ciphertext length {len(ciphertext)} does not match {num_rows}x{num_cols} grid."
        )

    grid: Grid = [[""] * num_cols for _ in range(num_rows)]
    for group, target_column in zip(split_groups(ciphertext, num_cols, num_rows), key):
        for row, char in enumerate(group):
            grid[row][target_column - 1] = char

    padded = read_rows(grid)
    if padding_length > len(padded):
        raise PaddingExceedsLengthError(
            f"Padding length {padding_length} exceeds text length {len(padded)}."
        )
    return padded[: len(padded) - padding_length]


def decrypt_grid(ciphertext: str, key: Sequence[int], num_cols: int, num_rows: int) -> Grid:
    """Devuelve la tabla reconstruida durante el descifrado, para visualizarla."""

    padded = decrypt(ciphertext, key, num_cols, num_rows, 0)
    return build_grid(padded, num_cols, num_rows)
