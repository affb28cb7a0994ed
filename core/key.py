# --------------------------------------------------------------
# File: key.py
# Description: Lectura y validación de claves numéricas de permutación.
# --------------------------------------------------------------
"""Conversión de texto a clave y comprobación de permutaciones 1..N.

Por defecto la clave es una cadena de dígitos sueltos (``"312"``), como en la
versión original de consola, lo que limita la tabla a 9 columnas. En modo
``wide`` la clave se escribe como enteros separados por comas o espacios
(``"3,10,1,..."``) y admite cualquier número de columnas.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from core.errors import NonDigitOrZeroError, NotAPermutationError

MAX_DIGIT = 9

DELIMITERS = re.compile(r"[,\s]+")


def parse_key(text: str, *, wide: bool = False) -> List[int]:
    """Convierte la clave escrita por el usuario en una lista de enteros.

    Args:
        text (str): Clave tal como la introduce el usuario.
        wide (bool): Acepta enteros de varias cifras separados por comas o espacios.

    Returns:
        List[int]: Secuencia de posiciones de columna (base 1).

    Raises:
        NonDigitOrZeroError: Si aparece un carácter no numérico o un cero.

    """

    raw = (text or "").strip()
    if wide and DELIMITERS.search(raw):
        tokens = [token for token in DELIMITERS.split(raw) if token]
    else:
        tokens = list(raw)

    digits: List[int] = []
    for token in tokens:
        if not token.isdecimal() or int(token) == 0:
            raise NonDigitOrZeroError(
                f"Key must contain digits 1..9 only, no zeros or letters (got {token!r})."
            )
        digits.append(int(token))
    return digits


def validate_key(digits: Sequence[int], *, wide: bool = False) -> int:
    """Comprueba que la clave sea una permutación de 1..N y devuelve N.

    Args:
        digits (Sequence[int]): Posiciones de columna en orden de lectura.
        wide (bool): Si es ``False`` cada valor debe estar entre 1 y 9.

    Returns:
        int: Número de columnas de la tabla.

    Raises:
        NonDigitOrZeroError: Si algún valor está fuera del rango de dígitos.
        NotAPermutationError: Si hay repetidos o falta algún valor de 1..N.

    """

    upper = None if wide else MAX_DIGIT
    for value in digits:
        if isinstance(value, bool) or not isinstance(value, int):
            raise NonDigitOrZeroError(f"Key value {value!r} is not an integer.")
        if value < 1 or (upper is not None and value > upper):
            raise NonDigitOrZeroError(
                f"Key must contain digits 1..{upper or 'N'} only, got {value}."
            )

    num_cols = len(digits)
    if num_cols == 0 or sorted(digits) != list(range(1, num_cols + 1)):
        raise NotAPermutationError(f"Key must be a permutation of 1..{num_cols}.")
    return num_cols
