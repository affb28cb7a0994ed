# --------------------------------------------------------------
# File: cli.py
# Description: Bucle interactivo de consola para el cifrado tabular.
# --------------------------------------------------------------
"""Lee texto y clave, cifra, muestra la tabla y descifra hasta que el usuario sale."""

from __future__ import annotations

import argparse
import re
from typing import Callable, List, Optional

from core import config
from core.errors import NonDigitOrZeroError, NotAPermutationError
from core.key import parse_key, validate_key
from core.planner import plan_dimensions
from core.rendering import render_decrypt_view, render_grid
from core.text_policy import contains_digit
from core.transposition import build_grid, decrypt, decrypt_grid, encrypt, pad_plaintext, split_groups

INTEGER = re.compile(r"[+-]?\d+")


def _read_key(raw: str, wide: bool, output_fn: Callable[[str], None]) -> Optional[List[int]]:
    """Valida la clave escrita y devuelve sus dígitos, o ``None`` tras avisar del error."""

    raw = raw.strip()
    if not wide:
        if not INTEGER.fullmatch(raw):
            output_fn("Error: Key must be a positive integer composed of digits 1..9.")
            return None
        if int(raw) <= 0:
            output_fn("Error: Key must be greater than 0.")
            return None
        raw = str(int(raw))
    elif not raw:
        output_fn("Error: Key must not be empty.")
        return None

    try:
        digits = parse_key(raw, wide=wide)
        num_cols = validate_key(digits, wide=wide)
    except NonDigitOrZeroError:
        if wide:
            output_fn("Error: Key must be positive integers separated by commas or spaces, no zeros or letters.")
        else:
            output_fn("Error: Key must contain digits 1..9 only, no zeros or letters.")
        return None
    except NotAPermutationError:
        n = len(digits)
        if wide:
            output_fn(f"Error: Key must be a permutation of 1..{n}. Example for 4: 3,1,4,2.")
        else:
            output_fn(f"Error: Key must be a permutation of 1..{n}. Example for 3: 123, 132, 213, 231, 312, 321.")
        return None
    output_fn(f"Number of columns: {num_cols}")
    return digits


def run(
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
    *,
    wide: bool = False,
) -> None:
    """Ejecuta el bucle interactivo hasta que el usuario responde que no o llega EOF.

    Args:
        input_fn (Callable[[str], str]): Función de lectura con prompt.
        output_fn (Callable[[str], None]): Función de escritura de líneas.
        wide (bool): Acepta claves de varias cifras separadas por comas o espacios.

    """

    try:
        while True:
            output_fn("=== Tabular TC ===")
            plaintext = input_fn("Plain Text: ")
            while contains_digit(plaintext):
                output_fn("Error: Plaintext must not contain numbers (0-9).")
                plaintext = input_fn("Plain Text: ")

            key = _read_key(input_fn("Auto Key: "), wide, output_fn)
            if key is None:
                continue

            num_cols = len(key)
            num_rows, padding_length = plan_dimensions(len(plaintext), num_cols)
            output_fn(f"Number of rows: {num_rows}")

            padded = pad_plaintext(plaintext, padding_length)
            output_fn(render_grid(build_grid(padded, num_cols, num_rows), num_cols))
            ciphertext = encrypt(plaintext, key, num_cols, num_rows, padding_length)
            output_fn(f"Encrypted Text: {ciphertext}\n")

            output_fn(render_decrypt_view(split_groups(ciphertext, num_cols, num_rows), key))
            output_fn(render_grid(decrypt_grid(ciphertext, key, num_cols, num_rows), num_cols))
            decrypted = decrypt(ciphertext, key, num_cols, num_rows, padding_length)
            output_fn(f"Decrypted Text: {decrypted}")

            answer = input_fn("Do you want to encrypt another text? (y/n): ")
            if not answer.strip().lower().startswith("y"):
                break
    except EOFError:
        return


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Tabular (columnar) transposition cipher.")
    parser.add_argument(
        "--wide",
        action="store_true",
        default=config.WIDE_KEYS,
        help="Accept keys as comma/space separated integers (more than 9 columns).",
    )
    args = parser.parse_args(argv)
    run(wide=args.wide)


if __name__ == "__main__":
    main()
