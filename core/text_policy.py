# --------------------------------------------------------------
# File: text_policy.py
# Description: Reglas de validación del texto en claro antes de cifrar.
# --------------------------------------------------------------
"""Utilidades para comprobar que el texto en claro es apto para la tabla."""

from __future__ import annotations

import re
from typing import List, Tuple

from core.errors import PlaintextPolicyError

DIGIT = re.compile(r"\d")


def contains_digit(text: str | None) -> bool:
    """Indica si el texto contiene algún dígito (0-9 u otro dígito Unicode)."""

    if not text:
        return False
    return DIGIT.search(text) is not None


def check_plaintext(text: str | None) -> Tuple[bool, List[str]]:
    """Evalúa el texto en claro y devuelve cumplimiento y motivos de rechazo.

    Letras, espacios y símbolos están permitidos; los dígitos no, porque la
    clave se introduce como número.

    Args:
        text (str | None): Texto en claro propuesto por el usuario.

    Returns:
        Tuple[bool, List[str]]: Resultado de la validación y motivos de rechazo.

    """

    reasons: List[str] = []
    if contains_digit(text):
        reasons.append("Plaintext must not contain numbers (0-9).")
    return not reasons, reasons


def ensure_plaintext(text: str | None) -> str:
    """Devuelve el texto normalizado o lanza ``PlaintextPolicyError``."""

    ok, reasons = check_plaintext(text)
    if not ok:
        raise PlaintextPolicyError(" ".join(reasons))
    return text or ""
