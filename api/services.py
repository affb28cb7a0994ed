# --------------------------------------------------------------
# File: services.py
# Description: Servicios de cifrado tabular y persistencia de mensajes.
# --------------------------------------------------------------
"""Funciones de la capa de servicios: validar, planificar, transformar y guardar."""

from __future__ import annotations

import os
from typing import List, Optional, Tuple

from pydantic import ValidationError

from core import config
from core.errors import CipherError
from core.key import parse_key, validate_key
from core.models import CipherParameters, EncryptedMessage
from core.planner import plan_dimensions
from core.storage import load_json, save_json
from core.text_policy import ensure_plaintext
from core.transposition import decrypt, encrypt

# Configuración de rutas de persistencia.
DATA_DIR = os.getenv("STORAGE_PATH", config.STORAGE_PATH)
MESSAGES_DIR = os.path.join(DATA_DIR, "messages")


def secure_name(name: str) -> str:
    """Normaliza el nombre del mensaje para evitar caracteres problemáticos.

    Args:
        name (str): Nombre propuesto por el usuario.

    Returns:
        str: Nombre limpio y libre de rutas o caracteres inválidos.
    """

    bad = '<>:"/\\|?*'
    for ch in bad:
        name = name.replace(ch, "_")
    return name.strip().replace("..", "_")


def _message_path(name: str) -> str:
    clean = secure_name(name)
    if not clean:
        raise ValueError("Message name cannot be empty.")
    return os.path.join(MESSAGES_DIR, clean + ".json")


def encrypt_message(
    plaintext: str, key_text: str, *, wide: Optional[bool] = None
) -> Tuple[bool, str, Optional[EncryptedMessage], str]:
    """Cifra el texto aplicando el orden validar, planificar y transformar.

    Args:
        plaintext (str): Texto en claro sin dígitos.
        key_text (str): Clave tal como la escribe el usuario (``"312"``).
        wide (Optional[bool]): Fuerza el modo de claves delimitadas; por
            defecto se toma de ``CIPHER_WIDE_KEYS``.

    Returns:
        Tuple[bool, str, Optional[EncryptedMessage], str]: Indicador de éxito,
        mensaje para la interfaz, mensaje cifrado con sus parámetros y traza
        de depuración.

    """

    wide = config.WIDE_KEYS if wide is None else wide
    try:
        text = ensure_plaintext(plaintext)
        digits = parse_key(key_text, wide=wide)
        num_cols = validate_key(digits, wide=wide)
    except CipherError as exc:
        return False, str(exc), None, f"[KEY] rejected wide={wide}"

    num_rows, padding_length = plan_dimensions(len(text), num_cols)
    ciphertext = encrypt(text, digits, num_cols, num_rows, padding_length)
    params = CipherParameters(
        key=digits,
        num_cols=num_cols,
        num_rows=num_rows,
        padding_length=padding_length,
    )

    debug = (
        f"[KEY] digits={digits} num_cols={num_cols}\n"
        f"[PLAN] length={len(text)} num_rows={num_rows} padding={padding_length}\n"
        f"[ENCRYPT] ct_len={len(ciphertext)}"
    )
    return True, "Texto cifrado.", EncryptedMessage(ciphertext=ciphertext, params=params), debug


def decrypt_message(message: EncryptedMessage) -> Tuple[bool, str, Optional[str], str]:
    """Descifra un mensaje usando los parámetros que lo acompañan.

    Args:
        message (EncryptedMessage): Ciphertext y parámetros de la tabla.

    Returns:
        Tuple[bool, str, Optional[str], str]: Indicador de éxito, mensaje para
        la interfaz, texto en claro recuperado y traza de depuración.

    """

    params = message.params
    try:
        plaintext = decrypt(
            message.ciphertext,
            params.key,
            params.num_cols,
            params.num_rows,
            params.padding_length,
        )
    except CipherError as exc:
        dbg = f"[DECRYPT] ct_len={len(message.ciphertext)} grid={params.num_rows}x{params.num_cols}"
        return False, str(exc), None, dbg

    debug = (
        f"[DECRYPT] key={params.key} grid={params.num_rows}x{params.num_cols} "
        f"padding={params.padding_length} pt_len={len(plaintext)}"
    )
    return True, "Texto descifrado.", plaintext, debug


def store_message(name: str, message: EncryptedMessage) -> str:
    """Guarda el mensaje cifrado y sus parámetros como JSON.

    Args:
        name (str): Nombre con el que se identificará el mensaje.
        message (EncryptedMessage): Mensaje a persistir.

    Returns:
        str: Ruta del archivo escrito.

    Raises:
        ValueError: Si el nombre queda vacío tras normalizarlo.
    """

    path = _message_path(name)
    save_json(message.model_dump(mode="json"), path)
    return path


def load_message(name: str) -> Optional[EncryptedMessage]:
    """Recupera un mensaje guardado o ``None`` si no existe o no es válido."""

    if not secure_name(name):
        return None
    data = load_json(_message_path(name))
    if data is None:
        return None
    try:
        return EncryptedMessage.model_validate(data)
    except ValidationError:
        return None


def list_messages() -> List[str]:
    """Devuelve los nombres de los mensajes guardados, ordenados alfabéticamente."""

    if not os.path.isdir(MESSAGES_DIR):
        return []
    names = [f[: -len(".json")] for f in os.listdir(MESSAGES_DIR) if f.endswith(".json")]
    return sorted(name for name in names if load_message(name) is not None)
