# --------------------------------------------------------------
# File: storage.py
# Description: Utilidades de persistencia JSON para mensajes cifrados.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para el almacenamiento local."""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

__all__ = ["load_json", "save_json"]


def _ensure_parent_dir(path: str) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)


def load_json(path: str) -> Optional[Dict[str, Any]]:
    """Carga un archivo JSON y devuelve su contenido.

    Args:
        path (str): Ruta del archivo JSON.

    Returns:
        Optional[Dict[str, Any]]: Estructura cargada o ``None`` si el archivo
        no existe o está corrupto.

    """

    try:
        with open(path, "r", encoding="utf-8") as handler:
            data = json.load(handler)
    except (FileNotFoundError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else None


def save_json(data: Dict[str, Any], path: str) -> None:
    """Guarda el diccionario como JSON aplicando escritura atómica."""

    _ensure_parent_dir(path)
    tmp_path = f"{path}.tmp"
    with open(tmp_path, "w", encoding="utf-8") as handler:
        json.dump(data, handler, indent=2, ensure_ascii=False)
    os.replace(tmp_path, path)
