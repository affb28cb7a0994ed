# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del motor de transposición tabular.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "config",
    "errors",
    "key",
    "models",
    "planner",
    "rendering",
    "storage",
    "text_policy",
    "transposition",
]
