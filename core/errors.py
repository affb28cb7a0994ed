# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del motor de transposición.
# --------------------------------------------------------------
"""Errores tipados que el motor devuelve a sus llamadores."""


class CipherError(ValueError):
    """Error base recuperable de cualquier operación del cifrado."""


class KeyValidationError(CipherError):
    """La clave introducida no es válida."""


class NonDigitOrZeroError(KeyValidationError):
    """La clave contiene un valor fuera del rango de dígitos admitido."""


class NotAPermutationError(KeyValidationError):
    """Los dígitos de la clave no forman una permutación de 1..N."""


class PlanError(CipherError):
    """No se pueden calcular las dimensiones de la tabla."""


class InvalidColumnCountError(PlanError):
    """El número de columnas es cero o negativo."""


class DecryptError(CipherError):
    """Parámetros inconsistentes entre cifrado y descifrado."""


class LengthMismatchError(DecryptError):
    """La longitud del ciphertext no coincide con filas x columnas."""


class PaddingExceedsLengthError(DecryptError):
    """El relleno declarado supera la longitud del texto reconstruido."""


class PlaintextPolicyError(CipherError):
    """El texto en claro no cumple la política de entrada (sin dígitos)."""
