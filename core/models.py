# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos que acompañan al ciphertext de transposición.
# --------------------------------------------------------------
"""Modelos Pydantic con los parámetros necesarios para descifrar."""

from datetime import UTC, datetime
from typing import List

from pydantic import BaseModel, Field, model_validator

from core.key import validate_key


class CipherParameters(BaseModel):
    """Parámetros de la tabla que deben viajar junto al ciphertext.

    Attributes:
        key (List[int]): Permutación de 1..N que fija el orden de lectura de columnas.
        num_cols (int): Número de columnas (longitud de la clave).
        num_rows (int): Número de filas de la tabla.
        padding_length (int): Caracteres de relleno añadidos al texto en claro.

    """

    key: List[int]
    num_cols: int = Field(gt=0)
    num_rows: int = Field(ge=0)
    padding_length: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_consistency(self) -> "CipherParameters":
        if self.num_cols != len(self.key):
            raise ValueError("num_cols must equal the key length.")
        if self.padding_length >= self.num_cols:
            raise ValueError("padding_length must be smaller than num_cols.")
        validate_key(self.key, wide=True)
        return self


class EncryptedMessage(BaseModel):
    """Ciphertext junto con sus parámetros, tal como se persiste en disco."""

    ciphertext: str
    params: CipherParameters
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
