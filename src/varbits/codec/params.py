"""Parameters of a variable-width integer field.

The bit stream is not self-describing: a decoder must use exactly the
parameters the encoder used. VariableWidthParams bundles them so they can be
validated once and passed around (or serialized) as a unit.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class VariableWidthParams(BaseModel):
    """Encoding parameters for a sequence of variable-width integers.

    Attributes:
        width: Width of the value type in bits (8, 16, 32 or 64)
        chunk_length: Payload bits per chunk (>= 1)
        signed: Whether values are signed (zigzag encoded before chunking)
        zigzag_exponent: Block exponent of the zigzag mapping, below ``width``

    Example:
        >>> params = VariableWidthParams(width=16, chunk_length=4, signed=True, zigzag_exponent=2)
        >>> params.max_bits()
        19
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: Literal[8, 16, 32, 64] = 64
    chunk_length: int = Field(ge=1)
    signed: bool = False
    zigzag_exponent: int = Field(default=0, ge=0, lt=64)

    @model_validator(mode="after")
    def _check_zigzag_exponent(self) -> VariableWidthParams:
        if self.zigzag_exponent >= self.width:
            raise ValueError(
                f"zigzag_exponent must be below width {self.width}, got {self.zigzag_exponent}"
            )
        return self

    @property
    def min_value(self) -> int:
        return -(1 << (self.width - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.width - 1)) - 1 if self.signed else (1 << self.width) - 1

    def max_bits(self) -> int:
        """Return the largest number of bits one encoded value can take."""
        full_chunks = (self.width - 1) // self.chunk_length
        return self.width + full_chunks
