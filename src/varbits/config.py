"""Configuration for word-packed bit streams."""

from __future__ import annotations

from dataclasses import dataclass

SUPPORTED_WORD_BITS = (8, 16, 32, 64)


@dataclass(frozen=True)
class StreamConfig:
    """Layout of the word buffer behind a writer or reader.

    Attributes:
        word_bits: Size of one storage word in bits (default 64).
            Must be one of 8, 16, 32 or 64. The writer and the reader of a
            stream must agree on it; words are laid out in the host's native
            byte order, so on little-endian hosts every word size produces
            the same bytes.

    Examples:
        ```python
        from varbits import StreamConfig, WordBitWriter

        writer = WordBitWriter(StreamConfig(word_bits=32))
        ```
    """

    word_bits: int = 64

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.word_bits not in SUPPORTED_WORD_BITS:
            raise ValueError(
                f"word_bits must be one of {SUPPORTED_WORD_BITS}, got {self.word_bits}"
            )

    @property
    def word_bytes(self) -> int:
        """Size of one storage word in bytes."""
        return self.word_bits // 8


DEFAULT_CONFIG = StreamConfig()
