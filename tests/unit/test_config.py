"""Unit tests for stream configuration."""

from __future__ import annotations

import pytest

from varbits import StreamConfig, WordBitReader, WordBitWriter
from varbits.config import DEFAULT_CONFIG


class TestStreamConfig:
    """Test StreamConfig validation."""

    def test_default(self) -> None:
        """Test the default 64-bit words."""
        config = StreamConfig()

        assert config.word_bits == 64
        assert config.word_bytes == 8
        assert config == DEFAULT_CONFIG

    @pytest.mark.parametrize("word_bits", [8, 16, 32, 64])
    def test_supported(self, word_bits: int) -> None:
        """Test every supported word size."""
        assert StreamConfig(word_bits=word_bits).word_bytes == word_bits // 8

    @pytest.mark.parametrize("word_bits", [0, 1, 12, 24, 128, -8])
    def test_unsupported(self, word_bits: int) -> None:
        """Test that other word sizes are rejected."""
        with pytest.raises(ValueError, match="word_bits must be one of"):
            StreamConfig(word_bits=word_bits)

    def test_frozen(self) -> None:
        """Test that a config can't change once shared by a writer."""
        config = StreamConfig()
        with pytest.raises(AttributeError):
            config.word_bits = 8  # type: ignore[misc]

    def test_used_by_writer_and_reader(self, config: StreamConfig) -> None:
        """Test that both sides expose the config they were built with."""
        writer = WordBitWriter(config)
        writer.write_bits(1, 1)
        reader = WordBitReader.from_words(writer.words(), config)

        assert writer.config is config
        assert reader.config is config
        assert reader.capacity() == config.word_bits
