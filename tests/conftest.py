"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from varbits import StreamConfig, VariableWidthParams, WordBitWriter


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by the CLI."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def writer() -> WordBitWriter:
    """Empty writer over 64-bit words."""
    return WordBitWriter()


@pytest.fixture(params=[8, 16, 32, 64], ids=lambda bits: f"word{bits}")
def config(request: pytest.FixtureRequest) -> StreamConfig:
    """Stream configuration for every supported word size."""
    return StreamConfig(word_bits=request.param)


@pytest.fixture
def signed_params() -> VariableWidthParams:
    """Signed 32-bit parameters with 4-bit chunks and block exponent 2."""
    return VariableWidthParams(width=32, chunk_length=4, signed=True, zigzag_exponent=2)


@pytest.fixture
def sample_values() -> list[int]:
    """Small signed deltas as produced by a typical structural encoder."""
    return [0, 1, -1, 2, -2, 15, -16, 300, -300, 70000, -(1 << 31), (1 << 31) - 1]
