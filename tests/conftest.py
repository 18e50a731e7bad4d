#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for r2magic tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import io
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "slow: long-running tests")


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def default_magic_header() -> bytes:
    """The default magic value as a little-endian header."""
    return bytes([0x79, 0xCC, 0xB5, 0x6A])


@pytest.fixture
def fixed_keystream() -> bytes:
    """First XOR masks of a run seeded with the default magic value."""
    return bytes.fromhex("ccc5dfcceebdf8ce")


@pytest.fixture
def header_01020304_keystream() -> bytes:
    """First XOR masks of a run seeded from header 01 02 03 04."""
    return bytes.fromhex("025b0fa0")


@pytest.fixture
def sample_data() -> bytes:
    """A header followed by a payload with every byte value."""
    return b"R2DT" + bytes(range(256)) * 4


@pytest.fixture
def sample_file(tmp_path: Path, sample_data: bytes) -> Path:
    """Write `sample_data` to a file and return its path."""
    path = tmp_path / "sample.bin"
    path.write_bytes(sample_data)
    return path


class _TrickleReader(io.RawIOBase):
    """Readable stream that returns at most one byte per read call."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if self._pos >= len(self._data) or size == 0:
            return b""
        chunk = self._data[self._pos : self._pos + 1]
        self._pos += 1
        return chunk


class _FailingReader(io.BytesIO):
    """BytesIO that raises OSError once `fail_after` bytes have been read."""

    def __init__(self, data: bytes, fail_after: int) -> None:
        super().__init__(data)
        self.fail_after = fail_after

    def read(self, size: int | None = -1) -> bytes:
        if self.tell() >= self.fail_after:
            raise OSError("simulated read failure")
        return super().read(size)


class _FailingWriter(io.BytesIO):
    """BytesIO that raises OSError once `fail_after` bytes have been written."""

    def __init__(self, fail_after: int) -> None:
        super().__init__()
        self.fail_after = fail_after

    def write(self, data: bytes) -> int:  # type: ignore[override]
        if self.tell() >= self.fail_after:
            raise OSError("simulated write failure")
        return super().write(data)


@pytest.fixture
def trickle_reader() -> Callable[[bytes], io.RawIOBase]:
    """Factory for sources that return at most one byte per read."""
    return _TrickleReader


@pytest.fixture
def failing_reader() -> Callable[[bytes, int], io.BytesIO]:
    """Factory for sources that fail after `fail_after` bytes."""
    return _FailingReader


@pytest.fixture
def failing_writer() -> Callable[[int], io.BytesIO]:
    """Factory for destinations that fail after `fail_after` bytes."""
    return _FailingWriter


# 🌶️📦🔚
