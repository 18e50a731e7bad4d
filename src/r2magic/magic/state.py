#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Magic-value state and the single-byte transform.

The magic value is a 32-bit unsigned integer. Each transformed byte is
XORed with bits 8-15 of the current value, after which the value is
advanced by a Park-Miller style recurrence. All arithmetic wraps modulo
2**32, so every intermediate result is masked explicitly.
"""

from __future__ import annotations

from enum import Enum

from attrs import define, field

from r2magic.exceptions import TruncatedHeaderError
from r2magic.magic.constants import (
    BYTE_MASK,
    DEFAULT_MAGIC,
    HEADER_BYTE_ORDER,
    HEADER_SIZE,
    MAGIC_DIVISOR,
    MAGIC_MODULUS,
    MAGIC_MULTIPLIER,
    MAGIC_XOR_KEY,
    UINT32_MASK,
)


class SeedMode(Enum):
    """Where the initial magic value comes from."""

    FIXED = "fixed"
    HEADER = "header"

    @classmethod
    def parse(cls, value: str | SeedMode) -> SeedMode:
        """Parse a seed mode name ("fixed" or "header"), case-insensitively."""
        if isinstance(value, SeedMode):
            return value
        normalized = value.strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        raise ValueError(f"Invalid seed mode: {value}")


def next_magic(magic: int) -> int:
    """Advance a magic value by one step of the recurrence."""
    t = (magic ^ MAGIC_XOR_KEY) & UINT32_MASK
    product = (MAGIC_MULTIPLIER * t) & UINT32_MASK
    correction = (MAGIC_MODULUS * (t // MAGIC_DIVISOR)) & UINT32_MASK
    return (product - correction) & UINT32_MASK


def magic_mask(magic: int) -> int:
    """Return the XOR mask for a magic value (its second-lowest byte)."""
    return (magic >> 8) & BYTE_MASK


def unmagic(byte: int, magic: int) -> tuple[int, int]:
    """Transform one byte.

    Args:
        byte: Input byte value (0-255)
        magic: Current 32-bit magic value

    Returns:
        Tuple of (transformed byte, next magic value)
    """
    return byte ^ magic_mask(magic), next_magic(magic)


def initial_magic(seed_mode: SeedMode, header: bytes | bytearray | memoryview) -> int:
    """Derive the initial magic value for a run.

    Args:
        seed_mode: FIXED uses the default constant, HEADER reads the header
        header: The first bytes of the input (at least 4 are required)

    Returns:
        Initial 32-bit magic value

    Raises:
        TruncatedHeaderError: If fewer than 4 header bytes are given
    """
    if len(header) < HEADER_SIZE:
        raise TruncatedHeaderError(len(header))
    if seed_mode is SeedMode.HEADER:
        return int.from_bytes(bytes(header[:HEADER_SIZE]), HEADER_BYTE_ORDER)
    return DEFAULT_MAGIC


@define
class MagicState:
    """Mutable magic value threaded through one transform run.

    One instance belongs to exactly one run over one sequence.
    """

    value: int = field(default=DEFAULT_MAGIC, converter=lambda v: int(v) & UINT32_MASK)

    @classmethod
    def from_seed_mode(
        cls, seed_mode: SeedMode, header: bytes | bytearray | memoryview
    ) -> MagicState:
        """Create the state for a run, seeded according to `seed_mode`."""
        return cls(initial_magic(seed_mode, header))

    def transform_byte(self, byte: int) -> int:
        """Transform one byte and advance the state."""
        out, self.value = unmagic(byte, self.value)
        return out

    def keystream(self, length: int) -> bytes:
        """Return the next `length` XOR masks, advancing the state past them.

        The masks depend only on the magic value, never on the data.
        """
        masks = bytearray(length)
        magic = self.value
        for i in range(length):
            masks[i] = (magic >> 8) & BYTE_MASK
            magic = next_magic(magic)
        self.value = magic
        return bytes(masks)

    def apply(self, chunk: bytes | bytearray | memoryview) -> bytes:
        """Transform a chunk of bytes in order, advancing the state."""
        masks = self.keystream(len(chunk))
        return bytes(a ^ b for a, b in zip(chunk, masks))


# 🌶️📦🔚
