#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Buffer and stream drivers for the magic-value transform.

Both drivers copy the 4-byte header verbatim and transform every byte
after it in strict order. The transform is its own inverse, so the same
functions encode and decode.
"""

from __future__ import annotations

from typing import BinaryIO

from provide.foundation import logger

from r2magic.config.defaults import DEFAULT_CHUNK_SIZE
from r2magic.exceptions import InvalidLengthError, MagicIOError, TruncatedHeaderError
from r2magic.magic.constants import HEADER_SIZE
from r2magic.magic.state import MagicState, SeedMode


def transform_buffer(
    data: bytes | bytearray | memoryview,
    seed_mode: SeedMode = SeedMode.FIXED,
    *,
    min_length: int | None = None,
) -> bytes:
    """
    Transform an in-memory byte sequence.

    The input is never modified; a new sequence of the same length is
    returned.

    Args:
        data: Input bytes (at least 4)
        seed_mode: How the initial magic value is chosen
        min_length: Optional minimum total length required by the caller

    Returns:
        Transformed bytes, header unchanged

    Raises:
        TruncatedHeaderError: If the input is shorter than the header
        InvalidLengthError: If `min_length` is given and not met
    """
    if len(data) < HEADER_SIZE:
        raise TruncatedHeaderError(len(data))
    if min_length is not None and len(data) < min_length:
        raise InvalidLengthError(len(data), min_length)

    view = memoryview(data)
    header = bytes(view[:HEADER_SIZE])
    state = MagicState.from_seed_mode(seed_mode, header)
    logger.trace(
        "Transforming buffer",
        seed_mode=seed_mode.value,
        seed=f"0x{state.value:08x}",
        size=len(data),
    )
    return header + state.apply(view[HEADER_SIZE:])


def _read(source: BinaryIO, size: int) -> bytes:
    try:
        return source.read(size)
    except (OSError, ValueError) as e:
        raise MagicIOError("read", e) from e


def _write(destination: BinaryIO, data: bytes) -> None:
    try:
        destination.write(data)
    except (OSError, ValueError) as e:
        raise MagicIOError("write", e) from e


def read_header(source: BinaryIO) -> bytes:
    """Read exactly the header bytes, tolerating short reads.

    Raises:
        TruncatedHeaderError: If the source ends before 4 bytes
        MagicIOError: If reading fails
    """
    header = b""
    while len(header) < HEADER_SIZE:
        chunk = _read(source, HEADER_SIZE - len(header))
        if not chunk:
            raise TruncatedHeaderError(len(header))
        header += chunk
    return header


def transform_stream(
    source: BinaryIO,
    destination: BinaryIO,
    seed_mode: SeedMode = SeedMode.FIXED,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    header: bytes | None = None,
) -> int:
    """
    Transform a byte stream into another, in constant memory.

    Output is identical to `transform_buffer` over the whole input. Bytes
    already written before a failure are left in the destination; the
    caller decides what to do with them.

    Args:
        source: Readable binary stream
        destination: Writable binary stream
        seed_mode: How the initial magic value is chosen
        chunk_size: Number of bytes read per step
        header: Header already consumed from `source` with `read_header`;
            read from `source` when omitted

    Returns:
        Total number of bytes written, header included

    Raises:
        TruncatedHeaderError: If the source ends before 4 bytes
        MagicIOError: If reading or writing fails
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    if header is None:
        header = read_header(source)
    elif len(header) != HEADER_SIZE:
        raise TruncatedHeaderError(len(header))
    state = MagicState.from_seed_mode(seed_mode, header)
    logger.debug(
        "Transforming stream",
        seed_mode=seed_mode.value,
        seed=f"0x{state.value:08x}",
        chunk_size=chunk_size,
    )

    _write(destination, header)
    written = len(header)
    while chunk := _read(source, chunk_size):
        _write(destination, state.apply(chunk))
        written += len(chunk)

    logger.debug("Stream transformed", bytes_written=written, final_magic=f"0x{state.value:08x}")
    return written


def keystream(seed_mode: SeedMode, length: int, header: bytes | None = None) -> bytes:
    """
    Return the first `length` XOR masks for a run.

    Args:
        seed_mode: How the initial magic value is chosen
        length: Number of masks to generate
        header: Header bytes, required when `seed_mode` is HEADER

    Returns:
        The masks applied to bytes 4, 5, 6, ... of a sequence

    Raises:
        ValueError: If `seed_mode` is HEADER and no header is given
    """
    if header is None:
        if seed_mode is SeedMode.HEADER:
            raise ValueError("header is required when seed_mode is HEADER")
        header = bytes(HEADER_SIZE)
    return MagicState.from_seed_mode(seed_mode, header).keystream(length)


# The transform is symmetric
decode_buffer = encode_buffer = transform_buffer
decode_stream = encode_stream = transform_stream

# 🌶️📦🔚
