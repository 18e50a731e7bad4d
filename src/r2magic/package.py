#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for transforming magic-obfuscated files."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger
from provide.foundation.file.directory import ensure_parent_dir

from r2magic.config.defaults import DEFAULT_CHUNK_SIZE
from r2magic.magic.codec import read_header, transform_stream
from r2magic.magic.state import SeedMode


def transform_file(
    input_path: Path,
    output_path: Path,
    seed_mode: SeedMode = SeedMode.FIXED,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Decode or encode a file into another file.

    The input is streamed, so memory use does not grow with file size.
    The header is read before the output is opened, so a truncated input
    leaves any existing output file untouched. If the operation fails
    after that, whatever was written stays on disk; removing it is up to
    the caller.

    Args:
        input_path: File to read
        output_path: File to write
        seed_mode: FIXED for the default magic value, HEADER to seed from
            the file's first 4 bytes
        chunk_size: Bytes read per step

    Returns:
        Number of bytes written

    Raises:
        TruncatedHeaderError: If the input is shorter than 4 bytes
        MagicIOError: If reading or writing fails midway
        ValueError: If `chunk_size` is not positive
        FileNotFoundError: If the input does not exist

    Example:
        ```python
        from pathlib import Path
        from r2magic import SeedMode, transform_file

        transform_file(Path("fix.sna"), Path("fix.sna.dec"), SeedMode.FIXED)
        ```
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    logger.debug(
        "Transforming file",
        input=str(input_path),
        output=str(output_path),
        seed_mode=seed_mode.value,
    )

    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    with input_path.open("rb") as source:
        header = read_header(source)
        ensure_parent_dir(output_path)
        with output_path.open("wb") as destination:
            written = transform_stream(
                source, destination, seed_mode, chunk_size=chunk_size, header=header
            )

    logger.info("File transformed", input=str(input_path), output=str(output_path), size=written)
    return written


decode_file = encode_file = transform_file

# 🌶️📦🔚
