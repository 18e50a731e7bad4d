#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""r2magic core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from r2magic.exceptions import (
    InvalidLengthError,
    MagicException,
    MagicIOError,
    TruncatedHeaderError,
)
from r2magic.magic import (
    DEFAULT_MAGIC,
    HEADER_SIZE,
    MagicState,
    SeedMode,
    decode_buffer,
    decode_stream,
    encode_buffer,
    encode_stream,
    keystream,
    next_magic,
    transform_buffer,
    transform_stream,
    unmagic,
)
from r2magic.package import decode_file, encode_file, transform_file

__version__ = get_version("r2magic", caller_file=__file__)

__all__ = [
    "DEFAULT_MAGIC",
    "HEADER_SIZE",
    "InvalidLengthError",
    "MagicException",
    "MagicIOError",
    "MagicState",
    "SeedMode",
    "TruncatedHeaderError",
    "__version__",
    "decode_buffer",
    "decode_file",
    "decode_stream",
    "encode_buffer",
    "encode_file",
    "encode_stream",
    "keystream",
    "next_magic",
    "transform_buffer",
    "transform_file",
    "transform_stream",
    "unmagic",
]

# 🌶️📦🔚
