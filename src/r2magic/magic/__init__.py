#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Magic-value obfuscation: state, constants and codecs."""

from __future__ import annotations

from r2magic.magic.codec import (
    decode_buffer,
    decode_stream,
    encode_buffer,
    encode_stream,
    keystream,
    read_header,
    transform_buffer,
    transform_stream,
)
from r2magic.magic.constants import DEFAULT_MAGIC, HEADER_SIZE
from r2magic.magic.state import (
    MagicState,
    SeedMode,
    initial_magic,
    next_magic,
    unmagic,
)

__all__ = [
    "DEFAULT_MAGIC",
    "HEADER_SIZE",
    "MagicState",
    "SeedMode",
    "decode_buffer",
    "decode_stream",
    "encode_buffer",
    "encode_stream",
    "initial_magic",
    "keystream",
    "next_magic",
    "read_header",
    "transform_buffer",
    "transform_stream",
    "unmagic",
]

# 🌶️📦🔚
