#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the r2magic CLI."""

from __future__ import annotations

from r2magic.commands.keystream import keystream_command
from r2magic.commands.transform import decode_command, encode_command

__all__ = [
    "decode_command",
    "encode_command",
    "keystream_command",
]

# 🌶️📦🔚
