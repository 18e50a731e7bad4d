#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Constants of the magic-value obfuscation scheme.

These values are bit-exact and must not change.
"""

from __future__ import annotations

# =================================
# Header
# =================================
HEADER_SIZE = 4  # Always copied through untransformed
HEADER_BYTE_ORDER = "little"

# =================================
# Seed
# =================================
DEFAULT_MAGIC = 1790299257  # 0x6AB5CC79

# =================================
# Recurrence
# =================================
MAGIC_MULTIPLIER = 16807
MAGIC_XOR_KEY = 123459876
MAGIC_DIVISOR = 0x1F31D
MAGIC_MODULUS = 0x7FFFFFFF

UINT32_MASK = 0xFFFFFFFF
BYTE_MASK = 0xFF

# 🌶️📦🔚
