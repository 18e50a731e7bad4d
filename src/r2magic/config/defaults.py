#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for r2magic configuration."""

from __future__ import annotations

# Note: bit-exact scheme constants live in r2magic.magic.constants

# =================================
# Streaming defaults
# =================================
DEFAULT_CHUNK_SIZE = 64 * 1024  # Bytes read per step when streaming

# =================================
# Seed defaults
# =================================
DEFAULT_SEED_MODE = "fixed"  # "fixed" or "header"

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"

# =================================
# CLI defaults
# =================================
DEFAULT_KEYSTREAM_LENGTH = 16

# 🌶️📦🔚
