#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""r2magic runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from r2magic.config.defaults import DEFAULT_CHUNK_SIZE, DEFAULT_LOG_LEVEL, DEFAULT_SEED_MODE

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_SEED_MODES = {"fixed", "header"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_seed_mode(value: str) -> str:
    """Validate and normalize seed mode names."""
    normalized = value.strip().lower()
    if normalized not in VALID_SEED_MODES:
        raise ValueError(f"Invalid seed mode: {value}")
    return normalized


def parse_chunk_size(value: str | int) -> int:
    """Validate chunk sizes, which must be positive integers."""
    size = int(value)
    if size <= 0:
        raise ValueError(f"Invalid chunk size: {value}")
    return size


@define
class MagicRuntimeConfig(RuntimeConfig):
    """r2magic runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="R2MAGIC_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for r2magic operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    seed_mode: str = field(
        default=DEFAULT_SEED_MODE,
        env_var="R2MAGIC_SEED_MODE",
        converter=parse_seed_mode,
        metadata={"help": "Default seed mode when no --header-seed/--fixed-seed flag is given"},
    )

    chunk_size: int = field(
        default=DEFAULT_CHUNK_SIZE,
        env_var="R2MAGIC_CHUNK_SIZE",
        converter=parse_chunk_size,
        metadata={"help": "Bytes read per step when streaming files"},
    )


# 🌶️📦🔚
