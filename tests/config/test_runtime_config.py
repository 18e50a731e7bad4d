#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for Foundation-based runtime configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from r2magic.config import MagicRuntimeConfig
from r2magic.config.defaults import DEFAULT_CHUNK_SIZE, DEFAULT_LOG_LEVEL, DEFAULT_SEED_MODE
from r2magic.config.runtime import parse_chunk_size, parse_log_level, parse_seed_mode


class TestMagicRuntimeConfig:
    """Test runtime configuration."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = MagicRuntimeConfig()
        assert config.log_level == DEFAULT_LOG_LEVEL
        assert config.seed_mode == DEFAULT_SEED_MODE == "fixed"
        assert config.chunk_size == DEFAULT_CHUNK_SIZE

    @patch.dict(
        os.environ,
        {"R2MAGIC_LOG_LEVEL": "debug", "R2MAGIC_SEED_MODE": "Header", "R2MAGIC_CHUNK_SIZE": "4096"},
    )
    def test_from_env(self) -> None:
        """Test values are read and normalized from the environment."""
        config = MagicRuntimeConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.seed_mode == "header"
        assert config.chunk_size == 4096

    def test_invalid_seed_mode(self) -> None:
        """Test invalid seed modes are rejected."""
        with pytest.raises(ValueError, match="Invalid seed mode"):
            MagicRuntimeConfig(seed_mode="random")

    def test_invalid_chunk_size(self) -> None:
        """Test non-positive chunk sizes are rejected."""
        with pytest.raises(ValueError, match="Invalid chunk size"):
            MagicRuntimeConfig(chunk_size=0)


class TestParsers:
    """Test value converters."""

    def test_parse_log_level(self) -> None:
        """Test log level normalization."""
        assert parse_log_level(" trace ") == "TRACE"
        with pytest.raises(ValueError, match="Invalid log level"):
            parse_log_level("loud")

    def test_parse_seed_mode(self) -> None:
        """Test seed mode normalization."""
        assert parse_seed_mode("FIXED") == "fixed"

    def test_parse_chunk_size(self) -> None:
        """Test chunk sizes accept strings and ints."""
        assert parse_chunk_size("512") == 512
        assert parse_chunk_size(1) == 1
        with pytest.raises(ValueError):
            parse_chunk_size("-1")
        with pytest.raises(ValueError):
            parse_chunk_size("lots")


# 🌶️📦🔚
