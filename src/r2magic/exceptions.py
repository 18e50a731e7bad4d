#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for r2magic."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class MagicException(FoundationError):
    """Base exception for all r2magic errors."""

    pass


class TruncatedHeaderError(MagicException):
    """Raised when fewer than the 4 header bytes are available."""

    def __init__(self, available: int) -> None:
        self.available = available
        super().__init__(f"Truncated header: expected 4 bytes, got {available}")


class InvalidLengthError(MagicException):
    """Raised when input is shorter than a caller-required minimum length."""

    def __init__(self, length: int, min_length: int) -> None:
        self.length = length
        self.min_length = min_length
        super().__init__(f"Input is {length} bytes, at least {min_length} required")


class MagicIOError(MagicException):
    """Raised when the source or destination stream fails mid-operation."""

    def __init__(self, operation: str, cause: Exception) -> None:
        self.operation = operation
        super().__init__(f"Stream {operation} failed: {cause}")


# 🌶️📦🔚
