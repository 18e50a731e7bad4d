#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""r2magic configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from r2magic.config.runtime import MagicRuntimeConfig

__all__ = [
    "MagicRuntimeConfig",
]

# 🌶️📦🔚
