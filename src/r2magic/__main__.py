#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Allow `python -m r2magic`."""

from __future__ import annotations

from r2magic.cli import cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
