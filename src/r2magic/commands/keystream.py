#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Keystream command for the r2magic CLI - show the XOR masks of a run."""

from __future__ import annotations

import click
from provide.foundation.console import pout

from r2magic.commands.transform import resolve_seed_mode
from r2magic.config.defaults import DEFAULT_KEYSTREAM_LENGTH
from r2magic.console import get_command_logger
from r2magic.magic.codec import keystream
from r2magic.magic.constants import HEADER_SIZE
from r2magic.magic.state import SeedMode, initial_magic

log = get_command_logger("keystream")


def parse_header(value: str | None) -> bytes | None:
    """Parse a hex header such as "79ccb56a" or "79 cc b5 6a"."""
    if value is None:
        return None
    try:
        header = bytes.fromhex(value)
    except ValueError as e:
        raise click.BadParameter(f"not a hex string: {value}") from e
    if len(header) != HEADER_SIZE:
        raise click.BadParameter(f"expected {HEADER_SIZE} bytes, got {len(header)}")
    return header


@click.command("keystream")
@click.option(
    "--header",
    "header_hex",
    default=None,
    help="Header bytes as hex (required with --header-seed)",
)
@click.option(
    "--header-seed/--fixed-seed",
    "header_seed",
    default=None,
    help="Seed from --header, or from the fixed default",
)
@click.option(
    "--length",
    "-n",
    type=click.IntRange(min=0),
    default=DEFAULT_KEYSTREAM_LENGTH,
    show_default=True,
    help="Number of masks to print",
)
@click.pass_context
def keystream_command(ctx: click.Context, header_hex: str | None, header_seed: bool | None, length: int) -> None:
    """Print the XOR masks applied to bytes 4, 5, 6, ... of a file."""
    header = parse_header(header_hex)
    seed_mode = resolve_seed_mode(ctx, header_seed)
    if seed_mode is SeedMode.HEADER and header is None:
        raise click.UsageError("--header is required when seeding from the header")

    seed = initial_magic(seed_mode, header or bytes(HEADER_SIZE))
    log.debug("Generating keystream", seed_mode=seed_mode.value, seed=f"0x{seed:08x}", length=length)

    masks = keystream(seed_mode, length, header)
    pout(f"seed: 0x{seed:08x} ({seed_mode.value})")
    for offset in range(0, len(masks), 16):
        pout(f"{offset + HEADER_SIZE:08x}  {masks[offset : offset + 16].hex(' ')}")


# 🌶️📦🔚
