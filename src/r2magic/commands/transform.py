#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Decode and encode commands for the r2magic CLI."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from provide.foundation.console import perr, pout
from provide.foundation.formatting import format_size

from r2magic.config import MagicRuntimeConfig
from r2magic.console import get_command_logger
from r2magic.exceptions import MagicException
from r2magic.magic.state import SeedMode
from r2magic.package import transform_file

# Get structured logger for this command
log = get_command_logger("transform")


def resolve_seed_mode(ctx: click.Context, header_seed: bool | None) -> SeedMode:
    """Pick the seed mode from the CLI flag, falling back to configuration."""
    if header_seed is not None:
        return SeedMode.HEADER if header_seed else SeedMode.FIXED
    config = get_runtime_config(ctx)
    return SeedMode.parse(config.seed_mode)


def get_runtime_config(ctx: click.Context) -> MagicRuntimeConfig:
    """Return the runtime config loaded by the CLI group, or load it now."""
    obj = ctx.find_root().obj or {}
    config = obj.get("config")
    if config is None:
        config = MagicRuntimeConfig.from_env()
    return config


def _run_transform(
    ctx: click.Context,
    verb: str,
    input_file: str,
    output_file: str,
    header_seed: bool | None,
    force: bool,
) -> None:
    input_path = Path(input_file)
    output = Path(output_file)
    seed_mode = resolve_seed_mode(ctx, header_seed)
    config = get_runtime_config(ctx)
    log.debug(
        f"{verb.capitalize()} command started",
        input=str(input_path),
        output=str(output),
        seed_mode=seed_mode.value,
        force=force,
    )

    if output.exists() and not force:
        log.error("Output file already exists", output=str(output))
        perr(f"❌ Output file already exists: {output}")
        perr("Use --force to overwrite")
        raise click.Abort()

    partial = output.with_name(f"{output.name}.part")
    if input_path in (output, partial):
        log.error("Output would overwrite input", path=str(output))
        perr("❌ Input and output must be different files")
        raise click.Abort()

    # Write beside the target and swap in on success (atomic for safety)
    try:
        written = transform_file(input_path, partial, seed_mode, chunk_size=config.chunk_size)
        partial.replace(output)
    except MagicException as e:
        partial.unlink(missing_ok=True)
        log.error(f"{verb.capitalize()} failed", error=str(e), input=input_file)
        perr(f"❌ {e}")
        raise click.Abort() from e
    except Exception as e:
        partial.unlink(missing_ok=True)
        log.error(f"{verb.capitalize()} failed", error=str(e), input=input_file)
        perr(f"❌ Error processing {input_path.name}: {e}")
        raise click.Abort() from e

    log.info(f"{verb.capitalize()} complete", output=str(output), size=written)
    pout(f"✅ {verb.capitalize()}d {input_path.name} → {output} ({format_size(written)})")


def _seed_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--header-seed/--fixed-seed",
        "header_seed",
        default=None,
        help="Seed from the file's first 4 bytes, or from the fixed default (default: R2MAGIC_SEED_MODE or fixed)",
    )(func)


@click.command("decode")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.argument(
    "output_file",
    type=click.Path(dir_okay=False, resolve_path=True),
    required=True,
)
@_seed_option
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing output file",
)
@click.pass_context
def decode_command(
    ctx: click.Context, input_file: str, output_file: str, header_seed: bool | None, force: bool
) -> None:
    """Decode an obfuscated data file.

    The first 4 bytes are copied unchanged; the rest is descrambled.
    """
    _run_transform(ctx, "decode", input_file, output_file, header_seed, force)


@click.command("encode")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.argument(
    "output_file",
    type=click.Path(dir_okay=False, resolve_path=True),
    required=True,
)
@_seed_option
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing output file",
)
@click.pass_context
def encode_command(
    ctx: click.Context, input_file: str, output_file: str, header_seed: bool | None, force: bool
) -> None:
    """Encode a data file (the inverse of decode, which is the same transform)."""
    _run_transform(ctx, "encode", input_file, output_file, header_seed, force)


# 🌶️📦🔚
