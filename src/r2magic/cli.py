#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""r2magic command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

# Import all commands at module level
from r2magic.commands.keystream import keystream_command
from r2magic.commands.transform import decode_command, encode_command
from r2magic.config import MagicRuntimeConfig

__version__ = get_version("r2magic", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="r2magic",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Decode and encode magic-obfuscated game data files.

    Configure via environment variables:
    - R2MAGIC_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - R2MAGIC_SEED_MODE: Default seed mode (fixed, header)
    - R2MAGIC_CHUNK_SIZE: Bytes read per step when streaming
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    # Load r2magic configuration from environment
    magic_config = MagicRuntimeConfig.from_env()

    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    # Merge with r2magic-specific settings
    telemetry_config = evolve(
        base_telemetry,
        service_name="r2magic",
        logging=evolve(
            base_telemetry.logging,
            default_level=magic_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["config"] = magic_config
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(decode_command, name="decode")
cli.add_command(encode_command, name="encode")
cli.add_command(keystream_command, name="keystream")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
