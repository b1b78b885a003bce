#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""davesave command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from davesave.commands.convert import convert_command, decode_command, encode_command
from davesave.commands.verify import verify_command
from davesave.config import SaveCodecRuntimeConfig

__version__ = get_version("davesave", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="davesave",
    message="%(prog)s version %(version)s",
)
@click.option(
    "--key",
    default=None,
    help="Override the XOR cipher key (default: GameData, or DAVESAVE_KEY).",
)
@click.pass_context
def cli(ctx: click.Context, key: str | None) -> None:
    """Convert Dave the Diver save files between .sav and .json.

    Configure via environment variables:
    - DAVESAVE_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - DAVESAVE_KEY: XOR cipher key
    - DAVESAVE_INDENT: Spaces per indentation level in decoded JSON
    """
    ctx.ensure_object(dict)

    codec_config = SaveCodecRuntimeConfig.from_env()
    if key is not None:
        if not key:
            raise click.BadParameter("key must not be empty", param_hint="--key")
        codec_config = evolve(codec_config, key=key)

    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="davesave",
        logging=evolve(
            base_telemetry.logging,
            default_level=codec_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["config"] = codec_config
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(convert_command, name="convert")
cli.add_command(decode_command, name="decode")
cli.add_command(encode_command, name="encode")
cli.add_command(verify_command, name="verify")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
