#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Round-trip verify command for the davesave CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from davesave.codec.verify import VerificationResult
from davesave.config import SaveCodecRuntimeConfig
from davesave.config.defaults import SAVE_SUFFIX
from davesave.console import get_command_logger
from davesave.exceptions import SaveCodecError
from davesave.files import roundtrip_file

# Get structured logger for this command
log = get_command_logger("verify")


@click.command("verify")
@click.argument(
    "sav_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def verify_command(ctx: click.Context, sav_file: Path) -> None:
    """Check that decoding and re-encoding SAV_FILE reproduces it byte-for-byte."""
    config: SaveCodecRuntimeConfig = ctx.obj["config"]
    if sav_file.suffix.lower() != SAVE_SUFFIX:
        perr("❌ verify requires a single .sav file")
        raise click.Abort()

    pout(f"🔍 Running round-trip test on '{sav_file}'...")
    try:
        result = roundtrip_file(sav_file, key=config.key)
    except SaveCodecError as e:
        log.error("Round trip failed", error=str(e), path=str(sav_file))
        perr(f"❌ Round trip failed: {e}")
        raise click.Abort() from e

    _display_result(result)
    if not result.identical:
        raise click.Abort()


def _display_result(result: VerificationResult) -> None:
    """Display the comparison outcome."""
    if not result.decoded:
        perr("❌ Decode step failed to produce a .json file")
        return

    pout(f"Original size: {result.original_size} bytes")
    pout(f"Resaved size: {result.resaved_size} bytes")
    if result.identical:
        log.info("Round trip identical", size=result.original_size)
        pout("✅ The files are identical. The process is perfectly reversible.")
    else:
        log.error("Round trip mismatch", first_mismatch=result.first_mismatch)
        perr(f"❌ The files are NOT identical (first difference at byte {result.first_mismatch}).")


# 🌶️📦🔚
