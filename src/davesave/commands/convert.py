#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Conversion commands for the davesave CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from davesave.config import SaveCodecRuntimeConfig
from davesave.console import get_command_logger
from davesave.exceptions import SaveCodecError
from davesave.files import ConfirmOverwrite, decode_file, encode_file, process_paths

# Get structured logger for this command
log = get_command_logger("convert")


def _confirm_overwrite(path: Path) -> bool:
    return click.confirm(f"'{path}' already exists. Overwrite?", default=False)


def _overwrite_policy(yes: bool) -> ConfirmOverwrite | None:
    return None if yes else _confirm_overwrite


@click.command("convert")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--yes", "-y", is_flag=True, help="Overwrite existing .sav files without asking")
@click.option("--compact", is_flag=True, help="Write decoded JSON without pretty printing")
@click.pass_context
def convert_command(ctx: click.Context, files: tuple[Path, ...], yes: bool, compact: bool) -> None:
    """Convert each FILE by extension: .sav is decoded, .json is encoded."""
    config: SaveCodecRuntimeConfig = ctx.obj["config"]
    log.debug("Converting files", count=len(files), yes=yes, compact=compact)

    report = process_paths(
        files,
        confirm_overwrite=_overwrite_policy(yes),
        pretty=not compact,
        key=config.key,
        indent_unit=config.indent_unit,
    )

    for path in report.written:
        pout(f"✅ Wrote '{path}'")
    for path in report.skipped:
        perr(f"⏭️  Skipped '{path}'")
    for path in report.failed:
        perr(f"❌ Failed to convert '{path}'")

    log.info(
        "Conversion finished",
        written=len(report.written),
        skipped=len(report.skipped),
        failed=len(report.failed),
    )
    if not report.ok:
        raise click.Abort()


@click.command("decode")
@click.argument(
    "sav_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--compact", is_flag=True, help="Write decoded JSON without pretty printing")
@click.pass_context
def decode_command(ctx: click.Context, sav_file: Path, compact: bool) -> None:
    """Decode a .sav file into an editable .json file."""
    config: SaveCodecRuntimeConfig = ctx.obj["config"]
    pout(f"🔓 Decoding '{sav_file}'...")

    try:
        out_path = decode_file(sav_file, pretty=not compact, key=config.key, indent_unit=config.indent_unit)
    except SaveCodecError as e:
        log.error("Decode failed", error=str(e), path=str(sav_file))
        perr(f"❌ Decode failed: {e}")
        raise click.Abort() from e

    if out_path is None:
        perr("❌ Decrypted data is not valid JSON; raw text saved to a .failed_decode.txt file")
        raise click.Abort()
    pout(f"✅ Decoded to '{out_path}'")


@click.command("encode")
@click.argument(
    "json_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--yes", "-y", is_flag=True, help="Overwrite an existing .sav file without asking")
@click.pass_context
def encode_command(ctx: click.Context, json_file: Path, yes: bool) -> None:
    """Encode an edited .json file back into a .sav file."""
    config: SaveCodecRuntimeConfig = ctx.obj["config"]
    pout(f"🔒 Encoding '{json_file}'...")

    try:
        out_path = encode_file(json_file, confirm_overwrite=_overwrite_policy(yes), key=config.key)
    except SaveCodecError as e:
        log.error("Encode failed", error=str(e), path=str(json_file))
        perr(f"❌ Encode failed: {e}")
        raise click.Abort() from e

    if out_path is None:
        pout("Aborted.")
        return
    pout(f"✅ Encoded to '{out_path}'")


# 🌶️📦🔚
