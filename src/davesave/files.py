#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""File-level API: convert .sav and .json files on disk."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from attrs import define, field
from provide.foundation import logger
from provide.foundation.file import atomic_write

from davesave.codec.pipeline import decode_save, encode_save
from davesave.codec.verify import VerificationResult, first_difference
from davesave.config.defaults import (
    DEFAULT_INDENT_UNIT,
    FAILED_DECODE_SUFFIX,
    FILE_ENCODING,
    JSON_SUFFIX,
    RESAVE_SUFFIX,
    SAVE_SUFFIX,
)
from davesave.exceptions import DecodingError, SaveCodecError
from davesave.utils.xor import XOR_KEY

ConfirmOverwrite = Callable[[Path], bool]


@define
class BatchReport:
    """Paths touched by process_paths, grouped by outcome."""

    written: list[Path] = field(factory=list)
    failed: list[Path] = field(factory=list)
    skipped: list[Path] = field(factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def output_path_for(path: Path, suffix: str) -> Path:
    """Replace the last extension of path with suffix."""
    return path.with_name(path.stem + suffix)


def decode_file(
    sav_path: Path,
    *,
    pretty: bool = True,
    key: str = XOR_KEY,
    indent_unit: str = DEFAULT_INDENT_UNIT,
) -> Path | None:
    """
    Decode a .sav file into a .json file next to it.

    When the decrypted text is not valid JSON it is written to a
    .failed_decode.txt file instead and None is returned.

    Raises:
        DecodingError: If the file is not valid UTF-8
    """
    logger.info("Decoding save", path=str(sav_path))
    result = decode_save(sav_path.read_bytes(), pretty=pretty, key=key, indent_unit=indent_unit)

    if not result.ok:
        failed_path = output_path_for(sav_path, FAILED_DECODE_SUFFIX)
        atomic_write(failed_path, result.text.encode(FILE_ENCODING))
        logger.error(
            "Decrypted data is not valid JSON, kept raw text for inspection",
            path=str(sav_path),
            failed_path=str(failed_path),
            error=result.error,
        )
        return None

    out_path = output_path_for(sav_path, JSON_SUFFIX)
    atomic_write(out_path, result.text.encode(FILE_ENCODING))
    logger.info("Decoded save", path=str(sav_path), output=str(out_path))
    return out_path


def encode_file(
    json_path: Path,
    *,
    confirm_overwrite: ConfirmOverwrite | None = None,
    already_compact: bool = False,
    output_path: Path | None = None,
    key: str = XOR_KEY,
) -> Path | None:
    """
    Encode a .json file into a .sav file next to it.

    If the target exists and confirm_overwrite is given, the callback decides
    whether to replace it. Returns None when the overwrite is declined.
    """
    out_path = output_path or output_path_for(json_path, SAVE_SUFFIX)

    if out_path.exists() and confirm_overwrite is not None and not confirm_overwrite(out_path):
        logger.info("Overwrite declined", output=str(out_path))
        return None

    logger.info("Encoding save", path=str(json_path))
    try:
        text = json_path.read_bytes().decode(FILE_ENCODING)
    except UnicodeDecodeError as e:
        raise DecodingError(f"JSON file is not valid UTF-8: {e}") from e
    atomic_write(out_path, encode_save(text, already_compact=already_compact, key=key))
    logger.info("Encoded save", path=str(json_path), output=str(out_path))
    return out_path


def roundtrip_file(sav_path: Path, *, key: str = XOR_KEY) -> VerificationResult:
    """
    Run the round-trip test on a .sav file through intermediate files.

    Writes a compact .json and a .resave next to the save, compares the
    .resave with the original and removes both intermediates only when they
    match.
    """
    json_path = output_path_for(sav_path, JSON_SUFFIX)
    resave_path = output_path_for(sav_path, RESAVE_SUFFIX)

    if decode_file(sav_path, pretty=False, key=key) is None:
        return VerificationResult(identical=False, decoded=False, original_size=sav_path.stat().st_size)

    encode_file(json_path, already_compact=True, output_path=resave_path, key=key)

    original = sav_path.read_bytes()
    resaved = resave_path.read_bytes()
    mismatch = first_difference(original, resaved)
    result = VerificationResult(
        identical=mismatch is None,
        decoded=True,
        original_size=len(original),
        resaved_size=len(resaved),
        first_mismatch=mismatch,
    )

    if result.identical:
        json_path.unlink(missing_ok=True)
        resave_path.unlink(missing_ok=True)
    else:
        logger.warning(
            "Round trip is not byte-identical, kept intermediates",
            json_path=str(json_path),
            resave_path=str(resave_path),
        )
    return result


def process_paths(
    paths: Iterable[Path],
    *,
    confirm_overwrite: ConfirmOverwrite | None = None,
    pretty: bool = True,
    key: str = XOR_KEY,
    indent_unit: str = DEFAULT_INDENT_UNIT,
) -> BatchReport:
    """
    Convert each path by extension: .sav is decoded, .json is encoded.

    Missing files and unsupported extensions are skipped. A codec error on one
    file is recorded and the batch carries on.
    """
    report = BatchReport()

    for path in paths:
        if not path.exists():
            logger.warning("File not found, skipping", path=str(path))
            report.skipped.append(path)
            continue

        ext = path.suffix.lower()
        try:
            if ext == JSON_SUFFIX:
                written = encode_file(path, confirm_overwrite=confirm_overwrite, key=key)
            elif ext == SAVE_SUFFIX:
                written = decode_file(path, pretty=pretty, key=key, indent_unit=indent_unit)
            else:
                logger.warning("Unsupported file extension, skipping", path=str(path), extension=ext)
                report.skipped.append(path)
                continue
        except SaveCodecError as e:
            logger.error("Conversion failed", path=str(path), error=str(e))
            report.failed.append(path)
            continue

        if written is None:
            if ext == SAVE_SUFFIX:
                report.failed.append(path)
            else:
                report.skipped.append(path)
        else:
            report.written.append(written)

    return report


# 🌶️📦🔚
