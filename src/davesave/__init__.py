#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""davesave core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from davesave.codec import (
    DecodeResult,
    VerificationResult,
    compact_raw,
    decode_save,
    encode_save,
    format_raw,
    verify_roundtrip,
)
from davesave.exceptions import DecodingError, EncodingError, SaveCodecError
from davesave.files import decode_file, encode_file, process_paths, roundtrip_file
from davesave.utils.xor import XOR_KEY, xor_text

__version__ = get_version("davesave", caller_file=__file__)

__all__ = [
    "XOR_KEY",
    "DecodeResult",
    "DecodingError",
    "EncodingError",
    "SaveCodecError",
    "VerificationResult",
    "__version__",
    "compact_raw",
    "decode_file",
    "decode_save",
    "encode_file",
    "encode_save",
    "format_raw",
    "process_paths",
    "roundtrip_file",
    "verify_roundtrip",
    "xor_text",
]

# 🌶️📦🔚
