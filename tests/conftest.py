#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for davesave tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from hypothesis import HealthCheck, settings
import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from davesave.codec import encode_save

# The autouse logging reset below is function scoped; it is safe to share across
# generated examples.
settings.register_profile("davesave", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("davesave")

# Minified save content with the shapes the codec must preserve: a 20-digit
# integer, key order that is not sorted, whitespace and an escaped quote inside
# strings, nested containers and an empty object.
SAMPLE_COMPACT = (
    '{"zeta":12345678901234567890,"alpha":{"name":"Dave \\"the\\" Diver",'
    '"note":"a b\\tc","items":[1,2.50,-3e10,true,false,null],"empty":{}},'
    '"list":[[],{"id":9007199254740993}]}'
)


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def sample_compact() -> str:
    """Minified JSON text as the game stores it before encryption."""
    return SAMPLE_COMPACT


@pytest.fixture
def sample_save_bytes() -> bytes:
    """Encrypted save bytes for SAMPLE_COMPACT with the default key."""
    return encode_save(SAMPLE_COMPACT, already_compact=True)


@pytest.fixture
def sample_save_file(tmp_path: Path, sample_save_bytes: bytes) -> Path:
    """A .sav file on disk containing the sample save."""
    path = tmp_path / "GameSave_00.sav"
    path.write_bytes(sample_save_bytes)
    return path


# 🌶️📦🔚
