# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest

from utfconvert.enums import Endianness

#: Suffix of the matching built-in codec name, e.g. ``"utf-32-" + suffix``.
CODEC_SUFFIX: dict[Endianness, str] = {
    Endianness.BIG_ENDIAN: "be",
    Endianness.LITTLE_ENDIAN: "le",
}


@pytest.fixture(params=list(Endianness), ids=lambda e: e.value)
def endianness(request: pytest.FixtureRequest) -> Endianness:
    """Run the test once per byte order."""
    return request.param


@pytest.fixture
def codec_suffix(endianness: Endianness) -> str:
    """Built-in codec suffix matching the ``endianness`` fixture."""
    return CODEC_SUFFIX[endianness]
