# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared pytest fixtures for varint tests."""

import pytest

# (value, encoding) pairs checked against the protobuf varint layout
KNOWN_VECTORS = [
    (0, b"\x00"),
    (1, b"\x01"),
    (127, b"\x7F"),
    (128, b"\x80\x01"),
    (300, b"\xAC\x02"),
    (16383, b"\xFF\x7F"),
    (16384, b"\x80\x80\x01"),
    (624485, b"\xE5\x8E\x26"),
    (0xFFFFFFFF, b"\xFF\xFF\xFF\xFF\x0F"),
    (0xFFFFFFFFFFFFFFFF, b"\xFF\xFF\xFF\xFF\xFF\xFF\xFF\xFF\xFF\x01"),
]


@pytest.fixture(params=KNOWN_VECTORS, ids=lambda v: str(v[0]))
def known_vector(request):
    """A (value, encoding) pair."""
    return request.param


@pytest.fixture
def concatenated_stream():
    """A stream of back-to-back varints with the values it holds."""
    values = [0, 127, 128, 300, 16384, 0xFFFFFFFF, 2**70]
    data = b"\x00\x7F\x80\x01\xAC\x02\x80\x80\x01\xFF\xFF\xFF\xFF\x0F"
    data += b"\x80\x80\x80\x80\x80\x80\x80\x80\x80\x80\x01"
    return values, data
