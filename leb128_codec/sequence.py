# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Helpers for payloads made of back-to-back varints.

Length-prefixed formats often write several varints in a row, e.g. an
offset followed by a size. These helpers walk such a payload using the
same scanner as parse().
"""

from typing import Iterable, Iterator, List, Tuple

from .errors import InvalidInputError
from .varint import BytesLike, decode_from, encode


def encode_sequence(values: Iterable[int]) -> bytes:
    """
    Encode each value and concatenate the results.

        >>> encode_sequence([1, 300, 0]).hex()
        '01ac0200'
    """
    return b"".join(encode(value) for value in values)


def iter_values(data: BytesLike) -> Iterator[int]:
    """
    Yield every varint in data, in order.

    Raises:
        TruncatedInputError: If the last value has no terminator byte
    """
    offset = 0
    while offset < len(data):
        value, offset = decode_from(data, offset)
        yield value


def decode_sequence(data: BytesLike) -> List[int]:
    """Decode every varint in data into a list."""
    return list(iter_values(data))


def parse_many(data: BytesLike, count: int) -> Tuple[List[int], BytesLike]:
    """
    Parse count leading varints from data.

    Args:
        data: Bytes starting with at least count varints
        count: Number of values to read

    Returns:
        Tuple of (decoded values, remaining bytes)

    Raises:
        InvalidInputError: If count is negative
        TruncatedInputError: If data holds fewer than count values
    """
    if count < 0:
        raise InvalidInputError("Varint decode: negative count")

    values = []
    offset = 0
    for _ in range(count):
        value, offset = decode_from(data, offset)
        values.append(value)
    return values, data[offset:]
