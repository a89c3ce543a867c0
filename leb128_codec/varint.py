# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

r"""
Unsigned LEB128 varint encoding/decoding.

Each byte carries 7 bits of the value, least-significant group first.
The high bit of a byte is set when more bytes follow. This is the same
layout protocol buffers and WebAssembly use for unsigned integers.

    >>> encode(300)
    b'\xac\x02'
    >>> decode(b'\xac\x02')
    300
    >>> parse(b'\xac\x02\x00')
    (300, b'\x00')
"""

from typing import Tuple, Union

from .errors import InvalidInputError, TrailingDataError, TruncatedInputError

BytesLike = Union[bytes, bytearray, memoryview]

CONTINUATION_BIT = 0x80
PAYLOAD_MASK = 0x7F
PAYLOAD_BITS = 7


def _check_unsigned(value: int) -> None:
    if not isinstance(value, int):
        raise TypeError(f"Cannot encode {type(value).__name__} as varint")
    if value < 0:
        raise InvalidInputError("Cannot encode negative value as varint")


def encode(value: int) -> bytes:
    """
    Encode an unsigned integer as a varint.

    Args:
        value: Non-negative integer to encode, of any magnitude

    Returns:
        Minimal-length varint-encoded bytes

    Raises:
        InvalidInputError: If value is negative
        TypeError: If value is not an integer
    """
    _check_unsigned(value)

    result = bytearray()
    while value > PAYLOAD_MASK:
        result.append((value & PAYLOAD_MASK) | CONTINUATION_BIT)
        value >>= PAYLOAD_BITS
    result.append(value)
    return bytes(result)


def encoded_length(value: int) -> int:
    """
    Number of bytes encode() produces for value, without encoding it.

        >>> encoded_length(0), encoded_length(127), encoded_length(128)
        (1, 1, 2)
    """
    _check_unsigned(value)
    return max(1, -(-value.bit_length() // PAYLOAD_BITS))


def decode_from(data: BytesLike, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a varint from bytes starting at offset.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        TruncatedInputError: If data ends before the terminator byte
        InvalidInputError: If offset is negative
    """
    if offset < 0:
        raise InvalidInputError("Varint decode: negative offset")

    value = 0
    shift = 0

    while True:
        if offset >= len(data):
            raise TruncatedInputError("Varint decode: unexpected end of data", offset)

        byte = data[offset]
        offset += 1
        value |= (byte & PAYLOAD_MASK) << shift

        if not (byte & CONTINUATION_BIT):
            break

        shift += PAYLOAD_BITS

    return value, offset


def decode(data: BytesLike) -> int:
    """
    Decode bytes holding exactly one varint.

    Use parse() when more data may follow the value.

    Args:
        data: Complete varint-encoded bytes

    Returns:
        Decoded value

    Raises:
        TruncatedInputError: If data is empty or has no terminator byte
        TrailingDataError: If bytes follow the terminator byte
    """
    if len(data) == 1 and not (data[0] & CONTINUATION_BIT):
        return data[0]

    value, offset = decode_from(data)

    trailing = len(data) - offset
    if trailing:
        raise TrailingDataError(
            f"Varint decode: {trailing} trailing byte(s) after value", trailing
        )
    return value


def parse(data: BytesLike) -> Tuple[int, BytesLike]:
    """
    Parse the first varint of data.

    Args:
        data: Bytes starting with a varint, optionally followed by more data

    Returns:
        Tuple of (decoded value, remaining bytes). The remainder is a
        slice of data, so a memoryview input gives a zero-copy view.

    Raises:
        TruncatedInputError: If data ends before the terminator byte
    """
    value, offset = decode_from(data)
    return value, data[offset:]
