# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 codec - unsigned varint encoding for Python.

This package encodes non-negative integers of any size as unsigned
LEB128 and decodes them back, either one value at a time or from a
stream of concatenated values.

Example usage:
    from leb128_codec import encode, decode, parse

    data = encode(300)            # b"\\xac\\x02"
    value = decode(data)          # 300

    # Walk a stream of varints
    value, rest = parse(b"\\xac\\x02\\x00")   # (300, b"\\x00")
    value, rest = parse(rest)                 # (0, b"")
"""

from .errors import (
    LEB128Error,
    InvalidInputError,
    TruncatedInputError,
    TrailingDataError,
)
from .sequence import encode_sequence, iter_values, decode_sequence, parse_many
from .varint import encode, decode, parse, decode_from, encoded_length

__version__ = "0.1.0"

__all__ = [
    # Codec
    "encode",
    "decode",
    "parse",
    "decode_from",
    "encoded_length",
    # Sequences
    "encode_sequence",
    "iter_values",
    "decode_sequence",
    "parse_many",
    # Errors
    "LEB128Error",
    "InvalidInputError",
    "TruncatedInputError",
    "TrailingDataError",
]
