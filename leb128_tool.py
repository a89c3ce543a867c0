#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for LEB128 varints.

Usage:
    python leb128_tool.py encode 300 1
    python leb128_tool.py encode --join 300 1
    python leb128_tool.py decode ac02
    python leb128_tool.py parse "ac 02 00"
    python leb128_tool.py parse --all ac0200

On Python 3.11+ decimal values longer than the interpreter's int/str
conversion limit (sys.get_int_max_str_digits(), 4300 by default) are
reported as errors.
"""

import argparse
import sys
from typing import List, Optional

from leb128_codec import decode, encode, encode_sequence, iter_values, parse


def _from_hex(text: str) -> bytes:
    """Parse a hex string, ignoring whitespace."""
    try:
        return bytes.fromhex("".join(text.split()))
    except ValueError:
        raise ValueError(f"Invalid hex string: {text!r}") from None


def _to_int(text: str) -> int:
    """Parse a decimal integer, reporting failures as ValueError."""
    try:
        return int(text)
    except ValueError as e:
        raise ValueError(f"Invalid integer: {e}") from None


def cmd_encode(texts: List[str], join: bool):
    """Print the encoding of each value."""
    values = [_to_int(text) for text in texts]
    if join:
        print(encode_sequence(values).hex())
        return

    for value in values:
        print(encode(value).hex())


def cmd_decode(text: str):
    """Decode exactly one value."""
    print(decode(_from_hex(text)))


def cmd_parse(text: str, parse_all: bool):
    """Parse the first value, or every value with parse_all."""
    data = _from_hex(text)

    if parse_all:
        for value in iter_values(data):
            print(value)
        return

    value, rest = parse(data)
    print(f"Value:     {value}")
    print(f"Remainder: {rest.hex() if rest else '(none)'}")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Encode and decode unsigned LEB128 varints"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode integers as hex")
    encode_parser.add_argument("values", nargs="+", help="Non-negative integers")
    encode_parser.add_argument("--join", "-j", action="store_true",
                               help="Print all encodings as one concatenated stream")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode exactly one value")
    decode_parser.add_argument("data", help="Hex-encoded varint")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse values from a hex stream")
    parse_parser.add_argument("data", help="Hex-encoded varint stream")
    parse_parser.add_argument("--all", "-a", dest="parse_all", action="store_true",
                              help="Print every value in the stream")

    args = parser.parse_args(argv)

    try:
        if args.command == "encode":
            cmd_encode(args.values, args.join)
        elif args.command == "decode":
            cmd_decode(args.data)
        elif args.command == "parse":
            cmd_parse(args.data, args.parse_all)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
