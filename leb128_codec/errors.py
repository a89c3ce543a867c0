# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by the LEB128 codec."""


class LEB128Error(ValueError):
    """Base exception for LEB128 codec errors."""
    pass


class InvalidInputError(LEB128Error):
    """Value outside the unsigned domain (negative value, offset or count)."""
    pass


class TruncatedInputError(LEB128Error):
    """Input ended before a terminator byte was found."""

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset

    def __reduce__(self):
        return (type(self), (str(self), self.offset))


class TrailingDataError(LEB128Error):
    """Bytes left over after a single encoded value."""

    def __init__(self, message: str, trailing: int):
        super().__init__(message)
        self.trailing = trailing

    def __reduce__(self):
        return (type(self), (str(self), self.trailing))
