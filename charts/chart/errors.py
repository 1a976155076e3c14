"""Errors raised while encoding or decoding charts."""

from __future__ import annotations


class ChartEncodingError(ValueError):
    """Base class for every chart encoding failure.

    ``kind`` is a stable name callers can report or branch on without
    matching exception classes.
    """

    kind = "ChartEncodingError"


class UnsupportedVersion(ChartEncodingError):
    """Transport string does not start with a known format version."""

    kind = "UnsupportedVersion"


class MalformedEncoding(ChartEncodingError):
    """Transport payload is not valid unpadded URL-safe base64."""

    kind = "MalformedEncoding"


class Truncated(ChartEncodingError):
    """Decoded buffer is too short to hold the year header."""

    kind = "Truncated"


class DateOutOfRange(ChartEncodingError):
    """A selected day does not exist in the declared year."""

    kind = "DateOutOfRange"


class NonCanonicalEncoding(ChartEncodingError):
    """Bitset ends with a zero byte an honest encoder never emits."""

    kind = "NonCanonicalEncoding"


class YearOutOfRange(ChartEncodingError):
    """Year cannot be stored in the 16-bit header or is below the supported minimum."""

    kind = "YearOutOfRange"
