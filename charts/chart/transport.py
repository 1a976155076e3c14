"""Version-tagged, URL-safe text form of an encoded chart."""

from __future__ import annotations

import base64
import binascii
import re

from charts.chart.errors import MalformedEncoding, UnsupportedVersion

FORMAT_VERSION = "0"

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def wrap(data: bytes) -> str:
    """Return ``FORMAT_VERSION`` followed by unpadded URL-safe base64 of ``data``."""

    return FORMAT_VERSION + _b64encode(data)


def unwrap(text: str) -> bytes:
    """Strip the version tag and decode the base64 payload.

    Decoding is strict: characters outside the URL-safe alphabet (including
    ``=``, whitespace and line breaks), impossible lengths and non-zero
    padding bits are all rejected, so each byte string has exactly one
    accepted text form.
    """

    if not text or text[0] != FORMAT_VERSION:
        raise UnsupportedVersion(f"unsupported chart format version: {text[:1]!r}")

    payload = text[1:]
    if not _ALPHABET.fullmatch(payload):
        raise MalformedEncoding("chart payload contains characters outside the URL-safe base64 alphabet")
    if len(payload) % 4 == 1:
        raise MalformedEncoding(f"chart payload has impossible base64 length {len(payload)}")

    padded = payload + "=" * (-len(payload) % 4)
    try:
        data = base64.b64decode(padded, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise MalformedEncoding(f"chart payload is not valid base64: {exc}") from exc

    if _b64encode(data) != payload:
        raise MalformedEncoding("chart payload has non-zero base64 padding bits")

    return data
