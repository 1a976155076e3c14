import pytest

from charts.chart.errors import MalformedEncoding, UnsupportedVersion
from charts.chart.transport import FORMAT_VERSION, unwrap, wrap


def test_wrap_uses_version_tag_and_unpadded_urlsafe_alphabet() -> None:
    assert wrap(b"\x07\xe8") == "0B-g"
    assert wrap(b"\x07\xe8\x81") == "0B-iB"
    assert wrap(b"\xfb\xff") == "0-_8"
    assert wrap(b"").startswith(FORMAT_VERSION)


def test_unwrap_restores_bytes() -> None:
    assert unwrap("0B-g") == b"\x07\xe8"
    assert unwrap("0B-f_gA") == b"\x07\xe7\xff\x80"
    assert unwrap("0") == b""


@pytest.mark.parametrize("text", ["", "1B-g", "B-g", "xB-g"])
def test_unwrap_rejects_unknown_versions(text: str) -> None:
    with pytest.raises(UnsupportedVersion):
        unwrap(text)


@pytest.mark.parametrize(
    "text",
    [
        "0B-g=",  # padding is never emitted
        "0B+g",  # standard alphabet
        "0B/g",
        "0B-g\n",
        "0B-\rg",
        "0B -g",
        "0B",  # one leftover character cannot encode a byte
        "0B-gAB",
        "0B-h",  # non-zero padding bits
    ],
)
def test_unwrap_rejects_malformed_payloads(text: str) -> None:
    with pytest.raises(MalformedEncoding):
        unwrap(text)
