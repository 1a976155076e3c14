"""Binary chart codec.

Layout of an encoded chart::

    bytes 0-1   year, unsigned 16-bit big-endian
    bytes 2..N  one bit per day in chronological order, most significant
                bit first (bit 7 of byte 2 is January 1)

The bitset is canonically trimmed: it never ends with a zero byte, and the
empty selection is the bare two-byte header. Decoding treats every input as
untrusted and rejects anything an honest encoder would not produce.
"""

from __future__ import annotations

from charts.chart.days import day_at, day_count
from charts.chart.errors import DateOutOfRange, NonCanonicalEncoding, Truncated, YearOutOfRange
from charts.chart.selection import ChartSelection
from charts.chart.transport import unwrap, wrap

MIN_YEAR = 1000
MAX_YEAR = 0xFFFF
HEADER_SIZE = 2


def encode_chart(selection: ChartSelection) -> bytes:
    """Pack ``selection`` into its canonical byte form."""

    year = selection.year
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise YearOutOfRange(f"year {year} is outside [{MIN_YEAR}, {MAX_YEAR}]")

    days_in_year = day_count(year)
    for index in selection.selected:
        if not 0 <= index < days_in_year:
            raise DateOutOfRange(f"day index {index} is out of range for year {year}")

    bitset = bytearray((selection.selected[-1] // 8 + 1) if selection.selected else 0)
    for index in selection.selected:
        bitset[index // 8] |= 1 << (7 - index % 8)

    return year.to_bytes(HEADER_SIZE, "big") + bytes(bitset).rstrip(b"\x00")


def decode_chart(data: bytes) -> ChartSelection:
    """Validate and unpack a byte form produced by :func:`encode_chart`."""

    if len(data) < HEADER_SIZE:
        raise Truncated(f"encoded chart has {len(data)} bytes, the year header needs {HEADER_SIZE}")

    year = int.from_bytes(data[:HEADER_SIZE], "big")
    if year < MIN_YEAR:
        raise DateOutOfRange(f"year {year} is below the supported minimum {MIN_YEAR}")

    bitset = data[HEADER_SIZE:]
    selected: list[int] = []
    for position, value in enumerate(bitset):
        if not value:
            continue
        for bit in range(7, -1, -1):
            if value & (1 << bit):
                index = position * 8 + (7 - bit)
                try:
                    day_at(year, index)
                except IndexError as exc:
                    raise DateOutOfRange(str(exc)) from exc
                selected.append(index)

    if bitset and bitset[-1] == 0:
        raise NonCanonicalEncoding("encoded chart ends with a zero byte")

    return ChartSelection(year=year, selected=tuple(selected))


def encode(selection: ChartSelection) -> str:
    """Encode ``selection`` as a transport string suitable for URLs."""

    return wrap(encode_chart(selection))


def decode(text: str) -> ChartSelection:
    """Decode a transport string back into a selection."""

    return decode_chart(unwrap(text))
