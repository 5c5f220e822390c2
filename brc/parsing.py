"""Parsers for ``station;temperature`` measurement lines."""

from __future__ import annotations

SEPARATOR = ord(";")
_MINUS = ord("-")
_DOT = ord(".")
_ZERO = ord("0")
_NINE = ord("9")


class EntryParseError(ValueError):
    """Raised when a measurement line cannot be parsed."""

    def __init__(self, line: bytes, reason: str = "malformed entry") -> None:
        self.line = bytes(line)
        self.reason = reason
        super().__init__(f"{reason}: {self.line!r}")


def _split(line: bytes) -> tuple[bytes, bytes]:
    station, sep, reading = bytes(line).partition(b";")
    if not sep:
        raise EntryParseError(line, "missing ';' separator")
    return station, reading


def _digit(line: bytes, value: int) -> int:
    if not _ZERO <= value <= _NINE:
        raise EntryParseError(line, f"unexpected character {chr(value)!r}")
    return value - _ZERO


def parse_float_entry(line: bytes) -> tuple[bytes, float]:
    """Split a line on ``;`` and read the temperature as a float."""
    station, reading = _split(line)
    try:
        temp = float(reading.split(b";", 1)[0])
    except ValueError as exc:
        raise EntryParseError(line, "invalid temperature") from exc
    return station, temp


def parse_decimal_entry(line: bytes) -> tuple[bytes, float]:
    """Read the temperature digit by digit, accumulating a float."""
    station, reading = _split(line)
    after_dec = False
    factor = 0.1
    before_dec = 0
    frac = 0.0
    negative = False
    for byte in reading:
        if byte == _MINUS:
            negative = True
        elif byte == _DOT:
            after_dec = True
        elif not after_dec:
            before_dec = before_dec * 10 + _digit(line, byte)
        else:
            frac += factor * _digit(line, byte)
            factor = frac / 10
    temp = before_dec + frac
    return station, -temp if negative else temp


def parse_tenths_entry(line: bytes) -> tuple[bytes, int]:
    """Parse a line whose temperature has exactly one decimal digit.

    Returns the station name and the temperature in tenths of a degree.
    Accepted forms are ``X.Y``, ``-X.Y``, ``XX.Y`` and ``-XX.Y``.
    """
    data = bytes(line)
    end = len(data)

    def at(offset: int) -> int | None:
        return data[end - offset] if end >= offset else None

    def digit(offset: int) -> int:
        return _digit(data, data[end - offset])

    if at(4) == SEPARATOR:
        return data[: end - 4], digit(3) * 10 + digit(1)
    if at(5) == SEPARATOR and at(4) == _MINUS:
        return data[: end - 5], -(digit(3) * 10 + digit(1))
    if at(5) == SEPARATOR:
        return data[: end - 5], digit(4) * 100 + digit(3) * 10 + digit(1)
    if at(6) == SEPARATOR and at(5) == _MINUS:
        return data[: end - 6], -(digit(4) * 100 + digit(3) * 10 + digit(1))
    raise EntryParseError(data)