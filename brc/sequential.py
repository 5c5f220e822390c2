"""Single-pass aggregation of a measurements file, line by line."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import Enum
from os import PathLike
from typing import Union

from brc.parsing import parse_decimal_entry, parse_float_entry, parse_tenths_entry
from brc.stats import FloatStationStat, StationStat

PathArg = Union[str, "PathLike[str]"]

PROGRESS_EVERY = 10_000_000
TENTHS_PROGRESS_EVERY = 100_000_000


class Variant(Enum):
    """Strategies for parsing and accumulating a measurements file."""

    R1 = "r1"
    R2 = "r2"
    R3 = "r3"
    R4 = "r4"
    R5 = "r5"

    @property
    def parser(self) -> Callable[[bytes], tuple[bytes, float | int]]:
        """The line parser this strategy uses."""
        return _PARSERS[self]

    @property
    def integer_tenths(self) -> bool:
        """Whether temperatures are kept as integer tenths of a degree."""
        return self is Variant.R5

    @property
    def progress_every(self) -> int:
        """Number of lines between progress messages."""
        return TENTHS_PROGRESS_EVERY if self.integer_tenths else PROGRESS_EVERY


_PARSERS = {
    Variant.R1: parse_float_entry,
    Variant.R2: parse_float_entry,
    Variant.R3: parse_float_entry,
    Variant.R4: parse_decimal_entry,
    Variant.R5: parse_tenths_entry,
}


def iter_lines(path: PathArg) -> Iterator[bytes]:
    """Yield the lines of a file as bytes, without their line endings."""
    with open(path, "rb") as handle:
        for raw in handle:
            if raw.endswith(b"\n"):
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            yield raw


def aggregate_float(
    lines: Iterable[bytes], parser: Callable[[bytes], tuple[bytes, float]]
) -> dict[bytes, FloatStationStat]:
    """Accumulate float statistics per station."""
    stats: dict[bytes, FloatStationStat] = {}
    for line in lines:
        station, temp = parser(line)
        stat = stats.get(station)
        if stat is None:
            stat = stats[station] = FloatStationStat()
        stat.add(temp)
    return stats


def aggregate_tenths(lines: Iterable[bytes]) -> dict[bytes, StationStat]:
    """Accumulate integer-tenths statistics per station."""
    stats: dict[bytes, StationStat] = {}
    for line in lines:
        station, temp = parse_tenths_entry(line)
        stat = stats.get(station)
        if stat is None:
            stat = stats[station] = StationStat()
        stat.add(temp)
    return stats


def _name(station: bytes) -> str:
    return station.decode("utf-8", errors="replace")


def format_float_report(stats: Mapping[bytes, FloatStationStat]) -> str:
    """Render one ``station min max mean`` line per station, sorted by name."""
    return "".join(
        f"{_name(station)} {stat.minimum} {stat.maximum} {stat.mean()}\n"
        for station, stat in sorted(stats.items())
    )


def format_tenths_report(stats: Mapping[bytes, StationStat]) -> str:
    """Render one ``station min max mean`` line per station with one decimal."""
    return "".join(
        f"{_name(station)} {stat.minimum / 10.0:0.1f} "
        f"{stat.maximum / 10.0:0.1f} {stat.mean():0.1f}\n"
        for station, stat in sorted(stats.items())
    )


def _with_progress(lines: Iterable[bytes], every: int, started: float) -> Iterator[bytes]:
    for count, line in enumerate(lines, 1):
        yield line
        if count % every == 0:
            print(f"processed: {count}, took: {time.perf_counter() - started:0.2f}")


def run(
    input_file: PathArg, variant: Variant = Variant.R5
) -> dict[bytes, StationStat] | dict[bytes, FloatStationStat]:
    """Aggregate ``input_file`` with the given strategy and print the report."""
    started = time.perf_counter()
    lines = _with_progress(iter_lines(input_file), variant.progress_every, started)
    if variant.integer_tenths:
        tenths = aggregate_tenths(lines)
        report = format_tenths_report(tenths)
        result: dict = tenths
    else:
        floats = aggregate_float(lines, variant.parser)
        report = format_float_report(floats)
        result = floats
    print(f"read file took: {time.perf_counter() - started:02.0f}")
    sys.stdout.write(report)
    return result