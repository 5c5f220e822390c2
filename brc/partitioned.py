"""Aggregation of a measurements file split into byte ranges read in parallel."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

from brc.parsing import parse_tenths_entry
from brc.stats import StationStat

PathArg = Union[str, "PathLike[str]"]

DEFAULT_PARTS = 25
PROGRESS_EVERY = 1_000_000


@dataclass
class PartResult:
    """What one byte range of the file contributes to the totals.

    The first line of a range may be the tail of a line that the previous
    range already read; it is kept aside and resolved when merging.
    """

    no: int
    stats: dict[bytes, StationStat] = field(default_factory=dict)
    first_line: bytes | None = None
    discard_first_line_of_next_part: bool = False


def _strip(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw


def _record(stats: dict[bytes, StationStat], line: bytes) -> None:
    station, temp = parse_tenths_entry(line)
    stat = stats.get(station)
    if stat is None:
        stat = stats[station] = StationStat()
    stat.add(temp)


def read_part(input_file: PathArg, no: int, start_byte: int, end_byte: int) -> PartResult:
    """Read the lines starting in ``[start_byte, end_byte)`` of ``input_file``."""
    stats: dict[bytes, StationStat] = {}
    first_line: bytes | None = None
    read_idx = start_byte
    count = 0
    started = time.perf_counter()
    with open(input_file, "rb") as handle:
        handle.seek(start_byte)
        while read_idx < end_byte:
            raw = handle.readline()
            if not raw:
                break
            read_idx += len(raw)
            line = _strip(raw)
            count += 1
            if count == 1:
                first_line = line
                continue
            if line:
                _record(stats, line)
            if count % PROGRESS_EVERY == 0:
                print(
                    f"part {no} processed: {count}, "
                    f"took: {time.perf_counter() - started:0.2f}"
                )
    return PartResult(
        no=no,
        stats=stats,
        first_line=first_line,
        discard_first_line_of_next_part=read_idx > end_byte,
    )


def aggregate_partitioned(
    input_file: PathArg, parts: int = DEFAULT_PARTS
) -> dict[bytes, StationStat]:
    """Split the file into ``parts`` byte ranges, read them concurrently and merge."""
    if parts < 1:
        raise ValueError(f"parts must be at least 1, got {parts}")
    size = os.path.getsize(input_file)
    chunk = size // parts
    bounds = [
        (no, no * chunk, (no + 1) * chunk if no < parts - 1 else size)
        for no in range(parts)
    ]
    workers = max(1, min(parts, os.cpu_count() or 1))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(
            pool.map(lambda bound: read_part(input_file, *bound), bounds)
        )

    skipped = {r.no + 1 for r in results if r.discard_first_line_of_next_part}
    totals: dict[bytes, StationStat] = {}
    for result in results:
        for station, stat in result.stats.items():
            totals.setdefault(station, StationStat()).merge(stat)
    for result in results:
        if result.no in skipped or not result.first_line:
            continue
        _record(totals, result.first_line)
    return totals


def format_report(stats: Mapping[bytes, StationStat]) -> str:
    """Render one ``station min max mean`` line per station, sorted by name."""
    return "".join(
        f"{station.decode('utf-8', errors='replace')} {stat.minimum / 10.0:0.1f} "
        f"{stat.maximum / 10.0:0.1f} {stat.mean():0.1f} \n"
        for station, stat in sorted(stats.items())
    )


def run(input_file: PathArg, parts: int = DEFAULT_PARTS) -> dict[bytes, StationStat]:
    """Aggregate ``input_file`` in ``parts`` ranges and print the report."""
    stats = aggregate_partitioned(input_file, parts)
    sys.stdout.write(format_report(stats))
    return stats