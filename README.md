# brc

Aggregates weather-station measurements into a per-station summary of
minimum, maximum and mean temperature.

The input is a text file with one measurement per line, in the form
`<station name>;<temperature>`, for example:

```
Da Lat;19.2
Saint Petersburg;-5.5
Kuwait City;31.6
Dikson;-13.9
```

Temperatures carry exactly one digit after the decimal point, with one or two
digits before it and an optional minus sign (`X.Y`, `-X.Y`, `XX.Y`, `-XX.Y`).
Lines may end in `\n` or `\r\n`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
brc [INPUT] [--profile FILE] [--parts N]
```

- `INPUT` is the measurements file; it defaults to `measurements.txt` in the
  current directory.
- `--parts N` sets how many byte ranges the file is split into (default 25).
  The ranges are read concurrently on a thread pool.
- `--profile FILE` (also accepted as `-profile`) records, while the
  aggregation runs, the call count and cumulative wall time of every function
  called, and writes them to `FILE` as a table sorted by time.

For every station, sorted by name, the command prints one line with the name,
minimum, maximum and mean, each to one decimal place, and finally
`took: <seconds>`. Each part also prints a progress line every million lines.
If the input or profile file cannot be opened, or a line cannot be parsed,
the command prints `error: ...` to standard error and exits with status 1.

Example:

```
brc measurements.txt --parts 8
```

## Library use

- `brc.parsing` turns one line (as bytes) into a station name and a
  temperature.
  - `parse_tenths_entry` returns the temperature as an integer number of
    tenths (`b"Dikson;-13.9"` gives `(b"Dikson", -139)`).
  - `parse_float_entry` splits on `;` and reads the temperature with `float`.
  - `parse_decimal_entry` reads the temperature digit by digit into a float.
  - A line that cannot be parsed raises `EntryParseError`, a `ValueError`
    subclass carrying `line` and `reason`.
- `brc.stats` holds `StationStat`, which keeps running minimum, maximum, total
  and count in integer tenths, and `FloatStationStat`, which keeps them as
  floats in degrees. Both have `add` and `mean` (mean in degrees; `mean`
  raises `ValueError` when nothing was recorded). `StationStat.merge` folds
  another `StationStat` into this one.
- `brc.sequential` reads a file line by line.
  - `iter_lines(path)` yields the lines without their endings.
  - `aggregate_float(lines, parser)` and `aggregate_tenths(lines)` build a
    `dict` from station name to statistics.
  - `format_float_report` and `format_tenths_report` render them, sorted by
    station name.
  - `run(input_file, variant)` aggregates a file with one of the `Variant`
    strategies (`R1`, `R2`, `R3` parse with `parse_float_entry`, `R4` with
    `parse_decimal_entry`, `R5`, the default, with `parse_tenths_entry`),
    prints progress, the time spent reading and the report, and returns the
    statistics.
- `brc.partitioned` splits a file into byte ranges.
  - `read_part` reads the lines starting in one range and returns a
    `PartResult`.
  - `aggregate_partitioned(input_file, parts)` reads all ranges concurrently
    and merges them; a line that crosses a range boundary is counted exactly
    once. It raises `ValueError` if `parts` is less than 1.
  - `format_report` renders the result, and `run` prints it and returns the
    statistics.

```python
from brc.partitioned import aggregate_partitioned, format_report

stats = aggregate_partitioned("measurements.txt", parts=25)
print(format_report(stats), end="")
```

## What it does not do

The `brc` command always uses the partitioned reader. The line-by-line
strategies in `brc.sequential` are available only from Python, not from the
command line. The profile written by `--profile` is a plain-text table, not a
format that other profiling tools read.