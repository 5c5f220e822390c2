import pytest

from brc.parsing import EntryParseError, parse_decimal_entry, parse_float_entry
from brc.sequential import (
    Variant,
    aggregate_float,
    aggregate_tenths,
    format_float_report,
    format_tenths_report,
    iter_lines,
    run,
)

LINES = [
    b"Da Lat;19.2",
    b"Saint Petersburg;-5.5",
    b"Kuwait City;31.6",
    b"Dikson;-13.9",
    b"Kuwait City;1.6",
]


@pytest.fixture
def measurements(tmp_path):
    path = tmp_path / "measurements.txt"
    path.write_bytes(b"\n".join(LINES) + b"\n")
    return path


def test_iter_lines_round_trip(measurements):
    assert list(iter_lines(measurements)) == LINES


def test_iter_lines_strips_crlf_and_keeps_unterminated_last_line(tmp_path):
    path = tmp_path / "m.txt"
    path.write_bytes(b"Da Lat;19.2\r\nDikson;-13.9\nKuwait City;1.6")
    assert list(iter_lines(path)) == [b"Da Lat;19.2", b"Dikson;-13.9", b"Kuwait City;1.6"]


def test_aggregate_tenths_min_max():
    stats = aggregate_tenths(LINES)
    kuwait = stats[b"Kuwait City"]
    assert kuwait.minimum == 16
    assert kuwait.maximum == 316
    assert stats[b"Dikson"].total == -139


def test_aggregate_tenths_counts_every_line():
    stats = aggregate_tenths(LINES)
    assert sum(stat.count for stat in stats.values()) == len(LINES)
    assert set(stats) == {line.split(b";")[0] for line in LINES}


@pytest.mark.parametrize("parser", [parse_float_entry, parse_decimal_entry])
def test_aggregate_float_agrees_with_tenths(parser):
    floats = aggregate_float(LINES, parser)
    tenths = aggregate_tenths(LINES)
    assert set(floats) == set(tenths)
    for station, stat in tenths.items():
        other = floats[station]
        assert other.count == stat.count
        assert other.minimum == pytest.approx(stat.minimum / 10)
        assert other.maximum == pytest.approx(stat.maximum / 10)
        assert other.mean() == pytest.approx(stat.mean())


def test_format_tenths_report_single_station():
    assert format_tenths_report(aggregate_tenths(LINES[:1])) == "Da Lat 19.2 19.2 19.2\n"


def test_format_float_report_single_station():
    stats = aggregate_float(LINES[:1], parse_float_entry)
    assert format_float_report(stats) == "Da Lat 19.2 19.2 19.2\n"


def test_reports_sorted_by_station():
    stats = aggregate_tenths(LINES)
    lines = format_tenths_report(stats).splitlines()
    assert len(lines) == len(stats)
    assert lines[0].startswith("Da Lat ")
    assert lines[-1].startswith("Saint Petersburg ")


def test_run_tenths_prints_report(measurements, capsys):
    stats = run(measurements, Variant.R5)
    assert stats == aggregate_tenths(LINES)
    out = capsys.readouterr().out
    assert "Da Lat 19.2 19.2 19.2\n" in out
    assert out.startswith("read file took: ")


@pytest.mark.parametrize("variant", [Variant.R1, Variant.R2, Variant.R3, Variant.R4])
def test_run_float_variants_agree_with_tenths(measurements, variant, capsys):
    stats = run(measurements, variant)
    tenths = aggregate_tenths(LINES)
    assert set(stats) == set(tenths)
    for station, stat in tenths.items():
        assert stats[station].count == stat.count
        assert stats[station].mean() == pytest.approx(stat.mean())
    assert "Da Lat 19.2 19.2 19.2\n" in capsys.readouterr().out


@pytest.mark.parametrize("variant", list(Variant))
def test_run_rejects_malformed_line(tmp_path, variant):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"Da Lat;19.2\nOslo\n")
    with pytest.raises(EntryParseError):
        run(path, variant)


def test_run_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run(tmp_path / "absent.txt", Variant.R5)