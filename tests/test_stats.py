import pytest

from brc.stats import FloatStationStat, StationStat

READINGS = [192, -55, 316, -139, 16]


def _filled(values):
    stat = StationStat()
    for value in values:
        stat.add(value)
    return stat


def test_single_reading_sets_all_fields():
    stat = _filled([192])
    assert (stat.minimum, stat.maximum, stat.total, stat.count) == (192, 192, 192, 1)


def test_add_tracks_extremes_and_count():
    stat = _filled(READINGS)
    assert stat.minimum == min(READINGS)
    assert stat.maximum == max(READINGS)
    assert stat.count == len(READINGS)
    assert stat.total == sum(READINGS)


def test_mean_of_single_reading_in_degrees():
    assert _filled([192]).mean() == pytest.approx(19.2)


def test_mean_lies_between_extremes():
    stat = _filled(READINGS)
    assert stat.minimum / 10 <= stat.mean() <= stat.maximum / 10


def test_merge_equals_adding_all():
    left = _filled(READINGS[:2])
    right = _filled(READINGS[2:])
    left.merge(right)
    assert left == _filled(READINGS)


def test_merge_into_empty_copies():
    target = StationStat()
    source = _filled(READINGS)
    target.merge(source)
    assert target == source


def test_merge_empty_is_noop():
    stat = _filled(READINGS)
    before = StationStat(stat.minimum, stat.maximum, stat.total, stat.count)
    stat.merge(StationStat())
    assert stat == before


def test_mean_of_empty_raises():
    with pytest.raises(ValueError):
        StationStat().mean()


def test_float_stat_tracks_readings():
    values = [19.2, -5.5, 31.6, -13.9]
    stat = FloatStationStat()
    for value in values:
        stat.add(value)
    assert stat.minimum == -13.9
    assert stat.maximum == 31.6
    assert stat.count == len(values)
    assert stat.mean() == pytest.approx(sum(values) / len(values))


def test_float_stat_single_reading_mean():
    stat = FloatStationStat()
    stat.add(-5.5)
    assert stat.mean() == -5.5


def test_float_stat_empty_mean_raises():
    with pytest.raises(ValueError):
        FloatStationStat().mean()