"""Running per-station temperature statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StationStat:
    """Statistics over temperatures held as integer tenths of a degree."""

    minimum: int | None = None
    maximum: int | None = None
    total: int = 0
    count: int = 0

    def add(self, temp: int) -> None:
        """Record one reading in tenths of a degree."""
        if self.count == 0:
            self.minimum = temp
            self.maximum = temp
        else:
            self.minimum = min(self.minimum, temp)
            self.maximum = max(self.maximum, temp)
        self.total += temp
        self.count += 1

    def merge(self, other: StationStat) -> None:
        """Fold the readings summarised by ``other`` into this one."""
        if other.count == 0:
            return
        if self.count == 0:
            self.minimum = other.minimum
            self.maximum = other.maximum
        else:
            self.minimum = min(self.minimum, other.minimum)
            self.maximum = max(self.maximum, other.maximum)
        self.total += other.total
        self.count += other.count

    def mean(self) -> float:
        """Mean temperature in degrees."""
        if self.count == 0:
            raise ValueError("no readings recorded")
        return self.total / 10.0 / self.count


@dataclass
class FloatStationStat:
    """Statistics over temperatures held as floats in degrees."""

    minimum: float | None = None
    maximum: float | None = None
    total: float = 0.0
    count: int = 0

    def add(self, temp: float) -> None:
        """Record one reading in degrees."""
        if self.count == 0:
            self.minimum = temp
            self.maximum = temp
        else:
            self.minimum = min(self.minimum, temp)
            self.maximum = max(self.maximum, temp)
        self.total += temp
        self.count += 1

    def mean(self) -> float:
        """Mean temperature in degrees."""
        if self.count == 0:
            raise ValueError("no readings recorded")
        return self.total / self.count