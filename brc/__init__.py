"""Per-station temperature aggregation over large measurement files."""

__version__ = "0.1.0"