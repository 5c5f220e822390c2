"""Command line entry point: aggregate a measurements file and time it."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from collections import Counter, defaultdict

from brc import partitioned

DEFAULT_INPUT = "measurements.txt"


class _CallProfiler:
    """Collects call counts and cumulative wall time per function."""

    def __init__(self) -> None:
        self._calls: Counter[str] = Counter()
        self._totals: defaultdict[str, float] = defaultdict(float)
        self._local = threading.local()
        self._lock = threading.Lock()

    def _stack(self) -> list[tuple[str, float]]:
        stack = getattr(self._local, "stack", None)
        if stack is None:
            stack = []
            self._local.stack = stack
        return stack

    def _hook(self, frame, event, arg) -> None:
        if event == "call":
            code = frame.f_code
            key = f"{code.co_filename}:{code.co_firstlineno}({code.co_name})"
            self._stack().append((key, time.perf_counter()))
        elif event == "c_call":
            name = getattr(arg, "__qualname__", None) or repr(arg)
            self._stack().append((f"<builtin>({name})", time.perf_counter()))
        elif event in ("return", "c_return", "c_exception"):
            stack = self._stack()
            if not stack:
                return
            key, began = stack.pop()
            elapsed = time.perf_counter() - began
            with self._lock:
                self._calls[key] += 1
                self._totals[key] += elapsed

    def enable(self) -> None:
        threading.setprofile(self._hook)
        sys.setprofile(self._hook)

    def disable(self) -> None:
        sys.setprofile(None)
        threading.setprofile(None)

    def dump(self, path: str) -> None:
        with self._lock:
            rows = sorted(self._totals.items(), key=lambda kv: kv[1], reverse=True)
            calls = dict(self._calls)
        with open(path, "w", encoding="utf-8") as out:
            out.write(f"{'calls':>10} {'cumtime':>12}  function\n")
            for key, total in rows:
                out.write(f"{calls[key]:>10} {total:>12.6f}  {key}\n")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brc", description="Per-station min, max and mean temperatures."
    )
    parser.add_argument(
        "input", nargs="?", default=DEFAULT_INPUT, help="measurements file"
    )
    parser.add_argument(
        "-profile", "--profile", default="", help="write CPU profile to file"
    )
    parser.add_argument(
        "--parts",
        type=int,
        default=partitioned.DEFAULT_PARTS,
        help="number of byte ranges read concurrently",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the aggregation; return the process exit status."""
    args = _parser().parse_args(argv)

    profiler = None
    if args.profile:
        try:
            with open(args.profile, "wb"):
                pass
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        profiler = _CallProfiler()
        profiler.enable()

    started = time.perf_counter()
    try:
        partitioned.run(args.input, args.parts)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        if profiler is not None:
            profiler.disable()
            profiler.dump(args.profile)

    print(f"took: {time.perf_counter() - started:0.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())