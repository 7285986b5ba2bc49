"""
CSV population statistics: one row per step, header step,fish,sharks.
"""

from __future__ import annotations
import csv
from pathlib import Path
from typing import TextIO

HEADER = ("step", "fish", "sharks")


class StatsWriter:
    """
    Writes population counts to a CSV file.

    Usable as a context manager; the header is written on open.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._file: TextIO | None = None
        self._writer = None
        self.rows_written = 0

    def open(self) -> StatsWriter:
        self._file = self.path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(HEADER)
        return self

    def write(self, step: int, fish: int, sharks: int) -> None:
        if self._writer is None:
            raise RuntimeError("StatsWriter is not open")
        self._writer.writerow((step, fish, sharks))
        self.rows_written += 1

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None

    def __enter__(self) -> StatsWriter:
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()


def read_stats(path: str | Path) -> list[tuple[int, int, int]]:
    """Read back (step, fish, sharks) rows written by StatsWriter."""
    with Path(path).open(newline="") as f:
        reader = csv.reader(f)
        header = next(reader)
        if tuple(header) != HEADER:
            raise ValueError(f"Unexpected CSV header: {header}")
        return [(int(s), int(f_), int(k)) for s, f_, k in reader]
