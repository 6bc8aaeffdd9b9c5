"""A sparse grid of string cells with range queries and numeric aggregates."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Iterator

__all__ = ["CellInfo", "SparseMatrix"]

_OUT_OF_RANGE = "indices out of range"

# Leading part of a string that a C-style floating-point parser accepts.
_NUMBER_PREFIX = re.compile(
    r"""
    [ \t\n\v\f\r]*
    (?P<number>
        (?P<sign>[+-]?)
        (?:
            (?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
          | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+))(?P<exp>e[+-]?[0-9]+)?
          | (?P<inf>inf(?:inity)?)
          | (?P<nan>nan)(?:\([0-9a-z_]*\))?
        )
    )
    """,
    re.IGNORECASE | re.VERBOSE,
)


def _parse_number(text: str) -> float | None:
    """Return the number at the start of ``text``, or None if there is none.

    Values that overflow or underflow a double are treated as not numeric.
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return None
    sign = -1.0 if match["sign"] == "-" else 1.0
    if match["inf"]:
        return sign * float("inf")
    if match["nan"]:
        return float("nan")
    if match["hex"]:
        mantissa = match["hex"].lower().split("p", 1)[0][2:]
        try:
            value = float.fromhex(match["hex"])
        except OverflowError:
            return None
    else:
        mantissa = match["dec"]
        value = float(match["dec"] + (match["exp"] or ""))
    if value in (float("inf"), float("-inf")):
        return None
    nonzero_mantissa = any(ch not in "0." for ch in mantissa)
    if nonzero_mantissa and abs(value) < sys.float_info.min:
        return None
    return sign * value


@dataclass(frozen=True)
class CellInfo:
    """An occupied cell: its coordinates and stored value."""

    row: int
    column: int
    value: str


class SparseMatrix:
    """A fixed-size grid that stores only the cells that have been set."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._columns = columns
        self._by_row: list[dict[int, str]] = [{} for _ in range(rows)]
        self._by_column: list[set[int]] = [set() for _ in range(columns)]

    @property
    def rows(self) -> int:
        """Number of rows in the grid."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns in the grid."""
        return self._columns

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise IndexError(_OUT_OF_RANGE)

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self._columns:
            raise IndexError(_OUT_OF_RANGE)

    def _check_cell(self, row: int, column: int) -> None:
        self._check_row(row)
        self._check_column(column)

    def _bounds(self, r1: int, c1: int, r2: int, c2: int) -> tuple[int, int, int, int]:
        self._check_cell(r1, c1)
        self._check_cell(r2, c2)
        return min(r1, r2), max(r1, r2), min(c1, c2), max(c1, c2)

    def insert(self, value: str, row: int, column: int) -> None:
        """Set the value of a cell, creating it if needed."""
        self._check_cell(row, column)
        self._by_row[row][column] = value
        self._by_column[column].add(row)

    def exists(self, row: int, column: int) -> bool:
        """Whether the cell holds a value."""
        self._check_cell(row, column)
        return column in self._by_row[row]

    def get(self, row: int, column: int) -> str:
        """The value of a cell, or an empty string if it is not set."""
        self._check_cell(row, column)
        return self._by_row[row].get(column, "")

    def remove(self, row: int, column: int) -> None:
        """Clear a cell; clearing an empty cell does nothing."""
        self._check_cell(row, column)
        if self._by_row[row].pop(column, None) is not None:
            self._by_column[column].discard(row)

    def remove_row(self, row: int) -> None:
        """Clear every cell of a row."""
        self._check_row(row)
        for column in self._by_row[row]:
            self._by_column[column].discard(row)
        self._by_row[row].clear()

    def remove_column(self, column: int) -> None:
        """Clear every cell of a column."""
        self._check_column(column)
        for row in self._by_column[column]:
            self._by_row[row].pop(column, None)
        self._by_column[column].clear()

    def remove_range(self, r1: int, c1: int, r2: int, c2: int) -> None:
        """Clear every cell in the rectangle spanned by two corners."""
        rmin, rmax, cmin, cmax = self._bounds(r1, c1, r2, c2)
        for row in range(rmin, rmax + 1):
            cells = self._by_row[row]
            for column in [c for c in cells if cmin <= c <= cmax]:
                del cells[column]
                self._by_column[column].discard(row)

    def _row_iter(self, row: int) -> Iterator[CellInfo]:
        for column, value in sorted(self._by_row[row].items()):
            yield CellInfo(row, column, value)

    def _range_iter(self, r1: int, c1: int, r2: int, c2: int) -> Iterator[CellInfo]:
        rmin, rmax, cmin, cmax = self._bounds(r1, c1, r2, c2)
        for row in range(rmin, rmax + 1):
            for cell in self._row_iter(row):
                if cell.column > cmax:
                    break
                if cell.column >= cmin:
                    yield cell

    def occupied(self) -> list[CellInfo]:
        """All set cells, in row-major order."""
        return [cell for row in range(self._rows) for cell in self._row_iter(row)]

    def row_cells(self, row: int) -> list[CellInfo]:
        """The set cells of a row, ordered by column."""
        self._check_row(row)
        return list(self._row_iter(row))

    def column_cells(self, column: int) -> list[CellInfo]:
        """The set cells of a column, ordered by row."""
        self._check_column(column)
        return [
            CellInfo(row, column, self._by_row[row][column])
            for row in sorted(self._by_column[column])
        ]

    def range_cells(self, r1: int, c1: int, r2: int, c2: int) -> list[CellInfo]:
        """The set cells inside a rectangle, in row-major order."""
        return list(self._range_iter(r1, c1, r2, c2))

    def _numbers(self, r1: int, c1: int, r2: int, c2: int) -> list[float]:
        parsed = (_parse_number(cell.value) for cell in self._range_iter(r1, c1, r2, c2))
        return [number for number in parsed if number is not None]

    def sum_range(self, r1: int, c1: int, r2: int, c2: int) -> float:
        """Sum of the numeric cells in a rectangle."""
        total = 0.0
        for number in self._numbers(r1, c1, r2, c2):
            total += number
        return total

    def average_range(self, r1: int, c1: int, r2: int, c2: int) -> float:
        """Mean of the numeric cells in a rectangle, 0.0 if there are none."""
        numbers = self._numbers(r1, c1, r2, c2)
        if not numbers:
            return 0.0
        total = 0.0
        for number in numbers:
            total += number
        return total / len(numbers)

    def max_range(self, r1: int, c1: int, r2: int, c2: int) -> float:
        """Largest numeric cell in a rectangle, 0.0 if there are none."""
        numbers = self._numbers(r1, c1, r2, c2)
        if not numbers:
            return 0.0
        best = -sys.float_info.max
        for number in numbers:
            if number > best:
                best = number
        return best

    def min_range(self, r1: int, c1: int, r2: int, c2: int) -> float:
        """Smallest numeric cell in a rectangle, 0.0 if there are none."""
        numbers = self._numbers(r1, c1, r2, c2)
        if not numbers:
            return 0.0
        best = sys.float_info.max
        for number in numbers:
            if number < best:
                best = number
        return best