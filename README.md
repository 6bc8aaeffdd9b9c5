# sparsesheet

A fixed-size sparse matrix of string cells, meant as the storage core of a
small spreadsheet. Only occupied cells take memory. A whole row, a whole
column or a rectangle can be read or cleared, and the numeric cells of a
rectangle can be summed, averaged, or searched for their maximum and minimum.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library. To run the
tests, install the `test` extra (`pip install .[test]`) and run `pytest`.

## Usage

```python
from sparsesheet.matrix import SparseMatrix

sheet = SparseMatrix(10, 5)          # 10 rows, 5 columns, all empty

sheet.insert("12.5", 0, 0)
sheet.insert("7", 1, 0)
sheet.insert("total", 2, 0)
sheet.insert("3", 1, 2)

sheet.get(1, 0)          # "7"
sheet.get(4, 4)          # "" (empty cell)
sheet.exists(2, 0)       # True

for cell in sheet.row_cells(1):
    print(cell.row, cell.column, cell.value)

sheet.sum_range(0, 0, 2, 2)      # 22.5, text cells are skipped
sheet.average_range(0, 0, 2, 2)  # 7.5
sheet.max_range(0, 0, 2, 2)      # 12.5
sheet.min_range(0, 0, 2, 2)      # 3.0
```

Note that `insert` takes the value first, then the row and the column.
Inserting into an occupied cell replaces its value.

Ranges are given by two opposite corners, `(r1, c1)` and `(r2, c2)`, in either
order, and include both ends.

### Reading

- `occupied()` returns every occupied cell, row by row and left to right.
- `row_cells(row)` returns the occupied cells of one row, ordered by column.
- `column_cells(column)` returns the occupied cells of one column, ordered by row.
- `range_cells(r1, c1, r2, c2)` returns the occupied cells of a rectangle, row by row.

Each result is a list of `CellInfo` records, frozen dataclasses with `row`,
`column` and `value`.

### Clearing

- `remove(row, column)` empties one cell. Removing an empty cell does nothing.
- `remove_row(row)` empties a whole row.
- `remove_column(column)` empties a whole column.
- `remove_range(r1, c1, r2, c2)` empties a rectangle.

### Numbers in cells

The aggregates read a cell as a number the way a C floating-point parser
does: leading whitespace is skipped and the number at the start of the text is
taken, so `"3"`, `" 2.5e1"`, `"0x1p3"` and `"4 apples"` all count, while
`"total"` and `""` do not. `inf`, `infinity` and `nan` are accepted in any
case; values too large or too small for a float are treated as not numeric.
A `nan` cell makes the sum and average `nan`.

Cells that are not numeric are left out. If no cell in a range is numeric,
all four aggregates return `0.0`.

### Size and errors

`rows` and `columns` are read-only properties giving the size of the matrix.
Negative dimensions passed to `SparseMatrix` raise `ValueError`.

An index outside the matrix raises `IndexError`. This applies to every cell,
row, column and range operation.

## What it does not do

This is only the data structure. There is no user interface or command to
run, no formulas or cell references, and no saving or loading of sheets; the
matrix lives in memory only.