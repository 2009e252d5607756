# sudoku_grid.py
# Flat 81-cell Sudoku grid: parsing, constraint checks and boxed printing.
# Cell index = row * 9 + col (0-based, row-major). 0 = blank.

import sys
from typing import List, Optional, TextIO, Union

Grid = List[int]

SIZE = 9
CELLS = SIZE * SIZE
SEPARATOR = "+-------+-------+-------+"


class ParseError(ValueError):
    """Raised when the raw puzzle text does not hold 81 usable characters."""


# --- Index helpers
def cell_index(r: int, c: int) -> int:
    # r, c are 0..8
    return r * SIZE + c

def index_to_rc(i: int):
    return divmod(i, SIZE)

def validate_grid(grid: Grid) -> None:
    if len(grid) != CELLS:
        raise ValueError(f"Grid must have {CELLS} cells (got {len(grid)}).")
    for i, v in enumerate(grid):
        if not 0 <= v <= SIZE:
            r, c = index_to_rc(i)
            raise ValueError(f"Cell r{r + 1}c{c + 1} holds {v}; expected 0..9.")

def grid_to_rows(grid: Grid) -> List[List[int]]:
    return [list(grid[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]

def grid_from_rows(rows: List[List[int]]) -> Grid:
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError("Expected 9 rows of 9 values.")
    return [v for row in rows for v in row]


# --- Parsing
# NEL and NBSP are skipped too, on top of ASCII whitespace
EXTRA_SPACE = (0x85, 0xA0)

def parse_grid(contents: Union[bytes, str]) -> Grid:
    """
    Read a puzzle from raw bytes, one byte per character:
      - whitespace is skipped (ASCII whitespace, 0x85 and 0xA0)
      - the first 81 remaining bytes are cells, in row-major order
      - '1'..'9' are clues; '0' and any other byte is a blank
      - anything after the 81st cell is ignored
    str input is UTF-8 encoded first, so a non-ASCII character takes up
    two or more cells. Pass bytes for exact per-byte positions.
    """
    if isinstance(contents, str):
        contents = contents.encode("utf-8")

    grid: Grid = []
    for b in contents:
        ch = bytes((b,))
        if ch.isspace() or b in EXTRA_SPACE:
            continue
        grid.append(int(ch) if ch.isdigit() else 0)
        if len(grid) == CELLS:
            return grid
    raise ParseError("not enough input")


# --- Constraint checks
def _units() -> List[List[int]]:
    rows = [[cell_index(r, c) for c in range(SIZE)] for r in range(SIZE)]
    cols = [[cell_index(r, c) for r in range(SIZE)] for c in range(SIZE)]
    boxes = []
    for br in range(3):
        for bc in range(3):
            offset = br * 27 + bc * 3
            boxes.append([offset + k * SIZE + dc for k in range(3) for dc in range(3)])
    return rows + cols + boxes

# 9 rows, then 9 columns, then 9 boxes
UNITS = _units()

def reject(grid: Grid) -> bool:
    """True if any placed digit repeats within a row, column or 3x3 box."""
    for unit in UNITS:
        counts = [0] * (SIZE + 1)
        for i in unit:
            v = grid[i]
            if v == 0:
                continue
            counts[v] += 1
            if counts[v] > 1:
                return True
    return False

def accept(grid: Grid) -> bool:
    return all(v != 0 for v in grid)

def first_empty(grid: Grid) -> Optional[int]:
    for i, v in enumerate(grid):
        if v == 0:
            return i
    return None

def is_solution(grid: Grid) -> bool:
    return len(grid) == CELLS and accept(grid) and not reject(grid)


# --- Printing
def format_grid(grid: Grid) -> str:
    lines = []
    for band in range(3):
        lines.append(SEPARATOR)
        for r in range(band * 3, band * 3 + 3):
            row = grid[r * SIZE:(r + 1) * SIZE]
            boxes = [" ".join(str(v) for v in row[c:c + 3]) for c in (0, 3, 6)]
            lines.append("| " + " | ".join(boxes) + " |")
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"

def print_grid(grid: Grid, out: Optional[TextIO] = None):
    """Write the boxed 9x9 rendering of grid to out (stdout by default)."""
    (out or sys.stdout).write(format_grid(grid))
