# board.py
# Board geometry, cell states and month/day label lookup

from __future__ import annotations

from enum import Enum
from typing import Iterable, NamedTuple, Optional, Sequence


class Cell(NamedTuple):
    row: int
    col: int


class CellState(Enum):
    OFF_BOARD = "."
    FILLABLE = "#"
    TARGET = "T"  # must stay visible
    BLOCKED = "X"


class BoardConfigError(ValueError):
    """Board shape, labels or date lookup are inconsistent."""


class BoardStateError(ValueError):
    """A cell transition that the board does not allow."""


MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Whole-year board: months on the first two rows, days 1–31 below.
WHOLE_YEAR_SHAPE: tuple[str, ...] = (
    ".######..",
    ".######..",
    ".#######.",
    ".#######.",
    ".#######.",
    ".#######.",
    "...###...",
)

WHOLE_YEAR_LABELS: tuple[tuple[Optional[str], ...], ...] = (
    (None, "Jan", "Feb", "Mar", "Apr", "May", "Jun", None, None),
    (None, "Jul", "Aug", "Sep", "Oct", "Nov", "Dec", None, None),
    (None, "1", "2", "3", "4", "5", "6", "7", None),
    (None, "8", "9", "10", "11", "12", "13", "14", None),
    (None, "15", "16", "17", "18", "19", "20", "21", None),
    (None, "22", "23", "24", "25", "26", "27", "28", None),
    (None, None, None, "29", "30", "31", None, None, None),
)


class Board:
    """Irregular grid of cell states with a parallel grid of labels.

    Cells only ever move FILLABLE -> TARGET or FILLABLE -> BLOCKED;
    ``reset()`` turns targets back into fillable cells.
    """

    def __init__(
        self,
        ascii_shape: Sequence[str],
        labels: Sequence[Sequence[Optional[str]]],
    ):
        if not ascii_shape:
            raise BoardConfigError("ascii_shape must be non-empty")
        rows = len(ascii_shape)
        cols = len(ascii_shape[0])
        if any(len(line) != cols for line in ascii_shape):
            raise BoardConfigError("All ascii_shape rows must be the same length")
        if len(labels) != rows:
            raise BoardConfigError(f"labels must have exactly {rows} rows")
        if any(len(label_row) != cols for label_row in labels):
            raise BoardConfigError(f"Each row in labels must have length {cols}")

        self._rows = rows
        self._cols = cols
        self._grid: list[list[CellState]] = []
        self._labels: list[list[Optional[str]]] = []

        for r, line in enumerate(ascii_shape):
            grid_row: list[CellState] = []
            for c, ch in enumerate(line):
                if ch == "#":
                    if labels[r][c] is None:
                        raise BoardConfigError(
                            f"Label for fillable cell ({r},{c}) cannot be None"
                        )
                    grid_row.append(CellState.FILLABLE)
                else:
                    grid_row.append(CellState.OFF_BOARD)
            self._grid.append(grid_row)
            self._labels.append(list(labels[r]))

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def copy(self) -> "Board":
        clone = Board.__new__(Board)
        clone._rows = self._rows
        clone._cols = self._cols
        clone._grid = [list(row) for row in self._grid]
        clone._labels = [list(row) for row in self._labels]
        return clone

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self._rows and 0 <= c < self._cols

    def _check_bounds(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise IndexError(f"Invalid cell ({r},{c})")

    def is_fillable(self, r: int, c: int) -> bool:
        return self.in_bounds(r, c) and self._grid[r][c] is CellState.FILLABLE

    def state(self, r: int, c: int) -> CellState:
        self._check_bounds(r, c)
        return self._grid[r][c]

    def label(self, r: int, c: int) -> Optional[str]:
        self._check_bounds(r, c)
        return self._labels[r][c]

    def fillable_cells(self) -> list[Cell]:
        """Currently fillable cells in row-major order."""
        return [
            Cell(r, c)
            for r in range(self._rows)
            for c in range(self._cols)
            if self._grid[r][c] is CellState.FILLABLE
        ]

    def cells_in_state(self, state: CellState) -> list[Cell]:
        return [
            Cell(r, c)
            for r in range(self._rows)
            for c in range(self._cols)
            if self._grid[r][c] is state
        ]

    def find_cell_by_label(self, label: str) -> Optional[Cell]:
        for r in range(self._rows):
            for c in range(self._cols):
                if self._grid[r][c] is CellState.FILLABLE and self._labels[r][c] == label:
                    return Cell(r, c)
        return None

    def set_target(self, r: int, c: int) -> None:
        if not self.is_fillable(r, c):
            raise BoardStateError(
                f"Cannot set target on invalid or non-fillable cell ({r},{c})"
            )
        self._grid[r][c] = CellState.TARGET

    def block(self, r: int, c: int) -> None:
        state = self.state(r, c)
        if state is CellState.FILLABLE:
            self._grid[r][c] = CellState.BLOCKED
        elif state is CellState.TARGET:
            raise BoardStateError(f"Cannot block a target cell ({r},{c})")
        elif state is CellState.OFF_BOARD:
            raise BoardStateError(f"Cannot block an off-board cell ({r},{c})")
        else:
            raise BoardStateError(f"Cell ({r},{c}) is already blocked")

    def block_shape(self, shape: Iterable[Cell], origin_row: int, origin_col: int) -> None:
        """Block the fillable cells of a relative shape; everything else is skipped."""
        for rel_r, rel_c in shape:
            r, c = origin_row + rel_r, origin_col + rel_c
            if self.is_fillable(r, c):
                self._grid[r][c] = CellState.BLOCKED

    def reset(self) -> None:
        # Targets go back to fillable; blocked and off-board cells stay.
        for row in self._grid:
            for c, state in enumerate(row):
                if state is CellState.TARGET:
                    row[c] = CellState.FILLABLE

    def __str__(self) -> str:
        return "\n".join("".join(state.value for state in row) for row in self._grid)


def create_whole_year_board() -> Board:
    return Board(WHOLE_YEAR_SHAPE, WHOLE_YEAR_LABELS)


def date_labels(month: int, day: int) -> tuple[str, str]:
    """(month label, day label) for a date, e.g. (10, 19) -> ("Oct", "19")."""
    if not 1 <= month <= 12:
        raise BoardConfigError(f"Month must be between 1 and 12, got {month}")
    return MONTH_LABELS[month - 1], str(day)


def mark_date(board: Board, month: int, day: int) -> tuple[Cell, Cell]:
    """Reset the board and mark the month and day cells as targets."""
    month_label, day_label = date_labels(month, day)
    board.reset()

    month_cell = board.find_cell_by_label(month_label)
    if month_cell is None:
        raise BoardConfigError(f"No cell labelled {month_label!r} on the board")
    day_cell = board.find_cell_by_label(day_label)
    if day_cell is None:
        raise BoardConfigError(f"No cell labelled {day_label!r} on the board")

    board.set_target(*month_cell)
    board.set_target(*day_cell)
    return month_cell, day_cell
