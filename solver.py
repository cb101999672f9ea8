# solver.py
# Combines everything; solves a board or a given date

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from board import Board, Cell, create_whole_year_board, mark_date
from dlx import DLXSolver
from pieces import Piece, PieceDefinitionError, load_all_pieces
from placements import Placement, generate_placements

logger = logging.getLogger(__name__)


class MatrixConsistencyError(RuntimeError):
    """A placement covers a cell that is not a column of the matrix."""


@dataclass
class ExactCoverMatrix:
    """Sparse exact-cover matrix: cell columns first, then one column per piece."""

    columns: List[str] = field(default_factory=list)
    cell_index: Dict[Cell, int] = field(default_factory=dict)
    piece_index: Dict[str, int] = field(default_factory=dict)
    rows: List[List[int]] = field(default_factory=list)

    @property
    def num_columns(self) -> int:
        return len(self.columns)

    def to_dense(self) -> List[List[bool]]:
        dense = []
        for cols in self.rows:
            row = [False] * self.num_columns
            for c in cols:
                row[c] = True
            dense.append(row)
        return dense


def build_exact_cover(
    fillable_cells: Sequence[Cell],
    placements: Sequence[Placement],
) -> ExactCoverMatrix:
    matrix = ExactCoverMatrix()

    for i, cell in enumerate(fillable_cells):
        matrix.cell_index[cell] = i
        matrix.columns.append(f"({cell[0]},{cell[1]})")

    # Piece columns in first-seen order.
    for placement in placements:
        if placement.piece_id not in matrix.piece_index:
            matrix.piece_index[placement.piece_id] = len(matrix.columns)
            matrix.columns.append(placement.piece_id)

    for row_id, placement in enumerate(placements):
        cols: List[int] = []
        for cell in placement.cells:
            idx = matrix.cell_index.get(cell)
            if idx is None:
                raise MatrixConsistencyError(
                    f"Placement {row_id} ({placement}) covers {cell}, "
                    "which is not a fillable cell"
                )
            cols.append(idx)
        cols.append(matrix.piece_index[placement.piece_id])
        matrix.rows.append(sorted(cols))

    return matrix


def _check_piece_ids(pieces: Sequence[Piece]) -> None:
    seen = set()
    for piece in pieces:
        if piece.id in seen:
            raise PieceDefinitionError(f"Duplicate piece id {piece.id!r}")
        seen.add(piece.id)


def solve(
    board: Board,
    pieces: Sequence[Piece],
    should_stop: Optional[Callable[[], bool]] = None,
    time_limit: Optional[float] = None,
) -> Optional[List[Placement]]:
    """Find one arrangement using every piece exactly once.

    Returns the placements of the first exact cover found, or None when
    no cover exists. Raises SearchCancelled when ``should_stop`` fires or
    ``time_limit`` seconds pass.
    """
    pieces = list(pieces)
    _check_piece_ids(pieces)
    start = time.monotonic()

    if time_limit is not None:
        deadline = start + time_limit
        outer_stop = should_stop

        def should_stop() -> bool:
            if time.monotonic() >= deadline:
                return True
            return outer_stop is not None and outer_stop()

    # Cells and placements come from the same snapshot.
    snapshot = board.copy()
    fillable = snapshot.fillable_cells()

    piece_area = sum(piece.size for piece in pieces)
    if piece_area != len(fillable):
        logger.warning(
            "Piece area %d does not match %d fillable cells; no solution possible",
            piece_area,
            len(fillable),
        )
        return None

    if not fillable:
        return []

    placements = generate_placements(snapshot, pieces)
    placed_ids = {p.piece_id for p in placements}
    unplaceable = [piece.id for piece in pieces if piece.id not in placed_ids]
    if unplaceable:
        logger.warning("No legal placement for pieces %s", ", ".join(unplaceable))
        return None

    matrix = build_exact_cover(fillable, placements)
    logger.debug(
        "Exact cover: %d placements, %d columns (%d cells, %d pieces)",
        len(placements),
        matrix.num_columns,
        len(matrix.cell_index),
        len(matrix.piece_index),
    )

    dlx = DLXSolver(matrix.num_columns)
    for row_id, cols in enumerate(matrix.rows):
        dlx.add_row(row_id, cols)

    rows = dlx.solve_one(should_stop)
    elapsed = time.monotonic() - start
    if rows is None:
        logger.info("No solution found (%d search calls, %.3fs)", dlx.search_calls, elapsed)
        return None

    logger.info("Solved with %d placements (%d search calls, %.3fs)", len(rows), dlx.search_calls, elapsed)
    return [placements[rid] for rid in rows]


def solve_for_date(
    month: int,
    day: int,
    pieces: Optional[Sequence[Piece]] = None,
    time_limit: Optional[float] = None,
) -> Optional[List[Placement]]:
    board = create_whole_year_board()
    mark_date(board, month, day)
    if pieces is None:
        pieces = load_all_pieces()
    logger.info("Solving for month=%d day=%d", month, day)
    return solve(board, pieces, time_limit=time_limit)
