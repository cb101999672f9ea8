# placements.py
# Generate all valid piece placements on the board

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from board import Board, Cell
from pieces import Piece


@dataclass(frozen=True)
class Placement:
    piece_id: str
    orientation: int  # index into Piece.orientations()
    anchor_row: int
    anchor_col: int
    cells: tuple[Cell, ...]  # board coordinates covered by this placement

    def __str__(self) -> str:
        return (
            f"{self.piece_id} @ ({self.anchor_row},{self.anchor_col}) "
            f"ori={self.orientation} covers {list(self.cells)}"
        )


def generate_placements(board: Board, pieces: Iterable[Piece]) -> list[Placement]:
    """Generate all valid placements of all pieces on the board.

    Only reads the board: a placement is valid when every cell it would
    cover is fillable right now.
    """
    placements: list[Placement] = []

    for piece in pieces:
        for orientation, shape in enumerate(piece.orientations()):
            max_r = max(r for r, _ in shape)
            max_c = max(c for _, c in shape)

            # Slide the shape over the board
            for r0 in range(board.rows - max_r):
                for c0 in range(board.cols - max_c):
                    placed = tuple(Cell(r0 + r, c0 + c) for r, c in shape)
                    if all(board.is_fillable(r, c) for r, c in placed):
                        placements.append(
                            Placement(
                                piece_id=piece.id,
                                orientation=orientation,
                                anchor_row=r0,
                                anchor_col=c0,
                                cells=placed,
                            )
                        )

    return placements
