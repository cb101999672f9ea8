# pieces.py
# Piece definitions + rotations/flips

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from board import Cell


class PieceDefinitionError(ValueError):
    """Malformed piece: no cells, repeated cells or a ragged template."""


# Whole-year catalogue, '#' marks a cell of the piece.
PIECE_TEMPLATES: dict[str, tuple[str, ...]] = {
    "L_small": ("#.", "#.", "##"),
    "L_big": ("#.", "#.", "#.", "##"),
    "S1": ("##", "##"),
    "T1": (".#.", "###", "..."),
    "Lightning": (".##", "##."),
    "Bridge": ("###", "#.#"),
    "LightningBig": (".##", ".#.", "##."),
    "SquarePlus": (".#", "##", "##"),
    "Cross": (".#.", "###", ".#."),
}

SIMPLE_PIECE_TEMPLATES: dict[str, tuple[str, ...]] = {
    "Square": ("##", "##"),
    "Domino": ("##",),
}


def _normalize(shape: Iterable[tuple[int, int]]) -> tuple[Cell, ...]:
    shape = list(shape)
    min_r = min(r for r, _ in shape)
    min_c = min(c for _, c in shape)
    return tuple(sorted(Cell(r - min_r, c - min_c) for r, c in shape))


def _rotate90(shape: Iterable[Cell], height: int) -> list[Cell]:
    # Clockwise: (r, c) -> (c, height - 1 - r)
    return [Cell(c, height - 1 - r) for r, c in shape]


def _flip_horizontal(shape: Iterable[Cell], width: int) -> list[Cell]:
    return [Cell(r, width - 1 - c) for r, c in shape]


def _signature(shape: Iterable[Cell]) -> str:
    return "".join(f"{r},{c};" for r, c in sorted(shape))


def generate_orientations(
    cells: Sequence[Cell], height: int, width: int
) -> list[tuple[Cell, ...]]:
    """All unique rotations + horizontal flip orientations, normalized to (0,0).

    The unrotated, unflipped shape always comes first.
    """
    seen: set[str] = set()
    result: list[tuple[Cell, ...]] = []

    for flip in (False, True):
        current = _flip_horizontal(cells, width) if flip else list(cells)
        cur_h, cur_w = height, width
        for _ in range(4):
            norm = _normalize(current)
            sig = _signature(norm)
            if sig not in seen:
                seen.add(sig)
                result.append(norm)
            current = _rotate90(current, cur_h)
            cur_h, cur_w = cur_w, cur_h

    return result


@dataclass(frozen=True)
class Piece:
    id: str
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if not self.cells:
            raise PieceDefinitionError(f"Piece {self.id!r} has no cells")
        if len(set(self.cells)) != len(self.cells):
            raise PieceDefinitionError(f"Piece {self.id!r} repeats a cell")
        object.__setattr__(self, "cells", _normalize(self.cells))

    @classmethod
    def from_ascii(cls, piece_id: str, template: Sequence[str]) -> "Piece":
        if not template:
            raise PieceDefinitionError(f"Piece {piece_id!r} has an empty template")
        width = len(template[0])
        if any(len(line) != width for line in template):
            raise PieceDefinitionError(
                f"All rows of the template for {piece_id!r} must have equal length"
            )
        cells = tuple(
            Cell(r, c)
            for r, line in enumerate(template)
            for c, ch in enumerate(line)
            if ch == "#"
        )
        return cls(piece_id, cells)

    @property
    def height(self) -> int:
        return max(r for r, _ in self.cells) + 1

    @property
    def width(self) -> int:
        return max(c for _, c in self.cells) + 1

    @property
    def size(self) -> int:
        return len(self.cells)

    def orientations(self) -> list[tuple[Cell, ...]]:
        return generate_orientations(self.cells, self.height, self.width)


def load_all_pieces() -> list[Piece]:
    return [Piece.from_ascii(name, tpl) for name, tpl in PIECE_TEMPLATES.items()]


def load_simple_pieces() -> list[Piece]:
    return [Piece.from_ascii(name, tpl) for name, tpl in SIMPLE_PIECE_TEMPLATES.items()]
