# gui.py

from __future__ import annotations

import calendar
from typing import Dict, List, Optional, Tuple

import pygame

from board import Board, Cell, CellState
from placements import Placement

CELL_SIZE = 64
TOP_BAR_HEIGHT = 120

# Colors – higher contrast, refined dark mode
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
OFF_BOARD = (45, 45, 49)
BLOCKED = (70, 70, 76)

DATE_BORDER = (220, 90, 90)

PIECE_COLORS: Dict[str, Tuple[int, int, int]] = {
    "L_small": (60, 200, 80),
    "L_big": (45, 140, 255),
    "S1": (255, 190, 60),
    "T1": (190, 70, 210),
    "Lightning": (90, 220, 220),
    "Bridge": (250, 80, 80),
    "LightningBig": (210, 145, 50),
    "SquarePlus": (110, 120, 255),
    "Cross": (255, 160, 210),
}

# Used for piece ids outside the whole-year catalogue.
FALLBACK_COLORS: List[Tuple[int, int, int]] = [
    (120, 200, 160),
    (200, 120, 160),
    (160, 160, 220),
    (220, 200, 120),
]


def piece_color(piece_id: str) -> Tuple[int, int, int]:
    if piece_id in PIECE_COLORS:
        return PIECE_COLORS[piece_id]
    return FALLBACK_COLORS[sum(map(ord, piece_id)) % len(FALLBACK_COLORS)]


def window_size(board: Board) -> Tuple[int, int]:
    return board.cols * CELL_SIZE, board.rows * CELL_SIZE + TOP_BAR_HEIGHT


def cell_rect(r: int, c: int, shake_offset: Tuple[int, int] = (0, 0)) -> pygame.Rect:
    sx, sy = shake_offset
    x = c * CELL_SIZE + sx
    y = TOP_BAR_HEIGHT + r * CELL_SIZE + sy
    return pygame.Rect(x + 2, y + 2, CELL_SIZE - 4, CELL_SIZE - 4)


def _month_short_name(month: int) -> str:
    return calendar.month_abbr[month].title()


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    month: int,
    day: int,
    solved: Optional[bool],
):
    width = screen.get_width()
    pygame.draw.rect(screen, BG, (0, 0, width, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, width - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render("Calendar Puzzle", True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    date_surf = label_font.render(f"{_month_short_name(month)} {day}", True, TEXT_MAIN)
    date_x = card_rect.right - date_surf.get_width() - 20
    screen.blit(date_surf, (date_x, card_rect.y + 12))

    if solved is None:
        status = "Solving..."
    elif solved:
        status = "Solved"
    else:
        status = "No solution"
    status_surf = label_font.render(status, True, TEXT_SECONDARY)
    screen.blit(status_surf, (card_rect.x + 20, card_rect.y + 48))


def draw_solution_grid(
    screen: pygame.Surface,
    cell_font: pygame.font.Font,
    board: Board,
    solution: Optional[List[Placement]],
    shake_offset: Tuple[int, int] = (0, 0),
):
    """
    Draws the board with the pieces of ``solution`` on it.
    Target cells show their label, off-board cells are drawn muted.
    """
    piece_map: Dict[Cell, str] = {}
    for placement in solution or []:
        for cell in placement.cells:
            piece_map[cell] = placement.piece_id

    for r in range(board.rows):
        for c in range(board.cols):
            rect = cell_rect(r, c, shake_offset)
            state = board.state(r, c)

            if state is CellState.OFF_BOARD:
                pygame.draw.rect(screen, OFF_BOARD, rect, border_radius=12)
                continue

            if state is CellState.TARGET:
                pygame.draw.rect(screen, BG, rect, border_radius=12)
                pygame.draw.rect(screen, DATE_BORDER, rect, width=2, border_radius=12)
                text_surf = cell_font.render((board.label(r, c) or "").upper(), True, TEXT_MAIN)
                screen.blit(
                    text_surf,
                    (
                        rect.centerx - text_surf.get_width() // 2,
                        rect.centery - text_surf.get_height() // 2,
                    ),
                )
                continue

            if (r, c) in piece_map:
                pygame.draw.rect(screen, piece_color(piece_map[(r, c)]), rect, border_radius=12)
            elif state is CellState.BLOCKED:
                pygame.draw.rect(screen, BLOCKED, rect, border_radius=12)
            else:
                # Empty playable cell
                pygame.draw.rect(screen, BG, rect, border_radius=12)
                pygame.draw.rect(screen, GRID, rect, width=1, border_radius=12)
