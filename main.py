from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional

import pygame

from board import create_whole_year_board, mark_date
from gui import BG, draw_solution_grid, draw_top_bar, window_size
from pieces import load_all_pieces
from placements import Placement
from solver import solve

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    board = create_whole_year_board()
    pieces = load_all_pieces()

    pygame.init()
    screen = pygame.display.set_mode(window_size(board))
    pygame.display.set_caption("Calendar Puzzle")

    title_font = pygame.font.SysFont("SF Pro Display", 32, bold=True)
    label_font = pygame.font.SysFont("SF Pro Text", 24)
    cell_font = pygame.font.SysFont("SF Pro Text", 20, bold=True)

    clock = pygame.time.Clock()
    selected = date.today()
    solution: Optional[List[Placement]] = None

    def solve_selected() -> Optional[List[Placement]]:
        mark_date(board, selected.month, selected.day)
        logger.info("Solving for %s", selected.isoformat())
        return solve(board, pieces)

    solution = solve_selected()

    running = True
    while running:
        clock.tick(30)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_LEFT, pygame.K_RIGHT):
                    step = -1 if event.key == pygame.K_LEFT else 1
                    selected = selected + timedelta(days=step)
                    solution = solve_selected()

        screen.fill(BG)
        draw_top_bar(screen, title_font, label_font, selected.month, selected.day, solution is not None)
        draw_solution_grid(screen, cell_font, board, solution)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
