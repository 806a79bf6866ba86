"""Points Game - click the numbered points in ascending order.

Exercises SessionController on a fixed-rate tick accumulator.

Controls:
  Enter   Start with the selected amount
  Up/Down Adjust the amount (before starting)
  Click   Click a point
  R       Restart with the same amount
  A       Toggle auto play
  C       Clear back to the start screen
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from tick_points import SessionController
from ui.board import draw_board, point_at
from ui.constants import (
    BG_COLOR,
    CONFIG,
    DEFAULT_AMOUNT,
    FPS,
    MAX_AMOUNT,
    SCREEN_H,
    SCREEN_W,
    TPS,
)
from ui.status import draw_header, draw_status_bar


class GameState:
    """Holds the session controller and the front-end settings."""

    def __init__(self) -> None:
        self.controller = SessionController(config=CONFIG)
        self.amount = DEFAULT_AMOUNT
        self.started = False

    def start(self) -> None:
        self.controller.start(self.amount)
        self.started = True

    def clear(self) -> None:
        self.controller.clear()
        self.started = False

    def adjust_amount(self, delta: int) -> None:
        if not self.started:
            self.amount = max(1, min(self.amount + delta, MAX_AMOUNT))


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Points Game")
    clock = pygame.time.Clock()
    big = pygame.font.SysFont("sans", 28, bold=True)
    font = pygame.font.SysFont("sans", 20)
    small = pygame.font.SysFont("sans", 12)

    state = GameState()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt
        snapshot = state.controller.snapshot()

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    if not state.started:
                        state.start()
                elif event.key == pygame.K_r and state.started:
                    state.controller.reset()
                elif event.key == pygame.K_a:
                    state.controller.toggle_auto_play()
                elif event.key == pygame.K_c:
                    state.clear()
                elif event.key == pygame.K_UP:
                    state.adjust_amount(1)
                elif event.key == pygame.K_DOWN:
                    state.adjust_amount(-1)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                point = point_at(snapshot, event.pos)
                if point is not None:
                    # Clicks belong to the session that was on screen.
                    state.controller.click(point.number, snapshot.generation)

        # --- Tick ---
        while accumulator >= tick_interval:
            state.controller.step()
            accumulator -= tick_interval

        # --- Render ---
        snapshot = state.controller.snapshot()
        screen.fill(BG_COLOR)
        draw_header(screen, big, font, snapshot, state.amount)
        draw_board(screen, snapshot, font, small)
        draw_status_bar(screen, small, state.started)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
