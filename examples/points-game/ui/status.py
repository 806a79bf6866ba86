"""Header panel and bottom key-bindings bar."""
from __future__ import annotations

import pygame

from tick_points import SessionSnapshot, Status
from ui.constants import (
    LOST_COLOR,
    PAD,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    WON_COLOR,
)

_BANNER_COLORS = {Status.WON: WON_COLOR, Status.LOST: LOST_COLOR}


def draw_header(
    surface: pygame.Surface,
    big: pygame.font.Font,
    font: pygame.font.Font,
    snapshot: SessionSnapshot,
    amount: int,
) -> None:
    """Draw the status banner, amount, timer and auto-play flag."""
    color = _BANNER_COLORS.get(snapshot.status, TEXT_COLOR)
    surface.blit(big.render(snapshot.status.label, True, color), (PAD, 12))

    y = 50
    surface.blit(font.render(f"Points: {amount}", True, TEXT_COLOR), (PAD, y))
    surface.blit(
        font.render(f"Time: {snapshot.elapsed_seconds:.1f}s", True, TEXT_COLOR),
        (PAD, y + 24),
    )

    if snapshot.status is Status.RUNNING:
        auto = "ON" if snapshot.auto_play_enabled else "OFF"
        auto_color = WON_COLOR if snapshot.auto_play_enabled else TEXT_DIM
        surface.blit(font.render(f"Auto Play: {auto}", True, auto_color), (PAD + 220, y))
        nxt = min(snapshot.next_expected, snapshot.amount)
        surface.blit(font.render(f"Next: {nxt}", True, TEXT_DIM), (PAD + 220, y + 24))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, started: bool) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))

    if started:
        text = "[Click] Point  [R] Restart  [A] Auto Play  [C] Clear  [Esc] Quit"
    else:
        text = "[Enter] Start  [Up/Down] Points  [Esc] Quit"

    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
