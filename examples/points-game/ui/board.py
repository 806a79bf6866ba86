"""Playfield renderer and hit testing."""
from __future__ import annotations

import pygame

from tick_points import Point, SessionSnapshot
from ui.constants import (
    CLICKED_FILL,
    FIELD_BORDER,
    FIELD_H,
    FIELD_W,
    HEADER_H,
    PAD,
    POINT_FILL,
    POINT_RADIUS,
    POINT_RING,
    TEXT_COLOR,
)


def _center(point: Point) -> tuple[int, int]:
    return (
        PAD + point.location.x + POINT_RADIUS,
        HEADER_H + point.location.y + POINT_RADIUS,
    )


def point_at(snapshot: SessionSnapshot, pos: tuple[int, int]) -> Point | None:
    """Topmost point under the cursor. Later points are drawn on top."""
    mx, my = pos
    for point in reversed(snapshot.points):
        cx, cy = _center(point)
        if (mx - cx) ** 2 + (my - cy) ** 2 <= POINT_RADIUS ** 2:
            return point
    return None


def draw_board(
    surface: pygame.Surface,
    snapshot: SessionSnapshot,
    font: pygame.font.Font,
    small: pygame.font.Font,
) -> None:
    pygame.draw.rect(
        surface, FIELD_BORDER, (PAD - 2, HEADER_H - 2, FIELD_W + 4, FIELD_H + 4), 2,
        border_radius=6,
    )

    for point in snapshot.points:
        cx, cy = _center(point)
        disc = pygame.Surface((POINT_RADIUS * 2, POINT_RADIUS * 2), pygame.SRCALPHA)
        if point.clicked:
            alpha = int(255 * point.opacity / 100)
            pygame.draw.circle(
                disc, (*CLICKED_FILL, alpha), (POINT_RADIUS, POINT_RADIUS), POINT_RADIUS
            )
            label = font.render(str(point.number), True, (255, 255, 255))
            label.set_alpha(alpha)
            timer = small.render(f"{point.seconds_left:.2f}s", True, (255, 255, 255))
            timer.set_alpha(alpha)
        else:
            pygame.draw.circle(disc, POINT_FILL, (POINT_RADIUS, POINT_RADIUS), POINT_RADIUS)
            pygame.draw.circle(
                disc, POINT_RING, (POINT_RADIUS, POINT_RADIUS), POINT_RADIUS, 1
            )
            label = font.render(str(point.number), True, TEXT_COLOR)
            timer = None
        surface.blit(disc, (cx - POINT_RADIUS, cy - POINT_RADIUS))

        if timer is None:
            surface.blit(label, (cx - label.get_width() // 2, cy - label.get_height() // 2))
        else:
            surface.blit(label, (cx - label.get_width() // 2, cy - label.get_height() + 2))
            surface.blit(timer, (cx - timer.get_width() // 2, cy + 2))
