"""Layout constants and color definitions."""

from tick_points import PointsConfig

CONFIG = PointsConfig()

# Timing
FPS = 60
TPS = 1000 // CONFIG.tick_ms

# Layout dimensions
HEADER_H = 110
PAD = 20
FIELD_W = CONFIG.bounds.width
FIELD_H = CONFIG.bounds.height
STATUS_H = 30

SCREEN_W = FIELD_W + PAD * 2
SCREEN_H = HEADER_H + FIELD_H + PAD + STATUS_H

POINT_RADIUS = CONFIG.point_diameter // 2

# Amount limits for the +/- keys
DEFAULT_AMOUNT = 5
MAX_AMOUNT = 500

# Colors
BG_COLOR = (250, 250, 250)
FIELD_BORDER = (210, 210, 210)
TEXT_COLOR = (30, 30, 30)
TEXT_DIM = (120, 120, 130)
STATUS_BG = (235, 235, 240)
POINT_FILL = (255, 255, 255)
POINT_RING = (239, 68, 68)
CLICKED_FILL = (249, 115, 22)
WON_COLOR = (34, 197, 94)
LOST_COLOR = (239, 68, 68)
