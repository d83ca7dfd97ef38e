"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions
SCREEN_W = 640
SCREEN_H = 520
STATUS_H = 28
HEADER_H = 48
ROW_H = 24
MENU_PAD = 16
MARKER_RADIUS = 6

STAGE_H = SCREEN_H - STATUS_H - HEADER_H

# Colors
BG_COLOR = (242, 242, 247)
STAGE_BG = (255, 255, 255)
HEADER_BG = (229, 229, 234)
STATUS_BG = (209, 209, 214)
ROW_HIGHLIGHT = (220, 228, 245)
TEXT_COLOR = (28, 28, 30)
TEXT_DIM = (110, 110, 118)

# Marker colors: tap-driven vs passive components
MARKER_INTERACTIVE = (0, 122, 255)
MARKER_PASSIVE = (255, 45, 85)
