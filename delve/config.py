"""
Configuration constants.

Centralizes the magic numbers used by dungeon generation and the host glue.
Organized by functional area for easy maintenance.
"""

from delve import colors
from delve.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED: RandomSeed = None

# Prefix used for every log line and user-facing notice.
LOG_TAG = "[Delve]"

# =============================================================================
# ROOM PLACEMENT
# =============================================================================

MIN_ROOM_SIZE = 5
MAX_ROOM_SIZE = 9

# Max attempts the sampler makes before settling for fewer rooms.
MAX_ATTEMPTS = 45

# Max width/height ratio. Avoids thin rooms like 3x10 or 10x3.
MAX_ROOM_ASPECT_RATIO = 1.8

# Minimum number of wall tiles kept between any two rooms.
ROOM_GAP = 1

# Target room count is floor(area / AREA_PER_ROOM), clamped to the range below.
AREA_PER_ROOM = 100
MIN_TARGET_ROOMS = 2
MAX_TARGET_ROOMS = 6

# Maps narrower or shorter than this get an informational notice.
SMALL_MAP_WARNING_SIZE = 8

# =============================================================================
# TILE GRID
# =============================================================================

# Number of stacked tile layers on the host map. Only layer 0 is written.
GRID_LAYER_COUNT = 3
GROUND_LAYER = 0

# Tileset anchor positions (x, y) on the ground layer. The map author paints
# the wall, floor and door tiles at these cells before generation.
WALL_ANCHOR = (0, 0)
FLOOR_ANCHOR = (1, 0)
DOOR_ANCHOR = (2, 0)
# Reserved for the initial player marker. Not read by the generator.
PLAYER_MARKER_ANCHOR = (3, 0)

# =============================================================================
# COMMAND SURFACE
# =============================================================================

PLUGIN_COMMAND = "ProcGen"
GENERATE_MAP_SUBCOMMAND = "generatemap"

# =============================================================================
# CONSOLE PREVIEW
# =============================================================================

PREVIEW_WALL_GLYPH = "#"
PREVIEW_FLOOR_GLYPH = "."
PREVIEW_DOOR_GLYPH = "+"
PREVIEW_PLAYER_GLYPH = "@"
PREVIEW_UNKNOWN_GLYPH = "?"

PREVIEW_WALL_COLOR: colors.Color = colors.LIGHT_WALL
PREVIEW_FLOOR_COLOR: colors.Color = colors.LIGHT_GROUND
PREVIEW_DOOR_COLOR: colors.Color = colors.ORANGE
PREVIEW_PLAYER_COLOR: colors.Color = colors.PLAYER_COLOR

# Tile ids painted on the anchor cells when the CLI builds its own map.
DEMO_WALL_ID = 1
DEMO_FLOOR_ID = 2
DEMO_DOOR_ID = 3
