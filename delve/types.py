from __future__ import annotations

from typing import Literal, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# World coordinates - absolute positions on the host map
WorldTileCoord: TypeAlias = TileCoord  # Example: x=5, y=3
WorldTilePos: TypeAlias = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = tile 5,3 on map

# Index into the host's stacked tile layers. Layer 0 is the ground layer
# that generation writes to.
LayerIndex: TypeAlias = int

# =============================================================================
# TILE TYPES
# =============================================================================

# Host-defined tile template id. 0 means "no tile" on the host side.
TileId: TypeAlias = int

# Facing as reported by the host player (2=down, 4=left, 6=right, 8=up).
Facing: TypeAlias = Literal[0, 2, 4, 6, 8]

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "crypt-3".
RandomSeed: TypeAlias = int | str | None
