# Type alias for RGB colors
Color = tuple[int, int, int]

# Basic colors
WHITE: Color = (255, 255, 255)
ORANGE: Color = (255, 165, 0)

# Map colors
LIGHT_WALL: Color = (130, 110, 50)
LIGHT_GROUND: Color = (200, 180, 50)

# Entity colors
PLAYER_COLOR: Color = WHITE
