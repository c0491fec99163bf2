"""Grid-based raycasting engine for .cub scene files, with XPM textures."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "colors",
    "constants",
    "grid",
    "keys",
    "parsing",
    "player",
    "raycast",
    "render",
    "utils",
    "xpm",
]