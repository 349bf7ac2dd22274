"""A tile-based side-scrolling platform game: map, player, HUD, sound and main loop."""

__version__ = "0.1.0"
__all__ = [
    "basefunc",
    "sprite",
    "timer",
    "bullet",
    "explosion",
    "gamemap",
    "sound",
    "player",
    "hud",
    "text",
    "game",
]