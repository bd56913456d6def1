"""A small voxel game core: events, layers, entities, fonts, blocks, a level and a player."""

__version__ = "0.1.0"

__all__ = [
    "application",
    "blocks",
    "components",
    "debuglayer",
    "debugmenu",
    "events",
    "fonts",
    "level",
    "player",
    "stringformat",
    "timer",
]