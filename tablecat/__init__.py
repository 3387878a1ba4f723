"""A desktop pet with looping animations and a side-scrolling cake-collecting runner game."""

__version__ = "0.1.0"
__all__ = ["sprites", "game", "pet", "app"]