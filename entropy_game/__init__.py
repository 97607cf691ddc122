"""A tile-based side-scrolling platformer with jumping, collision and a following camera."""

__version__ = "0.1.0"