"""A 2D camera that zooms with the mouse wheel and follows the player."""

from __future__ import annotations

from dataclasses import dataclass

_MIN_STEP = 0.1
_MAX_STEP = 10.0
_MIN_SCALE = 0.65
_MAX_SCALE = 10.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class Camera:
    """Camera centre in world space and world units per screen pixel."""

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0

    def zoom(self, scroll_y: float) -> None:
        """Zoom in for positive wheel movement and out for negative."""
        factor = _clamp(1.0 - scroll_y * 0.1, _MIN_STEP, _MAX_STEP)
        self.scale = _clamp(self.scale * factor, _MIN_SCALE, _MAX_SCALE)

    def follow(
        self,
        player_x: float,
        player_y: float,
        player_width: float,
        window_height: float,
    ) -> None:
        """Centre on the player horizontally and keep it low in the view."""
        self.x = player_x + player_width / 2.0
        half = window_height / 2.0
        margin = 100.0 if half > 200.0 else 0.0
        self.y = (half - margin) * self.scale + player_y