"""Sprite components: placement, size and physical state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Transform:
    """World translation of a sprite's bottom-left corner."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class SpriteState:
    """Whether a sprite is falling and whether its head hit a ceiling."""

    is_falling: bool = False
    head_bumped: bool = False


def fit_size(
    image_width: float, image_height: float, width: float, height: float
) -> tuple[float, float]:
    """Scale an image to the given width, or to the height if it would be too tall.

    The image's aspect ratio is kept.
    """
    if image_width <= 0 or image_height <= 0:
        raise ValueError("image dimensions must be positive")
    target_width = float(width)
    target_height = target_width * (image_height / image_width)
    if target_height > height:
        target_height = float(height)
        target_width = target_height * (image_width / image_height)
    return target_width, target_height


@dataclass
class SpriteSize:
    """Box a sprite is drawn into, and the drawn size once the image is known."""

    width: float
    height: float
    done: bool = False
    custom_size: tuple[float, float] | None = None

    def resize(self, image_width: float, image_height: float) -> tuple[float, float]:
        """Fit the image into the box once; later calls keep the first result."""
        if self.done and self.custom_size is not None:
            return self.custom_size
        self.custom_size = fit_size(image_width, image_height, self.width, self.height)
        self.done = True
        return self.custom_size