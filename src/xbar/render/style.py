"""Theme and grid metrics for crossbar rendering."""

from __future__ import annotations

from dataclasses import dataclass

from xbar.render.constants import (
    BLOCK_HEIGHT,
    BLOCK_WIDTH,
    LABEL_PAD,
    MARGIN_X,
    MARGIN_Y,
)


@dataclass
class Theme:
    """Visual theme for a crossbar diagram."""

    name: str
    background_color: str
    border_color: str
    wire_color: str
    label_color: str
    border_width: float = 2.0
    wire_width: float = 2.0
    label_font_family: str = "sans-serif"


@dataclass
class GridMetrics:
    """Pixel sizes of the crossbar grid."""

    block_width: int = BLOCK_WIDTH
    block_height: int = BLOCK_HEIGHT
    margin_x: int = MARGIN_X
    margin_y: int = MARGIN_Y
    label_pad: int = LABEL_PAD

    def __post_init__(self) -> None:
        for name in ("block_width", "block_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("margin_x", "margin_y", "label_pad"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
