"""Screen geometry value types used by the edge snapper."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class Point(BaseModel):
    """Top-left position of a window."""

    model_config = ConfigDict(frozen=True)

    left: int
    top: int


class Rect(BaseModel):
    """Axis-aligned rectangle in screen coordinates (y grows downwards)."""

    model_config = ConfigDict(frozen=True)

    left: int
    top: int
    right: int
    bottom: int

    @model_validator(mode="after")
    def _check_edges(self) -> Rect:
        if self.right < self.left or self.bottom < self.top:
            raise ValueError(
                f"Invalid rectangle: left={self.left} top={self.top} "
                f"right={self.right} bottom={self.bottom}"
            )
        return self

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @classmethod
    def from_position(cls, left: int, top: int, width: int, height: int) -> Rect:
        return cls(left=left, top=top, right=left + width, bottom=top + height)
