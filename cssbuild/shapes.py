from __future__ import annotations

__all__ = ["Rect"]

class Rect:
    __slots__ = ("width", "height")
    def __init__(self, width: int | float = 0, height: int | float = 0):
        self.width = width
        self.height = height

    def area(self) -> int | float:
        """Width multiplied by height."""
        return self.width * self.height

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Rect):
            return self.width == __value.width and self.height == __value.height
        return False

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def __repr__(self) -> str:
        return f"Rect(width={self.width!r}, height={self.height!r})"
