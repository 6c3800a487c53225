from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Literal
from typing_extensions import TypeAliasType

from cssbuild.css.tokens import Part, Stage

__all__ = ["Color", "Style", "PALETTE", "ColorFormat", "highlight"]

ColorFormat = TypeAliasType(
    "ColorFormat",
    tuple[int, int, int]
    | int
    | Literal["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
    | str,
)

NAMED = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

@dataclass
class Color:
    """Helper class to get the color part of ansi sequences."""

    @staticmethod
    def new(color: ColorFormat) -> str:
        if isinstance(color, tuple) and len(color) == 3:
            return Color.rgb(*color)
        elif isinstance(color, int):
            return Color.xterm(color)
        elif isinstance(color, str) and color in NAMED:
            return str(NAMED.index(color))
        return Color.hex(color)

    @staticmethod
    def rgb(r: int, g: int, b: int) -> str:
        return f"8;2;{r};{g};{b}"

    @staticmethod
    def xterm(code: int) -> str:
        return f"8;5;{code}"

    @staticmethod
    def hex(code: str) -> str:
        code = code.lstrip("#")
        if len(code) not in [3, 6]:
            raise ValueError("Hex value must be 3 or 6 digits")

        if len(code) == 3:
            code = f"{code[0]*2}{code[1]*2}{code[2]*2}"

        return f"8;2;{int(code[0:2], 16)};{int(code[2:4], 16)};{int(code[4:6], 16)}"

class Style:
    """Foreground color and boldness composed into a single ansi sequence."""

    def __init__(self, fg: ColorFormat | None = None, *, bold: bool = False) -> None:
        self.fg = f"3{Color.new(fg)}" if fg is not None else ""
        self.bold = bold

    def ansi(self) -> str:
        codes = (["1"] if self.bold else []) + ([self.fg] if self.fg != "" else [])
        if len(codes) == 0:
            return ""
        return f"\x1b[{';'.join(codes)}m"

    def reset(self) -> str:
        codes = (["22"] if self.bold else []) + (["39"] if self.fg != "" else [])
        if len(codes) == 0:
            return ""
        return f"\x1b[{';'.join(codes)}m"

    def apply(self, text: str) -> str:
        return f"{self.ansi()}{text}{self.reset()}"

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Style):
            return self.fg == __value.fg and self.bold == __value.bold
        return False

    def __repr__(self) -> str:
        return f"Style(fg={self.fg!r}, bold={self.bold})"

    def __str__(self) -> str:
        return self.ansi()

PALETTE: dict[Stage, Style] = {
    Stage.Element: Style("blue", bold=True),
    Stage.Id: Style("magenta"),
    Stage.Class: Style("green"),
    Stage.Attribute: Style("yellow"),
    Stage.PseudoClass: Style("cyan"),
    Stage.PseudoElement: Style(208),
}

def highlight(parts: Iterable[Part], palette: dict[Stage, Style] | None = None) -> str:
    """Render selector parts with each kind in its own color."""
    palette = PALETTE if palette is None else palette
    return "".join(
        palette[part.stage].apply(str(part)) if part.stage in palette else str(part)
        for part in parts
    )
