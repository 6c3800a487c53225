r"""Selector parts.

element#id.class[attr]:pseudo-class::pseudo-element
          \----/\----/\----------/
          Can be several occurrences

Each part keeps the raw value it was given and renders itself with its
separator. Values are inserted verbatim, nothing is escaped.
"""
from __future__ import annotations
from enum import Enum
from functools import total_ordering

__all__ = [
    "Stage",
    "Part",
    "Element",
    "Id",
    "Class",
    "Attribute",
    "PseudoClass",
    "PseudoElement",
]

@total_ordering
class Stage(Enum):
    """Position of a part kind in the canonical selector order."""

    Element = 0
    Id = 1
    Class = 2
    Attribute = 3
    PseudoClass = 4
    PseudoElement = 5

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Stage):
            return self.value < other.value
        return NotImplemented

    @property
    def repeatable(self) -> bool:
        return self in (Stage.Class, Stage.Attribute, Stage.PseudoClass)

class Part:
    stage: Stage
    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Part):
            return type(self) is type(__value) and self.raw == __value.raw
        return False

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw))

class Element(Part):
    stage = Stage.Element

class Id(Part):
    stage = Stage.Id
    def __str__(self) -> str:
        return f"#{self.raw}"

class Class(Part):
    stage = Stage.Class
    def __str__(self) -> str:
        return f".{self.raw}"

class Attribute(Part):
    stage = Stage.Attribute
    def __str__(self) -> str:
        return f"[{self.raw}]"

class PseudoClass(Part):
    stage = Stage.PseudoClass
    def __str__(self) -> str:
        return f":{self.raw}"

class PseudoElement(Part):
    stage = Stage.PseudoElement
    def __str__(self) -> str:
        return f"::{self.raw}"
