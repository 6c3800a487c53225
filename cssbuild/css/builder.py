"""CSS selector builder.

Builds one selector fragment at a time through chained calls and checks each
addition against the canonical order and the at-most-once rules:

    builder.id('main').class_('container').class_('editable').stringify()
        => '#main.container.editable'

Fragments are joined into compound selectors with `CssSelectorBuilder.combine`.
"""

from __future__ import annotations
import logging
from typing import Literal
from typing_extensions import TypeAliasType

from cssbuild.css.tokens import *

__all__ = [
    "SelectorError",
    "DuplicateSelectorError",
    "OrderError",
    "Combinator",
    "COMBINATORS",
    "SelectorBuilder",
    "CombinedSelector",
    "CssSelectorBuilder",
    "css_selector_builder",
]

logger = logging.getLogger(__name__)

Combinator = TypeAliasType("Combinator", Literal[" ", "+", "~", ">"] | str)
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")

class SelectorError(Exception):
    message = ""
    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

class DuplicateSelectorError(SelectorError):
    message = (
        "Element, id and pseudo-element should not occur more then one time"
        " inside the selector"
    )

class OrderError(SelectorError):
    message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

class SelectorBuilder:
    """A single selector fragment under construction.

    Every mutator validates the new part, appends it and returns the same
    builder. A call that raises leaves the builder untouched.
    """

    __slots__ = ("_parts_", "_stage_", "_seen_")

    def __init__(self) -> None:
        self._parts_: list[Part] = []
        self._stage_: Stage | None = None
        self._seen_: set[Stage] = set()

    @property
    def parts(self) -> tuple[Part, ...]:
        """Parts written so far, in call order."""
        return tuple(self._parts_)

    def _push_(self, part: Part) -> SelectorBuilder:
        stage = part.stage
        if not stage.repeatable and stage in self._seen_:
            raise DuplicateSelectorError
        if self._stage_ is not None and stage < self._stage_:
            raise OrderError

        self._parts_.append(part)
        self._stage_ = stage
        self._seen_.add(stage)
        logger.debug("appended %r", part)
        return self

    def element(self, value: str) -> SelectorBuilder:
        return self._push_(Element(value))

    def id(self, value: str) -> SelectorBuilder:
        return self._push_(Id(value))

    def class_(self, value: str) -> SelectorBuilder:
        return self._push_(Class(value))

    def attr(self, value: str) -> SelectorBuilder:
        return self._push_(Attribute(value))

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._push_(PseudoClass(value))

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._push_(PseudoElement(value))

    def stringify(self) -> str:
        """Return the selector text and reset the builder to empty."""
        result = str(self)
        self._parts_.clear()
        self._stage_ = None
        self._seen_.clear()
        return result

    def __str__(self) -> str:
        return "".join(str(part) for part in self._parts_)

    def __repr__(self) -> str:
        return f"SelectorBuilder({str(self)!r})"

class CombinedSelector:
    """Two selectors joined by a combinator.

    Independent of the facade that produced it, so it can itself be one side
    of another `combine`.
    """

    __slots__ = ("_text_",)

    def __init__(self, text: str) -> None:
        self._text_ = text

    def stringify(self) -> str:
        result = self._text_
        self._text_ = ""
        return result

    def __str__(self) -> str:
        return self._text_

    def __repr__(self) -> str:
        return f"CombinedSelector({self._text_!r})"

Selector = SelectorBuilder | CombinedSelector

class CssSelectorBuilder:
    """Entry point for building selectors. Holds no state.

    Each part method starts a fresh `SelectorBuilder`.
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(self, left: Selector, combinator: Combinator, right: Selector) -> CombinedSelector:
        """Join two selectors as `<left> <combinator> <right>`.

        Both sides are stringified, which resets them. The combinator is
        inserted verbatim.
        """
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("combined %r", text)
        return CombinedSelector(text)

css_selector_builder = CssSelectorBuilder()
