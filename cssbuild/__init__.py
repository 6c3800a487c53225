from __future__ import annotations
import logging

from cssbuild.css import (
    COMBINATORS,
    CombinedSelector,
    CssSelectorBuilder,
    DuplicateSelectorError,
    OrderError,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)
from cssbuild.serial import from_json, get_json
from cssbuild.shapes import Rect

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
