"""Build a selector fragment from the command line.

    python -m cssbuild --element a --attr 'href$=".png"' --pseudo-class focus
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import Sequence

from conterm.pretty import Markup

from cssbuild.css import SelectorBuilder, SelectorError
from cssbuild.style import highlight

logger = logging.getLogger(__name__)

PARTS = {
    "element": SelectorBuilder.element,
    "id": SelectorBuilder.id,
    "class": SelectorBuilder.class_,
    "attr": SelectorBuilder.attr,
    "pseudo_class": SelectorBuilder.pseudo_class,
    "pseudo_element": SelectorBuilder.pseudo_element,
}

class AppendPart(argparse.Action):
    """Collects every part flag into one list so command line order is kept."""

    def __call__(self, parser, namespace, values, option_string=None):
        parts = list(getattr(namespace, "parts", None) or [])
        parts.append((self.const, values))
        setattr(namespace, "parts", parts)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cssbuild",
        description="Build a CSS selector, checking part order and repetition.",
    )
    for kind in PARTS:
        flag = "--" + kind.replace("_", "-")
        parser.add_argument(
            flag, action=AppendPart, dest="parts", const=kind, metavar="VALUE", default=[],
            help=f"append a {kind.replace('_', '-')} part",
        )
    parser.add_argument("--no-color", action="store_true", help="print plain text")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser

def build(parts: Sequence[tuple[str, str]]) -> SelectorBuilder:
    builder = SelectorBuilder()
    for kind, value in parts:
        PARTS[kind](builder, value)
    return builder

def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.parts:
        logger.error("no selector parts given")
        return 2

    try:
        builder = build(args.parts)
    except SelectorError as error:
        logger.error("%s", error)
        return 2

    if args.no_color:
        print(builder.stringify())
    else:
        text = highlight(builder.parts)
        builder.stringify()
        print(f"{Markup.parse('[bold]selector:', mar=False)}\x1b[0m {text}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
