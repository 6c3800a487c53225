"""
References:
    - [selectors](https://developer.mozilla.org/en-US/docs/Learn/CSS/Building_blocks/Selectors)
    - [combinators](https://developer.mozilla.org/en-US/docs/Learn/CSS/Building_blocks/Selectors/Combinators)
    - [pseudo classes+elements](https://developer.mozilla.org/en-US/docs/Learn/CSS/Building_blocks/Selectors/Pseudo-classes_and_pseudo-elements)

<selector>
    <element/><id/><class/>*<attribute/>*<pseudo-class/>*<pseudo-element/>
</selector>
<compound>
    <selector/> <combinator/> <selector/>
</compound>

element => `div`, at most once and first,
id => `#main`, at most once,
class => `.container`, repeatable,
attribute => `[href$=".png"]`, repeatable,
pseudo-class => `:focus`, repeatable,
pseudo-element => `::after`, at most once and last,
combinator => ` `, `+`, `~`, `>`,
"""
from cssbuild.css.builder import (
    COMBINATORS,
    Combinator,
    CombinedSelector,
    CssSelectorBuilder,
    DuplicateSelectorError,
    OrderError,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)
from cssbuild.css.tokens import Stage
