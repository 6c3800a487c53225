import pytest

from cssbuild.css import (
    DuplicateSelectorError,
    OrderError,
    SelectorBuilder,
    css_selector_builder as builder,
)
from cssbuild.css.tokens import Attribute, Element, Id, Stage


def test_full_fragment_in_canonical_order():
    selector = (
        builder.element("a")
        .id("link")
        .class_("nav")
        .class_("active")
        .attr("href$='.png'")
        .attr("target")
        .pseudo_class("hover")
        .pseudo_class("focus")
        .pseudo_element("after")
    )
    assert selector.stringify() == "a#link.nav.active[href$='.png'][target]:hover:focus::after"


@pytest.mark.parametrize(
    "selector, expected",
    [
        (lambda: builder.id("main").class_("container").class_("editable"), "#main.container.editable"),
        (lambda: builder.element("a").attr('href$=".png"').pseudo_class("focus"), 'a[href$=".png"]:focus'),
        (lambda: builder.element("div").pseudo_element("before"), "div::before"),
        (lambda: builder.class_("a").pseudo_element("first-line"), ".a::first-line"),
        (lambda: builder.attr("disabled"), "[disabled]"),
        (lambda: builder.pseudo_class("nth-of-type(even)"), ":nth-of-type(even)"),
        (lambda: builder.pseudo_element("selection"), "::selection"),
    ],
)
def test_examples(selector, expected):
    assert selector().stringify() == expected


def test_stringify_resets_builder():
    selector = builder.element("div").id("main")
    assert selector.stringify() == "div#main"
    assert selector.stringify() == ""
    assert selector.parts == ()


def test_builder_is_reusable_after_stringify():
    selector = builder.element("div")
    selector.stringify()
    assert selector.element("span").id("x").stringify() == "span#x"


def test_str_does_not_reset():
    selector = builder.element("p").class_("lead")
    assert str(selector) == "p.lead"
    assert selector.stringify() == "p.lead"


def test_mutators_return_same_builder():
    selector = SelectorBuilder()
    assert selector.element("a") is selector
    assert selector.id("b") is selector


def test_parts_in_call_order():
    selector = builder.element("a").id("b").attr("c")
    assert selector.parts == (Element("a"), Id("b"), Attribute("c"))
    assert [part.stage for part in selector.parts] == [Stage.Element, Stage.Id, Stage.Attribute]


@pytest.mark.parametrize(
    "chain",
    [
        lambda: builder.element("table").element("div"),
        lambda: builder.id("main").id("main"),
        lambda: builder.element("div").id("a").class_("b").id("c"),
        lambda: builder.pseudo_element("after").pseudo_element("before"),
        lambda: builder.element("p").pseudo_element("after").pseudo_element("before"),
    ],
)
def test_duplicate_parts(chain):
    with pytest.raises(DuplicateSelectorError) as info:
        chain()
    assert str(info.value) == (
        "Element, id and pseudo-element should not occur more then one time inside the selector"
    )


@pytest.mark.parametrize(
    "chain",
    [
        lambda: builder.id("main").element("div"),
        lambda: builder.class_("main").element("div"),
        lambda: builder.class_("main").id("id"),
        lambda: builder.attr("href").id("id"),
        lambda: builder.pseudo_class("focus").id("id"),
        lambda: builder.pseudo_element("after").id("id"),
        lambda: builder.attr("href").class_("main"),
        lambda: builder.pseudo_class("focus").class_("main"),
        lambda: builder.pseudo_class("focus").attr("href"),
        lambda: builder.pseudo_element("after").attr("href"),
        lambda: builder.pseudo_element("after").pseudo_class("focus"),
    ],
)
def test_order_violations(chain):
    with pytest.raises(OrderError) as info:
        chain()
    assert str(info.value) == (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )


def test_failed_call_leaves_builder_unchanged():
    selector = builder.element("div").class_("a")
    with pytest.raises(OrderError):
        selector.id("late")
    assert selector.stringify() == "div.a"


def test_values_inserted_verbatim():
    assert builder.class_("a#b:c").stringify() == ".a#b:c"
    assert builder.attr("data-a='::'").pseudo_class("hover").stringify() == "[data-a='::']:hover"
    assert builder.element("a").attr("title=':'").attr("lang").stringify() == "a[title=':'][lang]"


def test_stage_order():
    assert Stage.Element < Stage.Id < Stage.Class < Stage.Attribute < Stage.PseudoClass < Stage.PseudoElement
    assert [stage.repeatable for stage in Stage] == [False, False, True, True, True, False]


def test_tokens_module_compiles_without_warnings():
    import warnings
    from pathlib import Path

    from cssbuild.css import tokens

    source = Path(tokens.__file__).read_text(encoding="utf-8")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(source, tokens.__file__, "exec")
