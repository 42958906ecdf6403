import logging
from textwrap import dedent

import pytest

from nestcss import AtRootError, Declaration, NestingError, block, rule, style, stylesheet


def card():
    return rule(".card").prop("padding", "1rem").nest("&:hover").prop("color", "blue").root()


def indents(css: str):
    return [len(line) - len(line.lstrip(" ")) for line in css.splitlines() if line.strip()]


def test_card():
    assert card().render() == dedent("""\
        .card {
          padding: 1rem;

          &:hover {
            color: blue;
          }
        }
    """)
    assert str(card()) == card().render()


def test_empty_rule():
    assert rule(".empty").render() == ".empty {\n}\n"


def test_properties_only():
    css = rule("a").prop("color", "red").prop("margin", 0).prop("z-index", 3).render()
    lines = css.splitlines()
    assert len(lines) == 2 + 3
    assert "" not in lines
    assert lines[2] == "  margin: 0;"


def test_same_property_twice_is_kept():
    css = rule("a").prop("color", "red").prop("color", "blue").render()
    assert css == "a {\n  color: red;\n  color: blue;\n}\n"


def test_media():
    css = (
        rule(".container")
        .prop("width", "100%")
        .media("(min-width: 768px)")
            .prop("max-width", "720px")
        .up()
        .media("(min-width: 1024px)")
            .prop("max-width", "960px")
        .root()
        .render()
    )
    assert css == dedent("""\
        .container {
          width: 100%;

          @media (min-width: 768px) {
            max-width: 720px;
          }

          @media (min-width: 1024px) {
            max-width: 960px;
          }
        }
    """)


def test_at_rules():
    root = rule("main")
    assert root.supports("(display: grid)").selector == "@supports (display: grid)"
    assert root.container("sidebar (min-width: 400px)").selector == "@container sidebar (min-width: 400px)"
    assert root.at_rule("starting-style", "").selector == "@starting-style "
    assert [c.depth for c in root.children] == [1, 1, 1]


def test_deep_nesting_indentation():
    root = rule("nav")
    root.nest("ul").prop("list-style", "none").nest("li").prop("display", "inline-block") \
        .nest("a").prop("color", "blue").nest("&:hover").prop("text-decoration", "underline")
    css = root.render()
    headers = [line for line in css.splitlines() if line.endswith("{")]
    closers = [line for line in css.splitlines() if line.strip() == "}"]
    assert indents("\n".join(headers)) == [0, 2, 4, 6, 8]
    assert sorted(indents("\n".join(closers))) == [0, 2, 4, 6, 8]


def test_opener_and_closer_line_up():
    css = card().render()
    stack = []
    for line in css.splitlines():
        if line.endswith("{"):
            stack.append(len(line) - len(line.lstrip()))
        elif line.strip() == "}":
            assert len(line) - len(line.lstrip()) == stack.pop()
    assert stack == []


def test_render_is_idempotent():
    root = card()
    assert root.render() == root.render()


def test_render_child_alone():
    hover = rule(".card").nest("&:hover").prop("color", "blue")
    assert hover.render() == "&:hover {\n  color: blue;\n}\n"
    assert hover.render(2) == "    &:hover {\n      color: blue;\n    }\n"


def test_structural_and_setter_return_values():
    root = rule(".card")
    assert root.prop("padding", "1rem") is root
    assert root.props(font_weight="bold") is root
    assert root.style("color: red") is root
    child = root.nest("&:hover")
    assert child is not root
    assert child.parent is root
    assert child.up() is root
    assert root.children == [child]


def test_depth():
    root = rule("a")
    grandchild = root.nest("b").nest("c")
    assert root.depth == 0
    assert grandchild.depth == 2
    assert grandchild.root() is root
    assert root.root() is root
    with pytest.raises(AttributeError):
        grandchild.depth = 5


def test_up_at_root():
    with pytest.raises(AtRootError, match="already at root level"):
        rule(".card").up()
    with pytest.raises(NestingError):
        rule(".card").nest("&:hover").up().up()


def test_style_empty():
    assert rule("a").style("").properties == []
    assert rule("a").style(";;;").properties == []
    assert rule("a").style("  ;  ; ").properties == []


def test_style_fragments():
    root = rule("a").style("color: red; margin: 0")
    assert root.properties == [Declaration("color: red"), Declaration("margin: 0")]
    assert [str(p) for p in root.properties] == ["color: red", "margin: 0"]
    assert rule("a").style("color: red;").render() == "a {\n  color: red;\n}\n"


def test_style_keeps_malformed_text():
    assert rule("a").style("nonsense").render() == "a {\n  nonsense;\n}\n"


def test_style_builder():
    root = rule("a").prop("display", "block").style(style(color="red", font_weight="bold"))
    assert root.render() == dedent("""\
        a {
          display: block;
          color: red;
          font-weight: bold;
        }
    """)


def test_props():
    css = rule(".btn").props(padding="0.5rem 1rem", border_radius="4px").render()
    assert css == ".btn {\n  padding: 0.5rem 1rem;\n  border-radius: 4px;\n}\n"


def test_stylesheet():
    assert stylesheet(rule("a").prop("color", "red"), rule("b")) == "a {\n  color: red;\n}\n\nb {\n}\n"


def test_bem_block():
    css = (
        block("card")
        .prop("padding", "1rem")
        .element("header")
            .prop("font-weight", "bold")
        .up()
        .element("body")
            .prop("padding", "0.5rem")
        .modifier("featured")
            .prop("border", "2px solid gold")
        .render()
    )
    assert css == dedent("""\
        .card {
          padding: 1rem;

          &__header {
            font-weight: bold;
          }

          &__body {
            padding: 0.5rem;
          }

          &--featured {
            border: 2px solid gold;
          }
        }
    """)


def test_style_logs_merge(caplog):
    caplog.set_level(logging.DEBUG, logger="nestcss.nested")
    rule("a").style("color: red;;")
    assert "merging 1 of 3 fragments into 'a'" in caplog.text
