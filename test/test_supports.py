from nestcss import style
from nestcss.supports import flex_gap, grid, has_selector, supports, supports_selector


def test_render():
    css = supports("display", "grid").rule(".layout", style(display="grid")).render()
    assert css == "@supports (display: grid) {\n  .layout { display: grid; }\n}"
    assert grid().rule("a", "gap: 1rem;").render() == "@supports (display: grid) {\n  a { gap: 1rem; }\n}"


def test_operators():
    assert flex_gap().condition() == "(display: flex) and (gap: 1rem)"
    assert supports().not_().property("display", "grid").condition() == "not (display: grid)"
    inner = supports_selector(":has(*)").and_().property("gap", "1rem")
    assert supports("display", "flex").or_().group(inner).condition() == (
        "(display: flex) or (selector(:has(*)) and (gap: 1rem))"
    )


def test_selector():
    assert has_selector().condition() == "selector(:has(*))"
