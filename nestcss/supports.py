"""Feature queries (@supports)."""
from typing import List, Optional, Tuple, Union

from nestcss.helpers import INDENT
from nestcss.style import Style


class Supports:
    def __init__(self) -> None:
        self.conditions: List[str] = []
        self.rules: List[Tuple[str, str]] = []
        self._operator: Optional[str] = None

    def _add(self, condition: str) -> "Supports":
        if self._operator is not None:
            self.conditions.append(self._operator)
            self._operator = None
        self.conditions.append(condition)
        return self

    def property(self, name: str, value: str) -> "Supports":
        return self._add(f"({name}: {value})")

    def selector(self, selector: str) -> "Supports":
        return self._add(f"selector({selector})")

    def group(self, inner: "Supports") -> "Supports":
        return self._add(f"({inner.condition()})")

    def and_(self) -> "Supports":
        self._operator = "and"
        return self

    def or_(self) -> "Supports":
        self._operator = "or"
        return self

    def not_(self) -> "Supports":
        self._operator = "not"
        return self

    def rule(self, selector: str, style: Union[Style, str]) -> "Supports":
        declarations = style.render() if isinstance(style, Style) else style
        self.rules.append((selector, declarations))
        return self

    def condition(self) -> str:
        return " ".join(self.conditions)

    def render(self) -> str:
        css = f"@supports {self.condition()} {{\n"
        css += "".join(f"{INDENT}{s} {{ {d} }}\n" for s, d in self.rules)
        return css + "}"

    def __str__(self) -> str:
        return self.render()


def supports(prop: Optional[str] = None, value: Optional[str] = None) -> Supports:
    s = Supports()
    if prop is not None:
        s.property(prop, value)
    return s


def supports_selector(selector: str) -> Supports:
    return Supports().selector(selector)


def flexbox() -> Supports:
    return supports("display", "flex")


def grid() -> Supports:
    return supports("display", "grid")


def custom_properties() -> Supports:
    return supports("--test", "value")


def backdrop_filter() -> Supports:
    return supports("backdrop-filter", "blur(1px)")


def has_selector() -> Supports:
    return supports_selector(":has(*)")


def container_queries() -> Supports:
    return supports("container-type", "inline-size")


def aspect_ratio() -> Supports:
    return supports("aspect-ratio", "1/1")


def subgrid() -> Supports:
    return supports("grid-template-columns", "subgrid")


def flex_gap() -> Supports:
    return supports("display", "flex").and_().property("gap", "1rem")


def color_mix() -> Supports:
    return supports("color", "color-mix(in srgb, red 50%, blue)")


def focus_visible() -> Supports:
    return supports_selector(":focus-visible")


def scroll_snap() -> Supports:
    return supports("scroll-snap-type", "x mandatory")


def sticky() -> Supports:
    return supports("position", "sticky")


def clamp() -> Supports:
    return supports("font-size", "clamp(1rem, 2vw, 3rem)")


def where_selector() -> Supports:
    return supports_selector(":where(*)")


def is_selector() -> Supports:
    return supports_selector(":is(*)")


def logical_properties() -> Supports:
    return supports("margin-inline-start", "1rem")
