from typing import Any, Dict

from nestcss.helpers import hyphenate


class Style:
    """An ordered, flat block of declarations, as used in a style attribute."""

    def __init__(self) -> None:
        self._properties: Dict[str, str] = {}

    def prop(self, name: str, value: Any) -> "Style":
        self._properties[name] = str(value)
        return self

    def render(self) -> str:
        return " ".join(f"{k}: {v};" for k, v in self._properties.items())

    def to_rule(self, selector: str) -> str:
        return f"{selector} {{ {self.render()} }}"

    def to_dict(self) -> Dict[str, str]:
        return dict(self._properties)

    def __bool__(self) -> bool:
        return bool(self._properties)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Style {self.render()!r}>"


def style(**declarations: Any) -> Style:
    s = Style()
    for name, value in declarations.items():
        s.prop(hyphenate(name), value)
    return s
