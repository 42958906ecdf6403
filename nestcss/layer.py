"""Cascade layers (@layer)."""
from typing import Any, List, Optional

from nestcss.helpers import indent_lines, to_text


def order(*names: str) -> str:
    return f"@layer {', '.join(names)};"


def declare(name: str) -> str:
    return f"@layer {name};"


def import_into(layer_name: str, url: str, media: Optional[str] = None) -> str:
    css = f"@import url('{url}') layer({layer_name})"
    if media:
        css += f" {media}"
    return css + ";"


class LayerBuilder:
    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        self.rules: List[str] = []

    def rule(self, *rules: Any) -> "LayerBuilder":
        self.rules.extend(to_text(r) for r in rules)
        return self

    def css(self, text: str) -> "LayerBuilder":
        self.rules.append(text)
        return self

    def render(self) -> str:
        header = f"@layer {self.name} {{" if self.name else "@layer {"
        return header + "\n" + "".join(indent_lines(r) for r in self.rules) + "}"

    def __str__(self) -> str:
        return self.render()


def named(name: str) -> LayerBuilder:
    return LayerBuilder(name)


def layer(name: str, *rules: Any) -> str:
    return LayerBuilder(name).rule(*rules).render()


def anonymous(*rules: Any) -> str:
    return LayerBuilder().rule(*rules).render()


def stylesheet(*blocks: str) -> str:
    return "\n\n".join(blocks)
