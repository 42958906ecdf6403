"""Nested CSS rule trees.

    rule(".card")
        .prop("padding", "1rem")
        .nest("&:hover")
            .prop("color", "blue")
        .root()
        .render()

Methods fall in three groups:

    setters      prop, props, style            return the same rule
    structural   nest, at_rule, media,
                 supports, container           return the new child rule
    navigation   up, root                      return an existing rule
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, List, Optional, Union

from nestcss.helpers import INDENT, hyphenate
from nestcss.style import Style

logger = logging.getLogger(__name__)


class NestingError(Exception):
    pass


class AtRootError(NestingError):
    pass


@dataclass(frozen=True)
class Declaration:
    name: str
    value: Optional[str] = None  # None for raw "name: value" text merged via .style()

    def __str__(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name}: {self.value}"


class NestedRule:
    def __init__(self, selector: str, parent: Optional[NestedRule] = None, depth: int = 0) -> None:
        self.selector = selector
        self.parent = parent
        self._depth = depth
        self.properties: List[Declaration] = []
        self.children: List[NestedRule] = []

    @property
    def depth(self) -> int:
        return self._depth

    # setters

    def prop(self, name: str, value: Any) -> NestedRule:
        self.properties.append(Declaration(name, str(value)))
        return self

    def props(self, **declarations: Any) -> NestedRule:
        for name, value in declarations.items():
            self.prop(hyphenate(name), value)
        return self

    def style(self, *blocks: Union[str, Style]) -> NestedRule:
        """Merge flat "a: b; c: d" blocks, each fragment kept verbatim."""
        for block in blocks:
            text = block.render() if isinstance(block, Style) else block
            fragments = [f.strip() for f in text.split(";")]
            kept = [f for f in fragments if f]
            logger.debug("merging %d of %d fragments into %r", len(kept), len(fragments), self.selector)
            self.properties.extend(Declaration(f) for f in kept)
        return self

    # structural

    def nest(self, selector: str) -> NestedRule:
        child = NestedRule(selector, self, self._depth + 1)
        self.children.append(child)
        return child

    def at_rule(self, kind: str, condition: str) -> NestedRule:
        return self.nest(f"@{kind} {condition}")

    def media(self, query: str) -> NestedRule:
        return self.at_rule("media", query)

    def supports(self, condition: str) -> NestedRule:
        return self.at_rule("supports", condition)

    def container(self, query: str) -> NestedRule:
        return self.at_rule("container", query)

    # navigation

    def up(self) -> NestedRule:
        if self.parent is None:
            raise AtRootError("already at root level")
        return self.parent

    def root(self) -> NestedRule:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    # rendering

    def render(self, indent: int = 0) -> str:
        pad = INDENT * indent
        css = f"{pad}{self.selector} {{\n"
        css += "".join(f"{pad}{INDENT}{p};\n" for p in self.properties)
        for child in self.children:
            css += "\n" + child.render(indent + 1)
        css += f"{pad}}}\n"
        return css

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<NestedRule {self.selector!r} depth={self._depth}>"


def rule(selector: str) -> NestedRule:
    return NestedRule(selector)


def stylesheet(*rules: NestedRule) -> str:
    return "\n".join(r.render() for r in rules)


class BEMBlock:
    """Block__element--modifier rules, all nested under the block selector.

    Elements and modifiers nest directly under the block, never under each
    other, so .up() always lands back on the block.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.block = NestedRule(f".{name}")
        self.current = self.block

    def prop(self, name: str, value: Any) -> BEMBlock:
        self.current.prop(name, value)
        return self

    def element(self, name: str) -> BEMBlock:
        self.current = self.block.nest(f"&__{name}")
        return self

    def modifier(self, name: str) -> BEMBlock:
        self.current = self.block.nest(f"&--{name}")
        return self

    def up(self) -> BEMBlock:
        self.current = self.block
        return self

    def render(self) -> str:
        return self.block.render()

    def __str__(self) -> str:
        return self.render()


def block(name: str) -> BEMBlock:
    return BEMBlock(name)
