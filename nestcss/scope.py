from typing import Any, List, Optional

from nestcss.helpers import indent_lines, to_text


class ScopeBuilder:
    """@scope (root) to (limit) { ... }"""

    def __init__(self, root: str, limit: Optional[str] = None) -> None:
        self.root = root
        self.limit = limit
        self.rules: List[str] = []

    def to(self, selector: str) -> "ScopeBuilder":
        self.limit = selector
        return self

    def rule(self, *rules: Any) -> "ScopeBuilder":
        self.rules.extend(to_text(r) for r in rules)
        return self

    def css(self, text: str) -> "ScopeBuilder":
        self.rules.append(text)
        return self

    def render(self) -> str:
        css = f"@scope ({self.root})"
        if self.limit is not None:
            css += f" to ({self.limit})"
        css += " {\n"
        css += "".join(indent_lines(r, keep_blank=False) for r in self.rules)
        return css + "}"

    def __str__(self) -> str:
        return self.render()


def scope(root: str) -> ScopeBuilder:
    return ScopeBuilder(root)


def implicit() -> ScopeBuilder:
    return ScopeBuilder(":scope")


def stylesheet(*scopes: ScopeBuilder) -> str:
    return "\n\n".join(s.render() for s in scopes)
