from typing import Any, Iterable, Mapping, Optional

INDENT = "  "


def hyphenate(name: str) -> str:
    """font_weight -> font-weight, so keyword arguments can name properties."""
    return name.replace("_", "-")


def declaration(name: str, *values: Any) -> str:
    return f"{name}: {' '.join(str(v) for v in values)}"


def merge_pairs(pairs: Optional[Mapping[str, Any]], kwargs: Mapping[str, Any]) -> Iterable[tuple]:
    if pairs:
        for k, v in pairs.items():
            yield k, str(v)
    for k, v in kwargs.items():
        yield hyphenate(k), str(v)


def to_text(rule: Any) -> str:
    if isinstance(rule, str):
        return rule
    if hasattr(rule, "render") and callable(rule.render):
        return rule.render()
    raise TypeError(f"unable to render type {type(rule)}")


def indent_lines(text: str, keep_blank: bool = True) -> str:
    """Indent every line of text by one level, each line ending in a newline."""
    out = ""
    for line in text.rstrip("\n").split("\n"):
        if not line.strip():
            if keep_blank:
                out += "\n"
            continue
        out += INDENT + line + "\n"
    return out


def declarations(*decls: str) -> str:
    return "; ".join(decls)
