from nestcss.css import from_dict, to_css
from nestcss.helpers import declarations
from nestcss.nested import (
    AtRootError,
    BEMBlock,
    Declaration,
    NestedRule,
    NestingError,
    block,
    rule,
    stylesheet,
)
from nestcss.style import Style, style

__all__ = [
    "AtRootError",
    "BEMBlock",
    "Declaration",
    "NestedRule",
    "NestingError",
    "Style",
    "block",
    "declarations",
    "from_dict",
    "rule",
    "style",
    "stylesheet",
    "to_css",
]
