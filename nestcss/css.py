import logging
from typing import Any, Mapping

from nestcss.nested import NestedRule, stylesheet

logger = logging.getLogger(__name__)


def _fill(node: NestedRule, declarations: Mapping[str, Any]) -> NestedRule:
    for k, v in declarations.items():
        if isinstance(v, Mapping):
            _fill(node.nest(k), v)
        elif isinstance(v, (str, int, float)) and not isinstance(v, bool):
            node.prop(k, v)
        else:
            raise TypeError(f"unable to convert type {type(v)} for {k!r}")
    return node


def from_dict(selector: str, declarations: Mapping[str, Any]) -> NestedRule:
    """Build a rule tree where nested mappings become nested rules.

        from_dict(".card", {"padding": "1rem", "&:hover": {"color": "blue"}})
    """
    logger.debug("building %r from %d entries", selector, len(declarations))
    return _fill(NestedRule(selector), declarations)


def to_css(value: Mapping[str, Any]) -> str:
    if not isinstance(value, Mapping):
        raise TypeError(f"expected a mapping of selectors, got {type(value)}")
    rules = []
    for selector, declarations in value.items():
        if not isinstance(declarations, Mapping):
            raise TypeError(f"expected a mapping for {selector!r}, got {type(declarations)}")
        rules.append(from_dict(selector, declarations))
    return stylesheet(*rules)
