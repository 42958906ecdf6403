"""Custom properties: var()/env() references and design-token tables."""
from typing import Any, Dict, Mapping, Optional

from nestcss.helpers import INDENT, merge_pairs

PALETTE_WEIGHTS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)


def _normalize(name: str) -> str:
    return name if name.startswith("--") else "--" + name


def var(name: str, fallback: Optional[Any] = None) -> str:
    if fallback is None:
        return f"var({_normalize(name)})"
    return f"var({_normalize(name)}, {fallback})"


def var_chain(*names: str, fallback: Any) -> str:
    value = fallback
    for name in reversed(names):
        value = var(name, value)
    return value


def env(name: str, fallback: Optional[Any] = None) -> str:
    if fallback is None:
        return f"env({name})"
    return f"env({name}, {fallback})"


def scoped(scope: str, name: str) -> str:
    return f"{scope}-{name}"


def component(component: str, prop: str) -> str:
    return f"{component}-{prop}"


def themed(name: str) -> str:
    return f"theme-{name}"


def theme_color(name: str, fallback: Any) -> str:
    return var(themed(name), fallback)


def spacing(level: int, fallback: Any) -> str:
    return var(f"spacing-{level}", fallback)


def radius(level: int, fallback: Any) -> str:
    return var(f"radius-{level}", fallback)


def font_size(level: int, fallback: Any) -> str:
    return var(f"font-size-{level}", fallback)


def shadow(level: int, fallback: Any) -> str:
    return var(f"shadow-{level}", fallback)


def render_variables(selector: str, variables: Mapping[str, str]) -> str:
    if not variables:
        return ""
    lines = "".join(f"{INDENT}--{k}: {v};\n" for k, v in variables.items())
    return f"{selector} {{\n{lines}}}"


class DesignSystem:
    """An ordered table of design tokens rendered as custom properties."""

    def __init__(self) -> None:
        self._variables: Dict[str, str] = {}
        self._prefix = ""

    def prefix(self, prefix: str) -> "DesignSystem":
        self._prefix = f"{prefix}-" if prefix else ""
        return self

    def _put(self, name: str, value: Any) -> None:
        self._variables[self._prefix + name] = str(value)

    def _scale(self, stem: str, values: tuple) -> "DesignSystem":
        for i, value in enumerate(values, 1):
            self._put(f"{stem}-{i}", value)
        return self

    def _named(self, stem: str, pairs: Optional[Mapping[str, Any]], kwargs: Mapping[str, Any]) -> "DesignSystem":
        for name, value in merge_pairs(pairs, kwargs):
            self._put(stem + name, value)
        return self

    def spacing(self, *values: Any) -> "DesignSystem":
        return self._scale("spacing", values)

    def font_sizes(self, *values: Any) -> "DesignSystem":
        return self._scale("font-size", values)

    def radii(self, *values: Any) -> "DesignSystem":
        return self._scale("radius", values)

    def shadows(self, *values: Any) -> "DesignSystem":
        return self._scale("shadow", values)

    def durations(self, *values: Any) -> "DesignSystem":
        return self._scale("duration", values)

    def line_heights(self, *values: Any) -> "DesignSystem":
        return self._scale("line-height", values)

    def colors(self, pairs: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "DesignSystem":
        return self._named("", pairs, kwargs)

    def font_sizes_named(self, pairs: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "DesignSystem":
        return self._named("font-size-", pairs, kwargs)

    def z_index(self, pairs: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "DesignSystem":
        return self._named("z-", pairs, kwargs)

    def easing(self, pairs: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "DesignSystem":
        return self._named("easing-", pairs, kwargs)

    def breakpoints(self, pairs: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "DesignSystem":
        return self._named("breakpoint-", pairs, kwargs)

    def font_families(self, pairs: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "DesignSystem":
        return self._named("font-", pairs, kwargs)

    def color_palette(self, name: str, *shades: Any) -> "DesignSystem":
        # shades past the tenth have no weight and are dropped
        for weight, shade in zip(PALETTE_WEIGHTS, shades):
            self._put(f"{name}-{weight}", shade)
        return self

    def custom(self, name: str, value: Any) -> "DesignSystem":
        self._put(name, value)
        return self

    def render(self, selector: str = ":root") -> str:
        return render_variables(selector, self._variables)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._variables)

    def __str__(self) -> str:
        return self.render()


def design_system() -> DesignSystem:
    return DesignSystem()


class Theme:
    def __init__(self) -> None:
        self._light: Dict[str, str] = {}
        self._dark: Dict[str, str] = {}
        self._light_selector = ":root"
        self._dark_selector = "[data-theme='dark']"

    def light_selector(self, selector: str) -> "Theme":
        self._light_selector = selector
        return self

    def dark_selector(self, selector: str) -> "Theme":
        self._dark_selector = selector
        return self

    def light(self, pairs: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Theme":
        self._light.update(merge_pairs(pairs, kwargs))
        return self

    def dark(self, pairs: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Theme":
        self._dark.update(merge_pairs(pairs, kwargs))
        return self

    def render_light(self) -> str:
        return render_variables(self._light_selector, self._light)

    def render_dark(self) -> str:
        return render_variables(self._dark_selector, self._dark)

    def render(self) -> str:
        return "\n\n".join(css for css in (self.render_light(), self.render_dark()) if css)

    def __str__(self) -> str:
        return self.render()


def theme() -> Theme:
    return Theme()
