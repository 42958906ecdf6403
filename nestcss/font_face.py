from typing import List, Optional

from nestcss.helpers import INDENT

WOFF2 = "woff2"
WOFF = "woff"
TRUETYPE = "truetype"
OPENTYPE = "opentype"
EMBEDDED_OPENTYPE = "embedded-opentype"
SVG = "svg"

AUTO = "auto"
BLOCK = "block"
SWAP = "swap"
FALLBACK = "fallback"
OPTIONAL = "optional"

NORMAL = "normal"
ITALIC = "italic"
OBLIQUE = "oblique"


class FontFace:
    def __init__(self, family: str) -> None:
        self.family = family
        self.sources: List[str] = []
        self._weight: Optional[int] = None
        self._max_weight: Optional[int] = None  # variable fonts
        self._style = NORMAL
        self._display = SWAP
        self._unicode_range: Optional[str] = None
        self._stretch: Optional[str] = None

    def src(self, url: str, format: Optional[str] = None) -> "FontFace":
        source = f"url('{url}')"
        if format is not None:
            source += f" format('{format}')"
        self.sources.append(source)
        return self

    def local(self, name: str) -> "FontFace":
        self.sources.append(f"local('{name}')")
        return self

    def weight(self, weight: int, max_weight: Optional[int] = None) -> "FontFace":
        self._weight = weight
        self._max_weight = max_weight
        return self

    def style(self, style: str) -> "FontFace":
        self._style = style
        return self

    def display(self, display: str) -> "FontFace":
        self._display = display
        return self

    def unicode_range(self, unicode_range: str) -> "FontFace":
        self._unicode_range = unicode_range
        return self

    def stretch(self, stretch: str) -> "FontFace":
        self._stretch = stretch
        return self

    def render(self) -> str:
        lines = [f"font-family: '{self.family}'"]
        if self.sources:
            lines.append("src: " + ",\n       ".join(self.sources))
        if self._weight is not None:
            weight = str(self._weight)
            if self._max_weight is not None:
                weight += f" {self._max_weight}"
            lines.append(f"font-weight: {weight}")
        lines.append(f"font-style: {self._style}")
        lines.append(f"font-display: {self._display}")
        if self._unicode_range is not None:
            lines.append(f"unicode-range: {self._unicode_range}")
        if self._stretch is not None:
            lines.append(f"font-stretch: {self._stretch}")
        return "@font-face {\n" + "".join(f"{INDENT}{l};\n" for l in lines) + "}"

    def __str__(self) -> str:
        return self.render()


def font_face(family: str) -> FontFace:
    return FontFace(family)
