"""
Swift UIColor extension. Reserved: rendering rules are not defined yet, so the
output is empty text. Only the file placement is fixed.
"""
from ..color import Color
from ..naming import prefixed_color_name
from ..palette import NamingFunction, Palette
from .base import Formatter


class SwiftExtensionFormatter(Formatter):
    kind = "swift"
    post_prefix_newlines_default = 0
    intercolor_newlines_default = 0
    pre_suffix_newlines_default = 0

    def render_color_line(self, color: Color, identifier: str) -> str:
        return ""

    def default_naming(self) -> NamingFunction:
        return prefixed_color_name

    def derive_filename(self, palette: Palette) -> str:
        return f"UIColor+{palette.prefix.upper()}Color.swift"
