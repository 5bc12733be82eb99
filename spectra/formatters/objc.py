"""
Objective-C UIColor category. Rendered twice per palette: the header (declarations)
and the implementation (class methods returning the color).
"""
from ..color import Color
from ..naming import prefixed_color_name
from ..palette import NamingFunction, Palette
from .base import Formatter, format_value

BANNER_NOTE = "This file is generated by Spectra, so don't expect to make any persistent changes."


def objc_float(value: float | None) -> str:
    return format_value(value, "%.2f") + "f"


class ObjcCategoryFormatter(Formatter):
    post_prefix_newlines_default = 2
    pre_suffix_newlines_default = 2

    def __init__(self, *, is_header: bool = False, **kwargs) -> None:
        self.is_header = is_header
        self.intercolor_newlines_default = 1 if is_header else 2
        super().__init__(**kwargs)

    @property
    def kind(self) -> str:
        return "objc-header" if self.is_header else "objc-impl"

    def category_name(self, palette: Palette) -> str:
        return f"{palette.prefix.upper()}Color"

    def render_prefix(self, palette: Palette) -> str:
        keyword = "interface" if self.is_header else "implementation"
        return (
            "//\n"
            f"// {self.derive_filename(palette)}\n"
            f"// {BANNER_NOTE}\n"
            "//\n\n"
            f"@{keyword} UIColor ({self.category_name(palette)})"
        )

    def render_color_line(self, color: Color, identifier: str) -> str:
        signature = f"+ (UIColor *){identifier}"
        if self.is_header:
            return f"{signature};"
        return f"{signature}\n{{\n    return {self.color_expression(color)};\n}}"

    def color_expression(self, color: Color) -> str:
        # white constructor when the color was defined as a gray level
        if color.white is not None:
            return f"[UIColor colorWithWhite:{objc_float(color.white)} alpha:{objc_float(color.alpha)}]"
        return (
            f"[UIColor colorWithRed:{objc_float(color.red)} green:{objc_float(color.green)} "
            f"blue:{objc_float(color.blue)} alpha:{objc_float(color.alpha)}]"
        )

    def render_suffix(self, palette: Palette) -> str:
        return "@end"

    def default_naming(self) -> NamingFunction:
        return prefixed_color_name

    def derive_filename(self, palette: Palette) -> str:
        extension = "h" if self.is_header else "m"
        return f"UIColor+{self.category_name(palette)}.{extension}"
