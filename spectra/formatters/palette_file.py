"""
Text palette (.clr source): "11" header, then one line per color:
  red green blue alpha Name
"""
from ..color import Color
from ..naming import upper_camel_name
from ..palette import NamingFunction, Palette
from .base import Formatter, format_value

PALETTE_HEADER = "11"


class PaletteFormatter(Formatter):
    kind = "palette"

    def render_prefix(self, palette: Palette) -> str:
        return PALETTE_HEADER

    def render_color_line(self, color: Color, identifier: str) -> str:
        values = [color.red, color.green, color.blue, color.alpha]
        return " ".join(format_value(v, "%.3f") for v in values) + f" {identifier}"

    def default_naming(self) -> NamingFunction:
        return upper_camel_name

    def default_directory(self) -> str:
        if self.home is None:
            raise ValueError("PaletteFormatter needs a home directory for its default output path")
        return f"{self.home.as_posix().rstrip('/')}/Library/Colors/"

    def derive_filename(self, palette: Palette) -> str:
        return f"{palette.prefix}-palette.clr"
