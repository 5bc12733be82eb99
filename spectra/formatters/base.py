"""
Abstract formatter. One palette → the text of one generated file.
Subclasses only fill in the hooks; the layout algorithm lives in Formatter.render.
"""
from abc import ABC, abstractmethod
from pathlib import Path

from ..color import Color
from ..palette import NamingFunction, Palette


class UnknownFormatKind(ValueError):
    """Requested output format has no formatter."""
    def __init__(self, kind: str):
        super().__init__(f"Specified an invalid format: {kind!r}")
        self.kind = kind


def format_value(value: float | None, spec: str) -> str:
    """Missing components render as 0.0."""
    return spec % (value if value is not None else 0.0)


class Formatter(ABC):
    """
    Renders a Palette as:
      prefix, post_prefix newlines, color lines joined by intercolor newlines,
      pre_suffix newlines, suffix.
    Newline counts and the naming function default per subclass and can be
    overridden per instance.
    """

    kind: str = ""
    post_prefix_newlines_default = 1
    intercolor_newlines_default = 1
    pre_suffix_newlines_default = 1

    def __init__(
        self,
        *,
        naming: NamingFunction | None = None,
        home: Path | str | None = None,
        post_prefix_newlines: int | None = None,
        intercolor_newlines: int | None = None,
        pre_suffix_newlines: int | None = None,
    ) -> None:
        self.naming = naming or self.default_naming()
        self.home = Path(home) if home is not None else None
        self.post_prefix_newlines = _pick(post_prefix_newlines, self.post_prefix_newlines_default)
        self.intercolor_newlines = _pick(intercolor_newlines, self.intercolor_newlines_default)
        self.pre_suffix_newlines = _pick(pre_suffix_newlines, self.pre_suffix_newlines_default)

    def render(self, palette: Palette) -> str:
        output = self.render_prefix(palette)
        output += "\n" * self.post_prefix_newlines
        last = len(palette.colors) - 1
        for index, color in enumerate(palette.colors):
            identifier = self.naming(color.name, palette.prefix)
            output += self.render_color_line(color, identifier)
            if index < last:
                output += "\n" * self.intercolor_newlines
        output += "\n" * self.pre_suffix_newlines
        output += self.render_suffix(palette)
        return output

    def render_prefix(self, palette: Palette) -> str:
        return ""

    def render_suffix(self, palette: Palette) -> str:
        return ""

    @abstractmethod
    def render_color_line(self, color: Color, identifier: str) -> str:
        """Text for one color (no trailing newline)."""
        ...

    @abstractmethod
    def derive_filename(self, palette: Palette) -> str:
        ...

    @abstractmethod
    def default_naming(self) -> NamingFunction:
        """Renamer used when the output request does not supply one."""
        ...

    def default_directory(self) -> str:
        return "./"


def _pick(value: int | None, default: int) -> int:
    if value is None:
        return default
    if value < 0:
        raise ValueError(f"newline count must be >= 0, got {value}")
    return value
