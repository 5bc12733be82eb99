"""
Palette: prefix + ordered colors + ordered output requests. Built once by the loader
(or by hand), then passed read-only through rendering.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .color import Color

NamingFunction = Callable[[str, str], str]

DEFAULT_FORMATS: tuple[str, ...] = ("palette", "objc")


@dataclass(frozen=True)
class OutputRequest:
    """One requested output: format kind, optional base directory, optional renamer."""
    kind: str
    path: str | None = None
    naming: NamingFunction | None = None


@dataclass
class Palette:
    prefix: str
    colors: list[Color] = field(default_factory=list)
    outputs: list[OutputRequest] = field(default_factory=list)

    def add_color(self, name: str, attributes: Mapping[str, Any]) -> Color:
        """Resolve attributes into a Color and append it (definition order is output order)."""
        color = Color.from_attributes(name, attributes)
        self.colors.append(color)
        return color

    def add_output(
        self,
        kind: str,
        path: str | None = None,
        naming: NamingFunction | None = None,
    ) -> OutputRequest:
        request = OutputRequest(kind=kind, path=path, naming=naming)
        self.outputs.append(request)
        return request

    def requested_outputs(self, default_formats: tuple[str, ...] | list[str] = DEFAULT_FORMATS) -> list[OutputRequest]:
        """Explicit requests, or one request per default format when none were made."""
        if self.outputs:
            return list(self.outputs)
        return [OutputRequest(kind=kind) for kind in default_formats]
