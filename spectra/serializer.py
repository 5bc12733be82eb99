"""
Output targets: a formatter bound to where its file goes. One target → one file per run.
"""
import logging
from pathlib import Path

from .formatters import Formatter, create_formatter, formatter_kinds_for
from .palette import OutputRequest, Palette

logger = logging.getLogger(__name__)


class OutputTarget:
    """Formatter + optional base directory override."""

    def __init__(self, formatter: Formatter, base_path: str | None = None) -> None:
        self.formatter = formatter
        self.base_path = base_path

    def resolve_path(self, palette: Palette) -> str:
        """(base_path or formatter default directory) + "/" if missing + filename."""
        base = str(self.base_path) if self.base_path else self.formatter.default_directory()
        if not base.endswith("/"):
            base = base + "/"
        return base + self.formatter.derive_filename(palette)

    def render(self, palette: Palette) -> str:
        return self.formatter.render(palette)

    def emit(self, palette: Palette) -> str:
        """Write the rendered text to the resolved path, replacing any existing file. OSError propagates."""
        path = self.resolve_path(palette)
        text = self.render(palette)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Wrote %s (%s, %d colors)", path, self.formatter.kind, len(palette.colors))
        return path

    def __repr__(self) -> str:
        return f"OutputTarget(kind={self.formatter.kind!r}, base_path={self.base_path!r})"


def targets_for_request(request: OutputRequest, home: Path | str | None = None) -> list[OutputTarget]:
    """
    objc → two targets (header, then implementation) sharing the request's naming;
    every other kind → one target. Unknown kinds raise UnknownFormatKind before anything renders.
    """
    return [
        OutputTarget(create_formatter(kind, home=home, naming=request.naming), base_path=request.path)
        for kind in formatter_kinds_for(request.kind)
    ]
