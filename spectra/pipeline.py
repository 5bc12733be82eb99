"""
Pipeline: one palette definition → every requested generated file.
Rendering is pure; writes happen one target at a time, in request order.
"""
import logging
from pathlib import Path
from typing import Any

from .config import get_default_formats, get_definition_path, get_home_dir, load_config
from .loader import load_palette
from .palette import DEFAULT_FORMATS, Palette
from .serializer import OutputTarget, targets_for_request

logger = logging.getLogger(__name__)


def build_targets(
    palette: Palette,
    home: Path | str | None = None,
    *,
    default_formats: list[str] | tuple[str, ...] = DEFAULT_FORMATS,
) -> list[OutputTarget]:
    """All targets for the palette's requests (or the default formats). Fails fast on unknown kinds."""
    targets: list[OutputTarget] = []
    for request in palette.requested_outputs(default_formats):
        targets.extend(targets_for_request(request, home=home))
    return targets


def render_outputs(
    palette: Palette,
    home: Path | str | None = None,
    *,
    default_formats: list[str] | tuple[str, ...] = DEFAULT_FORMATS,
) -> list[tuple[str, str]]:
    """(path, content) for every target, without touching the file system."""
    return [
        (target.resolve_path(palette), target.render(palette))
        for target in build_targets(palette, home, default_formats=default_formats)
    ]


def emit_outputs(
    palette: Palette,
    home: Path | str | None = None,
    *,
    default_formats: list[str] | tuple[str, ...] = DEFAULT_FORMATS,
) -> list[str]:
    """Write every target's file. The first failure aborts the run."""
    targets = build_targets(palette, home, default_formats=default_formats)
    return [target.emit(palette) for target in targets]


def generate(
    definition_path: Path | str | None = None,
    *,
    config: dict[str, Any] | None = None,
) -> list[str]:
    """
    Load config and the palette definition, then write every output.
    Returns the written paths.
    """
    if config is None:
        config = load_config()
    if definition_path is None:
        definition_path = get_definition_path(config)
    palette = load_palette(definition_path, config=config)
    home = get_home_dir(config)
    logger.info(
        "Generating %d colors with prefix %r from %s",
        len(palette.colors), palette.prefix, definition_path,
    )
    return emit_outputs(palette, home, default_formats=get_default_formats(config))
