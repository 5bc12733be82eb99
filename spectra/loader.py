"""
Palette definition loader: YAML file → Palette.

  prefix: sp
  formats:
    - palette
    - {kind: objc, path: Classes/Generated, naming: "{PREFIX}{Camel}"}
  colors:
    hotPink: {hex: 0xFF69B4}
    shadow: {white: [0.2, 0.5]}
    accent: {components: [255, 128, 0]}
"""
import logging
from pathlib import Path
from typing import Any

import yaml

from .color import components_from, hex_from, white_from
from .config import get_default_formats
from .naming import template_renamer
from .palette import OutputRequest, Palette

logger = logging.getLogger(__name__)

# list shorthand → helper that names the positional values
_SHORTHANDS = {
    "components": components_from,
    "hex": hex_from,
    "white": white_from,
}


class DefinitionError(ValueError):
    """Palette definition is unreadable or malformed."""
    def __init__(self, message: str, path: str = ""):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


def load_palette(path: Path | str, config: dict[str, Any] | None = None) -> Palette:
    """Read and parse a YAML palette definition."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise DefinitionError(f"cannot read definition: {e}", path=str(path)) from e
    except yaml.YAMLError as e:
        raise DefinitionError(f"invalid YAML: {e}", path=str(path)) from e
    try:
        palette = palette_from_dict(data, config=config)
    except DefinitionError as e:
        if e.path:
            raise
        raise DefinitionError(str(e), path=str(path)) from e
    logger.debug("Loaded %s: %d colors, %d outputs", path, len(palette.colors), len(palette.outputs))
    return palette


def palette_from_dict(data: Any, config: dict[str, Any] | None = None) -> Palette:
    """
    Build a Palette from parsed definition data. When no formats are listed and a config
    is given, the config's default formats are requested explicitly.
    """
    if not isinstance(data, dict):
        raise DefinitionError("definition must be a mapping with prefix and colors")
    prefix = data.get("prefix", "")
    if not isinstance(prefix, str):
        raise DefinitionError(f"prefix must be a string, got {prefix!r}")

    palette = Palette(prefix=prefix)
    for name, attributes in _color_entries(data.get("colors")):
        palette.add_color(name, expand_attributes(name, attributes))

    formats = data.get("formats")
    if formats is None and config is not None:
        formats = get_default_formats(config)
    for entry in formats or []:
        palette.outputs.append(output_request_from(entry))
    return palette


def _color_entries(colors: Any) -> list[tuple[str, Any]]:
    if colors is None:
        raise DefinitionError("definition has no colors")
    if isinstance(colors, dict):
        return [(str(name), attrs) for name, attrs in colors.items()]
    if isinstance(colors, list):
        entries = []
        for item in colors:
            if not isinstance(item, dict) or len(item) != 1:
                raise DefinitionError(f"color list entries must be single-key mappings, got {item!r}")
            (name, attrs), = item.items()
            entries.append((str(name), attrs))
        return entries
    raise DefinitionError(f"colors must be a mapping or a list, got {type(colors).__name__}")


def expand_attributes(name: str, attributes: Any) -> dict[str, Any]:
    """Expand list shorthands (components: [r, g, b, a], hex: [h, a], white: [w, a]) into plain attributes."""
    if not isinstance(attributes, dict):
        raise DefinitionError(f"color {name!r}: attributes must be a mapping, got {attributes!r}")
    expanded: dict[str, Any] = {}
    for key, value in attributes.items():
        helper = _SHORTHANDS.get(key)
        if helper is not None and isinstance(value, list):
            expanded.update(helper(*value))
        elif key == "components":
            raise DefinitionError(f"color {name!r}: components must be a list")
        else:
            expanded[key] = value
    return expanded


def output_request_from(entry: Any) -> OutputRequest:
    """"palette" or {kind: objc, path: ..., naming: "<template>"} → OutputRequest."""
    if isinstance(entry, str):
        return OutputRequest(kind=entry)
    if not isinstance(entry, dict) or "kind" not in entry:
        raise DefinitionError(f"format entries must be a kind or a mapping with 'kind', got {entry!r}")
    naming = None
    template = entry.get("naming")
    if template is not None:
        naming = template_renamer(str(template))
        try:
            naming("sample", "sp")
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            raise DefinitionError(f"invalid naming template {template!r}: {e}") from e
    path = entry.get("path")
    return OutputRequest(kind=str(entry["kind"]), path=str(path) if path is not None else None, naming=naming)
