# Spectra: palette definition → generated color files (text palette, UIColor categories)

from .color import Color, InvalidComponentFormat, resolve_components
from .formatters import UnknownFormatKind, create_formatter
from .loader import DefinitionError, load_palette, palette_from_dict
from .palette import OutputRequest, Palette
from .pipeline import build_targets, emit_outputs, generate, render_outputs
from .serializer import OutputTarget, targets_for_request

__all__ = [
    "Color",
    "InvalidComponentFormat",
    "resolve_components",
    "UnknownFormatKind",
    "create_formatter",
    "DefinitionError",
    "load_palette",
    "palette_from_dict",
    "OutputRequest",
    "Palette",
    "build_targets",
    "emit_outputs",
    "generate",
    "render_outputs",
    "OutputTarget",
    "targets_for_request",
]
