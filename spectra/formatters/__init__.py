# Formatters: one strategy per output format kind

from pathlib import Path
from typing import Any

from .base import Formatter, UnknownFormatKind
from .objc import ObjcCategoryFormatter
from .palette_file import PaletteFormatter
from .swift import SwiftExtensionFormatter

# kind → (formatter class, fixed constructor options)
FORMATTERS: dict[str, tuple[type[Formatter], dict[str, Any]]] = {
    "palette": (PaletteFormatter, {}),
    "objc-header": (ObjcCategoryFormatter, {"is_header": True}),
    "objc-impl": (ObjcCategoryFormatter, {"is_header": False}),
    "swift": (SwiftExtensionFormatter, {}),
}

# Kinds a definition may request; objc expands to header + implementation.
REQUEST_KINDS: dict[str, tuple[str, ...]] = {
    "palette": ("palette",),
    "objc": ("objc-header", "objc-impl"),
    "swift": ("swift",),
}


def formatter_kinds_for(kind: str) -> tuple[str, ...]:
    """Requested kind → formatter kinds it renders. Raises UnknownFormatKind."""
    key = str(kind).strip().lower()
    if key in REQUEST_KINDS:
        return REQUEST_KINDS[key]
    if key in FORMATTERS:
        return (key,)
    raise UnknownFormatKind(str(kind))


def create_formatter(kind: str, *, home: Path | str | None = None, **options: Any) -> Formatter:
    """Build the formatter for one formatter kind (e.g. "palette", "objc-header")."""
    key = str(kind).strip().lower()
    if key not in FORMATTERS:
        raise UnknownFormatKind(str(kind))
    cls, fixed = FORMATTERS[key]
    return cls(home=home, **fixed, **options)


__all__ = [
    "Formatter",
    "UnknownFormatKind",
    "PaletteFormatter",
    "ObjcCategoryFormatter",
    "SwiftExtensionFormatter",
    "FORMATTERS",
    "REQUEST_KINDS",
    "formatter_kinds_for",
    "create_formatter",
]
