"""
Colors: raw definition attributes → canonical components → immutable named Color.
Every stored component is a float in 0–1; alpha is always present.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

COMPONENT_KEYS: tuple[str, ...] = ("red", "green", "blue", "white", "alpha")

_SHORT_KEYS: dict[str, str] = {
    "r": "red",
    "g": "green",
    "b": "blue",
    "w": "white",
    "a": "alpha",
}


class InvalidComponentFormat(ValueError):
    """A component value is neither an integer (0–255) nor a float (0–1)."""
    def __init__(self, message: str, component: str = "", value: Any = None):
        super().__init__(message)
        self.component = component
        self.value = value


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def normalize_component(value: Any, component: str = "") -> float:
    """
    Integers are on the 0–255 scale and get divided by 255; floats are already 0–1.
    Anything else raises InvalidComponentFormat. The result is clamped into [0, 1].
    """
    if _is_integer(value):
        value = value / 255.0
    if not isinstance(value, float):
        raise InvalidComponentFormat(
            f"component {component or '?'}={value!r} is not in a legible format",
            component=component,
            value=value,
        )
    return max(0.0, min(1.0, value))


def parse_hex(value: Any) -> int:
    """
    Hex attribute → integer. Accepts an int (0xFF8000), a decimal string ("16744448"),
    or a string with an explicit hex prefix ("#FF8000", "0xff8000").
    """
    if _is_integer(value):
        return value
    if isinstance(value, str):
        text = value.strip()
        base = 10
        if text.startswith("#"):
            text, base = text[1:], 16
        elif text[:2].lower() == "0x":
            text, base = text[2:], 16
        try:
            return int(text, base)
        except ValueError:
            pass
    raise InvalidComponentFormat(f"hex value {value!r} is not an integer", component="hex", value=value)


def componentize_hex(value: Any) -> dict[str, int]:
    hex_value = parse_hex(value)
    return {
        "red": (hex_value & 0xFF0000) >> 16,
        "green": (hex_value & 0x00FF00) >> 8,
        "blue": hex_value & 0x0000FF,
    }


def resolve_components(attributes: Mapping[str, Any]) -> dict[str, float]:
    """
    Canonicalize raw attributes (r/g/b/w/a or long names, optional hex) into
    {red, green, blue, white, alpha}. Order matters: alpha default, then hex,
    then white (white overrides hex), then normalization of everything present.
    """
    components: dict[str, Any] = {}
    for key, value in attributes.items():
        key = _SHORT_KEYS.get(key, key)
        if key in COMPONENT_KEYS:
            components[key] = value

    if components.get("alpha") is None:
        components["alpha"] = 1.0
    hex_value = attributes.get("hex")
    if hex_value is not None:
        components.update(componentize_hex(hex_value))
    white = components.get("white")
    if white is not None:
        components.update(red=white, green=white, blue=white)

    return {key: normalize_component(value, key) for key, value in components.items()}


def _hash_from(keys: tuple[str, ...], values: tuple[Any, ...]) -> dict[str, Any]:
    return dict(zip(keys, values))


def components_from(*values: Any) -> dict[str, Any]:
    """components_from(255, 128, 0) → {red: 255, green: 128, blue: 0}; optional 4th value is alpha."""
    return _hash_from(("red", "green", "blue", "alpha"), values)


def hex_from(*values: Any) -> dict[str, Any]:
    """hex_from(0xFF8000, 0.5) → {hex: 0xFF8000, alpha: 0.5}"""
    return _hash_from(("hex", "alpha"), values)


def white_from(*values: Any) -> dict[str, Any]:
    """white_from(0.5, 1.0) → {white: 0.5, alpha: 1.0}"""
    return _hash_from(("white", "alpha"), values)


@dataclass(frozen=True)
class Color:
    """A named color with resolved components. Build with Color.from_attributes."""

    name: str
    components: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        unknown = set(self.components) - set(COMPONENT_KEYS)
        if unknown:
            raise KeyError(f"unknown color components: {sorted(unknown)}")
        object.__setattr__(self, "components", MappingProxyType(dict(self.components)))

    @classmethod
    def from_attributes(cls, name: str, attributes: Mapping[str, Any]) -> Color:
        return cls(name=name, components=resolve_components(attributes))

    def __getitem__(self, key: str) -> float | None:
        if key not in COMPONENT_KEYS:
            raise KeyError(key)
        return self.components.get(key)

    @property
    def red(self) -> float | None:
        return self.components.get("red")

    @property
    def green(self) -> float | None:
        return self.components.get("green")

    @property
    def blue(self) -> float | None:
        return self.components.get("blue")

    @property
    def white(self) -> float | None:
        return self.components.get("white")

    @property
    def alpha(self) -> float | None:
        return self.components.get("alpha")

    def __repr__(self) -> str:
        return f"{self.name} :: {dict(self.components)}"
