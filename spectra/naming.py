"""
Identifier naming: camel casing plus the default renamers each formatter carries.
A renamer maps (color_name, prefix) → generated identifier.
"""
import re

from .palette import NamingFunction

_WORD_SEPARATORS = re.compile(r"[\s_\-/]+")


def camelize(name: str, upper_first: bool = True) -> str:
    """
    hot_pink / hot-pink / hotPink → HotPink (upper_first) or hotPink.
    Only word boundaries change case; the rest of each word is kept as written.
    """
    words = [w for w in _WORD_SEPARATORS.split(name) if w]
    if not words:
        return ""
    joined = "".join(w[0].upper() + w[1:] for w in words)
    if upper_first:
        return joined
    return joined[0].lower() + joined[1:]


def upper_camel_name(name: str, prefix: str) -> str:
    return camelize(name, upper_first=True)


def prefixed_color_name(name: str, prefix: str) -> str:
    """sp + hotPink → sp_hotPinkColor"""
    return f"{prefix}_{camelize(name, upper_first=False)}Color"


def template_renamer(template: str) -> NamingFunction:
    """
    Renamer from a str.format template. Fields: name (as written), prefix,
    PREFIX (upper-cased), camel (lowerCamel), Camel (UpperCamel).
    e.g. "{PREFIX}{Camel}" turns (hot_pink, sp) into SPHotPink.
    """
    def rename(name: str, prefix: str) -> str:
        return template.format(
            name=name,
            prefix=prefix,
            PREFIX=prefix.upper(),
            camel=camelize(name, upper_first=False),
            Camel=camelize(name, upper_first=True),
        )
    return rename
