# __init__.py

from .errors import InvalidHexError, StyleParseError, TooManyColorsError, UnknownTokenError
from .logger import Logger
from .parser import ATTRIBUTE_ALIASES, StyleParser, parse
from .rendering import paint, to_rich_color, to_rich_style
from .sheet import StyleSheet
from .style import Attribute, Color, Indexed, Named, NamedColor, Rgb, StyleDescriptor

__all__ = [
    "parse", "StyleParser", "ATTRIBUTE_ALIASES",
    "StyleDescriptor", "Color", "Named", "NamedColor", "Indexed", "Rgb", "Attribute",
    "StyleParseError", "UnknownTokenError", "InvalidHexError", "TooManyColorsError",
    "to_rich_color", "to_rich_style", "paint",
    "StyleSheet", "Logger",
]
