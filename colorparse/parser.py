# colorparse/parser.py

"""
Parser for Git's color configuration syntax.

A style string is a whitespace separated list of words. Attribute keywords
may appear anywhere; the first color word sets the foreground and the second
the background, so "bold red blue" is bold red text on a blue background.
"""

import re
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .errors import InvalidHexError, TooManyColorsError, UnknownTokenError
from .style import Attribute, Color, Indexed, Named, NamedColor, Rgb, StyleDescriptor

ATTRIBUTE_ALIASES: Dict[str, Attribute] = {
    'bold': Attribute.BOLD,
    'b': Attribute.BOLD,
    'dim': Attribute.DIMMED,
    'italic': Attribute.ITALIC,
    'i': Attribute.ITALIC,
    'underline': Attribute.UNDERLINE,
    'ul': Attribute.UNDERLINE,
    'u': Attribute.UNDERLINE,
    'blink': Attribute.BLINK,
    'reverse': Attribute.REVERSE,
    'swap': Attribute.REVERSE,
    'hidden': Attribute.HIDDEN,
    'conceal': Attribute.HIDDEN,
    'strikethrough': Attribute.STRIKETHROUGH,
    'strike': Attribute.STRIKETHROUGH,
}

BASE_COLORS: Dict[str, NamedColor] = {
    c.value: c for c in NamedColor if not c.is_bright and c is not NamedColor.DEFAULT
}

# Words that take a color slot without setting a color
UNSET_COLORS = frozenset({'normal', '-1'})

BRIGHT = 'bright'

_HEX_RE = re.compile(r'#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})')
# Signs are rejected ("+5" is an unknown word); only ASCII digits form an index
_DECIMAL_RE = re.compile(r'[0-9]+')

class Slot(Enum):
    """Marker for color words that take a slot without setting a color."""
    UNSET = 'unset'

def classify_attribute(word: str) -> Optional[Tuple[Attribute, bool]]:
    """
    Match an attribute keyword.

    Args:
        word: Lower-cased token

    Returns:
        (attribute, enabled) or None when the word is not an attribute.
        A "no" or "no-" prefix clears the attribute instead of setting it.
    """
    if word in ATTRIBUTE_ALIASES:
        return ATTRIBUTE_ALIASES[word], True
    for prefix in ('no-', 'no'):
        if word.startswith(prefix) and word[len(prefix):] in ATTRIBUTE_ALIASES:
            return ATTRIBUTE_ALIASES[word[len(prefix):]], False
    return None

def parse_hex(text: str, token: str) -> Rgb:
    """Parse a '#rrggbb' token, raising InvalidHexError for any other '#' word."""
    match = _HEX_RE.fullmatch(token.lower())
    if not match:
        raise InvalidHexError(text, token)
    return Rgb(*(int(part, 16) for part in match.groups()))

def classify_color(word: str) -> Optional[Union[Color, Slot]]:
    """
    Match a single-word color (hex words are handled by parse_hex).

    Returns a Color, Slot.UNSET for "normal"/"-1", or None.
    """
    if word in UNSET_COLORS:
        return Slot.UNSET
    if word == NamedColor.DEFAULT.value:
        return Named(NamedColor.DEFAULT)
    if word in BASE_COLORS:
        return Named(BASE_COLORS[word])
    if word.startswith(BRIGHT) and word[len(BRIGHT):] in BASE_COLORS:
        return Named(BASE_COLORS[word[len(BRIGHT):]].brighten())
    if _DECIMAL_RE.fullmatch(word):
        index = int(word)
        if index <= 255:
            return Indexed(index)
    return None

class StyleParser:
    """
    Single-use accumulator for one style string.

    Holds the foreground/background slots and the attribute set while the
    tokens are consumed; ``parse`` builds the descriptor only once every
    token has been accepted.
    """
    def __init__(self, text: str):
        self.text = text
        self._colors: List[Optional[Color]] = []
        self._attributes = set()

    def _tokens(self) -> Iterator[str]:
        return iter(self.text.split())

    def _add_color(self, color: Optional[Color], token: str) -> None:
        if len(self._colors) == 2:
            raise TooManyColorsError(self.text, token)
        self._colors.append(color)

    def _read_bright(self, tokens: Iterator[str], token: str) -> Tuple[Color, str]:
        """Consume the word after a standalone 'bright'."""
        following = next(tokens, None)
        if following is None or following.lower() not in BASE_COLORS:
            raise UnknownTokenError(self.text, token)
        return Named(BASE_COLORS[following.lower()].brighten()), f"{token} {following}"

    def parse(self) -> StyleDescriptor:
        self._colors = []
        self._attributes = set()
        tokens = self._tokens()
        for token in tokens:
            word = token.lower()

            attribute = classify_attribute(word)
            if attribute is not None:
                attr, enabled = attribute
                if enabled:
                    self._attributes.add(attr)
                else:
                    self._attributes.discard(attr)
                continue

            if word.startswith('#'):
                self._add_color(parse_hex(self.text, token), token)
                continue

            if word == BRIGHT:
                color, token = self._read_bright(tokens, token)
                self._add_color(color, token)
                continue

            color = classify_color(word)
            if color is None:
                raise UnknownTokenError(self.text, token)
            self._add_color(None if color is Slot.UNSET else color, token)

        colors = self._colors + [None] * (2 - len(self._colors))
        return StyleDescriptor(
            foreground=colors[0],
            background=colors[1],
            attributes=frozenset(self._attributes)
        )

def parse(text: str) -> StyleDescriptor:
    """
    Parse a style string in Git's color configuration syntax.

    Args:
        text: Style string such as "bold red blue" or "#0000ee ul"

    Returns:
        The parsed StyleDescriptor

    Raises:
        UnknownTokenError: A word is neither a color nor an attribute
        InvalidHexError: A '#' word is not exactly six hex digits
        TooManyColorsError: More than two color words were given
    """
    return StyleParser(text).parse()
