# colorparse/style.py

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Union

class NamedColor(Enum):
    """The eight base terminal colors, their bright variants and the default."""
    BLACK = 'black'
    RED = 'red'
    GREEN = 'green'
    YELLOW = 'yellow'
    BLUE = 'blue'
    MAGENTA = 'magenta'
    CYAN = 'cyan'
    WHITE = 'white'
    BRIGHT_BLACK = 'bright_black'
    BRIGHT_RED = 'bright_red'
    BRIGHT_GREEN = 'bright_green'
    BRIGHT_YELLOW = 'bright_yellow'
    BRIGHT_BLUE = 'bright_blue'
    BRIGHT_MAGENTA = 'bright_magenta'
    BRIGHT_CYAN = 'bright_cyan'
    BRIGHT_WHITE = 'bright_white'
    DEFAULT = 'default'

    @property
    def is_bright(self) -> bool:
        return self.value.startswith('bright_')

    def brighten(self) -> "NamedColor":
        """Return the bright counterpart of a base color."""
        if self is NamedColor.DEFAULT or self.is_bright:
            raise ValueError(f"'{self.value}' has no bright variant")
        return NamedColor(f"bright_{self.value}")

def _check_byte(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")

@dataclass(frozen=True)
class Named:
    """A color referenced by name."""
    color: NamedColor

    def __post_init__(self):
        if not isinstance(self.color, NamedColor):
            raise ValueError(f"color must be a NamedColor, got {self.color!r}")

@dataclass(frozen=True)
class Indexed:
    """A color from the 256-entry terminal palette."""
    index: int

    def __post_init__(self):
        _check_byte('index', self.index)

@dataclass(frozen=True)
class Rgb:
    """A 24-bit color, as written in a ``#rrggbb`` token."""
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ('red', 'green', 'blue'):
            _check_byte(name, getattr(self, name))

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

Color = Union[Named, Indexed, Rgb]

class Attribute(Enum):
    """Text rendering modifiers, orthogonal to color."""
    BOLD = 'bold'
    DIMMED = 'dimmed'
    ITALIC = 'italic'
    UNDERLINE = 'underline'
    BLINK = 'blink'
    REVERSE = 'reverse'
    HIDDEN = 'hidden'
    STRIKETHROUGH = 'strikethrough'

@dataclass(frozen=True)
class StyleDescriptor:
    """
    The result of parsing a style string.

    A color left as None means "use the terminal default". Attributes are a
    set, so repeating a keyword never changes the result.
    """
    foreground: Optional[Color] = None
    background: Optional[Color] = None
    attributes: FrozenSet[Attribute] = field(default_factory=frozenset)

    def __post_init__(self):
        # Accept any iterable of attributes but always store a frozenset
        if not isinstance(self.attributes, frozenset):
            object.__setattr__(self, 'attributes', frozenset(self.attributes))

    @property
    def is_plain(self) -> bool:
        """True when nothing is set: no colors and no attributes."""
        return self.foreground is None and self.background is None and not self.attributes

    def has(self, attribute: Attribute) -> bool:
        return attribute in self.attributes
