# colorparse/rendering.py

from typing import Optional

from rich.color import Color as RichColor, ColorSystem
from rich.style import Style

from .style import Attribute, Color, Indexed, Named, Rgb, StyleDescriptor

# Attribute -> keyword argument of rich.style.Style
RICH_ATTRIBUTES = {
    Attribute.BOLD: 'bold',
    Attribute.DIMMED: 'dim',
    Attribute.ITALIC: 'italic',
    Attribute.UNDERLINE: 'underline',
    Attribute.BLINK: 'blink',
    Attribute.REVERSE: 'reverse',
    Attribute.HIDDEN: 'conceal',
    Attribute.STRIKETHROUGH: 'strike',
}

COLOR_SYSTEMS = {
    'standard': ColorSystem.STANDARD,
    '256': ColorSystem.EIGHT_BIT,
    'truecolor': ColorSystem.TRUECOLOR,
    'windows': ColorSystem.WINDOWS,
}

def to_rich_color(color: Color) -> RichColor:
    """Convert a parsed color into the equivalent Rich color."""
    if isinstance(color, Named):
        return RichColor.parse(color.color.value)
    if isinstance(color, Indexed):
        return RichColor.from_ansi(color.index)
    if isinstance(color, Rgb):
        return RichColor.from_rgb(color.red, color.green, color.blue)
    raise TypeError(f"Not a color: {color!r}")

def to_rich_style(descriptor: StyleDescriptor) -> Style:
    """
    Build a Rich style from a parsed descriptor.

    Args:
        descriptor: Result of ``parse``

    Returns:
        rich.style.Style with the same colors and attributes; attributes the
        descriptor does not carry are left unset rather than switched off
    """
    flags = {RICH_ATTRIBUTES[attr]: True for attr in descriptor.attributes}
    return Style(
        color=to_rich_color(descriptor.foreground) if descriptor.foreground is not None else None,
        bgcolor=to_rich_color(descriptor.background) if descriptor.background is not None else None,
        **flags
    )

def paint(text: str, descriptor: StyleDescriptor,
          color_system: Optional[str] = "truecolor") -> str:
    """
    Wrap text in the ANSI sequences for a descriptor.

    Args:
        text: Text to style
        descriptor: Parsed style
        color_system: Rich color system name ('standard', "256", "truecolor")
            or None to return the text unchanged

    Returns:
        Styled text, or the original text for a plain descriptor
    """
    if color_system is None or descriptor.is_plain:
        return text
    if color_system not in COLOR_SYSTEMS:
        raise ValueError(f"Unknown color system: {color_system!r}")
    return to_rich_style(descriptor).render(text, color_system=COLOR_SYSTEMS[color_system])
