# colorparse/sheet.py

from typing import Dict, List, Mapping, Optional

from .errors import StyleParseError
from .logger import Logger
from .parser import parse
from .rendering import paint
from .style import StyleDescriptor

class StyleSheet:
    """
    Named styles parsed once from configuration strings.

    Mirrors how a Git-style tool reads ``color.<slot>`` keys at startup:
    every slot has a default string, the user may override some of them, and
    the parsed descriptors are kept for the lifetime of the sheet.
    """
    def __init__(
        self,
        defaults: Mapping[str, str],
        overrides: Optional[Mapping[str, str]] = None,
        logger: Optional[Logger] = None,
        strict: bool = False
    ):
        """
        Parse defaults and overrides.

        Args:
            defaults: Slot name -> style string; every entry must parse
            overrides: Slot name -> user style string replacing the default
            logger: Logger for rejected overrides (a disabled one if omitted)
            strict: Raise on a bad override instead of keeping the default

        Raises:
            StyleParseError: A default is invalid, or an override is invalid
                and strict is set
        """
        self.logger = logger or Logger('colorparse.sheet')
        self.strict = strict
        self._styles: Dict[str, StyleDescriptor] = {
            name: parse(text) for name, text in defaults.items()
        }
        for name, text in (overrides or {}).items():
            self._apply_override(name, text)

    def _apply_override(self, name: str, text: str) -> None:
        try:
            descriptor = parse(text)
        except StyleParseError as e:
            if self.strict:
                raise
            self.logger.warning(f"Ignoring style for '{name}': {e}")
            return
        self.logger.debug(f"Style '{name}' set to '{text}'")
        self._styles[name] = descriptor

    def get(self, name: str) -> StyleDescriptor:
        """Return the style for a slot, or a plain style for unknown slots."""
        return self._styles.get(name, StyleDescriptor())

    def names(self) -> List[str]:
        return sorted(self._styles)

    def __contains__(self, name: str) -> bool:
        return name in self._styles

    def paint(self, name: str, text: str, color_system: Optional[str] = "truecolor") -> str:
        """Render text with the style stored under name."""
        return paint(text, self.get(name), color_system=color_system)
