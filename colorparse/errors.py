# colorparse/errors.py

class StyleParseError(ValueError):
    """
    Base class for every failure raised by ``parse``.

    Attributes:
        text: The complete style string that was being parsed
        token: The word that could not be accepted, as written in the input
    """
    reason = "invalid style"

    def __init__(self, text: str, token: str):
        self.text = text
        self.token = token
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f'Error parsing style "{self.text}": {self.reason}: "{self.token}"'

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.text, self.token) == (other.text, other.token)

    def __hash__(self):
        return hash((type(self), self.text, self.token))

    def __repr__(self):
        return f"{type(self).__name__}({self.text!r}, {self.token!r})"

class UnknownTokenError(StyleParseError):
    """A word that is neither a color nor an attribute keyword."""
    reason = "unknown word"

class InvalidHexError(UnknownTokenError):
    """A word starting with '#' that is not exactly six hex digits."""
    reason = "invalid hex color"

class TooManyColorsError(StyleParseError):
    """A color word after both foreground and background were taken."""

    def _describe(self) -> str:
        return f'Error parsing style "{self.text}": extra color "{self.token}"'
