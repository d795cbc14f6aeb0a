"""Exception types raised by chromashade."""


class ChromashadeError(Exception):
    """Base class for every error raised by this package."""


class InvalidChannelValue(ChromashadeError, ValueError):
    """A channel value lies outside the domain its constructor accepts.

    Raised for programmer errors such as an HSV saturation above one or a
    non-finite hue. Clamping of arithmetic results never raises this.
    """

    def __init__(self, channel: str, value: object, message: str | None = None) -> None:
        self.channel = channel
        self.value = value
        super().__init__(message or f"Invalid {channel} value: {value!r}")


class HexParseError(ChromashadeError, ValueError):
    """A hex color string could not be parsed."""

    def __init__(self, text: object, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse hex color {text!r}: {reason}")
