"""
Errors raised by the Maidenhead codec and Position type.

Every error derives from MaidenheadError, itself a ValueError, so callers
can catch either the whole family or plain ValueError.
"""


class MaidenheadError(ValueError):
    """Base class for all Maidenhead errors."""


class InvalidLocator(MaidenheadError):
    """A string is not a valid Maidenhead locator."""

    def __init__(self, locator):
        self.locator = locator
        super().__init__(
            f"{locator!r} is not a valid Maidenhead Locator System string"
        )


class OutOfRange(MaidenheadError):
    """A latitude or longitude falls outside its axis limit."""

    def __init__(self, name: str, limit: float, value=None):
        self.name = name
        self.limit = limit
        self.value = value
        super().__init__(f"{name} must be between -{limit} and +{limit}")


class InvalidPrecision(MaidenheadError):
    """Precision is not an integer in the supported range."""

    def __init__(self, precision, minimum: int = 1, maximum: int = 5):
        self.precision = precision
        super().__init__(
            f"precision must be an integer between {minimum} and {maximum}, "
            f"got {precision!r}"
        )


class InvalidCharacter(MaidenheadError):
    """A locator character is neither a decimal digit nor a Latin letter."""

    def __init__(self, character):
        self.character = character
        super().__init__(f"{character!r} is not a locator character")


class InvalidUnit(MaidenheadError):
    """A distance unit other than kilometres or metres was requested."""

    def __init__(self, unit):
        self.unit = unit
        super().__init__(f"unsupported distance unit {unit!r}, use 'km' or 'm'")
