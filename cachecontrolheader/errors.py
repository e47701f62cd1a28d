"""
Errors raised when a Cache-Control header value can't be parsed strictly.
"""


class CacheControlError(ValueError):
    """Base class for Cache-Control parsing errors."""


class UnknownDirective(CacheControlError):
    """A directive name that isn't recognised."""

    def __init__(self, directive: str) -> None:
        CacheControlError.__init__(self, f"unknown directive: {directive}")
        self.directive = directive


class InvalidDirectiveValue(CacheControlError):
    """A directive value that isn't valid delta-seconds."""

    def __init__(self, directive: str, value: str, cause: Exception) -> None:
        CacheControlError.__init__(
            self,
            f"failed to parse the value of directive({directive}={value}): {cause}",
        )
        self.directive = directive
        self.value = value
        self.cause = cause
