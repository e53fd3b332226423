"""Custom exceptions for Lexirate."""


class LexirateError(Exception):
    """Base exception for all Lexirate errors."""

    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(message, *args)


# Resource errors
class ResourceError(LexirateError):
    """Base error for bundled or on-disk text resources."""


class LexiconNotFoundError(ResourceError):
    """A lexicon resource is missing or could not be decoded."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Lexicon '{name}' could not be loaded")

