class ShortenerError(Exception):
    """Base class for errors raised by the shortener engine."""

    message = "Shortener error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidUrl(ShortenerError):
    message = "Invalid URL format"


class InvalidCustomCode(ShortenerError):
    message = "Invalid custom code"


class CustomCodeExists(ShortenerError):
    message = "Custom code already exists"


class CodeSpaceExhausted(ShortenerError):
    """No free code could be derived for an auto-generated short URL."""

    message = "Could not allocate a short code"
