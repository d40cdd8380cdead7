"""Errors raised while reading a scene description."""

RED = "\033[1;31m"
GREEN = "\033[1;32m"
RESET = "\033[0m"


class ConfigError(ValueError):
    """A scene file is missing, malformed or inconsistent."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


def format_error(message):
    """Return the coloured report line for *message*, as shown on stderr."""
    return f"{RED}Error : {RESET}{message}"