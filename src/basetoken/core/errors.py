"""
Error types for basetoken color handling, configuration, and fetching.
"""


class BasetokenError(Exception):
    """Base exception for all basetoken errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidColorError(BasetokenError, ValueError):
    """
    Raised when a color is not a valid 3- or 6-digit hex token.

    Every color conversion raises this same error so callers can
    surface bad seeds and bad scheme values uniformly.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class ConfigError(BasetokenError):
    """
    Raised when a configuration cannot be loaded or resolved.

    Examples:
    - Malformed YAML in basetoken.yaml
    - Structurally invalid sections (e.g. prefixes given as a list)
    - Unknown color format or palette scheme variant
    """

    pass


class FetchError(BasetokenError):
    """Raised when Open Props source CSS cannot be retrieved."""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)
