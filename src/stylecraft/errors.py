"""
Error types for stylecraft configuration and stylesheet sources.

The compilation core is permissive and never raises for unusual style
input; these errors cover the edges where files and settings are read.
"""


class StylecraftError(Exception):
    """Base exception for all stylecraft errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(StylecraftError):
    """
    Raised when compiler configuration cannot be loaded.

    Examples:
    - Unreadable TOML
    - Out-of-range hoist threshold
    - Unknown theme key mode
    """

    pass


class SourceError(StylecraftError):
    """
    Raised when a stylesheet source file cannot be loaded.

    Examples:
    - Unsupported file extension
    - Invalid JSON / YAML / TOML
    - Sections with the wrong shape
    """

    pass
