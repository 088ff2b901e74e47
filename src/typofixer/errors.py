"""Exceptions raised by typofixer."""


class TypoFixerError(Exception):
    """Base class for all typofixer errors."""


class ConfigError(TypoFixerError):
    """Raised when a lookup table configuration is invalid."""


class SourcePathError(TypoFixerError):
    """Raised when an input path cannot be found or read."""
