"""Exceptions for hot-config."""

from pathlib import Path


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigFileError(ConfigError):
    """Error discovering or reading configuration files."""

    pass


class ConfigValidationError(ConfigError):
    """Error validating load options."""

    pass


class ParserError(ConfigError):
    """Error decoding a configuration file.

    Attributes:
        path: File that failed to parse
        cause: Underlying exception raised by the parser
    """

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse configuration file {path}: {cause}")
