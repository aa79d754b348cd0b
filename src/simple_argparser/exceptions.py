"""
Exception classes raised by simple_argparser.

Hierarchy:
- ArgParserError
    ├── UnknownArgument
    ├── MissingValue
    ├── MissingArgument
    ├── ConversionError (also a ValueError)
    ├── DuplicateDefinition
    └── DefinitionFileError (also a ValueError)

Parsing errors carry the offending token or argument name in ``key``.
"""

from typing import Any


class ArgParserError(Exception):
    """Base exception for every error raised by the argument parser."""

    def __init__(self, message: str, key: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        return self.message


class UnknownArgument(ArgParserError):
    """Raised when a key token does not resolve to any registered name or alias."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown argument: {key}", key)


class MissingArgument(ArgParserError):
    """
    Raised when a mandatory argument was not provided, or when a result is
    requested for a name that is not in the result set.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"Missing mandatory argument: {key}", key)


class MissingValue(ArgParserError):
    """Raised when a value-taking key is the last scanned token."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Found argument {key} with no value", key)


class ConversionError(ArgParserError, ValueError):
    """Raised when a typed reader cannot convert the stored raw string."""

    def __init__(self, raw_value: str, target: Any, key: str = "") -> None:
        target_name = getattr(target, "__name__", str(target))
        where = f" for argument {key}" if key else ""
        super().__init__(
            f"Cannot convert value {raw_value!r}{where} to {target_name}", key
        )
        self.raw_value = raw_value
        self.target = target


class DuplicateDefinition(ArgParserError):
    """Raised when a name or alias is registered twice."""

    def __init__(self, key: str, existing: str = "") -> None:
        owner = f" (already used by {existing})" if existing and existing != key else ""
        super().__init__(f"Argument name conflict: {key}{owner}", key)
        self.existing = existing


class DefinitionFileError(ArgParserError, ValueError):
    """Raised when a parser definition file is unsupported or malformed."""


__all__ = [
    "ArgParserError",
    "UnknownArgument",
    "MissingArgument",
    "MissingValue",
    "ConversionError",
    "DuplicateDefinition",
    "DefinitionFileError",
]
