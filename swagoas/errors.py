"""Exceptions raised by the swag-oas pipeline."""

from __future__ import annotations


class SwagOASError(Exception):
    """Base class for every error the CLI reports and exits on."""


class ConfigError(SwagOASError):
    """A flag value is outside its accepted set."""


class GeneratorError(SwagOASError):
    """The external swag executable failed."""

    def __init__(self, message: str, command: list[str] | None = None, returncode: int | None = None) -> None:
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode


class ConversionError(SwagOASError):
    """Swagger 2.0 to OpenAPI 3.0 conversion failed."""


class ValidationError(SwagOASError):
    """The written document is not a valid OpenAPI 3.0 document."""
