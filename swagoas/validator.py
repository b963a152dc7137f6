"""Validate the written OpenAPI document."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from openapi_spec_validator import OpenAPIV30SpecValidator
from referencing.exceptions import Unresolvable

from .errors import ValidationError
from .loader import load_document


def validate_document(document: dict[str, Any]) -> None:
    """Raise ValidationError unless ``document`` is valid OpenAPI 3.0."""
    version = str(document.get("openapi", ""))
    if not version.startswith("3.0"):
        raise ValidationError(f"expected an OpenAPI 3.0 document, got openapi={version or 'missing'}")

    try:
        errors = list(OpenAPIV30SpecValidator(document).iter_errors())
    except Unresolvable as exc:
        raise ValidationError(f"invalid OpenAPI 3.0 document: {exc}") from exc

    if errors:
        first = errors[0]
        location = "/".join(str(p) for p in first.path)
        detail = f"{location}: {first.message}" if location else first.message
        more = f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""
        raise ValidationError(f"invalid OpenAPI 3.0 document: {detail}{more}")


def validate_file(path: str | Path) -> None:
    """Reload ``path`` from disk and validate it."""
    validate_document(load_document(path))
