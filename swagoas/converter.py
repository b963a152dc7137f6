"""Swagger 2.0 to OpenAPI 3.0 conversion backends.

The structural mapping lives in external tools:
  - swagger2openapi  local executable (npm package of the same name)
  - http             a swagger-converter service, POST {url} with the
                     Swagger 2.0 JSON body, OpenAPI 3.0 JSON back
"""

from __future__ import annotations

import json
import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import Any, Protocol

import httpx

from .errors import ConfigError, ConversionError

logger = logging.getLogger(__name__)

SWAGGER2OPENAPI_BIN_ENV = "SWAGGER2OPENAPI_BIN"
DEFAULT_CONVERTER_URL = "https://converter.swagger.io/api/convert"
DEFAULT_TIMEOUT = 30.0

CONVERTERS = ("swagger2openapi", "http")


class Converter(Protocol):
    def convert(self, document: dict[str, Any]) -> dict[str, Any]: ...


class Swagger2OpenAPIConverter:
    """Convert by running the swagger2openapi executable."""

    def __init__(self, executable: str | None = None, patch: bool = False) -> None:
        self.executable = executable or os.environ.get(SWAGGER2OPENAPI_BIN_ENV) or "swagger2openapi"
        self.patch = patch

    def convert(self, document: dict[str, Any]) -> dict[str, Any]:
        with tempfile.TemporaryDirectory(prefix="swagoas-") as tmp:
            source = Path(tmp) / "swagger.json"
            source.write_text(json.dumps(document), encoding="utf-8")

            command = [self.executable]
            if self.patch:
                command.append("--patch")
            command.append(str(source))

            try:
                result = subprocess.run(command, capture_output=True, text=True, check=False)
            except FileNotFoundError as exc:
                raise ConversionError(
                    f"{self.executable} not found; install swagger2openapi or set {SWAGGER2OPENAPI_BIN_ENV}"
                ) from exc

        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise ConversionError(f"swagger2openapi failed: {detail}")

        try:
            converted = json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise ConversionError(f"swagger2openapi returned invalid JSON: {exc}") from exc
        if not isinstance(converted, dict):
            raise ConversionError("swagger2openapi did not return a JSON object")
        return converted


class HTTPConverter:
    """Convert through a swagger-converter HTTP service."""

    def __init__(
        self,
        url: str = DEFAULT_CONVERTER_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client

    def convert(self, document: dict[str, Any]) -> dict[str, Any]:
        logger.debug("posting swagger document to %s", self.url)
        client = self._client or httpx.Client(timeout=self.timeout)
        try:
            resp = client.post(
                self.url,
                json=document,
                headers={"Accept": "application/json"},
            )
            resp.raise_for_status()
            converted = resp.json()
        except httpx.HTTPStatusError as exc:
            raise ConversionError(
                f"converter at {self.url} returned {exc.response.status_code}"
            ) from exc
        except httpx.RequestError as exc:
            raise ConversionError(f"converter at {self.url} unreachable: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConversionError(f"converter at {self.url} returned invalid JSON") from exc
        finally:
            if self._client is None:
                client.close()

        if not isinstance(converted, dict):
            raise ConversionError(f"converter at {self.url} did not return a JSON object")
        return converted


def make_converter(
    name: str,
    url: str = DEFAULT_CONVERTER_URL,
    patch: bool = False,
) -> Converter:
    """Pick a conversion backend by name."""
    if name == "swagger2openapi":
        return Swagger2OpenAPIConverter(patch=patch)
    if name == "http":
        return HTTPConverter(url=url)
    raise ConfigError(f"unknown converter {name!r}; choose from {', '.join(CONVERTERS)}")
