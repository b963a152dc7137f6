"""Shared fixtures: sample documents and stand-ins for swag and the converter."""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any

import pytest

from swagoas import log
from swagoas.config import GeneratorConfig


# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------

@pytest.fixture
def swagger_doc() -> dict[str, Any]:
    """A minimal swag-style Swagger 2.0 document."""
    return {
        "swagger": "2.0",
        "info": {"title": "Pet API", "version": "1.0", "description": "Pets & <friends>"},
        "host": "localhost:8080",
        "basePath": "/api/v1",
        "paths": {
            "/pets/{id}": {
                "get": {
                    "summary": "Get a pet",
                    "parameters": [
                        {"name": "id", "in": "path", "required": True, "type": "integer"},
                    ],
                    "responses": {
                        "200": {"description": "OK", "schema": {"$ref": "#/definitions/main.Pet"}},
                    },
                },
            },
        },
        "definitions": {
            "main.Pet": {
                "type": "object",
                "properties": {"id": {"type": "integer"}, "name": {"type": "string"}},
            },
        },
    }


@pytest.fixture
def openapi_doc() -> dict[str, Any]:
    """What a converter makes of ``swagger_doc``."""
    return {
        "openapi": "3.0.0",
        "info": {"title": "Pet API", "version": "1.0", "description": "Pets & <friends>"},
        "servers": [{"url": "//localhost:8080/api/v1"}],
        "paths": {
            "/pets/{id}": {
                "get": {
                    "summary": "Get a pet",
                    "parameters": [
                        {"name": "id", "in": "path", "required": True, "schema": {"type": "integer"}},
                    ],
                    "responses": {
                        "200": {
                            "description": "OK",
                            "content": {
                                "application/json": {
                                    "schema": {"$ref": "#/components/schemas/main.Pet"},
                                },
                            },
                        },
                    },
                },
            },
        },
        "components": {
            "schemas": {
                "main.Pet": {
                    "type": "object",
                    "properties": {"id": {"type": "integer"}, "name": {"type": "string"}},
                },
            },
        },
    }


# ---------------------------------------------------------------------------
# Collaborator fakes
# ---------------------------------------------------------------------------

class FakeGenerator:
    """Writes a fixed swagger.json into the configured output dir."""

    def __init__(self, document: dict[str, Any], calls: list[str]) -> None:
        self.document = document
        self.calls = calls

    def init(self, config: GeneratorConfig) -> None:
        self.calls.append("generate")
        out = Path(config.output_dir)
        out.mkdir(parents=True, exist_ok=True)
        (out / "swagger.json").write_text(json.dumps(self.document))


class FakeConverter:
    """Returns a fixed OpenAPI document and records what it was given."""

    def __init__(self, document: dict[str, Any], calls: list[str]) -> None:
        self.document = document
        self.calls = calls
        self.received: dict[str, Any] | None = None

    def convert(self, document: dict[str, Any]) -> dict[str, Any]:
        self.calls.append("convert")
        self.received = document
        return self.document


@pytest.fixture
def calls() -> list[str]:
    return []


@pytest.fixture
def fake_generator(swagger_doc, calls) -> FakeGenerator:
    return FakeGenerator(swagger_doc, calls)


@pytest.fixture
def fake_converter(openapi_doc, calls) -> FakeConverter:
    return FakeConverter(openapi_doc, calls)


@pytest.fixture
def config(tmp_path) -> GeneratorConfig:
    return GeneratorConfig(output_dir=str(tmp_path / "docs"))


# ---------------------------------------------------------------------------
# Real executables, integration tests only
# ---------------------------------------------------------------------------

@pytest.fixture
def require_tools():
    """Skip unless both swag and swagger2openapi are on PATH."""
    for tool in ("swag", "swagger2openapi"):
        if shutil.which(tool) is None:
            pytest.skip(f"{tool} not installed")


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the stream handlers a test attached; they point at captured output."""
    yield
    logger = logging.getLogger(log.LOGGER_NAME)
    for handler in log._handlers:
        logger.removeHandler(handler)
    log._handlers.clear()
    logger.setLevel(logging.NOTSET)
