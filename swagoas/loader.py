"""Read, write and remove the JSON documents in the output directory."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

SWAGGER_FILE = "swagger.json"
OPENAPI_FILE = "openapi.json"

# Characters Go's encoding/json escapes, so output matches swag's byte for byte
_GO_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def swagger_path(output_dir: str | Path) -> Path:
    return Path(output_dir) / SWAGGER_FILE


def openapi_path(output_dir: str | Path) -> Path:
    return Path(output_dir) / OPENAPI_FILE


def load_document(path: str | Path) -> dict[str, Any]:
    """Load a JSON document from disk."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def dump_document(document: dict[str, Any]) -> str:
    """Serialize a document tab-indented with a trailing newline."""
    text = json.dumps(document, indent="\t", ensure_ascii=False)
    for char, escape in _GO_ESCAPES.items():
        text = text.replace(char, escape)
    return text + "\n"


def write_document(path: str | Path, document: dict[str, Any]) -> Path:
    """Write a document and return its path."""
    output = Path(path)
    output.write_text(dump_document(document), encoding="utf-8")
    os.chmod(output, 0o644)
    return output


def remove_document(path: str | Path) -> None:
    """Delete a document; a file that is already gone is fine."""
    Path(path).unlink(missing_ok=True)
