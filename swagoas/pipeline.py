"""The init and fmt sequences.

init: swag init -> read swagger.json -> convert -> write openapi.json
      -> validate -> remove swagger.json

Every step's error propagates unchanged; swagger.json is only removed
once openapi.json has been written and validated.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .config import FormatConfig, GeneratorConfig
from .converter import Converter
from .loader import load_document, openapi_path, remove_document, swagger_path, write_document
from .log import RESULT_LOGGER_NAME
from .validator import validate_file

logger = logging.getLogger(__name__)
result_logger = logging.getLogger(RESULT_LOGGER_NAME)


class Generator(Protocol):
    def init(self, config: GeneratorConfig) -> None: ...


class Formatter(Protocol):
    def fmt(self, config: FormatConfig) -> None: ...


def run_init(config: GeneratorConfig, generator: Generator, converter: Converter) -> Path:
    """Generate swagger.json, convert it and leave only openapi.json behind."""
    generator.init(config)

    logger.info("opening swagger file")
    source = swagger_path(config.output_dir)
    swagger = load_document(source)

    logger.info("converting swagger 2.0 to openapi 3.0")
    openapi = converter.convert(swagger)

    output = openapi_path(config.output_dir)
    logger.info("writing openapi to %s", output)
    write_document(output, openapi)

    validate_file(output)

    logger.info("removing original swagger file %s", source)
    remove_document(source)

    result_logger.info("OpenAPI 3.0 has been successfully created and validated. %s", output)
    return output


def run_fmt(config: FormatConfig, formatter: Formatter) -> None:
    formatter.fmt(config)
