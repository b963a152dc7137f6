"""Tests for the init / fmt sequences."""

import json
import logging
from pathlib import Path

import pytest

from swagoas.config import FormatConfig
from swagoas.errors import ConversionError, GeneratorError, ValidationError
from swagoas.pipeline import run_fmt, run_init


class TestRunInit:
    def test_replaces_swagger_with_openapi(self, config, fake_generator, fake_converter, openapi_doc):
        output = run_init(config, fake_generator, fake_converter)

        docs = Path(config.output_dir)
        assert output == docs / "openapi.json"
        assert json.loads(output.read_text()) == openapi_doc
        assert not (docs / "swagger.json").exists()

    def test_converter_gets_generated_document(self, config, fake_generator, fake_converter, swagger_doc):
        run_init(config, fake_generator, fake_converter)
        assert fake_converter.received == swagger_doc

    def test_steps_in_order(self, config, fake_generator, fake_converter, calls):
        run_init(config, fake_generator, fake_converter)
        assert calls == ["generate", "convert"]

    def test_output_is_tab_indented(self, config, fake_generator, fake_converter):
        output = run_init(config, fake_generator, fake_converter)
        text = output.read_text()
        assert text.startswith('{\n\t"openapi"')
        assert text.endswith("}\n")

    def test_log_messages(self, config, fake_generator, fake_converter, caplog):
        caplog.set_level(logging.INFO, logger="swagoas")
        output = run_init(config, fake_generator, fake_converter)

        messages = [r.getMessage() for r in caplog.records]
        swagger = Path(config.output_dir) / "swagger.json"
        assert messages == [
            "opening swagger file",
            "converting swagger 2.0 to openapi 3.0",
            f"writing openapi to {output}",
            f"removing original swagger file {swagger}",
            f"OpenAPI 3.0 has been successfully created and validated. {output}",
        ]
        assert caplog.records[-1].name == "swagoas.result"

    def test_generator_failure_stops_everything(self, config, fake_converter, calls):
        class FailingGenerator:
            def init(self, config):
                calls.append("generate")
                raise GeneratorError("swag init exited with status 1", returncode=1)

        with pytest.raises(GeneratorError):
            run_init(config, FailingGenerator(), fake_converter)
        assert calls == ["generate"]

    def test_missing_swagger_file(self, config, fake_converter):
        class SilentGenerator:
            def init(self, config):
                pass

        with pytest.raises(FileNotFoundError):
            run_init(config, SilentGenerator(), fake_converter)

    def test_conversion_failure_keeps_swagger(self, config, fake_generator):
        class FailingConverter:
            def convert(self, document):
                raise ConversionError("swagger2openapi failed: boom")

        with pytest.raises(ConversionError):
            run_init(config, fake_generator, FailingConverter())

        docs = Path(config.output_dir)
        assert (docs / "swagger.json").exists()
        assert not (docs / "openapi.json").exists()

    def test_invalid_output_keeps_swagger(self, config, fake_generator, fake_converter):
        fake_converter.document = {"openapi": "3.0.0", "paths": {}}

        with pytest.raises(ValidationError):
            run_init(config, fake_generator, fake_converter)

        docs = Path(config.output_dir)
        assert (docs / "swagger.json").exists()
        assert (docs / "openapi.json").exists()


class TestRunFmt:
    def test_delegates(self):
        seen = []

        class Formatter:
            def fmt(self, config):
                seen.append(config)

        config = FormatConfig(search_dir="./api")
        run_fmt(config, Formatter())
        assert seen == [config]
