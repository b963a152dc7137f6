"""Run the external swag executable.

``swag init`` parses the annotated sources and writes swagger.json;
``swag fmt`` formats the annotation comments in place. Both are driven
entirely through their command line.
"""

from __future__ import annotations

import logging
import os
import subprocess

from .config import DEFAULT_LEFT_DELIM, DEFAULT_RIGHT_DELIM, FormatConfig, GeneratorConfig
from .errors import GeneratorError

logger = logging.getLogger(__name__)

SWAG_BIN_ENV = "SWAG_BIN"


def default_executable() -> str:
    return os.environ.get(SWAG_BIN_ENV) or "swag"


def build_init_args(config: GeneratorConfig) -> list[str]:
    """Translate a GeneratorConfig into ``swag init`` arguments."""
    args = [
        "init",
        "--dir", config.search_dir,
        "--generalInfo", config.main_api_file,
        "--propertyStrategy", config.prop_naming_strategy,
        "--output", config.output_dir,
        "--outputTypes", ",".join(config.output_types),
        "--parseDependencyLevel", str(config.parse_dependency),
        "--parseDepth", str(config.parse_depth),
        "--collectionFormat", config.collection_format,
    ]

    optional_strings = (
        ("--exclude", config.excludes),
        ("--markdownFiles", config.markdown_files_dir),
        ("--codeExampleFiles", config.code_example_files_dir),
        ("--instanceName", config.instance_name),
        ("--overridesFile", config.overrides_file),
        ("--tags", config.tags),
        ("--parseExtension", config.parse_extension),
        ("--packageName", config.package_name),
        ("--packagePrefix", config.package_prefix),
    )
    for flag, value in optional_strings:
        if value:
            args.extend([flag, value])

    switches = (
        ("--parseVendor", config.parse_vendor),
        ("--parseInternal", config.parse_internal),
        ("--generatedTime", config.generated_time),
        ("--requiredByDefault", config.required_by_default),
        ("--quiet", config.quiet),
    )
    args.extend(flag for flag, enabled in switches if enabled)

    if not config.parse_go_list:
        args.append("--parseGoList=false")

    delims = (config.left_template_delim, config.right_template_delim)
    if delims != (DEFAULT_LEFT_DELIM, DEFAULT_RIGHT_DELIM):
        args.extend(["--templateDelims", ",".join(delims)])

    return args


def build_fmt_args(config: FormatConfig) -> list[str]:
    """Translate a FormatConfig into ``swag fmt`` arguments."""
    args = ["fmt", "--dir", config.search_dir, "--generalInfo", config.main_file]
    if config.excludes:
        args.extend(["--exclude", config.excludes])
    return args


class SwagRunner:
    """Thin wrapper around the swag executable."""

    def __init__(self, executable: str | None = None) -> None:
        self.executable = executable or default_executable()

    def run(self, args: list[str]) -> None:
        command = [self.executable, *args]
        logger.debug("running %s", " ".join(command))
        try:
            result = subprocess.run(command, check=False)
        except FileNotFoundError as exc:
            raise GeneratorError(
                f"{self.executable} not found; install swag or set {SWAG_BIN_ENV}",
                command=command,
            ) from exc

        if result.returncode != 0:
            raise GeneratorError(
                f"{' '.join(command[:2])} exited with status {result.returncode}",
                command=command,
                returncode=result.returncode,
            )

    def init(self, config: GeneratorConfig) -> None:
        self.run(build_init_args(config))

    def fmt(self, config: FormatConfig) -> None:
        self.run(build_fmt_args(config))
