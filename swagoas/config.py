"""Flag enumerations and validated configuration for swag init / swag fmt.

Every value here is passed through to the swag executable unchanged once
it has been checked against the sets swag itself accepts.
"""

from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass

from .errors import ConfigError

# Property naming strategies understood by swag
SNAKE_CASE = "snakecase"
CAMEL_CASE = "camelcase"
PASCAL_CASE = "pascalcase"
PROPERTY_STRATEGIES = (SNAKE_CASE, CAMEL_CASE, PASCAL_CASE)

COLLECTION_FORMATS = ("csv", "multi", "pipes", "tsv", "ssv")

# 0 disabled, 1 models, 2 operations, 3 all
DEPENDENCY_LEVELS = (0, 1, 2, 3)

DEFAULT_LEFT_DELIM = "{{"
DEFAULT_RIGHT_DELIM = "}}"
DEFAULT_OVERRIDES_FILE = ".swaggo"
DEFAULT_SEARCH_DIR = "./"
DEFAULT_MAIN_FILE = "main.go"
DEFAULT_OUTPUT_DIR = "./docs"
DEFAULT_PARSE_DEPTH = 100


@dataclass(frozen=True)
class GeneratorConfig:
    """Options forwarded to ``swag init``."""

    search_dir: str = DEFAULT_SEARCH_DIR
    excludes: str = ""
    main_api_file: str = DEFAULT_MAIN_FILE
    prop_naming_strategy: str = CAMEL_CASE
    output_dir: str = DEFAULT_OUTPUT_DIR
    output_types: tuple[str, ...] = ("json",)
    parse_vendor: bool = False
    parse_dependency: int = 0
    markdown_files_dir: str = ""
    code_example_files_dir: str = ""
    parse_internal: bool = False
    generated_time: bool = False
    parse_depth: int = DEFAULT_PARSE_DEPTH
    required_by_default: bool = False
    instance_name: str = ""
    overrides_file: str = DEFAULT_OVERRIDES_FILE
    parse_go_list: bool = True
    tags: str = ""
    parse_extension: str = ""
    left_template_delim: str = DEFAULT_LEFT_DELIM
    right_template_delim: str = DEFAULT_RIGHT_DELIM
    package_name: str = ""
    collection_format: str = "csv"
    package_prefix: str = ""
    quiet: bool = False


@dataclass(frozen=True)
class FormatConfig:
    """Options forwarded to ``swag fmt``."""

    search_dir: str = DEFAULT_SEARCH_DIR
    excludes: str = ""
    main_file: str = DEFAULT_MAIN_FILE


def check_property_strategy(strategy: str) -> str:
    if strategy not in PROPERTY_STRATEGIES:
        raise ConfigError(f"not supported {strategy} propertyStrategy")
    return strategy


def parse_template_delims(value: str | None) -> tuple[str, str]:
    """Split a ``left,right`` delimiter pair.

    ``None`` means the flag was not given and yields the swag defaults.
    """
    if value is None:
        return DEFAULT_LEFT_DELIM, DEFAULT_RIGHT_DELIM

    delims = value.split(",")
    if len(delims) != 2:
        raise ConfigError("exactly two template delimiters must be provided, comma separated")
    if delims[0] == delims[1]:
        raise ConfigError("template delimiters must be different")
    return delims[0].strip(), delims[1].strip()


def check_collection_format(fmt: str) -> str:
    if fmt not in COLLECTION_FORMATS:
        raise ConfigError(f"not supported {fmt} collectionFormat")
    return fmt


def resolve_dependency_level(level: int, parse_dependency: bool) -> int:
    """Combine --parseDependencyLevel with the older --parseDependency switch."""
    if level == 0 and parse_dependency:
        level = 1
    if level not in DEPENDENCY_LEVELS:
        raise ConfigError(f"not supported {level} parseDependencyLevel")
    return level


def build_generator_config(args: Namespace) -> GeneratorConfig:
    """Validate parsed ``init`` flags and build the generator config."""
    strategy = check_property_strategy(args.property_strategy)
    left_delim, right_delim = parse_template_delims(args.template_delims)
    collection_format = check_collection_format(args.collection_format)
    level = resolve_dependency_level(args.parse_dependency_level, args.parse_dependency)

    return GeneratorConfig(
        search_dir=args.dir,
        excludes=args.exclude,
        main_api_file=args.general_info,
        prop_naming_strategy=strategy,
        output_dir=args.output,
        parse_vendor=args.parse_vendor,
        parse_dependency=level,
        markdown_files_dir=args.markdown_files,
        code_example_files_dir=args.code_example_files,
        parse_internal=args.parse_internal,
        generated_time=args.generated_time,
        parse_depth=args.parse_depth,
        required_by_default=args.required_by_default,
        instance_name=args.instance_name,
        overrides_file=args.overrides_file,
        parse_go_list=args.parse_go_list,
        tags=args.tags,
        parse_extension=args.parse_extension,
        left_template_delim=left_delim,
        right_template_delim=right_delim,
        package_name=args.package_name,
        collection_format=collection_format,
        package_prefix=args.package_prefix,
        quiet=args.quiet,
    )


def build_format_config(args: Namespace) -> FormatConfig:
    return FormatConfig(
        search_dir=args.dir,
        excludes=args.exclude,
        main_file=args.general_info,
    )
