"""Command-line front-end.

  swag-oas init   generate swagger.json with swag and convert it to openapi.json
  swag-oas fmt    format swag comments

Flag names and short aliases follow the swag CLI so existing invocations
keep working.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from . import __version__
from .config import (
    CAMEL_CASE,
    DEFAULT_MAIN_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OVERRIDES_FILE,
    DEFAULT_PARSE_DEPTH,
    DEFAULT_SEARCH_DIR,
    PASCAL_CASE,
    SNAKE_CASE,
    build_format_config,
    build_generator_config,
)
from .converter import CONVERTERS, DEFAULT_CONVERTER_URL, make_converter
from .errors import SwagOASError
from .log import configure
from .pipeline import run_fmt, run_init
from .swag import SwagRunner

logger = logging.getLogger(__name__)

CONVERTER_ENV = "SWAG_OAS_CONVERTER"
CONVERTER_URL_ENV = "SWAG_OAS_CONVERTER_URL"

_TRUE = {"1", "t", "true", "yes", "y", "on"}
_FALSE = {"0", "f", "false", "no", "n", "off"}


def _bool_value(value: str) -> bool:
    """Accept ``--flag=false`` style values."""
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {value!r}")


def _add_source_flags(parser: argparse.ArgumentParser) -> None:
    """Flags shared by init and fmt."""
    parser.add_argument(
        "--dir", "-d", dest="dir", default=DEFAULT_SEARCH_DIR,
        help="Directories you want to parse, comma separated and general-info file must be in the first one",
    )
    parser.add_argument(
        "--exclude", dest="exclude", default="",
        help="Exclude directories and files when searching, comma separated",
    )
    parser.add_argument(
        "--generalInfo", "-g", dest="general_info", default=DEFAULT_MAIN_FILE,
        help="Go file path in which 'swagger general API Info' is written",
    )


def _add_init_flags(parser: argparse.ArgumentParser) -> None:
    _add_source_flags(parser)
    parser.add_argument("--quiet", "-q", action="store_true", help="Make the logger quiet.")
    parser.add_argument(
        "--propertyStrategy", "-p", dest="property_strategy", default=CAMEL_CASE,
        help=f"Property Naming Strategy like {SNAKE_CASE},{CAMEL_CASE},{PASCAL_CASE}",
    )
    parser.add_argument(
        "--output", "-o", dest="output", default=DEFAULT_OUTPUT_DIR,
        help="Output directory for the generated openapi.json",
    )
    parser.add_argument(
        "--parseVendor", dest="parse_vendor", action="store_true",
        help="Parse go files in 'vendor' folder, disabled by default",
    )
    parser.add_argument(
        "--parseDependencyLevel", "-pdl", dest="parse_dependency_level", type=int, default=0,
        help="Parse go files inside dependency folder, 0 disabled, 1 only parse models, "
             "2 only parse operations, 3 parse all",
    )
    parser.add_argument(
        "--parseDependency", "-pd", dest="parse_dependency", action="store_true",
        help="Parse go files inside dependency folder, disabled by default",
    )
    parser.add_argument(
        "--markdownFiles", "-md", dest="markdown_files", default="",
        help="Parse folder containing markdown files to use as description, disabled by default",
    )
    parser.add_argument(
        "--codeExampleFiles", "-cef", dest="code_example_files", default="",
        help="Parse folder containing code example files to use for the x-codeSamples extension, "
             "disabled by default",
    )
    parser.add_argument(
        "--parseInternal", dest="parse_internal", action="store_true",
        help="Parse go files in internal packages, disabled by default",
    )
    parser.add_argument(
        "--generatedTime", dest="generated_time", action="store_true",
        help="Generate timestamp at the top of docs.go, disabled by default",
    )
    parser.add_argument(
        "--parseDepth", dest="parse_depth", type=int, default=DEFAULT_PARSE_DEPTH,
        help="Dependency parse depth",
    )
    parser.add_argument(
        "--requiredByDefault", dest="required_by_default", action="store_true",
        help="Set validation required for all fields by default",
    )
    parser.add_argument(
        "--instanceName", dest="instance_name", default="",
        help="Name of the swagger document instance. Optional.",
    )
    parser.add_argument(
        "--overridesFile", dest="overrides_file", default=DEFAULT_OVERRIDES_FILE,
        help="File to read global type overrides from.",
    )
    parser.add_argument(
        "--parseGoList", dest="parse_go_list", type=_bool_value, nargs="?", const=True, default=True,
        help="Parse dependency via 'go list' (default true, --parseGoList=false to disable)",
    )
    parser.add_argument(
        "--parseExtension", dest="parse_extension", default="",
        help="Parse only those operations that match given extension",
    )
    parser.add_argument(
        "--tags", "-t", dest="tags", default="",
        help="A comma-separated list of tags to filter the APIs for which the documentation is "
             "generated. Tags prefixed with '!' are excluded",
    )
    parser.add_argument(
        "--templateDelims", "-td", dest="template_delims", default=None,
        help='Custom delimiters for Go template generation, as leftDelim,rightDelim. For example: "[[,]]"',
    )
    parser.add_argument(
        "--packageName", dest="package_name", default="",
        help="A package name of docs.go, using output directory name by default",
    )
    parser.add_argument(
        "--collectionFormat", "-cf", dest="collection_format", default="csv",
        help="Set default collection format",
    )
    parser.add_argument(
        "--packagePrefix", dest="package_prefix", default="",
        help="Parse only packages whose import path match the given prefix, comma separated",
    )
    parser.add_argument(
        "--converter", dest="converter", choices=CONVERTERS,
        default=os.environ.get(CONVERTER_ENV) or "swagger2openapi",
        help="Swagger 2.0 to OpenAPI 3.0 conversion backend",
    )
    parser.add_argument(
        "--converterUrl", dest="converter_url",
        default=os.environ.get(CONVERTER_URL_ENV) or DEFAULT_CONVERTER_URL,
        help="swagger-converter endpoint used by --converter http",
    )
    parser.add_argument(
        "--patch", dest="patch", action="store_true",
        help="Let swagger2openapi fix up minor errors in the source document",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swag-oas",
        description="Automatically generate RESTful API documentation of swag annotation to openapi 3.0.",
    )
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    init = sub.add_parser("init", aliases=["i"], help="Create openapi 3.0 file")
    _add_init_flags(init)
    init.set_defaults(handler=_init_command)

    fmt = sub.add_parser("fmt", aliases=["f"], help="format swag comments")
    _add_source_flags(fmt)
    fmt.set_defaults(handler=_fmt_command)

    return parser


def _init_command(args: argparse.Namespace) -> None:
    config = build_generator_config(args)
    converter = make_converter(args.converter, url=args.converter_url, patch=args.patch)
    run_init(config, SwagRunner(), converter)


def _fmt_command(args: argparse.Namespace) -> None:
    run_fmt(build_format_config(args), SwagRunner())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure(quiet=getattr(args, "quiet", False))

    if args.command is None:
        parser.print_help(sys.stdout)
        return 0

    try:
        args.handler(args)
    except (SwagOASError, OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0
