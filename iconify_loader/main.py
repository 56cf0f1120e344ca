"""CLI entry point."""
import argparse
import dataclasses
import sys

import yaml

from .errors import IconifyLoaderError, ValidationError
from .loader import IconifyLoader
from .models import OUTPUT_FORMATS, GenerationResult, LoaderOptions
from .utils.logger import get_logger, verbosity

logger = get_logger("cli")


def _parse_prop(value: str):
    key, sep, prop = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, prop


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Iconify Loader - Convert SVG icons to React components, SVG strings or JSON"
    )

    parser.add_argument("input_dir", help="Directory containing SVG files")
    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        required=True,
        help="Output format",
    )
    parser.add_argument(
        "--output",
        "-o",
        dest="output_dir",
        default=None,
        help="Output directory (defaults to the current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (loader defaults and optimizer settings)",
    )
    parser.add_argument(
        "--no-optimize",
        action="store_true",
        help="Skip SVGO optimization",
    )
    parser.add_argument(
        "--no-index",
        action="store_true",
        help="Do not generate an index file",
    )
    parser.add_argument(
        "--javascript",
        action="store_true",
        help="Emit .jsx/.js instead of .tsx/.ts",
    )
    parser.add_argument(
        "--no-subdirs",
        action="store_true",
        help="Only read the top level of the input directory",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Regex of paths to skip (repeatable, replaces the defaults)",
    )
    parser.add_argument(
        "--svg-prop",
        action="append",
        type=_parse_prop,
        default=None,
        metavar="KEY=VALUE",
        help="Attribute added to every root <svg> (repeatable)",
    )
    parser.add_argument(
        "--float-precision",
        type=int,
        default=None,
        help="SVGO floatPrecision (0-10)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose logging and verbose JSON output",
    )
    return parser


def build_options(args: argparse.Namespace, file_config: dict = None) -> LoaderOptions:
    """Turn parsed arguments into LoaderOptions on top of the configured defaults."""
    values = IconifyLoader.get_default_options()
    values.update((file_config or {}).get("loader", {}) or {})

    values["input_dir"] = args.input_dir
    values["format"] = args.format
    if args.output_dir:
        values["output_dir"] = args.output_dir
    if args.no_optimize:
        values["optimize"] = False
    if args.no_index:
        values["generate_index"] = False
    if args.javascript:
        values["typescript"] = False
    if args.no_subdirs:
        values["include_subdirs"] = False
    if args.ignore:
        values["ignore_patterns"] = args.ignore
    if args.svg_prop:
        values["svg_props"] = dict(args.svg_prop)
    if args.float_precision is not None:
        values["svgo_options"] = dict(values.get("svgo_options") or {}, floatPrecision=args.float_precision)
    if args.verbose:
        values["verbose"] = True

    unknown = set(values) - {f.name for f in dataclasses.fields(LoaderOptions)}
    if unknown:
        raise ValidationError(f"Unknown loader options: {', '.join(sorted(unknown))}")

    return LoaderOptions(**values)


def report(result: GenerationResult) -> None:
    for path in result.files:
        logger.info(f"  wrote {path}")
    for warning in result.warnings:
        logger.warning(warning)
    for error in result.errors:
        logger.error(error)

    if result.success:
        logger.info(f"Success! Generated {len(result.files)} files")
    else:
        logger.error(f"Generation failed with {len(result.errors)} error(s)")


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    with verbosity(args.verbose):
        return run(args)


def run(args: argparse.Namespace) -> int:
    try:
        file_config = {}
        if args.config:
            with open(args.config, encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}

        options = build_options(args, file_config)
        result = IconifyLoader.load(options, config_path=args.config)

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except IconifyLoaderError as e:
        logger.debug(f"{e.code}: {e.details}")
        result = GenerationResult.failed(str(e))

    report(result)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
