"""Main orchestrator that ties the full pipeline together."""
import dataclasses
from pathlib import Path
from typing import List, Optional, Union

import yaml

from .errors import IconifyLoaderError, SVGProcessingError, ValidationError
from .models import (
    OUTPUT_FORMATS,
    FileRecord,
    GenerationResult,
    LoaderOptions,
    ProcessedSVG,
    SVGMetadata,
)
from .optimization.svg_optimizer import SVGOptimizer
from .output import GENERATORS
from .parsing.svg_reader import SVGReader, extract_svg_attributes, validate_svg_content
from .utils.logger import get_logger, verbosity

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "config" / "defaults.yaml"


class IconifyLoader:
    """
    Convert a directory of SVG icons into React components, SVG strings
    or JSON metadata.

    Pipeline:
      1. Validate options (before any I/O)
      2. Collect SVG files from the input directory
      3. Validate, extract attributes and optionally optimize each file
      4. Render everything with the generator chosen by format
    """

    def __init__(
        self,
        options: LoaderOptions,
        config: dict = None,
        config_path: str = None,
    ):
        """
        Args:
            options: What to convert and how.
            config: Engine settings overriding the packaged defaults.
            config_path: Path to a YAML file with engine settings.
        """
        self.validate_options(options)
        self.options = options
        self.config = self._load_config(config, config_path)

        self.reader = SVGReader(
            include_subdirs=options.include_subdirs,
            ignore_patterns=options.ignore_patterns or [],
        )
        self.optimizer = SVGOptimizer(self.config)

    @classmethod
    def load(cls, options: LoaderOptions, **kwargs) -> GenerationResult:
        """Build a loader and run it once."""
        return cls(options, **kwargs).process()

    @staticmethod
    def _load_config(config: Optional[dict], config_path: Optional[str]) -> dict:
        base_config = load_defaults()

        if config_path:
            with open(config_path, encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
            base_config = _deep_merge(base_config, file_config)

        if config:
            base_config = _deep_merge(base_config, config)

        return base_config

    @staticmethod
    def validate_options(options: LoaderOptions) -> None:
        if not options.input_dir:
            raise ValidationError("Input directory is required")

        if not options.format:
            raise ValidationError("Output format is required")

        if options.format not in OUTPUT_FORMATS:
            raise ValidationError(
                f"Invalid format. Must be one of: {', '.join(OUTPUT_FORMATS)}",
                {"format": options.format, "valid_formats": list(OUTPUT_FORMATS)},
            )

        if options.svgo_options:
            SVGOptimizer.validate_options(options.svgo_options)

    @staticmethod
    def get_default_options() -> dict:
        """Loader defaults from the packaged config, as LoaderOptions keyword arguments."""
        return dict(load_defaults().get("loader", {}))

    @classmethod
    def merge_options(cls, options: Union[LoaderOptions, dict]) -> LoaderOptions:
        """
        Fill options the caller did not set from the packaged defaults.

        A dict is merged key by key. For a LoaderOptions instance, fields
        still at their dataclass default are taken from the defaults.
        """
        defaults = cls.get_default_options()
        if isinstance(options, LoaderOptions):
            blank = LoaderOptions()
            user = {
                f.name: getattr(options, f.name)
                for f in dataclasses.fields(LoaderOptions)
                if getattr(options, f.name) != getattr(blank, f.name)
            }
        else:
            user = dict(options)
        return LoaderOptions(**{**defaults, **user})

    def process(self) -> GenerationResult:
        """
        Run the whole pipeline.

        Raises:
            ValidationError: no SVG files were found.
            FileSystemError: the input could not be read or the output
                directory could not be created.
            SVGProcessingError: an input file is not a usable SVG, or an
                unexpected error occurred (original kept in details).
        """
        with verbosity(self.options.verbose):
            return self._process()

    def _process(self) -> GenerationResult:
        opts = self.options
        logger.info(f"Starting IconifyLoader: {opts.input_dir} -> {opts.format}")
        logger.debug(f"Optimization: {'enabled' if opts.optimize else 'disabled'}")

        try:
            logger.info("Step 1/3: Reading SVG files...")
            files = self.read_svgs()
            logger.info(f"  Found {len(files)} SVG files")

            logger.info("Step 2/3: Processing SVG files...")
            warnings: List[str] = []
            processed = self.process_svgs(files, warnings)

            logger.info(f"Step 3/3: Generating {opts.format} output...")
            result = self.generate_output(processed)
        except IconifyLoaderError:
            raise
        except Exception as e:
            raise SVGProcessingError(
                f"IconifyLoader process failed: {e}",
                {"original_error": e},
            ) from e

        result.warnings[:0] = warnings

        logger.info(f"Generated {len(result.files)} files")
        if result.errors:
            logger.warning(f"Errors: {len(result.errors)}")
        if result.warnings:
            logger.warning(f"Warnings: {len(result.warnings)}")
        return result

    def read_svgs(self) -> List[FileRecord]:
        files = self.reader.read_svg_files(self.options.input_dir)
        if not files:
            raise ValidationError(
                f"No SVG files found in directory: {self.options.input_dir}",
                {"input_dir": self.options.input_dir},
            )
        return files

    def process_svgs(self, files: List[FileRecord], warnings: List[str]) -> List[ProcessedSVG]:
        """Validate, describe and optionally optimize each file, stopping at the first bad one."""
        processed = []

        for record in files:
            try:
                validate_svg_content(record.content, record.name)
            except IconifyLoaderError as e:
                logger.error(f"Failed to process {record.name}: {e}")
                raise

            metadata = SVGMetadata.from_file(record, extract_svg_attributes(record.content))
            content = record.content
            optimized = False

            if self.options.optimize:
                try:
                    content = self.optimizer.optimize(content, self.options.svgo_options, record.name)
                    optimized = True
                    stats = SVGOptimizer.get_optimization_stats(record.content, content)
                    logger.debug(
                        f"Optimized {record.name}: {stats.bytes_saved} bytes saved "
                        f"({stats.compression_ratio * 100:.1f}%)"
                    )
                except SVGProcessingError as e:
                    message = f"Failed to optimize {record.name}: {e}"
                    warnings.append(message)
                    logger.warning(message)
                    content = record.content

            processed.append(ProcessedSVG(metadata=metadata, content=content, optimized=optimized))

        return processed

    def generate_output(self, svgs: List[ProcessedSVG]) -> GenerationResult:
        generator_cls = GENERATORS.get(self.options.format)
        if generator_cls is None:
            raise ValidationError(
                f"Unsupported output format: {self.options.format}",
                {"format": self.options.format},
            )
        return generator_cls(self.options).generate(svgs)


def load_defaults() -> dict:
    if DEFAULTS_PATH.exists():
        with open(DEFAULTS_PATH, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dicts. Override takes precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
