"""
Convert directories of SVG icons into React components, cleaned SVG
string modules or JSON metadata catalogs.
"""
__version__ = "1.0.0"

from .errors import FileSystemError, IconifyLoaderError, SVGProcessingError, ValidationError
from .loader import IconifyLoader
from .models import (
    FileRecord,
    GenerationResult,
    LoaderOptions,
    OptimizationStats,
    ProcessedSVG,
    SVGMetadata,
)
from .optimization.svg_optimizer import SVGOptimizer
from .output import JSONGenerator, ReactGenerator, SVGGenerator
from .parsing.svg_reader import SVGReader

__all__ = [
    "FileRecord",
    "FileSystemError",
    "GenerationResult",
    "IconifyLoader",
    "IconifyLoaderError",
    "JSONGenerator",
    "LoaderOptions",
    "OptimizationStats",
    "ProcessedSVG",
    "ReactGenerator",
    "SVGGenerator",
    "SVGMetadata",
    "SVGOptimizer",
    "SVGProcessingError",
    "SVGReader",
    "ValidationError",
]
