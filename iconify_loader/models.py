"""Data containers passed between pipeline stages."""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

OUTPUT_FORMATS = ("svg", "react", "json")

Namer = Callable[[str], str]


@dataclass(frozen=True)
class FileRecord:
    """One SVG file discovered under the input directory."""

    path: str
    name: str
    extension: str
    content: str


@dataclass
class SVGMetadata:
    """Icon metadata derived from a FileRecord and its root attributes."""

    name: str
    original_name: str
    path: str
    size: int
    width: Optional[str] = None
    height: Optional[str] = None
    view_box: Optional[str] = None
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: Optional[str] = None
    class_name: Optional[str] = None

    # Python attribute -> key used in generated JSON
    JSON_KEYS = (
        ("name", "name"),
        ("original_name", "originalName"),
        ("path", "path"),
        ("size", "size"),
        ("width", "width"),
        ("height", "height"),
        ("view_box", "viewBox"),
        ("fill", "fill"),
        ("stroke", "stroke"),
        ("stroke_width", "strokeWidth"),
        ("class_name", "className"),
    )

    @classmethod
    def from_file(cls, record: FileRecord, attributes: Dict[str, str]) -> "SVGMetadata":
        return cls(
            name=record.name,
            original_name=record.name,
            path=record.path,
            size=len(record.content.encode("utf-8")),
            width=attributes.get("width"),
            height=attributes.get("height"),
            view_box=attributes.get("viewBox"),
            fill=attributes.get("fill"),
            stroke=attributes.get("stroke"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, leaving out attributes that were not found."""
        data = {}
        for attr, key in self.JSON_KEYS:
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        return data


@dataclass
class ProcessedSVG:
    metadata: SVGMetadata
    content: str
    optimized: bool = False


@dataclass
class LoaderOptions:
    """
    Options for a single loader run.

    Args:
        input_dir: Directory scanned for .svg files.
        format: One of "svg", "react" or "json".
        output_dir: Where generated files go. Current directory if unset.
        svgo_options: SVGO option overrides (camelCase keys, plus "plugins").
        component_namer: Maps an icon name to a React component name.
        file_namer: Maps a name to the base name of a generated file.
        svg_props: Attributes appended to the root <svg> tag.
        ignore_patterns: Regexes; matching paths are skipped while walking.
    """

    input_dir: Optional[str] = None
    format: Optional[str] = None
    output_dir: Optional[str] = None
    svgo_options: Optional[Dict[str, Any]] = None
    optimize: bool = False
    generate_index: bool = False
    typescript: bool = False
    component_namer: Optional[Namer] = None
    svg_props: Optional[Dict[str, Any]] = None
    file_namer: Optional[Namer] = None
    include_subdirs: bool = False
    ignore_patterns: List[str] = field(default_factory=list)
    verbose: bool = False


@dataclass
class GenerationResult:
    success: bool = True
    files: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def failed(cls, message: str) -> "GenerationResult":
        """Result of a run that aborted before writing anything."""
        return cls(success=False, errors=[message])

    def finalize(self) -> "GenerationResult":
        self.success = not self.errors
        return self


@dataclass(frozen=True)
class OptimizationStats:
    original_size: int
    optimized_size: int
    bytes_saved: int
    compression_ratio: float
