"""Discover SVG files on disk and pull basic attributes out of them."""
import os
import re
from typing import Dict, Iterable, List, Pattern

from ..errors import FileSystemError, SVGProcessingError, ValidationError
from ..models import FileRecord
from ..utils.logger import get_logger

logger = get_logger(__name__)

SVG_EXTENSIONS = (".svg",)

ATTRIBUTE_PATTERNS = {
    "viewBox": re.compile(r"viewBox\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE),
    "width": re.compile(r"width\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE),
    "height": re.compile(r"height\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE),
    "fill": re.compile(r"fill\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE),
    "stroke": re.compile(r"stroke\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE),
}


def extract_svg_attributes(content: str) -> Dict[str, str]:
    """
    Scan raw SVG text for root-level presentation attributes.

    Each attribute is matched independently and the first occurrence wins.
    This is a text scan, not an XML parse: attributes that are not found
    are simply left out of the result.
    """
    attributes = {}
    for name, pattern in ATTRIBUTE_PATTERNS.items():
        match = pattern.search(content)
        if match:
            attributes[name] = match.group(1)
    return attributes


def validate_svg_content(content: str, file_name: str) -> None:
    """Reject content that cannot plausibly be an SVG document."""
    if not content or not isinstance(content, str):
        raise ValidationError(
            f"Invalid SVG content in file: {file_name}",
            {"file_name": file_name, "content_length": len(content or "")},
        )

    trimmed = content.strip()

    if "<svg" not in trimmed:
        raise SVGProcessingError(
            f"File does not appear to be a valid SVG: {file_name}",
            {"file_name": file_name, "content_preview": trimmed[:100]},
        )

    if "</svg>" not in trimmed and not trimmed.endswith("/>"):
        raise SVGProcessingError(
            f"SVG file appears to be malformed: {file_name}",
            {"file_name": file_name, "content_preview": trimmed[:100]},
        )


class SVGReader:
    """Walk an input directory and load every SVG file found in it."""

    def __init__(self, include_subdirs: bool = True, ignore_patterns: Iterable[str] = ()):
        self.include_subdirs = include_subdirs
        self.ignore_patterns: List[Pattern] = []
        for pattern in ignore_patterns:
            try:
                self.ignore_patterns.append(re.compile(pattern))
            except re.error as e:
                raise ValidationError(
                    f"Invalid ignore pattern {pattern!r}: {e}",
                    {"pattern": pattern},
                ) from e

    def read_svg_files(self, input_dir: str) -> List[FileRecord]:
        """
        Collect SVG files below input_dir.

        Returns:
            FileRecords in directory listing order. Empty when nothing matches.

        Raises:
            FileSystemError: a directory could not be listed or a file read.
        """
        files: List[FileRecord] = []
        self._read_directory(input_dir, files)
        svg_files = [f for f in files if f.extension in SVG_EXTENSIONS]
        logger.debug(f"Walked {input_dir}: {len(files)} files, {len(svg_files)} SVG")
        return svg_files

    def _read_directory(self, dir_path: str, files: List[FileRecord]) -> None:
        try:
            entries = list(os.scandir(dir_path))
        except OSError as e:
            raise FileSystemError(
                f"Failed to read directory: {dir_path}",
                {"original_error": e, "dir_path": dir_path},
            ) from e

        for entry in entries:
            full_path = os.path.join(dir_path, entry.name)

            if self._should_ignore(full_path):
                continue

            # Symlinks are neither walked nor read
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError as e:
                raise FileSystemError(
                    f"Failed to read directory: {dir_path}",
                    {"original_error": e, "dir_path": dir_path},
                ) from e

            if is_dir:
                if self.include_subdirs:
                    self._read_directory(full_path, files)
            elif is_file:
                files.append(self._read_file(full_path))

    @staticmethod
    def _read_file(file_path: str) -> FileRecord:
        base, extension = os.path.splitext(os.path.basename(file_path))
        extension = extension.lower()

        if extension not in SVG_EXTENSIONS:
            # Only SVG content is ever used, skip reading everything else
            return FileRecord(path=file_path, name=base, extension=extension, content="")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileSystemError(
                f"Failed to read file: {file_path}",
                {"original_error": e, "file_path": file_path},
            ) from e

        return FileRecord(path=file_path, name=base, extension=extension, content=content)

    def _should_ignore(self, path: str) -> bool:
        return any(pattern.search(path) for pattern in self.ignore_patterns)

    @staticmethod
    def directory_exists(dir_path: str) -> bool:
        return os.path.isdir(dir_path)

    @staticmethod
    def ensure_directory_exists(dir_path: str) -> None:
        """Create dir_path and any missing parents."""
        try:
            os.makedirs(dir_path, exist_ok=True)
        except OSError as e:
            raise FileSystemError(
                f"Failed to create directory: {dir_path}",
                {"original_error": e, "dir_path": dir_path},
            ) from e
