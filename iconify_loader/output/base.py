"""Shared write loop for every output format."""
import os
from typing import List

from ..errors import FileSystemError
from ..models import GenerationResult, LoaderOptions, ProcessedSVG
from ..parsing.svg_reader import SVGReader
from ..utils.logger import get_logger

logger = get_logger(__name__)


class BaseGenerator:
    """
    Write one artifact per icon, then an optional index.

    Subclasses implement generate_file() and generate_index(). A failure
    on one icon is recorded in the result and the batch carries on; only
    a failure to create the output directory aborts the whole run.
    """

    item_kind = "file"

    def __init__(self, options: LoaderOptions):
        self.options = options
        self.output_dir = options.output_dir or "."

    def generate(self, svgs: List[ProcessedSVG]) -> GenerationResult:
        result = GenerationResult()

        SVGReader.ensure_directory_exists(self.output_dir)

        self.generate_items(svgs, result)

        if self.options.generate_index:
            try:
                index_files = self.generate_index(svgs)
                result.files.extend(index_files)
                logger.debug(f"Generated index: {', '.join(index_files)}")
            except Exception as e:
                message = f"Failed to generate {self.item_kind} index: {e}"
                result.errors.append(message)
                logger.error(message)

        return result.finalize()

    def generate_items(self, svgs: List[ProcessedSVG], result: GenerationResult) -> None:
        for svg in svgs:
            try:
                file_path = self.generate_file(svg)
                result.files.append(file_path)
                logger.debug(f"Generated {self.item_kind}: {file_path}")
            except Exception as e:
                message = f"Failed to generate {self.item_kind} for {svg.metadata.name}: {e}"
                result.errors.append(message)
                logger.error(message)

    def generate_file(self, svg: ProcessedSVG) -> str:
        raise NotImplementedError

    def generate_index(self, svgs: List[ProcessedSVG]) -> List[str]:
        raise NotImplementedError

    def write_file(self, file_name: str, content: str) -> str:
        """Write content under the output directory and return its path."""
        file_path = os.path.join(self.output_dir, file_name)
        try:
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise FileSystemError(
                f"Failed to write file: {file_path}",
                {"original_error": e, "file_path": file_path},
            ) from e
        return file_path

    @property
    def index_extension(self) -> str:
        return "ts" if self.options.typescript else "js"
