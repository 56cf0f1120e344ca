"""Generate JSON metadata catalogs for processed icons."""
import json
from datetime import datetime, timezone
from typing import Any, Dict, List

from .. import __version__
from ..models import GenerationResult, ProcessedSVG
from ..utils.logger import get_logger
from .base import BaseGenerator

logger = get_logger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JSONGenerator(BaseGenerator):
    """
    Write an aggregate icons.json, and with generate_index one JSON file
    per icon carrying its full metadata and raw content.
    """

    item_kind = "JSON"

    def icon_key(self, name: str) -> str:
        if self.options.file_namer:
            return self.options.file_namer(name)
        return name

    def generate_items(self, svgs: List[ProcessedSVG], result: GenerationResult) -> None:
        try:
            file_path = self.generate_catalog(svgs)
            result.files.append(file_path)
            logger.debug(f"Generated JSON file: {file_path}")
        except Exception as e:
            message = f"Failed to generate JSON file: {e}"
            result.errors.append(message)
            logger.error(message)

    def generate_catalog(self, svgs: List[ProcessedSVG]) -> str:
        data = self.create_json_output(svgs)
        return self.write_file(f"{self.icon_key('icons')}.json", self._dump(data))

    def generate_index(self, svgs: List[ProcessedSVG]) -> List[str]:
        files = []
        for svg in svgs:
            data = self.create_icon_output(svg)
            files.append(self.write_file(f"{self.icon_key(svg.metadata.name)}.json", self._dump(data)))
        logger.debug(f"Generated {len(files)} individual JSON files")
        return files

    def create_json_output(self, svgs: List[ProcessedSVG]) -> Dict[str, Any]:
        icons = {}
        for svg in svgs:
            entry = svg.metadata.to_dict()
            if self.options.verbose:
                entry["content"] = svg.content
            icons[self.icon_key(svg.metadata.name)] = entry

        metadata = {
            "totalIcons": len(svgs),
            "generatedAt": _timestamp(),
            "version": __version__,
            "format": self.options.format,
            "optimized": bool(self.options.optimize),
        }
        if self.options.verbose:
            metadata["options"] = {
                "inputDir": self.options.input_dir,
                "outputDir": self.options.output_dir,
                "svgoOptions": self.options.svgo_options,
                "svgProps": self.options.svg_props,
            }

        return {"icons": icons, "metadata": metadata}

    @staticmethod
    def create_icon_output(svg: ProcessedSVG) -> Dict[str, Any]:
        data = svg.metadata.to_dict()
        data["content"] = svg.content
        data["optimized"] = svg.optimized
        data["metadata"] = {"generatedAt": _timestamp(), "version": __version__}
        return data

    def _dump(self, data: Dict[str, Any]) -> str:
        if self.options.verbose:
            return json.dumps(data, indent=2, default=str)
        return json.dumps(data, separators=(",", ":"), default=str)

    @staticmethod
    def validate_json_output(data: Any) -> bool:
        """Check that data has the shape of a generated catalog."""
        if not isinstance(data, dict):
            return False
        if not isinstance(data.get("icons"), dict):
            return False
        metadata = data.get("metadata")
        if not isinstance(metadata, dict):
            return False
        total = metadata.get("totalIcons")
        if isinstance(total, bool) or not isinstance(total, int):
            return False
        return isinstance(metadata.get("generatedAt"), str) and bool(metadata["generatedAt"])

    @staticmethod
    def merge_json_outputs(outputs: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Combine several catalogs. Later catalogs win on duplicate icon keys."""
        icons = {}
        for output in outputs:
            icons.update(output["icons"])
        return {
            "icons": icons,
            "metadata": {
                "totalIcons": sum(o["metadata"]["totalIcons"] for o in outputs),
                "generatedAt": _timestamp(),
                "version": __version__,
                "merged": True,
                "sources": len(outputs),
            },
        }
