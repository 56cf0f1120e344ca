"""SVGO integration: option shaping and the call into the svgo CLI."""
import json
import os
import shlex
import shutil
import subprocess
import tempfile
from types import MappingProxyType
from typing import Any, Dict, List, Optional

from ..errors import SVGProcessingError
from ..models import OptimizationStats
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SVGO_OPTIONS = MappingProxyType({
    "multipass": True,
    "floatPrecision": 2,
    "transformPrecision": 5,
    "makePathsRelative": True,
    "convertShapeToPath": True,
    "mergePaths": True,
    "convertTransform": True,
    "removeOffCanvasPaths": True,
    "removeDimensions": False,
    "removeAttrs": False,
    "removeElementsByAttr": False,
    "addClassesToSVG": False,
    "removeTitle": True,
    "removeDesc": True,
    "removeUselessStrokeAndFill": True,
    "removeUnusedNS": True,
    "cleanupListOfValues": True,
    "sortAttrs": True,
    "removeDoctype": True,
    "removeXMLProcInst": True,
    "removeComments": True,
    "removeMetadata": True,
    "removeEditorsNSData": True,
    "removeEmptyAttrs": True,
    "removeHiddenElems": True,
    "removeEmptyText": True,
    "removeEmptyContainers": True,
    "minifyStyles": True,
    "convertStyleToAttrs": True,
    "convertColors": True,
    "convertPathData": True,
    "convertEllipseToCircle": True,
    "convertUseToSymbol": False,
    "convertSymbolToPath": False,
    "convertPolygonToPath": False,
    "moveGroupAttrsToElems": True,
    "moveElemsAttrsToGroup": True,
    "collapseGroups": True,
    "convertGToUse": False,
    "reusePaths": False,
})

# Preset toggles that stay off unless explicitly switched on
OPT_IN_PLUGINS = (
    "removeDimensions",
    "removeAttrs",
    "removeElementsByAttr",
    "addClassesToSVG",
    "convertUseToSymbol",
    "convertSymbolToPath",
    "convertPolygonToPath",
    "convertGToUse",
    "reusePaths",
)

# Preset toggles that stay on unless explicitly switched off
OPT_OUT_PLUGINS = (
    "removeTitle",
    "removeDesc",
    "removeUselessStrokeAndFill",
    "removeUnusedNS",
    "cleanupListOfValues",
    "sortAttrs",
    "removeDoctype",
    "removeXMLProcInst",
    "removeComments",
    "removeMetadata",
    "removeEditorsNSData",
    "removeEmptyAttrs",
    "removeHiddenElems",
    "removeEmptyText",
    "removeEmptyContainers",
    "minifyStyles",
    "convertStyleToAttrs",
    "convertColors",
    "convertPathData",
    "convertEllipseToCircle",
    "moveGroupAttrsToElems",
    "moveElemsAttrsToGroup",
    "collapseGroups",
)

PRECISION_RANGE = (0, 10)


class SVGOptimizer:
    """Run SVG markup through SVGO using a merged preset configuration."""

    def __init__(self, config: dict):
        opt_cfg = config.get("optimizer", {})
        command = opt_cfg.get("command", "svgo")
        self.command = shlex.split(command) if isinstance(command, str) else list(command)
        self.timeout = opt_cfg.get("timeout", 60)

    def optimize(
        self,
        content: str,
        user_options: Optional[Dict[str, Any]] = None,
        file_name: Optional[str] = None,
    ) -> str:
        """
        Optimize one SVG document.

        Args:
            content: Raw SVG markup.
            user_options: SVGO option overrides, merged over DEFAULT_SVGO_OPTIONS.
            file_name: Used only for error details.

        Returns:
            Optimized markup.

        Raises:
            SVGProcessingError: svgo is missing, timed out or reported an error.
        """
        try:
            merged = self.merge_options(user_options or {})
            svgo_config = self.build_config(merged)
            return self._run_svgo(content, svgo_config, file_name)
        except SVGProcessingError:
            raise
        except Exception as e:
            raise SVGProcessingError(
                f"Unexpected error during SVG optimization: {e}",
                {"file_name": file_name, "original_error": e},
            ) from e

    @staticmethod
    def merge_options(user_options: Dict[str, Any]) -> Dict[str, Any]:
        """Shallow-merge user options over the defaults into a fresh dict."""
        merged = dict(DEFAULT_SVGO_OPTIONS)
        merged.update(user_options)
        plugins = user_options.get("plugins")
        merged["plugins"] = list(plugins) if isinstance(plugins, (list, tuple)) else []
        return merged

    @staticmethod
    def build_plugins(options: Dict[str, Any]) -> List[dict]:
        """
        Build the plugin list: preset-default first, then any user plugins.

        removeViewBox is always disabled in the preset. User plugins are
        appended as given, without deduplication against the preset.
        """
        overrides: Dict[str, Any] = {"removeViewBox": False}
        for name in OPT_IN_PLUGINS:
            overrides[name] = bool(options.get(name, False))
        for name in OPT_OUT_PLUGINS:
            overrides[name] = options.get(name) is not False

        if options.get("convertTransform") is False:
            overrides["convertTransform"] = False
        else:
            overrides["convertTransform"] = {
                "transformPrecision": options.get("transformPrecision", DEFAULT_SVGO_OPTIONS["transformPrecision"]),
            }

        plugins = [{"name": "preset-default", "params": {"overrides": overrides}}]
        plugins.extend(options.get("plugins") or [])
        return plugins

    def build_config(self, options: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "multipass": bool(options.get("multipass", True)),
            "floatPrecision": options.get("floatPrecision", DEFAULT_SVGO_OPTIONS["floatPrecision"]),
            "plugins": self.build_plugins(options),
        }

    @staticmethod
    def validate_options(options: Dict[str, Any]) -> None:
        """Check numeric options before any file is touched."""
        low, high = PRECISION_RANGE
        for key in ("floatPrecision", "transformPrecision"):
            value = options.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not low <= value <= high:
                raise SVGProcessingError(
                    f"{key} must be between {low} and {high}",
                    {key: value},
                )

    def _run_svgo(self, content: str, svgo_config: dict, file_name: Optional[str]) -> str:
        if not self.command or not shutil.which(self.command[0]):
            raise SVGProcessingError(
                "svgo is not installed. Install it with: npm install -g svgo",
                {"file_name": file_name, "command": self.command},
            )

        config_source = f"module.exports = {json.dumps(svgo_config, indent=2)};\n"
        with tempfile.NamedTemporaryFile(
            "w", suffix=".cjs", delete=False, encoding="utf-8"
        ) as tmp:
            tmp.write(config_source)
            config_path = tmp.name

        try:
            result = subprocess.run(
                self.command + ["--config", config_path, "--input", "-", "--output", "-"],
                input=content,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise SVGProcessingError(
                f"SVGO optimization timed out after {self.timeout} seconds",
                {"file_name": file_name, "original_error": e},
            ) from e
        finally:
            try:
                os.remove(config_path)
            except OSError:
                pass

        if result.returncode != 0 or not result.stdout.strip():
            raise SVGProcessingError(
                f"SVGO optimization failed: {result.stderr.strip() or 'no output'}",
                {"file_name": file_name, "returncode": result.returncode, "stderr": result.stderr},
            )

        return result.stdout.strip()

    @staticmethod
    def get_optimization_stats(original: str, optimized: str) -> OptimizationStats:
        original_size = len(original.encode("utf-8"))
        optimized_size = len(optimized.encode("utf-8"))
        bytes_saved = original_size - optimized_size
        ratio = bytes_saved / original_size if original_size > 0 else 0.0
        return OptimizationStats(
            original_size=original_size,
            optimized_size=optimized_size,
            bytes_saved=bytes_saved,
            compression_ratio=ratio,
        )
