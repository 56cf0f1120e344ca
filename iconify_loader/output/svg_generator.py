"""Generate cleaned SVG files and a module of SVG string constants."""
import re
from typing import Any, Dict, List

from ..models import ProcessedSVG
from ..utils.naming import to_variable_name
from .base import BaseGenerator

ROOT_TAG = re.compile(r"<svg([^>]*?)>", re.IGNORECASE)


def add_custom_attributes(content: str, custom_props: Dict[str, Any]) -> str:
    """Append attributes to the root <svg> tag, keeping the existing ones."""
    match = ROOT_TAG.search(content)
    if not match:
        return content

    existing = match.group(1)
    self_closing = existing.endswith("/")
    attributes = existing[:-1].rstrip() if self_closing else existing

    for key, value in custom_props.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = str(value).lower()
        attributes += f' {key}="{value}"'

    new_tag = f"<svg{attributes}{' /' if self_closing else ''}>"
    return content[:match.start()] + new_tag + content[match.end():]


def format_svg_content(content: str) -> str:
    """Collapse whitespace and put each tag on its own line."""
    formatted = re.sub(r"\s+", " ", content)
    formatted = re.sub(r">\s+<", "><", formatted)
    formatted = formatted.replace("><", ">\n<")
    formatted = re.sub(r"\n\s*\n", "\n", formatted)
    return formatted.strip()


def escape_js_string(content: str) -> str:
    return (
        content.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )


class SVGGenerator(BaseGenerator):
    """Write one cleaned .svg per icon plus an index of string constants."""

    item_kind = "SVG"

    def file_base_name(self, name: str) -> str:
        if self.options.file_namer:
            return self.options.file_namer(name)
        return name

    def variable_name(self, name: str) -> str:
        if self.options.file_namer:
            return self.options.file_namer(name)
        return to_variable_name(name)

    def generate_file(self, svg: ProcessedSVG) -> str:
        content = self.prepare_content(svg)
        return self.write_file(f"{self.file_base_name(svg.metadata.name)}.svg", content)

    def prepare_content(self, svg: ProcessedSVG) -> str:
        content = svg.content
        svgo_options = self.options.svgo_options or {}

        if self.options.svg_props:
            content = add_custom_attributes(content, self.options.svg_props)

        if svgo_options.get("removeComments") is not False:
            content = re.sub(r"<!--[\s\S]*?-->", "", content)

        if svgo_options.get("removeMetadata") is not False:
            content = re.sub(r"<metadata[^>]*>[\s\S]*?</metadata>", "", content, flags=re.IGNORECASE)

        return format_svg_content(content)

    def generate_index(self, svgs: List[ProcessedSVG]) -> List[str]:
        exports = []
        types = []
        for svg in svgs:
            name = self.variable_name(svg.metadata.name)
            escaped = escape_js_string(self.prepare_content(svg))
            exports.append(f"export const {name} = '{escaped}';")
            if self.options.typescript:
                types.append(f"  {name}: string;")

        content = "\n\n".join(exports)
        if self.options.typescript and types:
            content += "\n\nexport interface SVGIcons {\n" + "\n".join(types) + "\n}\n"
        else:
            content += "\n"

        return [self.write_file(f"index.{self.index_extension}", content)]
