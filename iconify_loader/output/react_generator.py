"""Generate React components from processed icons."""
import re
from string import Template
from typing import List

from lxml import etree

from ..models import ProcessedSVG
from ..utils.logger import get_logger
from ..utils.naming import to_component_name
from .base import BaseGenerator

logger = get_logger(__name__)

XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)

JSX_ATTRIBUTE_NAMES = {
    "class": "className",
    "for": "htmlFor",
    "tabindex": "tabIndex",
}

# Owned by the component signature, never copied from svg_props
WRAPPER_ATTRIBUTES = {"width", "height", "fill", "viewBox"}

COMPONENT_TEMPLATE_TS = Template("""import React from 'react';

export interface ${name}Props extends React.SVGProps<SVGSVGElement> {
  size?: number | string;
}

const ${name}: React.FC<${name}Props> = ({
  size = '1em',
  fill = 'currentColor',
  ...props
}) => {
  return (
    <svg
      width={size}
      height={size}
      fill={fill}
      viewBox="0 0 24 24"${extra_attributes}
      {...props}
    >
${content}
    </svg>
  );
};

export default ${name};
""")

COMPONENT_TEMPLATE_JS = Template("""import React from 'react';

const ${name} = ({
  size = '1em',
  fill = 'currentColor',
  ...props
}) => {
  return (
    <svg
      width={size}
      height={size}
      fill={fill}
      viewBox="0 0 24 24"${extra_attributes}
      {...props}
    >
${content}
    </svg>
  );
};

export default ${name};
""")

CONTENT_INDENT = " " * 6


def jsx_attribute_name(name: str) -> str:
    """'stroke-width' -> 'strokeWidth', 'class' -> 'className'."""
    if name in JSX_ATTRIBUTE_NAMES:
        return JSX_ATTRIBUTE_NAMES[name]
    if name.startswith(("data-", "aria-")):
        return name
    head, *rest = re.split(r"[-:]", name)
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def strip_prolog(content: str) -> str:
    """Drop the XML declaration, doctype and comments."""
    content = re.sub(r"<\?xml[^>]*\?>", "", content)
    content = re.sub(r"<!DOCTYPE[^>]*>", "", content, flags=re.IGNORECASE)
    content = re.sub(r"<!--[\s\S]*?-->", "", content)
    return content.strip()


def extract_inner_markup(content: str) -> List[str]:
    """
    Return the children of the root <svg> as JSX-ready markup, one per entry.

    Markup that does not parse as XML falls back to stripping the outer
    <svg> tag textually.
    """
    cleaned = strip_prolog(content)
    try:
        root = etree.fromstring(cleaned.encode("utf-8"), XML_PARSER)
    except etree.XMLSyntaxError as e:
        logger.debug(f"Falling back to text extraction: {e}")
        match = re.search(r"<svg\b[^>]*>(.*)</svg>", cleaned, re.DOTALL | re.IGNORECASE)
        inner = match.group(1) if match else cleaned
        inner = re.sub(r">\s+<", "><", re.sub(r"\s+", " ", inner)).strip()
        return [inner] if inner else []

    for elem in root.iter():
        if not isinstance(elem.tag, str):
            continue
        elem.tag = etree.QName(elem).localname
        attributes = [(_jsx_name(key), value) for key, value in elem.attrib.items()]
        elem.attrib.clear()
        for key, value in attributes:
            elem.set(key, value)
    etree.cleanup_namespaces(root)

    parts = []
    if root.text and root.text.strip():
        parts.append(root.text.strip())
    for child in root:
        if not isinstance(child.tag, str):
            continue
        markup = etree.tostring(child, encoding="unicode", with_tail=False)
        parts.append(re.sub(r">\s+<", "><", markup).strip())
    return parts


def _jsx_name(key: str) -> str:
    qname = etree.QName(key)
    if qname.namespace == XLINK_NS:
        return "xlink" + qname.localname[:1].upper() + qname.localname[1:]
    if qname.namespace == XML_NS:
        return "xml" + qname.localname[:1].upper() + qname.localname[1:]
    return jsx_attribute_name(qname.localname)


def jsx_attribute(name: str, value) -> str:
    if isinstance(value, bool):
        return f"{name}={{{str(value).lower()}}}"
    if isinstance(value, (int, float)):
        return f"{name}={{{value}}}"
    return f'{name}="{value}"'


class ReactGenerator(BaseGenerator):
    """Write one React component per icon plus an index re-exporting them."""

    item_kind = "component"

    def component_name(self, name: str) -> str:
        if self.options.component_namer:
            return self.options.component_namer(name)
        return to_component_name(name)

    def file_base_name(self, component_name: str) -> str:
        if self.options.file_namer:
            return self.options.file_namer(component_name)
        return component_name

    def generate_file(self, svg: ProcessedSVG) -> str:
        name = self.component_name(svg.metadata.name)
        extension = "tsx" if self.options.typescript else "jsx"
        content = self.render_component(svg, name)
        return self.write_file(f"{self.file_base_name(name)}.{extension}", content)

    def render_component(self, svg: ProcessedSVG, name: str) -> str:
        template = COMPONENT_TEMPLATE_TS if self.options.typescript else COMPONENT_TEMPLATE_JS
        inner = "\n".join(CONTENT_INDENT + part for part in extract_inner_markup(svg.content))
        return template.substitute(
            name=name,
            content=inner,
            extra_attributes=self._extra_attributes(),
        )

    def _extra_attributes(self) -> str:
        lines = []
        for key, value in (self.options.svg_props or {}).items():
            if value is None or key in WRAPPER_ATTRIBUTES:
                continue
            lines.append("\n" + CONTENT_INDENT + jsx_attribute(jsx_attribute_name(key), value))
        return "".join(lines)

    def generate_index(self, svgs: List[ProcessedSVG]) -> List[str]:
        names = [self.component_name(svg.metadata.name) for svg in svgs]
        exports = [f"export {{ default as {name} }} from './{self.file_base_name(name)}';" for name in names]

        content = "\n".join(exports)
        if self.options.typescript and names:
            # typeof needs the components in scope, re-exports alone do not bind them
            imports = [f"import {name} from './{self.file_base_name(name)}';" for name in names]
            types = [f"  {name}: typeof {name};" for name in names]
            content += "\n\n" + "\n".join(imports)
            content += "\n\nexport interface IconComponents {\n" + "\n".join(types) + "\n}\n"
        else:
            content += "\n"

        return [self.write_file(f"index.{self.index_extension}", content)]
