from .json_generator import JSONGenerator
from .react_generator import ReactGenerator
from .svg_generator import SVGGenerator

GENERATORS = {
    "react": ReactGenerator,
    "svg": SVGGenerator,
    "json": JSONGenerator,
}

__all__ = ["GENERATORS", "JSONGenerator", "ReactGenerator", "SVGGenerator"]
