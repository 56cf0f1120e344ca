"""Default naming strategies for generated identifiers and files."""
import re

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def to_component_name(name: str) -> str:
    """'arrow-left' -> 'ArrowLeft'."""
    words = _NON_ALNUM.sub(" ", name).split(" ")
    return "".join(word[:1].upper() + word[1:].lower() for word in words)


def to_variable_name(name: str) -> str:
    """'Arrow-Left' -> 'arrow_left'."""
    return _NON_ALNUM.sub("_", name).lower().strip("_")
