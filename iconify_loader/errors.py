"""Error types raised by the loader pipeline."""
from typing import Any, Dict, Optional


class IconifyLoaderError(Exception):
    """Base error carrying a machine-readable code and a detail payload."""

    def __init__(self, message: str, code: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict:
        details = {
            key: (repr(value) if isinstance(value, BaseException) else value)
            for key, value in self.details.items()
        }
        return {"error": type(self).__name__, "code": self.code, "message": self.message, "details": details}


class SVGProcessingError(IconifyLoaderError):
    """Malformed SVG content or a failure inside the optimizer."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "SVG_PROCESSING_ERROR", details)


class FileSystemError(IconifyLoaderError):
    """A directory or file could not be listed, read, written or created."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "FILESYSTEM_ERROR", details)


class ValidationError(IconifyLoaderError):
    """Bad configuration or an input set that cannot be processed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "VALIDATION_ERROR", details)
