"""Tests for iconify_loader.utils.naming and the data model helpers."""

from __future__ import annotations

import pytest

from iconify_loader.errors import FileSystemError
from iconify_loader.models import FileRecord, GenerationResult, SVGMetadata
from iconify_loader.utils.naming import to_component_name, to_variable_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("arrow", "Arrow"),
        ("arrow-left", "ArrowLeft"),
        ("ARROW_up.small", "ArrowUpSmall"),
        ("2fa-key", "2faKey"),
    ],
)
def test_to_component_name(name: str, expected: str) -> None:
    assert to_component_name(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Arrow-Left", "arrow_left"),
        ("-star-", "star"),
        ("check circle", "check_circle"),
    ],
)
def test_to_variable_name(name: str, expected: str) -> None:
    assert to_variable_name(name) == expected


def test_metadata_from_file_uses_byte_size_and_camel_case_keys() -> None:
    record = FileRecord(path="icons/é.svg", name="é", extension=".svg", content="<svg>é</svg>")

    metadata = SVGMetadata.from_file(record, {"viewBox": "0 0 8 8", "fill": "none"})

    assert metadata.size == len("<svg>é</svg>") + 1
    assert metadata.to_dict() == {
        "name": "é",
        "originalName": "é",
        "path": "icons/é.svg",
        "size": metadata.size,
        "viewBox": "0 0 8 8",
        "fill": "none",
    }


def test_generation_result_success_tracks_errors() -> None:
    result = GenerationResult(files=["a.svg"])
    assert result.finalize().success is True

    result.errors.append("boom")
    assert result.finalize().success is False

    failed = GenerationResult.failed("No SVG files found")
    assert failed.success is False
    assert failed.files == []
    assert failed.errors == ["No SVG files found"]


def test_error_to_dict_is_serializable() -> None:
    error = FileSystemError("Failed to read directory: x", {"original_error": OSError(2, "missing")})

    data = error.to_dict()

    assert data["code"] == "FILESYSTEM_ERROR"
    assert data["error"] == "FileSystemError"
    assert isinstance(data["details"]["original_error"], str)
