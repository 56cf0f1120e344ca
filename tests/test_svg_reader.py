"""Tests for iconify_loader.parsing.svg_reader."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from iconify_loader.errors import FileSystemError, SVGProcessingError, ValidationError
from iconify_loader.parsing.svg_reader import SVGReader, extract_svg_attributes, validate_svg_content
from tests.conftest import ARROW_SVG


def test_read_svg_files_filters_by_extension(icon_dir) -> None:
    root = icon_dir({"arrow.svg": ARROW_SVG, "notes.txt": "hello", "Upper.SVG": ARROW_SVG})

    files = SVGReader().read_svg_files(str(root))

    assert sorted(f.name for f in files) == ["Upper", "arrow"]
    arrow = next(f for f in files if f.name == "arrow")
    assert arrow.extension == ".svg"
    assert arrow.content == ARROW_SVG
    assert arrow.path == os.path.join(str(root), "arrow.svg")


def test_read_svg_files_respects_include_subdirs(icon_dir) -> None:
    root = icon_dir({"arrow.svg": ARROW_SVG, "nested/deep/star.svg": ARROW_SVG})

    flat = SVGReader(include_subdirs=False).read_svg_files(str(root))
    recursive = SVGReader(include_subdirs=True).read_svg_files(str(root))

    assert [f.name for f in flat] == ["arrow"]
    assert sorted(f.name for f in recursive) == ["arrow", "star"]


def test_read_svg_files_skips_ignored_paths(icon_dir) -> None:
    root = icon_dir(
        {
            "arrow.svg": ARROW_SVG,
            "node_modules/pkg/icon.svg": ARROW_SVG,
            "draft-star.svg": ARROW_SVG,
        }
    )

    files = SVGReader(ignore_patterns=["node_modules", r"draft-"]).read_svg_files(str(root))

    assert [f.name for f in files] == ["arrow"]


def test_read_svg_files_returns_empty_list_when_nothing_matches(icon_dir) -> None:
    root = icon_dir({"readme.md": "# icons"})

    assert SVGReader().read_svg_files(str(root)) == []


def test_read_svg_files_raises_for_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileSystemError) as excinfo:
        SVGReader().read_svg_files(str(tmp_path / "missing"))

    assert excinfo.value.code == "FILESYSTEM_ERROR"
    assert excinfo.value.details["dir_path"] == str(tmp_path / "missing")


def test_read_svg_files_raises_for_undecodable_file(icon_dir) -> None:
    root = icon_dir({})
    (root / "broken.svg").write_bytes(b"\xff\xfe\x00<svg>")

    with pytest.raises(FileSystemError):
        SVGReader().read_svg_files(str(root))


def test_extract_svg_attributes_finds_root_attributes() -> None:
    attributes = extract_svg_attributes(ARROW_SVG)

    assert attributes == {"viewBox": "0 0 24 24", "width": "16", "height": "16"}


def test_extract_svg_attributes_is_case_insensitive_and_first_match_wins() -> None:
    content = "<svg VIEWBOX='0 0 10 10' fill=\"red\"><path fill=\"blue\" stroke='#000'/></svg>"

    attributes = extract_svg_attributes(content)

    assert attributes["viewBox"] == "0 0 10 10"
    assert attributes["fill"] == "red"
    assert attributes["stroke"] == "#000"
    assert "width" not in attributes


def test_validate_svg_content_accepts_self_closing_root() -> None:
    validate_svg_content('<svg xmlns="http://www.w3.org/2000/svg"/>', "empty")


def test_validate_svg_content_rejects_empty_content() -> None:
    with pytest.raises(ValidationError):
        validate_svg_content("", "blank")


def test_validate_svg_content_rejects_non_svg() -> None:
    with pytest.raises(SVGProcessingError, match="does not appear to be a valid SVG"):
        validate_svg_content("<html></html>", "page")


def test_validate_svg_content_rejects_unbalanced_markup() -> None:
    with pytest.raises(SVGProcessingError, match="malformed") as excinfo:
        validate_svg_content('<svg viewBox="0 0 24 24"><path d="M0 0">', "broken")

    assert excinfo.value.details["file_name"] == "broken"


def test_ensure_directory_exists_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"

    SVGReader.ensure_directory_exists(str(target))

    assert SVGReader.directory_exists(str(target))


def test_ensure_directory_exists_raises_when_path_is_a_file(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(FileSystemError):
        SVGReader.ensure_directory_exists(str(blocker / "child"))


def test_invalid_ignore_pattern_is_a_validation_error() -> None:
    with pytest.raises(ValidationError, match="Invalid ignore pattern"):
        SVGReader(ignore_patterns=["[unclosed"])


def test_read_svg_files_does_not_follow_symlinks(icon_dir) -> None:
    root = icon_dir({"arrow.svg": ARROW_SVG, "nested/star.svg": ARROW_SVG})
    try:
        os.symlink(root, root / "loop", target_is_directory=True)
        os.symlink(root / "arrow.svg", root / "linked.svg")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not available")

    files = SVGReader(include_subdirs=True).read_svg_files(str(root))

    assert sorted(f.name for f in files) == ["arrow", "star"]
