"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from iconify_loader.errors import ValidationError
from iconify_loader.main import _build_parser, build_options, main
from tests.conftest import ARROW_SVG


def test_cli_requires_format() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["icons"])


def test_cli_rejects_unknown_format() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["icons", "--format", "vue"])


def test_build_options_starts_from_defaults() -> None:
    args = _build_parser().parse_args(["icons", "--format", "react"])

    options = build_options(args)

    assert options.input_dir == "icons"
    assert options.format == "react"
    assert options.optimize is True
    assert options.typescript is True
    assert options.generate_index is True


def test_build_options_applies_flags() -> None:
    args = _build_parser().parse_args(
        [
            "icons",
            "-f",
            "svg",
            "-o",
            "dist/icons",
            "--no-optimize",
            "--no-index",
            "--javascript",
            "--no-subdirs",
            "--ignore",
            "legacy",
            "--svg-prop",
            "role=img",
            "--svg-prop",
            "aria-hidden=true",
            "--float-precision",
            "3",
        ]
    )

    options = build_options(args)

    assert options.output_dir == "dist/icons"
    assert options.optimize is False
    assert options.generate_index is False
    assert options.typescript is False
    assert options.include_subdirs is False
    assert options.ignore_patterns == ["legacy"]
    assert options.svg_props == {"role": "img", "aria-hidden": "true"}
    assert options.svgo_options == {"floatPrecision": 3}


def test_build_options_reads_loader_section_from_config() -> None:
    args = _build_parser().parse_args(["icons", "-f", "json"])

    options = build_options(args, {"loader": {"optimize": False, "svg_props": {"role": "img"}}})

    assert options.optimize is False
    assert options.svg_props == {"role": "img"}


def test_build_options_rejects_unknown_config_keys() -> None:
    args = _build_parser().parse_args(["icons", "-f", "json"])

    with pytest.raises(ValidationError, match="colour"):
        build_options(args, {"loader": {"colour": "red"}})


def test_svg_prop_requires_key_value() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["icons", "-f", "svg", "--svg-prop", "novalue"])


def test_main_generates_files(icon_dir, tmp_path: Path) -> None:
    root = icon_dir({"arrow.svg": ARROW_SVG})
    out = tmp_path / "out"

    code = main([str(root), "--format", "json", "-o", str(out), "--no-optimize"])

    assert code == 0
    data = json.loads((out / "icons.json").read_text(encoding="utf-8"))
    assert data["icons"]["arrow"]["width"] == "16"
    assert (out / "arrow.json").exists()


def test_main_returns_one_on_fatal_error(icon_dir, tmp_path: Path) -> None:
    root = icon_dir({})

    code = main([str(root), "--format", "json", "-o", str(tmp_path / "out")])

    assert code == 1
    assert not (tmp_path / "out").exists()


def test_main_returns_one_for_missing_config(tmp_path: Path) -> None:
    code = main([str(tmp_path), "--format", "json", "--config", str(tmp_path / "missing.yml")])

    assert code == 1


def test_main_uses_config_file(icon_dir, tmp_path: Path) -> None:
    root = icon_dir({"arrow.svg": ARROW_SVG})
    out = tmp_path / "out"
    config = tmp_path / "iconify.yml"
    config.write_text("loader:\n  optimize: false\n  generate_index: false\n", encoding="utf-8")

    code = main([str(root), "-f", "react", "-o", str(out), "--config", str(config)])

    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["Arrow.tsx"]
