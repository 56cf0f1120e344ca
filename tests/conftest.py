from __future__ import annotations

import json
import re
import subprocess
from pathlib import Path
from typing import Callable, Dict, List

import pytest

from iconify_loader.optimization import svg_optimizer

ARROW_SVG = '<svg viewBox="0 0 24 24" width="16" height="16"><path d="M0 0h24v24H0z"/></svg>'


@pytest.fixture
def icon_dir(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Write {relative path: content} under tmp_path/icons and return that directory."""

    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "icons"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


class FakeSvgo:
    """Stand-in for the svgo CLI: collapses inter-tag whitespace and records calls."""

    def __init__(self) -> None:
        self.calls: List[dict] = []
        self.returncode = 0
        self.stderr = ""

    def __call__(self, cmd, input=None, **kwargs):
        config_path = cmd[cmd.index("--config") + 1]
        text = Path(config_path).read_text(encoding="utf-8")
        config = json.loads(text[len("module.exports = "):].rstrip().rstrip(";"))
        self.calls.append({"cmd": cmd, "config": config, "input": input, "kwargs": kwargs})
        if self.returncode != 0:
            return subprocess.CompletedProcess(cmd, self.returncode, stdout="", stderr=self.stderr)
        output = re.sub(r">\s+<", "><", input).strip()
        return subprocess.CompletedProcess(cmd, 0, stdout=output + "\n", stderr="")


@pytest.fixture
def fake_svgo(monkeypatch: pytest.MonkeyPatch) -> FakeSvgo:
    fake = FakeSvgo()
    monkeypatch.setattr(svg_optimizer.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(svg_optimizer.subprocess, "run", fake)
    return fake


@pytest.fixture
def missing_svgo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(svg_optimizer.shutil, "which", lambda name: None)
