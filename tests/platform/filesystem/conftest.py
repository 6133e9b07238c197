"""Shared fixtures for filesystem helper tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def walk_tree(tmp_path: Path) -> Path:
    """Build ``root/{a.txt, b.log, .hidden, sub/{c.txt, deeper/d.txt}}``."""

    root = tmp_path / "root"
    deeper = root / "sub" / "deeper"
    deeper.mkdir(parents=True)
    _ = (root / "a.txt").write_text("a")
    _ = (root / "b.log").write_text("b")
    _ = (root / ".hidden").write_text("h")
    _ = (root / "sub" / "c.txt").write_text("c")
    _ = (deeper / "d.txt").write_text("d")
    return root
