"""Shared path utilities for configuration and package locations.

This module centralizes how the library discovers where it lives and where
its optional config file is expected.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/fskit.toml`` unless overridden
  by ``FSKIT_CONFIG``.
- Logs: no default location; a file log is written only to the configured
  ``log_file``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "FSKIT_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    # Fallback: installed outside a checkout
    return Path.cwd()


def _join_segments(path: str, segments: tuple[str, ...]) -> str:
    parts = [segment.strip("/") for segment in segments if segment and segment.strip("/")]
    if not parts:
        return path
    return path.rstrip("/") + "/" + "/".join(parts)


def project_root(*segments: str) -> str:
    """Return the project root with ``segments`` appended using ``/`` joins."""

    root = _detect_repo_root().as_posix()
    return _join_segments(root, segments)


def package_root(*segments: str) -> str:
    """Return the directory of the installed ``fskit`` package."""

    root = Path(__file__).resolve().parent.parent.as_posix()
    return _join_segments(root, segments)


def default_config_path() -> Path:
    """Get the path to the TOML config file.

    Portable layout: ``<repo_root>/config/fskit.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / "fskit.toml",
    )


__all__ = [
    "default_config_path",
    "package_root",
    "project_root",
    "resolve_overridable_path",
]
