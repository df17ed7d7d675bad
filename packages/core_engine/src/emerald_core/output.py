"""File writers shared by the generators.

Writes are plain overwrites; an ``OSError`` becomes an ``OutputError`` naming
the path and ends the run.
"""

import shutil
from pathlib import Path

from emerald_core.errors import OutputError


def ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(str(path), exc.strerror or str(exc)) from exc


def write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputError(str(path), exc.strerror or str(exc)) from exc


def copy_file(source: Path, target: Path) -> None:
    try:
        shutil.copyfile(source, target)
    except OSError as exc:
        raise OutputError(str(target), exc.strerror or str(exc)) from exc
