"""Deferred source files: registered, not yet read."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from silverpy.source_map.module_path import ModulePath


@dataclass(frozen=True, slots=True)
class DeferredSourceFile:
    """A file or directory of the project whose contents are read on first use.

    Files that are never referenced are never loaded into memory.
    """

    path: ModulePath
    fs_path: Path

    def exists(self) -> bool:
        return self.fs_path.exists()

    def is_file(self) -> bool:
        return self.fs_path.is_file()

    def load(self) -> str:
        return self.fs_path.read_text(encoding="utf-8")

    def __str__(self) -> str:
        return f'DeferredSourceFile(path="{self.path}")'
