"""Module paths and source file ids."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True, order=True)
class SourceFileId:
    """64-bit hash of a module's project-relative path."""

    value: int


@dataclass(frozen=True, slots=True)
class ModulePath:
    """One segment of a project path, chained to its parent directory's segment."""

    name: str
    parent: ModulePath | None = None

    @staticmethod
    def from_path(path: Path, parent: ModulePath | None = None) -> ModulePath:
        if not path.name:
            raise ValueError(f"Path has no final component: {path}")
        return ModulePath(path.name, parent)

    @staticmethod
    def from_parts(*names: str) -> ModulePath:
        if not names:
            raise ValueError("ModulePath needs at least one name")
        module_path: ModulePath | None = None
        for name in names:
            module_path = ModulePath(name, module_path)
        assert module_path is not None
        return module_path

    @property
    def parts(self) -> tuple[str, ...]:
        names: list[str] = []
        current: ModulePath | None = self
        while current is not None:
            names.append(current.name)
            current = current.parent
        return tuple(reversed(names))

    @property
    def module_id(self) -> SourceFileId:
        digest = hashlib.blake2b(str(self).encode("utf-8"), digest_size=8).digest()
        return SourceFileId(int.from_bytes(digest, "big"))

    def __str__(self) -> str:
        return "/".join(self.parts)
