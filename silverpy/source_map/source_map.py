"""Project source map with lazy module loading.

                 SourceMap
               /          ^
          Tree            dict[SourceFileId, SourceFile]
           | walk             ^ put
    DeferredSourceFile ---> SourceFile
                      load
"""

from __future__ import annotations

import logging
from pathlib import Path

from silverpy.source_map.deferred import DeferredSourceFile
from silverpy.source_map.errors import SourceMapError
from silverpy.source_map.module_path import ModulePath, SourceFileId
from silverpy.source_map.source_file import SourceCode, SourceFile
from silverpy.tree import Branch, Leaf, Tree, walk

logger = logging.getLogger(__name__)


class SourceMap:
    """Tree of the project's modules plus a cache of the ones loaded so far.

    Registering a project only walks the directory structure; file contents are
    read the first time a module is requested. Each loaded file is placed right
    after the previously loaded ones so spans stay unique across the project.
    """

    def __init__(self, root: Path, source_tree: Tree[DeferredSourceFile]) -> None:
        self._root = root
        self._source_tree = source_tree
        self._loaded: dict[SourceFileId, SourceFile] = {}

    @classmethod
    def from_root(cls, root: str | Path) -> SourceMap:
        root = Path(root).resolve()
        if not root.exists():
            raise SourceMapError(f"Root path does not exist: {root}")
        if not root.is_dir():
            raise SourceMapError(f"Root path should be a directory: {root}")
        tree = _load_tree(root, None)
        logger.debug("registered source tree at %s", root)
        return cls(root, tree)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def source_tree(self) -> Tree[DeferredSourceFile]:
        return self._source_tree

    def loaded_ids(self) -> tuple[SourceFileId, ...]:
        return tuple(self._loaded)

    def is_loaded(self, module_path: ModulePath) -> bool:
        return module_path.module_id in self._loaded

    def find(self, module_path: ModulePath) -> DeferredSourceFile | None:
        """Find a registered module without loading it."""
        for node in walk(self._source_tree):
            if node.value.path == module_path:
                return node.value
        return None

    def file_at(self, pos: int) -> SourceFile | None:
        """Find the loaded file whose contents cover the absolute position `pos`."""
        for source_file in self._loaded.values():
            if source_file.contains(pos):
                return source_file
        return None

    def get_module(self, module_path: ModulePath) -> SourceFile | None:
        """Get a module, loading it on first reference."""
        module_id = module_path.module_id
        cached = self._loaded.get(module_id)
        if cached is not None:
            return cached

        deferred = self.find(module_path)
        if deferred is None:
            return None

        if deferred.is_file():
            logger.debug("loading module %s from %s", module_path, deferred.fs_path)
            try:
                content = deferred.load()
            except (OSError, UnicodeDecodeError) as exc:
                raise SourceMapError(f"Unable to read module {module_path}: {exc}") from exc
            source_file = SourceFile(module_path, SourceCode(self._next_offset(), content))
        else:
            source_file = SourceFile(module_path)

        self._loaded[module_id] = source_file
        return source_file

    def _next_offset(self) -> int:
        ends = [f.source_code.end for f in self._loaded.values() if f.source_code is not None]
        return max(ends, default=0)


def _load_tree(path: Path, parent: ModulePath | None) -> Tree[DeferredSourceFile]:
    module_path = ModulePath.from_path(path, parent)
    children: list[Tree[DeferredSourceFile]] = []
    for entry in sorted(path.iterdir()):
        if entry.is_dir():
            children.append(_load_tree(entry, module_path))
        else:
            children.append(Leaf(DeferredSourceFile(ModulePath.from_path(entry, module_path), entry)))
    return Branch(DeferredSourceFile(module_path, path), tuple(children))
