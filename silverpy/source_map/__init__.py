"""Source map."""

from silverpy.source_map.deferred import DeferredSourceFile
from silverpy.source_map.errors import SourceMapError
from silverpy.source_map.module_path import ModulePath, SourceFileId
from silverpy.source_map.source_file import SourceCode, SourceFile
from silverpy.source_map.source_map import SourceMap

__all__ = [
    "DeferredSourceFile",
    "ModulePath",
    "SourceCode",
    "SourceFile",
    "SourceFileId",
    "SourceMap",
    "SourceMapError",
]
