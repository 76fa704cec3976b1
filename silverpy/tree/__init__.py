"""Tree."""

from silverpy.tree.tree import Branch, Leaf, Tree, render, walk

__all__ = [
    "Branch",
    "Leaf",
    "Tree",
    "render",
    "walk",
]
