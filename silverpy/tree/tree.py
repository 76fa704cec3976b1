"""Generic leaf/branch tree used for the project source layout."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Leaf(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Branch(Generic[T]):
    value: T
    children: tuple[Tree[T], ...] = field(default=())


Tree = Leaf[T] | Branch[T]


def walk(tree: Tree[T]) -> Iterator[Tree[T]]:
    """Pre-order walk over every node of the tree."""
    stack: list[Tree[T]] = [tree]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Branch):
            stack.extend(reversed(node.children))


def render(tree: Tree[T], indent: str = "  ") -> str:
    """Indented one-node-per-line display of the tree."""
    lines: list[str] = []

    def visit(node: Tree[T], depth: int) -> None:
        lines.append(f"{indent * depth}{node.value}")
        if isinstance(node, Branch):
            for child in node.children:
                visit(child, depth + 1)

    visit(tree, 0)
    return "\n".join(lines)
