from silverpy.tree import Branch, Leaf, render, walk


def _sample():
    return Branch("root", (Leaf("a"), Branch("pkg", (Leaf("b"), Leaf("c"))), Leaf("d")))


def test_walk_is_pre_order() -> None:
    assert [node.value for node in walk(_sample())] == ["root", "a", "pkg", "b", "c", "d"]


def test_walk_single_leaf() -> None:
    assert [node.value for node in walk(Leaf("only"))] == ["only"]


def test_render_indents_children() -> None:
    assert render(_sample()) == "root\n  a\n  pkg\n    b\n    c\n  d"
