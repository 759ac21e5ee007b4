import pytest

from foldercache.tree import Leaf, Tree, indent


def test_indent_two_levels():
    assert indent(2) == "    "


def test_indent_zero_is_empty():
    assert indent(0) == ""


@pytest.mark.parametrize("level", [-1, 120, 200])
def test_indent_out_of_range(level):
    with pytest.raises(ValueError):
        indent(level)


def test_new_tree_has_only_root():
    tree = Tree()
    assert [node.path for node in tree] == ["/"]
    assert tree.last_node() is tree.root


def test_add_node_appends_to_chain():
    tree = Tree()
    first = tree.add_node("/home")
    second = tree.add_node("/home/user")
    assert [node.path for node in tree] == ["/", "/home", "/home/user"]
    assert second.parent is first
    assert first.parent is tree.root
    assert tree.last_node() is second


def test_find_node():
    tree = Tree()
    node = tree.add_node("/a/")
    assert tree.find_node("/a/") is node
    assert tree.find_node("/") is tree.root
    assert tree.find_node("/missing/") is None


def test_add_leaf_and_lookup():
    tree = Tree()
    node = tree.add_node("/home/user")
    tree.add_leaf(node, "ABC", "abc")
    tree.add_leaf(node, "XYZ", "xyz")
    assert tree.lookup("/home/user", "ABC") == "abc"
    assert tree.lookup("/home/user", "XYZ") == "xyz"
    assert tree.lookup("/home/user", "nope") is None
    assert tree.lookup("/nowhere", "ABC") is None
    assert [leaf.key for leaf in node.leaves] == ["ABC", "XYZ"]


def test_find_leaf_returns_first_match():
    tree = Tree()
    node = tree.add_node("/d")
    first = tree.add_leaf(node, "k", "one")
    tree.add_leaf(node, "k", "two")
    assert tree.find_leaf("/d", "k") is first
    assert first == Leaf("k", "one")


def test_long_key_and_path_truncated():
    tree = Tree()
    node = tree.add_node("p" * 300)
    leaf = tree.add_leaf(node, "k" * 200, "v")
    assert len(node.path) == 255
    assert len(leaf.key) == 127


def test_render_layout():
    tree = Tree()
    node = tree.add_node("/a")
    tree.add_leaf(node, "k", "v")
    expected = "/\n  /a\n     > { k = 'v' }\n"
    assert tree.render() == expected


def test_render_lists_every_folder_once():
    tree = Tree()
    paths = [f"/f{i}" for i in range(5)]
    for path in paths:
        tree.add_node(path)
    lines = tree.render().splitlines()
    assert [line.strip() for line in lines] == ["/"] + paths