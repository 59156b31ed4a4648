#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the tree node model."""
import gc

import pytest

from bbtree.ast.nodes import EMPTY_LEAF_KINDS, NodeKind, TreeNode


@pytest.mark.unit
class TestTreeNodeConstruction:
    """Test node creation and payload handling."""

    def test_defaults(self) -> None:
        """Test a new node is an empty, detached leaf."""
        node = TreeNode(NodeKind.PARAGRAPH)

        assert node.kind is NodeKind.PARAGRAPH
        assert node.content == ""
        assert dict(node.attributes) == {}
        assert node.children == ()
        assert node.parent is None
        assert node.is_leaf

    def test_none_content_becomes_empty(self) -> None:
        """Test None content is stored as the empty string."""
        node = TreeNode(NodeKind.TEXT, None)
        assert node.content == ""

        node.content = "abc"
        node.content = None
        assert node.content == ""

    def test_rejects_non_kind(self) -> None:
        """Test the kind must be a NodeKind member."""
        with pytest.raises(TypeError):
            TreeNode("bold")  # type: ignore[arg-type]

    def test_initial_attributes_are_copied(self) -> None:
        """Test initial attributes are copied in order."""
        source = {"href": "http://a.test", "title": "A"}
        node = TreeNode(NodeKind.LINK, attributes=source)
        source["href"] = "changed"

        assert list(node.attributes) == ["href", "title"]
        assert node.get_attribute("href") == "http://a.test"

    def test_is_text(self) -> None:
        """Test only TEXT nodes report is_text."""
        assert TreeNode(NodeKind.TEXT, "x").is_text
        assert not TreeNode(NodeKind.HTML_RAW, "<b>").is_text

    def test_empty_leaf_kinds(self) -> None:
        """Test the kinds that stand on their own without children."""
        assert EMPTY_LEAF_KINDS == {NodeKind.IMAGE, NodeKind.HORIZONTAL_RULE, NodeKind.LINE_BREAK}

    def test_repr_truncates_content(self) -> None:
        """Test repr shows a shortened payload."""
        node = TreeNode(NodeKind.TEXT, "x" * 40)
        assert "..." in repr(node)
        assert "TEXT" in repr(node)


@pytest.mark.unit
class TestTreeNodeAttributes:
    """Test attribute access."""

    def test_set_and_get(self) -> None:
        """Test setting, reading and overwriting an attribute."""
        node = TreeNode(NodeKind.LINK)
        node.set_attribute("href", "http://a.test")
        node.set_attribute("href", "http://b.test")

        assert node.get_attribute("href") == "http://b.test"
        assert node.has_attribute("href")

    def test_missing_attribute_default(self) -> None:
        """Test the default is returned for missing attributes."""
        node = TreeNode(NodeKind.LINK)
        assert node.get_attribute("href") is None
        assert node.get_attribute("href", "") == ""

    def test_none_name_or_value_ignored(self) -> None:
        """Test None names and values do not create attributes."""
        node = TreeNode(NodeKind.IMAGE)
        node.set_attribute(None, "x")
        node.set_attribute("src", None)

        assert dict(node.attributes) == {}

    def test_remove_attribute(self) -> None:
        """Test removing present and absent attributes."""
        node = TreeNode(NodeKind.IMAGE, attributes={"src": "a.png"})
        node.remove_attribute("src")
        node.remove_attribute("src")

        assert not node.has_attribute("src")

    def test_attributes_view_is_read_only(self) -> None:
        """Test the attribute map cannot be modified through the view."""
        node = TreeNode(NodeKind.LINK, attributes={"href": "x"})
        with pytest.raises(TypeError):
            node.attributes["href"] = "y"  # type: ignore[index]


@pytest.mark.unit
class TestTreeNodeChildren:
    """Test ownership and child management."""

    def test_append_sets_parent(self) -> None:
        """Test appending makes the receiver the parent."""
        parent = TreeNode(NodeKind.BOLD)
        child = TreeNode(NodeKind.TEXT, "a")
        parent.append_child(child)

        assert child.parent is parent
        assert parent.children == (child,)
        assert parent.last_child is child
        assert not parent.is_leaf

    def test_append_none_ignored(self) -> None:
        """Test appending None is a no-op."""
        parent = TreeNode(NodeKind.BOLD)
        parent.append_child(None)
        assert parent.is_leaf

    def test_append_detaches_from_previous_parent(self) -> None:
        """Test a node is moved rather than shared."""
        first = TreeNode(NodeKind.BOLD)
        second = TreeNode(NodeKind.ITALIC)
        child = TreeNode(NodeKind.TEXT, "a")
        first.append_child(child)
        second.append_child(child)

        assert first.children == ()
        assert second.children == (child,)
        assert child.parent is second

    def test_remove_child_by_identity(self) -> None:
        """Test removal matches the exact node, not an equal one."""
        parent = TreeNode(NodeKind.PARAGRAPH)
        a = TreeNode(NodeKind.TEXT, "same")
        b = TreeNode(NodeKind.TEXT, "same")
        parent.append_child(a)
        parent.append_child(b)
        parent.remove_child(b)

        assert parent.children == (a,)
        assert b.parent is None
        assert a.parent is parent

    def test_remove_non_child_is_noop(self) -> None:
        """Test removing a stranger or None changes nothing."""
        parent = TreeNode(NodeKind.PARAGRAPH)
        child = TreeNode(NodeKind.TEXT, "a")
        parent.append_child(child)
        parent.remove_child(TreeNode(NodeKind.TEXT, "a"))
        parent.remove_child(None)

        assert parent.children == (child,)

    def test_clear_children(self) -> None:
        """Test clearing detaches every child."""
        parent = TreeNode(NodeKind.LIST)
        items = [TreeNode(NodeKind.LIST_ITEM) for _ in range(3)]
        for item in items:
            parent.append_child(item)
        parent.clear_children()

        assert parent.is_leaf
        assert all(item.parent is None for item in items)

    def test_children_snapshot(self) -> None:
        """Test the children tuple does not change when the node does."""
        parent = TreeNode(NodeKind.PARAGRAPH)
        parent.append_child(TreeNode(NodeKind.TEXT, "a"))
        snapshot = parent.children
        parent.append_child(TreeNode(NodeKind.TEXT, "b"))

        assert len(snapshot) == 1
        assert len(parent.children) == 2

    def test_parent_link_does_not_keep_parent_alive(self) -> None:
        """Test the back-reference is weak."""
        child = TreeNode(NodeKind.TEXT, "a")
        parent = TreeNode(NodeKind.BOLD)
        parent.append_child(child)
        del parent
        gc.collect()

        assert child.parent is None

    def test_walk_is_preorder(self) -> None:
        """Test walk yields the node then descendants in document order."""
        root = TreeNode(NodeKind.DOCUMENT)
        bold = TreeNode(NodeKind.BOLD)
        bold.append_child(TreeNode(NodeKind.TEXT, "a"))
        root.append_child(bold)
        root.append_child(TreeNode(NodeKind.TEXT, "b"))

        order = [(node.kind.value, node.content) for node in root.walk()]

        assert order == [("document", ""), ("bold", ""), ("text", "a"), ("text", "b")]


@pytest.mark.unit
class TestTreeNodeAccept:
    """Test visitor dispatch."""

    def test_accept_calls_kind_method(self) -> None:
        """Test accept routes to visit_<kind> and returns its result."""

        class Recorder:
            def visit_code_inline(self, node):
                return f"inline:{node.content}"

        assert TreeNode(NodeKind.CODE_INLINE, "x").accept(Recorder()) == "inline:x"

    def test_accept_missing_method(self) -> None:
        """Test a visitor without the method raises AttributeError."""
        with pytest.raises(AttributeError):
            TreeNode(NodeKind.TABLE).accept(object())
