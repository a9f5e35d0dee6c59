"""Tests for TreeNode dataclass and NodeKind StrEnum.

Verifies:
- NodeKind has exactly 6 members with lowercase string values
- TreeNode is immutable (fields, elements and attributes)
- Object equality ignores field order; array equality does not ignore element order
- Numbers compare mathematically (1.0 == 1)
- render() produces compact JSON text
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from json_unit.tree.nodes import NodeKind, TreeNode


class TestNodeKind:
    """Tests for the NodeKind StrEnum."""

    def test_has_exactly_six_members(self) -> None:
        assert len(NodeKind) == 6

    def test_values_are_lowercased(self) -> None:
        assert NodeKind.NULL == "null"
        assert NodeKind.BOOLEAN == "boolean"
        assert NodeKind.NUMBER == "number"
        assert NodeKind.TEXT == "text"
        assert NodeKind.ARRAY == "array"
        assert NodeKind.OBJECT == "object"

    def test_only_array_and_object_are_containers(self) -> None:
        containers = {kind for kind in NodeKind if kind.is_container}
        assert containers == {NodeKind.ARRAY, NodeKind.OBJECT}


class TestTreeNodeConstruction:
    """Tests for the helper constructors."""

    def test_null(self) -> None:
        node = TreeNode.null()
        assert node.kind == NodeKind.NULL
        assert node.value is None

    def test_boolean(self) -> None:
        node = TreeNode.boolean(True)
        assert node.kind == NodeKind.BOOLEAN
        assert node.value is True

    def test_number_is_stored_as_decimal(self) -> None:
        node = TreeNode.number("2.50")
        assert node.kind == NodeKind.NUMBER
        assert isinstance(node.value, Decimal)
        assert node.value == Decimal("2.5")

    def test_text(self) -> None:
        assert TreeNode.text("hi").value == "hi"

    def test_array_accepts_any_iterable(self) -> None:
        node = TreeNode.array(TreeNode.number(i) for i in range(3))
        assert node.kind == NodeKind.ARRAY
        assert isinstance(node.elements, tuple)
        assert len(node.elements) == 3

    def test_object_preserves_insertion_order(self) -> None:
        node = TreeNode.object([("b", TreeNode.null()), ("a", TreeNode.null())])
        assert list(node.fields) == ["b", "a"]

    def test_leaf_defaults(self) -> None:
        node = TreeNode.text("x")
        assert node.elements == ()
        assert dict(node.fields) == {}
        assert not node.is_container


class TestTreeNodeImmutability:
    def test_attributes_cannot_be_assigned(self) -> None:
        node = TreeNode.text("x")
        with pytest.raises(FrozenInstanceError):
            node.value = "y"  # type: ignore[misc]

    def test_fields_mapping_is_read_only(self) -> None:
        node = TreeNode.object({"a": TreeNode.null()})
        with pytest.raises(TypeError):
            node.fields["b"] = TreeNode.null()  # type: ignore[index]

    def test_fields_are_copied_from_source_dict(self) -> None:
        source = {"a": TreeNode.null()}
        node = TreeNode(NodeKind.OBJECT, fields=source)
        source["b"] = TreeNode.null()
        assert list(node.fields) == ["a"]


class TestTreeNodeEquality:
    def test_object_equality_ignores_field_order(self) -> None:
        left = TreeNode.object({"a": TreeNode.number(1), "b": TreeNode.number(2)})
        right = TreeNode.object({"b": TreeNode.number(2), "a": TreeNode.number(1)})
        assert left == right

    def test_array_equality_respects_order(self) -> None:
        left = TreeNode.array([TreeNode.number(1), TreeNode.number(2)])
        right = TreeNode.array([TreeNode.number(2), TreeNode.number(1)])
        assert left != right

    def test_numbers_compare_mathematically(self) -> None:
        assert TreeNode.number("1.0") == TreeNode.number(1)

    def test_text_and_number_differ(self) -> None:
        assert TreeNode.text("1") != TreeNode.number(1)

    @pytest.mark.parametrize(
        "node",
        [TreeNode.number(1), TreeNode.null(), TreeNode.array([]), TreeNode.object({})],
    )
    def test_nodes_are_not_hashable(self, node: TreeNode) -> None:
        assert TreeNode.__hash__ is None
        with pytest.raises(TypeError, match="unhashable"):
            hash(node)


class TestRender:
    def test_scalars(self) -> None:
        assert TreeNode.null().render() == "null"
        assert TreeNode.boolean(False).render() == "false"
        assert TreeNode.number("1.50").render() == "1.50"
        assert TreeNode.text('say "hi"').render() == '"say \\"hi\\""'

    def test_nested(self) -> None:
        node = TreeNode.object(
            {"a": TreeNode.array([TreeNode.number(1), TreeNode.null()]), "b": TreeNode.text("x")}
        )
        assert node.render() == '{"a":[1,null],"b":"x"}'

    def test_non_ascii_text_is_kept(self) -> None:
        assert TreeNode.text("żółw").render() == '"żółw"'
