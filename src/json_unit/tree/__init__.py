"""Tree subpackage: the canonical JSON tree and its builder.

Re-exports the public API for the tree module:
- TreeNode: immutable dataclass representing one JSON value
- NodeKind: StrEnum of the six JSON kinds
- TreeBuilder: converts text, streams and Python values into TreeNode trees
"""

from json_unit.tree.builder import TreeBuilder
from json_unit.tree.nodes import NodeKind, TreeNode

__all__ = ["NodeKind", "TreeBuilder", "TreeNode"]
