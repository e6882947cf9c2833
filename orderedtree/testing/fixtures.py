"""Test fixtures for orderedtree consumers.

These fixtures give read-only access to a tree's shape for verification in
test suites, without making node placement part of the public API.
"""

from typing import Any, List, Optional, Tuple
from ..core.node import BinaryNode
from ..tree import OrderedTree

# Sentinel for "no bound" so None can still be a stored value
_UNBOUNDED = object()


class TreeTestHelper:
    """Public test fixture for verifying tree structure.

    Example:
        tree = OrderedTree([5, 3, 8])
        helper = TreeTestHelper(tree)

        helper.assert_bst_invariant()
        assert helper.height() == 1
        assert helper.shape() == (5, (3, None, None), (8, None, None))
    """

    def __init__(self, tree: OrderedTree):
        """Initialize with the tree under test.

        Args:
            tree: The OrderedTree to inspect
        """
        self._tree = tree

    def bst_violations(self) -> List[Tuple[Any, str]]:
        """List every node that breaks the ordering invariant.

        Each node is checked against the bounds inherited from all of its
        ancestors: values in a left subtree must be strictly less than the
        ancestor, values in a right subtree greater than or equal to it.

        Returns:
            List of (value, reason) tuples; empty if the tree is valid
        """
        violations = []
        root = self._tree.root
        if root is None:
            return violations

        # (node, lower bound inclusive, upper bound exclusive)
        stack: List[Tuple[BinaryNode, Any, Any]] = [(root, _UNBOUNDED, _UNBOUNDED)]
        while stack:
            node, low, high = stack.pop()
            value = node.value

            if low is not _UNBOUNDED and value < low:
                violations.append((value, f"less than ancestor {low!r} in its right subtree"))
            if high is not _UNBOUNDED and not value < high:
                violations.append((value, f"not less than ancestor {high!r} in its left subtree"))

            if node.left is not None:
                stack.append((node.left, low, value))
            if node.right is not None:
                stack.append((node.right, value, high))

        return violations

    def assert_bst_invariant(self) -> None:
        """Raise AssertionError describing every violation, if any."""
        violations = self.bst_violations()
        if violations:
            details = ", ".join(f"{value!r} is {reason}" for value, reason in violations)
            raise AssertionError(f"BST invariant violated: {details}")

    def height(self) -> int:
        """Depth of the deepest node (-1 for an empty tree)."""
        return self._tree.stats()['height']

    def shape(self) -> Optional[Tuple[Any, Any, Any]]:
        """Snapshot the tree as nested ``(value, left, right)`` tuples.

        Returns:
            Nested tuples, with None for empty slots; None for an empty tree
        """
        return _shape_of(self._tree.root)


def _shape_of(root: Optional[BinaryNode]) -> Optional[Tuple[Any, Any, Any]]:
    # Iterative post-order build so degenerate trees don't hit the recursion limit
    if root is None:
        return None

    built = {}
    stack: List[Tuple[BinaryNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            built[id(node)] = (
                node.value,
                built.pop(id(node.left)) if node.left is not None else None,
                built.pop(id(node.right)) if node.right is not None else None,
            )
            continue
        stack.append((node, True))
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, False))

    return built[id(root)]
