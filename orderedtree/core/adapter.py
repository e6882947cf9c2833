"""TreeAdapter abstraction for orderedtree.

The TreeAdapter provides the navigation logic for binary trees, decoupling
the node representation from the traversal algorithms. Traversers only ever
ask the adapter for a node's left and right children.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional
from .node import BinaryNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating binary trees.

    While BinaryNode is just a data container, the adapter knows HOW to
    reach a node's children. Swapping the adapter changes what a traverser
    sees without touching the tree itself.
    """

    @abstractmethod
    def get_left(self, node: BinaryNode) -> Optional[BinaryNode]:
        """Get the left child of the given node.

        Args:
            node: The parent node

        Returns:
            Left child or None if the slot is empty
        """
        pass

    @abstractmethod
    def get_right(self, node: BinaryNode) -> Optional[BinaryNode]:
        """Get the right child of the given node.

        Args:
            node: The parent node

        Returns:
            Right child or None if the slot is empty
        """
        pass

    def get_children(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Yield the present children of a node, left before right.

        Args:
            node: The parent node

        Yields:
            Child nodes in sibling order
        """
        left = self.get_left(node)
        if left is not None:
            yield left
        right = self.get_right(node)
        if right is not None:
            yield right

    def is_leaf(self, node: BinaryNode) -> bool:
        """Check if a node has no children as seen through this adapter."""
        return self.get_left(node) is None and self.get_right(node) is None

    def estimated_size(self, node: BinaryNode) -> Optional[int]:
        """Estimate the number of nodes in the subtree.

        Return None if estimation is not possible.

        Args:
            node: Root of subtree to estimate

        Returns:
            Estimated node count or None
        """
        return None


class BinaryNodeAdapter(TreeAdapter):
    """Adapter that follows BinaryNode's own ``left``/``right`` links."""

    def get_left(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.left

    def get_right(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.right
