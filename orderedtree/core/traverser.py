"""Tree traversal strategies for orderedtree.

Traversers implement different algorithms for walking through a binary tree.
They work through a TreeAdapter, so the same algorithm runs over any view of
the tree. Every traverser is iterative: a degenerate tree built from sorted
input can be far deeper than the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple
from .node import BinaryNode
from .adapter import TreeAdapter


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers implement the algorithms for walking through trees in
    different orders (in-order, breadth-first, depth-first). They are
    independent of the node layout, working through the TreeAdapter.
    """

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Optional[BinaryNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None for an empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """In-order (symmetric) traversal strategy.

    Visits the left subtree, then the node, then the right subtree. On a
    binary search tree this yields values in ascending order.
    """

    def traverse(self,
                 root: Optional[BinaryNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse tree in-order using an explicit stack."""
        stack: List[Tuple[BinaryNode, int]] = []
        node, depth = root, 0

        while stack or node is not None:
            # Walk down the left spine, remembering each node
            while node is not None:
                stack.append((node, depth))
                if not self._should_explore(depth, max_depth):
                    break
                node, depth = self.adapter.get_left(node), depth + 1

            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                node, depth = self.adapter.get_right(node), depth + 1
            else:
                node = None


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1, and
    left siblings before right siblings within a level.
    """

    def traverse(self,
                 root: Optional[BinaryNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse tree breadth-first.

        Uses a FIFO queue to ensure level-order traversal.
        """
        if root is None:
            return

        # Queue stores (node, depth) tuples
        queue: Deque[Tuple[BinaryNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, left subtree before right. Replaying the
    yielded values into an empty tree rebuilds the same shape.
    """

    def traverse(self,
                 root: Optional[BinaryNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryNode, int]]:
        if root is None:
            return

        stack: List[Tuple[BinaryNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Right goes on first so left is popped first
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Processes nodes after their entire
    subtree has been processed, which suits aggregate calculations such as
    subtree sizes or heights.
    """

    def traverse(self,
                 root: Optional[BinaryNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse tree depth-first, post-order.

        Each stack entry carries a flag telling whether the node's children
        have already been scheduled.
        """
        if root is None:
            return

        stack: List[Tuple[BinaryNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1, False))


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (in_order, bfs, dfs_pre, dfs_post, level)
        adapter: TreeAdapter for the tree

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'in_order': InOrderTraverser,
        'inorder': InOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'level': BreadthFirstTraverser,
        'level_order': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'pre_order': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'post_order': DepthFirstPostOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
