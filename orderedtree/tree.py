"""OrderedTree - an unbalanced binary search tree container.

Values only need to support ``<`` and ``==`` with each other. Equal values
are kept, not rejected: a value equal to an existing node's value always
goes into that node's right subtree.
"""

import logging
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar, Union
from .core.node import BinaryNode
from .core.adapter import BinaryNodeAdapter
from .core.traverser import InOrderTraverser, BreadthFirstTraverser
from .config import TraversalStrategy
from .api import plan_traversal, get_tree_stats

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OrderedTree(Generic[T]):
    """Binary search tree with insert, find and sorted/level-order traversal.

    Every node's left subtree holds values strictly less than the node's
    value and its right subtree holds values greater than or equal to it.
    The tree never rebalances, so its shape depends only on insertion
    order: sorted input produces a chain as deep as the tree is large.

    Example:
        >>> tree = OrderedTree([5, 10, 3])
        >>> tree.insert(4)
        >>> tree.in_order()
        [3, 4, 5, 10]
        >>> tree.breadth_first()
        [5, 3, 10, 4]
    """

    def __init__(self, values: Optional[Iterable[T]] = None):
        """Create a tree, optionally inserting values in iteration order.

        Args:
            values: Initial values to insert
        """
        self._root: Optional[BinaryNode[T]] = None
        self._size = 0
        self._adapter = BinaryNodeAdapter()

        if values is not None:
            for value in values:
                self.insert(value)

    @property
    def root(self) -> Optional[BinaryNode[T]]:
        """The root node, or None when the tree is empty."""
        return self._root

    def insert(self, value: T) -> None:
        """Add a new node holding ``value``.

        Descends from the root, going left when ``value`` is less than the
        visited node's value and right otherwise, then attaches the new
        node to the empty slot it reached. Duplicates are never rejected.

        Args:
            value: The value to store

        Raises:
            TypeError: If ``value`` cannot be compared with stored values.
                The tree is left unchanged in that case.
        """
        parent = None
        node = self._root
        go_left = False

        while node is not None:
            parent = node
            go_left = value < node.value
            node = node.left if go_left else node.right

        new_node = BinaryNode(value)
        if parent is None:
            self._root = new_node
        elif go_left:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        logger.debug("Inserted %r (size=%d)", value, self._size)

    def find(self, value: T) -> Optional[BinaryNode[T]]:
        """Find a node holding a value equal to ``value``.

        With duplicates present this is the shallowest matching node on
        the search path, which is not necessarily the first one inserted.

        Args:
            value: The value to look for

        Returns:
            The matching node, or None if no stored value equals ``value``
        """
        node = self._root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def in_order(self) -> List[T]:
        """Return all values in ascending order."""
        traverser = InOrderTraverser(self._adapter)
        return [node.value for node, _ in traverser.traverse(self._root)]

    def breadth_first(self) -> List[T]:
        """Return all values level by level, left to right within a level."""
        traverser = BreadthFirstTraverser(self._adapter)
        return [node.value for node, _ in traverser.traverse(self._root)]

    def traverse(self,
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[T]:
        """Return a lazy iterator of values in any supported strategy's order.

        Args:
            strategy: in_order, bfs/level_order, dfs_pre/pre_order or
                dfs_post/post_order, as a string or TraversalStrategy
            max_depth: Deepest level to visit (root is depth 0)
            min_depth: Shallowest level to yield

        Returns:
            Iterator over stored values

        Raises:
            ValueError: If the strategy name is unknown
            InvalidConfigurationError: If the depth window is invalid
        """
        # Plan eagerly so bad arguments fail here, not on first next()
        plan = plan_traversal(
            self._adapter,
            strategy=strategy,
            max_depth=max_depth,
            min_depth=min_depth,
        )
        return (value for _, value in plan.execute(self._root))

    def stats(self) -> Dict[str, Any]:
        """Shape statistics; see api.get_tree_stats."""
        return get_tree_stats(self._root, self._adapter)

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self.traverse(TraversalStrategy.IN_ORDER)

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size})"
