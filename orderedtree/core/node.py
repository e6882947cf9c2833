"""BinaryNode for orderedtree.

A BinaryNode is a data container: it holds one value and at most two
child links. Navigation over nodes is delegated to a TreeAdapter, and the
placement rules live in OrderedTree.
"""

from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class ChildLinkError(ValueError):
    """Raised when a child link that is already set is assigned again."""
    pass


class BinaryNode(Generic[T]):
    """One stored element of a binary search tree.

    The value is fixed when the node is created. The ``left`` and ``right``
    links start out empty and can each be populated exactly once; after
    that they never change. This is what keeps a tree grow-only: nodes are
    attached, never moved or detached.

    Example:
        >>> node = BinaryNode(5)
        >>> node.left = BinaryNode(3)
        >>> node.left.value
        3
    """

    __slots__ = ("_value", "_left", "_right")

    def __init__(self, value: T):
        self._value = value
        self._left: Optional["BinaryNode[T]"] = None
        self._right: Optional["BinaryNode[T]"] = None

    @property
    def value(self) -> T:
        """The stored value (read-only)."""
        return self._value

    @property
    def left(self) -> Optional["BinaryNode[T]"]:
        return self._left

    @left.setter
    def left(self, node: "BinaryNode[T]") -> None:
        self._left = self._checked_link("left", self._left, node)

    @property
    def right(self) -> Optional["BinaryNode[T]"]:
        return self._right

    @right.setter
    def right(self, node: "BinaryNode[T]") -> None:
        self._right = self._checked_link("right", self._right, node)

    def _checked_link(self, side: str,
                      current: Optional["BinaryNode[T]"],
                      node: Any) -> "BinaryNode[T]":
        """Validate a child assignment and return the node to store.

        Args:
            side: "left" or "right", used in error messages
            current: The link's present value
            node: The proposed child

        Returns:
            The proposed child, once validated

        Raises:
            TypeError: If node is not a BinaryNode
            ChildLinkError: If the link is already populated
        """
        if not isinstance(node, BinaryNode):
            raise TypeError(
                f"{side} child must be a BinaryNode, got {type(node).__name__}"
            )
        if current is not None:
            raise ChildLinkError(
                f"{side} child of node {self._value!r} is already set"
            )
        return node

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self._left is None and self._right is None

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node.

        Returns:
            Dict with the value and which child links are populated
        """
        return {
            "value": self._value,
            "has_left": self._left is not None,
            "has_right": self._right is not None,
            "is_leaf": self.is_leaf(),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value!r})"
