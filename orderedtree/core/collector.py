"""Data collection strategies for orderedtree.

DataCollectors define what information to extract from nodes during
traversal. This allows the same traversal to produce plain values, nodes,
or anything a caller computes from them.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Tuple
from .node import BinaryNode
from .adapter import TreeAdapter


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    DataCollectors determine what information is extracted from each node
    during traversal, separately from the order the nodes are visited in.
    """

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: BinaryNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects only the stored value.

    This is what OrderedTree's own traversals return.
    """

    def collect(self, node: BinaryNode, depth: int) -> Any:
        return node.value


class FullNodeCollector(DataCollector):
    """Collects complete node objects."""

    def collect(self, node: BinaryNode, depth: int) -> BinaryNode:
        return node


class DepthCollector(DataCollector):
    """Collects ``(value, depth)`` pairs.

    Useful for printing a tree level by level or checking node placement.
    """

    def collect(self, node: BinaryNode, depth: int) -> Tuple[Any, int]:
        return (node.value, depth)


class CustomCollector(DataCollector):
    """Collector wrapping a user-supplied function.

    Example:
        collector = CustomCollector(adapter, lambda node, depth: node.value * 2)
    """

    def __init__(self, adapter: TreeAdapter,
                 collect_func: Callable[[BinaryNode, int], Any]):
        """Initialize with collection function.

        Args:
            adapter: TreeAdapter for node operations
            collect_func: Function(node, depth) -> collected_data
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: BinaryNode, depth: int) -> Any:
        return self.collect_func(node, depth)
