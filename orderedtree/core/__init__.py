"""Core abstractions for orderedtree.

This package contains the node type and the building blocks traversals are
assembled from.
"""

from .node import BinaryNode, ChildLinkError
from .adapter import TreeAdapter, BinaryNodeAdapter
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    FullNodeCollector,
    DepthCollector,
    CustomCollector,
)

__all__ = [
    "BinaryNode",
    "ChildLinkError",
    "TreeAdapter",
    "BinaryNodeAdapter",
    "TreeTraverser",
    "InOrderTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "FullNodeCollector",
    "DepthCollector",
    "CustomCollector",
]
