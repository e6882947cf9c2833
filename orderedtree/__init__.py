"""orderedtree - Generic Binary Search Tree Library.

orderedtree provides an unbalanced binary search tree over any values that
support ``<`` and ``==``, together with the traversal machinery used to
walk it.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtree import OrderedTree

    tree = OrderedTree([5, 10, 3])
    tree.in_order()        # [3, 5, 10]
    tree.breadth_first()   # [5, 3, 10]
    tree.find(10)          # BinaryNode(value=10)
━━━━━━━━━━━━━━━━━━━━━━━━━━

For finer control over traversal order, depth windows and what is
collected per node, see ``orderedtree.api`` and ``orderedtree.config``.
"""

__version__ = "0.1.0"

# Core components
from .core.node import BinaryNode, ChildLinkError
from .core.adapter import TreeAdapter, BinaryNodeAdapter
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    ValueCollector,
    FullNodeCollector,
    DepthCollector,
    CustomCollector,
)

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .planning import ExecutionPlan, InvalidConfigurationError

# High-level API
from .api import (
    traverse_tree,
    collect_tree_data,
    plan_traversal,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

from .tree import OrderedTree

__all__ = [
    '__version__',
    # Container
    'OrderedTree',
    # Core
    'BinaryNode',
    'ChildLinkError',
    'TreeAdapter',
    'BinaryNodeAdapter',
    'TreeTraverser',
    'InOrderTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
    'DataCollector',
    'ValueCollector',
    'FullNodeCollector',
    'DepthCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'DepthConfig',
    'FilterConfig',
    'ExecutionPlan',
    'InvalidConfigurationError',
    # API
    'traverse_tree',
    'collect_tree_data',
    'plan_traversal',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]
