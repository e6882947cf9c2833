"""High-level API for orderedtree.

This module provides simple, functional interfaces for common traversal
operations over a tree of BinaryNodes. These functions wrap the config and
plan objects for ease of use in simple cases.
"""

import dataclasses
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, Union
from .core.node import BinaryNode
from .core.adapter import TreeAdapter, BinaryNodeAdapter
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .planning import ExecutionPlan


def traverse_tree(
    root: Optional[BinaryNode],
    adapter: Optional[TreeAdapter] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Any], bool]] = None,
    exclude_filter: Optional[Callable[[Any], bool]] = None,
    **kwargs
) -> Iterator[BinaryNode]:
    """Simple interface for tree traversal.

    This is the primary high-level function for walking a tree. It handles
    the common case of wanting to iterate over nodes without dealing with
    configs and plans.

    Args:
        root: Starting node for traversal (None for an empty tree)
        adapter: Tree adapter (defaults to BinaryNodeAdapter)
        strategy: Traversal strategy (in_order, bfs, dfs_pre, dfs_post)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Predicate on values deciding inclusion
        exclude_filter: Predicate on values deciding exclusion
        **kwargs: Additional TraversalConfig fields (max_nodes, on_error, ...)

    Yields:
        BinaryNode instances that match the criteria

    Example:
        >>> tree = OrderedTree([5, 3, 10])
        >>> [n.value for n in traverse_tree(tree.root, strategy="bfs")]
        [5, 3, 10]
    """
    for node, _ in collect_tree_data(
        root, adapter,
        data_requirement=DataRequirement.FULL_NODE,
        strategy=strategy,
        max_depth=max_depth,
        min_depth=min_depth,
        include_filter=include_filter,
        exclude_filter=exclude_filter,
        **kwargs
    ):
        yield node


def collect_tree_data(
    root: Optional[BinaryNode],
    adapter: Optional[TreeAdapter] = None,
    data_requirement: DataRequirement = DataRequirement.VALUE,
    **kwargs
) -> Iterator[Tuple[BinaryNode, Any]]:
    """Traverse tree and collect specified data.

    Similar to traverse_tree but returns both nodes and collected data.

    Args:
        root: Starting node for traversal
        adapter: Tree adapter (defaults to BinaryNodeAdapter)
        data_requirement: What data to collect
        **kwargs: Additional traversal options (see traverse_tree)

    Yields:
        Tuples of (node, collected_data)
    """
    plan = plan_traversal(adapter, data_requirement=data_requirement, **kwargs)
    yield from plan.execute(root)


def plan_traversal(
    adapter: Optional[TreeAdapter] = None,
    **kwargs
) -> ExecutionPlan:
    """Build and validate an ExecutionPlan from keyword options.

    Unlike the generator helpers above, this fails immediately on a bad
    strategy name, unknown option or invalid config.

    Args:
        adapter: Tree adapter (defaults to BinaryNodeAdapter)
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        A validated ExecutionPlan

    Raises:
        ValueError: If the strategy name is unknown
        TypeError: If an option is not a traversal setting
        InvalidConfigurationError: If the resulting config is invalid
    """
    config = _build_config_from_kwargs(**kwargs)
    return ExecutionPlan(config, adapter or BinaryNodeAdapter())


def count_nodes(
    root: Optional[BinaryNode],
    adapter: Optional[TreeAdapter] = None,
    **kwargs
) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Starting node for traversal
        adapter: Tree adapter (defaults to BinaryNodeAdapter)
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, adapter, **kwargs):
        count += 1
    return count


def find_nodes(
    root: Optional[BinaryNode],
    predicate: Callable[[Any], bool],
    adapter: Optional[TreeAdapter] = None,
    **kwargs
) -> Iterator[BinaryNode]:
    """Find every node whose value matches a predicate.

    Unlike OrderedTree.find this visits the whole tree, so it also finds
    every duplicate of a value.

    Args:
        root: Starting node for traversal
        predicate: Function on values returning True for matches
        adapter: Tree adapter (defaults to BinaryNodeAdapter)
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate

    Example:
        >>> evens = [n.value for n in find_nodes(tree.root, lambda v: v % 2 == 0)]
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, adapter, **kwargs)


def get_leaf_nodes(
    root: Optional[BinaryNode],
    adapter: Optional[TreeAdapter] = None,
    **kwargs
) -> Iterator[BinaryNode]:
    """Get all leaf nodes in a tree.

    Args:
        root: Starting node for traversal
        adapter: Tree adapter (defaults to BinaryNodeAdapter)
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Leaf nodes (nodes with no children)
    """
    adapter = adapter or BinaryNodeAdapter()
    for node in traverse_tree(root, adapter, **kwargs):
        if adapter.is_leaf(node):
            yield node


def get_tree_stats(
    root: Optional[BinaryNode],
    adapter: Optional[TreeAdapter] = None,
    **kwargs
) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Starting node for traversal
        adapter: Tree adapter (defaults to BinaryNodeAdapter)
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height
        (-1 for an empty tree) and depths (node count per depth)

    Example:
        >>> stats = get_tree_stats(OrderedTree([2, 1, 3]).root)
        >>> stats['height'], stats['leaf_nodes']
        (1, 2)
    """
    adapter = adapter or BinaryNodeAdapter()
    kwargs.setdefault('strategy', TraversalStrategy.BREADTH_FIRST)

    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {}
    }

    for node, (_, depth) in collect_tree_data(
        root, adapter,
        data_requirement=DataRequirement.VALUE_WITH_DEPTH,
        **kwargs
    ):
        stats['total_nodes'] += 1

        if adapter.is_leaf(node):
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'in_order': TraversalStrategy.IN_ORDER,
        'inorder': TraversalStrategy.IN_ORDER,
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'level': TraversalStrategy.BREADTH_FIRST,
        'level_order': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'post_order': TraversalStrategy.DEPTH_FIRST_POST,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments.

    Args:
        **kwargs: Configuration options

    Returns:
        TraversalConfig instance

    Raises:
        TypeError: If an option does not correspond to any config field
    """
    config = TraversalConfig(
        depth=DepthConfig(),
        filter=FilterConfig(),
    )

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    # Apply any remaining kwargs directly, but only onto config fields
    field_names = {f.name for f in dataclasses.fields(TraversalConfig)}
    for key, value in kwargs.items():
        if key not in field_names:
            raise TypeError(f"Unknown traversal option: {key}")
        setattr(config, key, value)

    return config
