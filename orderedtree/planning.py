"""Execution planning for orderedtree.

The ExecutionPlan validates a TraversalConfig and coordinates the actual
traversal: the traverser decides the visiting order, the filters decide
what is kept, and the collector decides what is produced per node.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple
from .core.node import BinaryNode
from .core.adapter import TreeAdapter
from .core.traverser import TreeTraverser, create_traverser
from .core.collector import (
    DataCollector,
    ValueCollector,
    FullNodeCollector,
    DepthCollector,
)
from .config import TraversalConfig, DataRequirement, TraversalStrategy

logger = logging.getLogger(__name__)


class InvalidConfigurationError(ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between caller intent (TraversalConfig)
    and execution. Validation happens up front, so an invalid config fails
    before a single node is visited.
    """

    def __init__(self, config: TraversalConfig, adapter: TreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration
            adapter: Tree adapter used for navigation

        Raises:
            InvalidConfigurationError: If the config is inconsistent
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise InvalidConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        # Track execution state
        self.nodes_processed = 0
        self.errors_encountered: List[Tuple[Any, str]] = []

        logger.debug("Planned %s traversal with %s",
                     self.traverser.__class__.__name__,
                     self.collector.__class__.__name__)

    def _select_traverser(self) -> TreeTraverser:
        """Select appropriate traverser based on configuration."""
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser

        strategy_map = {
            TraversalStrategy.IN_ORDER: "in_order",
            TraversalStrategy.BREADTH_FIRST: "bfs",
            TraversalStrategy.DEPTH_FIRST_PRE: "dfs_pre",
            TraversalStrategy.DEPTH_FIRST_POST: "dfs_post",
        }

        return create_traverser(strategy_map[self.config.strategy], self.adapter)

    def _select_collector(self) -> DataCollector:
        """Select appropriate data collector based on requirements."""
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
            DataRequirement.VALUE_WITH_DEPTH: DepthCollector,
        }

        collector_class = collector_map[self.config.data_requirements]
        return collector_class(self.adapter)

    def _within_node_limit(self) -> bool:
        if self.config.max_nodes is None:
            return True
        return self.nodes_processed < self.config.max_nodes

    def _handle_error(self, node: BinaryNode, error: Exception) -> None:
        """Record an error raised while processing a node.

        Args:
            node: Node where error occurred
            error: The exception that was raised
        """
        self.errors_encountered.append((node.value, str(error)))

        if self.config.on_error:
            self.config.on_error(node, error)

        if self.config.skip_errors:
            logger.warning("Skipping node %r after error: %s", node.value, error)

    def execute(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from (None for an empty tree)

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0
        self.errors_encountered = []

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if not self._within_node_limit():
                logger.debug("Stopping after %d nodes (max_nodes reached)",
                             self.nodes_processed)
                break

            try:
                if not self.config.filter.should_include(node.value):
                    continue

                if not self.config.depth.should_yield(depth):
                    continue

                data = self.collector.collect(node, depth)
            except Exception as e:
                self._handle_error(node, e)
                if not self.config.skip_errors:
                    raise
                continue

            self.nodes_processed += 1
            yield (node, data)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.max_nodes,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
