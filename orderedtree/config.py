"""Configuration system for orderedtree traversals.

This module defines how callers specify their traversal requirements:
which order to visit nodes in, which depths and values they care about,
and what to collect from each visited node.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    IN_ORDER = "in_order"           # Left, node, right (sorted)
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    CUSTOM = "custom"               # User-defined traverser


class DataRequirement(Enum):
    """Specifies what data is collected from each visited node."""
    VALUE = "value"                     # Stored value only
    FULL_NODE = "full"                  # The BinaryNode itself
    VALUE_WITH_DEPTH = "value_depth"    # (value, depth) pairs
    CUSTOM = "custom"                   # User-defined collection


@dataclass
class FilterConfig:
    """Configuration for filtering nodes by value during traversal.

    Filtering only decides what is yielded; the whole tree is still walked
    so the traversal order of the remaining values is unchanged.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, value: Any) -> bool:
        """Check if a value passes the filters.

        Args:
            value: Node value to check

        Returns:
            True if value passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(value):
            return False

        if self.include_filter:
            return self.include_filter(value)

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    This is the primary way callers specify what they want from a
    traversal. The ExecutionPlan validates it before anything is visited.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.IN_ORDER
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Value filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Data collection
    data_requirements: DataRequirement = DataRequirement.VALUE
    custom_collector: Optional[Any] = None  # Custom collector instance

    # Stop after this many yielded nodes
    max_nodes: Optional[int] = None

    # Error handling
    on_error: Optional[Callable[[Any, Exception], None]] = None
    skip_errors: bool = False  # Continue on errors vs fail fast

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Create config yielding every value in ascending order."""
        return cls(
            strategy=TraversalStrategy.IN_ORDER,
            data_requirements=DataRequirement.VALUE,
        )

    @classmethod
    def level_scan(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Create config for a level-by-level scan with depths attached.

        Args:
            max_depth: Deepest level to include (None = whole tree)

        Returns:
            TraversalConfig for level scanning
        """
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
            data_requirements=DataRequirement.VALUE_WITH_DEPTH,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
