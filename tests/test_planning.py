"""Tests for configuration, execution plans and the functional API."""

import logging
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import (
    OrderedTree,
    BinaryNode,
    BinaryNodeAdapter,
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
    ExecutionPlan,
    InvalidConfigurationError,
    CustomCollector,
    InOrderTraverser,
    traverse_tree,
    collect_tree_data,
    plan_traversal,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)


@pytest.fixture
def tree():
    return OrderedTree([5, 10, 3, 4, 7, 12, 15])


@pytest.fixture
def adapter():
    return BinaryNodeAdapter()


class TestTraversalConfig:

    def test_defaults_are_sorted_values(self):
        config = TraversalConfig()
        assert config.strategy == TraversalStrategy.IN_ORDER
        assert config.data_requirements == DataRequirement.VALUE
        assert config.validate() == []
        assert TraversalConfig.sorted_values() == config

    def test_level_scan(self):
        config = TraversalConfig.level_scan(max_depth=2)
        assert config.strategy == TraversalStrategy.BREADTH_FIRST
        assert config.depth.max_depth == 2
        assert config.data_requirements == DataRequirement.VALUE_WITH_DEPTH

    def test_validation_messages(self):
        config = TraversalConfig(
            strategy=TraversalStrategy.CUSTOM,
            data_requirements=DataRequirement.CUSTOM,
            depth=DepthConfig(min_depth=3, max_depth=1),
            max_nodes=0,
        )
        errors = config.validate()
        assert "max_depth cannot be less than min_depth" in errors
        assert "max_nodes must be positive" in errors
        assert "custom_traverser required when strategy is CUSTOM" in errors
        assert "custom_collector required when data_requirements is CUSTOM" in errors

    def test_negative_depths(self):
        errors = TraversalConfig(depth=DepthConfig(min_depth=-1, max_depth=-2)).validate()
        assert "min_depth cannot be negative" in errors
        assert "max_depth cannot be negative" in errors

    def test_filter_exclusion_wins(self):
        config = FilterConfig(include_filter=lambda v: v > 0,
                              exclude_filter=lambda v: v == 5)
        assert config.should_include(4)
        assert not config.should_include(5)
        assert not config.should_include(-1)
        assert FilterConfig().should_include(None)


class TestExecutionPlan:

    def test_invalid_config_rejected(self, adapter):
        config = TraversalConfig(depth=DepthConfig(min_depth=2, max_depth=1))
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ExecutionPlan(config, adapter)
        assert "max_depth cannot be less than min_depth" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)

    def test_execute_values(self, tree, adapter):
        plan = ExecutionPlan(TraversalConfig.sorted_values(), adapter)
        assert [data for _, data in plan.execute(tree.root)] == [3, 4, 5, 7, 10, 12, 15]
        assert plan.nodes_processed == 7

    def test_execute_empty_tree(self, adapter):
        plan = ExecutionPlan(TraversalConfig(), adapter)
        assert list(plan.execute(None)) == []
        assert plan.nodes_processed == 0

    def test_level_scan_collects_depths(self, tree, adapter):
        plan = ExecutionPlan(TraversalConfig.level_scan(max_depth=1), adapter)
        assert [data for _, data in plan.execute(tree.root)] == [(5, 0), (3, 1), (10, 1)]

    def test_max_nodes(self, tree, adapter):
        plan = ExecutionPlan(TraversalConfig(max_nodes=3), adapter)
        assert [data for _, data in plan.execute(tree.root)] == [3, 4, 5]
        assert plan.nodes_processed == 3

    def test_custom_components(self, tree, adapter):
        config = TraversalConfig(
            strategy=TraversalStrategy.CUSTOM,
            custom_traverser=InOrderTraverser(adapter),
            data_requirements=DataRequirement.CUSTOM,
            custom_collector=CustomCollector(adapter, lambda node, depth: node.value * 10),
        )
        plan = ExecutionPlan(config, adapter)
        assert [data for _, data in plan.execute(tree.root)] == [30, 40, 50, 70, 100, 120, 150]

    def test_collector_error_propagates_by_default(self, tree, adapter):
        def explode(node, depth):
            if node.value == 7:
                raise RuntimeError("bad node")
            return node.value

        on_error = Mock()
        config = TraversalConfig(
            data_requirements=DataRequirement.CUSTOM,
            custom_collector=CustomCollector(adapter, explode),
            on_error=on_error,
        )
        plan = ExecutionPlan(config, adapter)
        seen = []
        with pytest.raises(RuntimeError, match="bad node"):
            for _, data in plan.execute(tree.root):
                seen.append(data)

        assert seen == [3, 4, 5]
        assert plan.errors_encountered == [(7, "bad node")]
        on_error.assert_called_once()
        node, error = on_error.call_args[0]
        assert node.value == 7
        assert isinstance(error, RuntimeError)

    def test_collector_error_skipped(self, tree, adapter):
        config = TraversalConfig(
            data_requirements=DataRequirement.CUSTOM,
            custom_collector=CustomCollector(adapter, lambda node, depth: 100 // (node.value - 7)),
            skip_errors=True,
        )
        plan = ExecutionPlan(config, adapter)
        collected = [node.value for node, _ in plan.execute(tree.root)]
        assert collected == [3, 4, 5, 10, 12, 15]
        assert len(plan.errors_encountered) == 1
        assert plan.errors_encountered[0][0] == 7

    def test_filter_error_skipped_and_logged(self, adapter, caplog):
        tree = OrderedTree([5, 3, 0, 7])
        config = TraversalConfig(
            filter=FilterConfig(include_filter=lambda v: 10 // v > 0),
            skip_errors=True,
        )
        plan = ExecutionPlan(config, adapter)

        with caplog.at_level(logging.WARNING, logger="orderedtree.planning"):
            kept = [node.value for node, _ in plan.execute(tree.root)]

        assert kept == [3, 5, 7]
        assert len(plan.errors_encountered) == 1
        assert plan.errors_encountered[0][0] == 0
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Skipping node 0" in warnings[0].getMessage()

    def test_summary(self, adapter):
        plan = ExecutionPlan(TraversalConfig.level_scan(max_depth=2), adapter)
        summary = plan.get_summary()
        assert summary['strategy'] == "bfs"
        assert summary['data_requirements'] == "value_depth"
        assert summary['max_depth'] == 2
        assert summary['traverser'] == "BreadthFirstTraverser"
        assert summary['collector'] == "DepthCollector"
        assert summary['adapter'] == "BinaryNodeAdapter"


class TestFunctionalApi:

    def test_traverse_tree_defaults_to_in_order(self, tree):
        nodes = list(traverse_tree(tree.root))
        assert all(isinstance(node, BinaryNode) for node in nodes)
        assert [node.value for node in nodes] == tree.in_order()

    def test_traverse_tree_strategy_names(self, tree):
        assert [n.value for n in traverse_tree(tree.root, strategy="bfs")] == tree.breadth_first()
        assert [n.value for n in traverse_tree(tree.root, strategy="dfs")] == [5, 3, 4, 10, 7, 12, 15]

    def test_unknown_strategy_name(self, tree):
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            list(traverse_tree(tree.root, strategy="spiral"))

    def test_unknown_option(self, tree):
        with pytest.raises(TypeError, match="colour"):
            list(traverse_tree(tree.root, colour="red"))

    @pytest.mark.parametrize("option", ["validate", "sorted_values", "level_scan"])
    def test_config_methods_are_not_options(self, tree, option):
        with pytest.raises(TypeError, match=f"Unknown traversal option: {option}"):
            list(traverse_tree(tree.root, **{option: True}))

    def test_plan_traversal_fails_immediately(self):
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            plan_traversal(strategy="spiral")
        with pytest.raises(InvalidConfigurationError):
            plan_traversal(max_depth=-1)
        plan = plan_traversal(strategy="bfs", max_nodes=2)
        assert plan.get_summary()["max_nodes"] == 2

    def test_filters(self, tree):
        kept = traverse_tree(tree.root,
                             include_filter=lambda v: v % 2 == 1,
                             exclude_filter=lambda v: v > 10)
        assert [node.value for node in kept] == [3, 5, 7]

    def test_collect_tree_data(self, tree):
        pairs = list(collect_tree_data(tree.root,
                                       data_requirement=DataRequirement.VALUE_WITH_DEPTH,
                                       strategy=TraversalStrategy.DEPTH_FIRST_POST))
        assert [data for _, data in pairs] == [(4, 2), (3, 1), (7, 2), (15, 3), (12, 2), (10, 1), (5, 0)]

    def test_count_nodes(self, tree):
        assert count_nodes(tree.root) == 7
        assert count_nodes(tree.root, max_depth=1) == 3
        assert count_nodes(None) == 0

    def test_find_nodes_sees_every_duplicate(self):
        tree = OrderedTree([5, 7, 5, 5, 1])
        matches = list(find_nodes(tree.root, lambda v: v == 5))
        assert len(matches) == 3
        assert matches[0] is tree.find(5)

    def test_get_leaf_nodes(self, tree):
        assert [node.value for node in get_leaf_nodes(tree.root)] == [4, 7, 15]

    def test_get_tree_stats(self, tree):
        stats = get_tree_stats(tree.root)
        assert stats == {
            'total_nodes': 7,
            'leaf_nodes': 3,
            'internal_nodes': 4,
            'height': 3,
            'depths': {0: 1, 1: 2, 2: 3, 3: 1},
        }

    def test_get_tree_stats_empty(self):
        stats = get_tree_stats(None)
        assert stats['total_nodes'] == 0
        assert stats['height'] == -1
        assert stats['depths'] == {}
