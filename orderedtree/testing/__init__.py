"""Testing utilities for orderedtree consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
