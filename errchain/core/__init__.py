"""Wrapped error chains.

Nodes are built one wrap at a time and never mutated; every traversal walks
from the outermost wrap toward the root.
"""
