"""
Tests for the core tree package.

- test_node.py: Node accessors and validation
- test_tree.py: insertion polarity, construction and membership
- test_search.py: level traversal, bf_search and bf_flatten
"""
