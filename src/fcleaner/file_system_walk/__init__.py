"""Directory traversal with exclusion-aware pruning.

This package provides the walk primitive shared by the deletable-file collector and
the empty-directory detector, along with the records they produce.
"""
