"""In-memory directory tree reconstructed from a command log.

This package provides the node type and the tree manager that tracks the current
directory while a command log is replayed.
"""
