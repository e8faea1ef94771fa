"""Reverse-index construction and chain traversal."""
