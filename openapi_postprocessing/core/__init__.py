"""Traversal engine and visitor contracts."""
