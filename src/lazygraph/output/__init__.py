"""Output: presentation of traversal results."""
