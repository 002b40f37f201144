"""Domain layer: vertex identity, node and event types, traversal state.

This layer depends only on stdlib and the config models.
It must never import from graph, infrastructure, or output.
"""
