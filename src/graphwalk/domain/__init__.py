"""Domain layer — graph model, loader, and traversal.

This layer depends only on stdlib and networkx.
It must never import from services, commands, config, or output.
"""
