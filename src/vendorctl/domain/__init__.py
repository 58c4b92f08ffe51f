"""Domain layer — modules, manifest, actions, and export rules.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
