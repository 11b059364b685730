"""Infrastructure layer — the flat-file backing store.

May import from domain. Must never import from services or commands.
"""
