"""Domain layer — task models, command kinds, and the storage line codec.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
