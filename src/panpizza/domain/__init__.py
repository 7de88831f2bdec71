"""Domain layer — unit normalization, dough estimation, and recipe composition.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
Every function here is pure: same inputs, same outputs, no side effects.
"""
