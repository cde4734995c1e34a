"""Domain layer — lexical rules, name validation, and path derivation.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
