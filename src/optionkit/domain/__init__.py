"""Domain layer — the Optional container and its error taxonomy.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
