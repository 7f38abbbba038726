"""Domain layer: the Lexicon node types and the strict decoder.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
