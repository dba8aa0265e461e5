"""Domain layer — the Quantified value type and its codecs.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
