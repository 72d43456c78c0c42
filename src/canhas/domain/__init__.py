"""Domain layer: records, change tracking, and error collections.

This layer depends only on stdlib and pydantic.
It must never import from validators, integrations, commands, or config.
"""
