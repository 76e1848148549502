"""Domain layer: post record, field schema, errors, pure parsing.

This layer depends only on stdlib, pydantic and ruamel.yaml.
It must never import from services, infrastructure, commands, or config.
"""
