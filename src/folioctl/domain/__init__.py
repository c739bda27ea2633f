"""Domain layer — state machines, validation rules, and site content.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, components, commands, or config.
"""
