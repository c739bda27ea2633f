"""Service layer — business logic returning ServiceResult.

Services may import from domain, components, and infrastructure.
They must never import from commands, output, or web.
"""
