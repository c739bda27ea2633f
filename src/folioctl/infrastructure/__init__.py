"""Infrastructure layer — database, preference store, mail delivery, timers.

This layer depends on stdlib and third-party libs (SQLAlchemy).
It must never import from services, components, commands, or output.
"""
