"""folioctl — portfolio site components, contact backend, and CLI."""

__version__ = "0.4.0"
