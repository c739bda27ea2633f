"""HTTP backend: contact endpoint, catalog API, and static files."""

from folioctl.web.app import create_app

__all__ = ["create_app"]
