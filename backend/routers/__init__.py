"""Routers module - FastAPI route handlers"""

from . import tools

__all__ = ["tools"]
