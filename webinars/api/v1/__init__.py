"""
API v1 Package
===============

Version 1 API controllers.
"""
from .webinar_controller import router as webinar_router

__all__ = ["webinar_router"]
