"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .webinar_provider import WebinarProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "WebinarProvider",
]
