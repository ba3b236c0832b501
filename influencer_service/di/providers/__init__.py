"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .influencer_provider import InfluencerProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "InfluencerProvider",
]
