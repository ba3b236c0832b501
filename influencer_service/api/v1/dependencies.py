"""
Dependency Container
====================

FastAPI dependency functions backed by the DI container.
Tests override these through ``app.dependency_overrides``.
"""
from influencer_service.application.services.influencer_service import InfluencerService
from influencer_service.di.container import get_container


def get_influencer_service() -> InfluencerService:
    """
    Get influencer service instance (singleton).

    Returns:
        InfluencerService instance
    """
    return get_container().get(InfluencerService)
