from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.influencer_repository import InfluencerRepository
from ...infrastructure.db.mongo_influencer_repository import MongoInfluencerRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Repositories are built lazily so no connection is made at import time.
        """
        def build_influencer_repository() -> InfluencerRepository:
            mongo_client = container.get("mongo_client")
            settings = get_settings()
            collection = mongo_client.get_collection(settings.influencers_collection)
            return MongoInfluencerRepository(collection, timeout_seconds=settings.request_timeout_seconds)

        container.register_factory(InfluencerRepository, build_influencer_repository)
