from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.influencer_repository import InfluencerRepository
from ...application.services.influencer_service import InfluencerService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class InfluencerProvider:
    """Influencer service provider - registers influencer-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register influencer service.
        Service is created with the repository from container.
        """
        settings = get_settings()
        container.register_factory(
            InfluencerService,
            lambda: InfluencerService(
                influencer_repository=container.get(InfluencerRepository),
                default_page_limit=settings.default_page_limit,
                quick_find_limit=settings.quick_find_limit,
            )
        )
