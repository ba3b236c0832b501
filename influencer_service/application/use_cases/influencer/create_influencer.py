"""
Create Influencer Use Case
==========================

Business use case for adding a new influencer record.
"""
import logging

from influencer_service.domain.models.influencer import Influencer, InfluencerData
from influencer_service.domain.repositories.influencer_repository import InfluencerRepository
from influencer_service.utils.datetime_utils import now_millis

logger = logging.getLogger(__name__)


class CreateInfluencerUseCase:
    """
    Use case for creating an influencer.

    No field is required; the server stamps updated_on and the
    repository starts visits at 1.
    """

    def __init__(self, influencer_repository: InfluencerRepository):
        self._repository = influencer_repository

    def execute(self, data: InfluencerData) -> Influencer:
        """
        Execute the create influencer use case.

        Args:
            data: Editable influencer fields

        Returns:
            Created influencer with its assigned ID

        Raises:
            StoreError: If the insert fails
        """
        influencer = self._repository.create(data, updated_on=now_millis())
        logger.info(f"Influencer {influencer.id} created")
        return influencer
