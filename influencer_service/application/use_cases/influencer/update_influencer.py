"""
Update Influencer Use Case
==========================

Business use case for replacing the editable fields of an influencer.
"""
import logging

from influencer_service.core.exceptions import InfluencerNotFoundError
from influencer_service.domain.models.influencer import Influencer, InfluencerData
from influencer_service.domain.repositories.influencer_repository import InfluencerRepository
from influencer_service.utils.datetime_utils import now_millis

logger = logging.getLogger(__name__)


class UpdateInfluencerUseCase:
    """
    Use case for updating an influencer.

    This is a wholesale replace, not a merge: every editable field is
    written, so a field missing from the payload is cleared. Visits are
    never touched.
    """

    def __init__(self, influencer_repository: InfluencerRepository):
        self._repository = influencer_repository

    def execute(self, influencer_id: str, data: InfluencerData) -> Influencer:
        """
        Execute the update influencer use case.

        Args:
            influencer_id: Identifier of the influencer to update
            data: New values for every editable field

        Returns:
            Influencer as stored after the update

        Raises:
            InfluencerNotFoundError: If no influencer has this ID
            StoreError: If the lookup or the update fails
        """
        if not self._repository.exists(influencer_id):
            raise InfluencerNotFoundError(influencer_id)

        updated = self._repository.replace_data(influencer_id, data, updated_on=now_millis())
        if updated is None:
            # Removed between the existence check and the update
            raise InfluencerNotFoundError(influencer_id)

        logger.info(f"Influencer {influencer_id} updated")
        return updated
