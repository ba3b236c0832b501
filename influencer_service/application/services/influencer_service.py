"""
Influencer Service
==================

Application service that coordinates influencer-related operations.
This service orchestrates multiple use cases.
"""
import logging
from typing import List, Optional, Tuple

from influencer_service.core.exceptions import InfluencerNotFoundError
from influencer_service.domain.models.influencer import (
    Influencer,
    InfluencerData,
    InfluencerSummary,
)
from influencer_service.domain.repositories.influencer_repository import InfluencerRepository
from influencer_service.application.use_cases.influencer import (
    CreateInfluencerUseCase,
    ListInfluencersUseCase,
    UpdateInfluencerUseCase,
)

logger = logging.getLogger(__name__)


class InfluencerService:
    """
    Application service for influencer operations.

    This service coordinates multiple use cases and provides
    a high-level interface for influencer management.
    Each operation runs inside one repository request scope, so all of
    its store calls share a single deadline.
    """

    def __init__(
        self,
        influencer_repository: InfluencerRepository,
        default_page_limit: int = 6,
        quick_find_limit: int = 20,
    ):
        """
        Initialize service with repository.

        Args:
            influencer_repository: Repository for influencer persistence
            default_page_limit: Page size for listing when the client gives none
            quick_find_limit: Maximum number of summaries returned by quick find
        """
        self._repository = influencer_repository
        self._quick_find_limit = quick_find_limit
        self._list_use_case = ListInfluencersUseCase(influencer_repository, default_page_limit)
        self._create_use_case = CreateInfluencerUseCase(influencer_repository)
        self._update_use_case = UpdateInfluencerUseCase(influencer_repository)

    def list_influencers(
        self,
        search: Optional[str] = None,
        label: Optional[str] = None,
        gender: Optional[str] = None,
        limit: Optional[str] = None,
        page: Optional[str] = None,
    ) -> Tuple[List[Influencer], int]:
        """
        List influencers with optional filters, newest update first.

        Returns:
            Tuple of (influencers on the requested page, total matching count)
        """
        with self._repository.request_scope():
            return self._list_use_case.execute(
                search=search,
                label=label,
                gender=gender,
                limit=limit,
                page=page,
            )

    def get_influencer(self, influencer_id: str) -> Influencer:
        """
        Get an influencer by ID and count the visit.

        The returned record is the state before this visit was counted.

        Raises:
            InfluencerNotFoundError: If no influencer has this ID
        """
        with self._repository.request_scope():
            influencer = self._repository.find_by_id_and_record_visit(influencer_id)
        if influencer is None:
            raise InfluencerNotFoundError(influencer_id)
        logger.debug(f"Influencer {influencer_id} visited ({influencer.visits + 1} visits)")
        return influencer

    def quick_find(self, ids: Optional[str] = None) -> List[InfluencerSummary]:
        """
        Find influencer summaries by a comma-separated list of IDs.

        Without ids, returns the first summaries the store yields.
        Invalid ids simply match nothing.
        """
        influencer_ids = ids.split(",") if ids else None
        with self._repository.request_scope():
            return self._repository.find_summaries(influencer_ids, self._quick_find_limit)

    def create_influencer(self, data: InfluencerData) -> Influencer:
        """Create a new influencer."""
        with self._repository.request_scope():
            return self._create_use_case.execute(data)

    def update_influencer(self, influencer_id: str, data: InfluencerData) -> Influencer:
        """Replace every editable field of an existing influencer."""
        with self._repository.request_scope():
            return self._update_use_case.execute(influencer_id, data)
