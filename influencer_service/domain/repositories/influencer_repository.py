"""
Influencer Repository Interface
===============================

Abstract interface for influencer data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from contextlib import nullcontext
from typing import ContextManager, List, Optional, Tuple

from influencer_service.domain.models.influencer import (
    Influencer,
    InfluencerData,
    InfluencerSummary,
)
from influencer_service.domain.models.influencer_query import InfluencerQuery, Page


class InfluencerRepository(ABC):
    """
    Abstract repository for influencer persistence operations.

    Identifiers are passed as strings; a string that is not a valid
    identifier never matches a record.
    """

    def request_scope(self) -> ContextManager:
        """
        Scope spanning every store call made for one request.

        Implementations bound the whole scope by a single deadline.
        The default imposes none.
        """
        return nullcontext()

    @abstractmethod
    def find_page(self, query: InfluencerQuery, page: Page) -> Tuple[List[Influencer], int]:
        """
        Find influencers matching a query, newest update first.

        Args:
            query: Filter criteria
            page: Pagination window

        Returns:
            Tuple of (records on the page, total number of matching records)
        """
        pass

    @abstractmethod
    def find_by_id(self, influencer_id: str) -> Optional[Influencer]:
        """
        Find an influencer by its ID without side effects.

        Args:
            influencer_id: Influencer identifier

        Returns:
            Influencer entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_id_and_record_visit(self, influencer_id: str) -> Optional[Influencer]:
        """
        Atomically increment an influencer's visits and return it.

        Args:
            influencer_id: Influencer identifier

        Returns:
            The record as it was before the increment, None if not found
        """
        pass

    @abstractmethod
    def find_summaries(self, influencer_ids: Optional[List[str]], limit: int) -> List[InfluencerSummary]:
        """
        Find summary projections of influencers.

        Args:
            influencer_ids: Identifiers to match; None means no id filter
            limit: Maximum number of summaries to return

        Returns:
            List of summaries
        """
        pass

    @abstractmethod
    def create(self, data: InfluencerData, updated_on: int) -> Influencer:
        """
        Insert a new influencer with visits set to 1.

        Args:
            data: Editable fields
            updated_on: Creation time in epoch milliseconds

        Returns:
            Created influencer entity with its assigned ID
        """
        pass

    @abstractmethod
    def replace_data(self, influencer_id: str, data: InfluencerData, updated_on: int) -> Optional[Influencer]:
        """
        Overwrite every editable field of an influencer, leaving visits untouched.

        Args:
            influencer_id: Influencer identifier
            data: Editable fields (None values clear the field)
            updated_on: Update time in epoch milliseconds

        Returns:
            Updated influencer entity, None if not found
        """
        pass

    @abstractmethod
    def exists(self, influencer_id: str) -> bool:
        """
        Check if an influencer exists.

        Args:
            influencer_id: Influencer identifier

        Returns:
            True if influencer exists, False otherwise
        """
        pass
