"""
List Influencers Use Case
=========================

Business use case for listing influencers with filters and pagination.
"""
from typing import List, Optional, Tuple

from influencer_service.core.exceptions import ClientInputError
from influencer_service.domain.constants.influencer_fields import Gender
from influencer_service.domain.models.influencer import Influencer
from influencer_service.domain.models.influencer_query import InfluencerQuery, Page
from influencer_service.domain.repositories.influencer_repository import InfluencerRepository

MAX_INT64 = 2 ** 63 - 1


def _parse_positive_int(name: str, raw: Optional[str], default: int) -> int:
    """Parse an optional positive integer query parameter that fits in an int64."""
    if raw is None or raw == "":
        return default
    digits = raw[1:] if raw[:1] in "+-" else raw
    if not (digits.isascii() and digits.isdigit()):
        raise ClientInputError(f"{name} must be an integer, got '{raw}'")
    value = int(raw)
    if value < 1:
        raise ClientInputError(f"{name} must be at least 1, got {value}")
    if value > MAX_INT64:
        raise ClientInputError(f"{name} is out of range, got {raw}")
    return value


def _split_csv(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


class ListInfluencersUseCase:
    """
    Use case for listing influencers.

    Turns raw query parameters into a query and a page, then asks the
    repository for the page and the total match count.
    """

    def __init__(self, influencer_repository: InfluencerRepository, default_limit: int = 6):
        """
        Initialize use case with repository.

        Args:
            influencer_repository: Repository for influencer persistence
            default_limit: Page size used when no limit is given
        """
        self._repository = influencer_repository
        self._default_limit = default_limit

    def build_query(
        self,
        search: Optional[str] = None,
        label: Optional[str] = None,
        gender: Optional[str] = None,
    ) -> InfluencerQuery:
        """Build the listing filter. Unrecognized gender values are ignored."""
        return InfluencerQuery(
            search=search or None,
            labels=_split_csv(label),
            gender=gender if gender in Gender.ALL else None,
        )

    def build_page(self, limit: Optional[str] = None, page: Optional[str] = None) -> Page:
        """
        Build the pagination window.

        Raises:
            ClientInputError: If limit or page is not a positive integer,
                or the resulting skip does not fit in an int64
        """
        window = Page(
            limit=_parse_positive_int("limit", limit, self._default_limit),
            page=_parse_positive_int("page", page, 1),
        )
        if window.skip > MAX_INT64:
            raise ClientInputError(f"page {window.page} is out of range for limit {window.limit}")
        return window

    def execute(
        self,
        search: Optional[str] = None,
        label: Optional[str] = None,
        gender: Optional[str] = None,
        limit: Optional[str] = None,
        page: Optional[str] = None,
    ) -> Tuple[List[Influencer], int]:
        """
        Execute the list influencers use case.

        Args:
            search: Case-insensitive substring of the name
            label: Comma-separated labels, any of which may match
            gender: 'm' or 'f'; anything else is ignored
            limit: Page size as received from the client
            page: 1-based page number as received from the client

        Returns:
            Tuple of (influencers on the page, total matching count)

        Raises:
            ClientInputError: If limit or page is malformed
            StoreError: If the store query fails
        """
        window = self.build_page(limit, page)
        query = self.build_query(search, label, gender)
        return self._repository.find_page(query, window)
