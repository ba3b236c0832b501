"""
Influencer Query
================

Filter criteria for listing influencers, independent of any store.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class InfluencerQuery:
    """
    Listing filter. Every criterion that is set must hold (logical AND).

    - search: case-insensitive substring of the name
    - labels: record matches if it carries at least one of these labels
    - gender: exact gender value
    """
    search: Optional[str] = None
    labels: List[str] = field(default_factory=list)
    gender: Optional[str] = None


@dataclass
class Page:
    """Pagination window with a 1-based page number."""
    limit: int
    page: int = 1

    @property
    def skip(self) -> int:
        """Number of records to skip before this page."""
        return (self.page - 1) * self.limit
