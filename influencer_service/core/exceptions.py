"""
Service Exceptions
==================

Error taxonomy shared by the application and API layers.

- ClientInputError: malformed input from the caller (HTTP 400)
- InfluencerNotFoundError: no record for the given identifier (HTTP 404)
- StoreError: the document store failed or timed out (HTTP 500)
"""


class InfluencerServiceError(Exception):
    """Base class for all influencer service errors."""


class ClientInputError(InfluencerServiceError):
    """Raised when request input cannot be parsed or is out of range."""


class InfluencerNotFoundError(InfluencerServiceError):
    """Raised when an influencer record does not exist."""

    def __init__(self, influencer_id: str):
        super().__init__(f"Influencer '{influencer_id}' not found")
        self.influencer_id = influencer_id


class StoreError(InfluencerServiceError):
    """Raised when a document store operation fails."""
