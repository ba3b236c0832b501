"""
Influencer DTO
==============

Pydantic models for influencer API requests and responses.
"""
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from influencer_service.domain.models.influencer import InfluencerData


class InfluencerPayload(BaseModel):
    """
    DTO for creating/updating an influencer.

    Every field is optional and an omitted field is written as null.
    Unknown fields are ignored.
    """
    name: Optional[str] = Field(None, description="Display name")
    bio: Optional[str] = Field(None, description="Short biography")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    nationality: Optional[str] = Field(None, description="Nationality")
    gender: Optional[Literal["m", "f"]] = Field(None, description="'m' or 'f'")
    socials: Optional[Dict[str, str]] = Field(None, description="Platform name -> handle or URL")
    label: Optional[List[str]] = Field(None, description="Category tags")

    class Config:
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "name": "Raisa Andriana",
                "bio": "Singer and songwriter",
                "avatar": "https://cdn.example.com/avatars/raisa.jpg",
                "nationality": "Indonesia",
                "gender": "f",
                "socials": {"instagram": "raisa6690", "twitter": "raisa6690"},
                "label": ["artist", "musician"]
            }
        }

    @field_validator("label")
    @classmethod
    def _dedupe_labels(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        # Labels form a set; keep first-seen order
        if value is None:
            return None
        return list(dict.fromkeys(value))

    def to_data(self) -> InfluencerData:
        """Convert to the domain's editable-fields model."""
        return InfluencerData(**self.model_dump())


class GlobalResponse(BaseModel):
    """Response envelope shared by every endpoint, success or error."""
    status: int
    message: str
    data: Optional[Dict[str, Any]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "status": 200,
                "message": "success",
                "data": {"influencers": [], "total": 0}
            }
        }
