"""
Influencer Model
================

Domain models representing influencer records.
Field names match the stored documents for consistency.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class Influencer(BaseModel):
    """
    Domain model representing a single influencer record.

    ``visits`` starts at 1 and only grows; ``updated_on`` is epoch
    milliseconds of the last create/update and is always computed server side.
    """
    id: str = Field(..., description="Store-generated identifier (hex ObjectId)")
    name: Optional[str] = Field(None, description="Display name")
    bio: Optional[str] = Field(None, description="Short biography")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    nationality: Optional[str] = Field(None, description="Nationality")
    gender: Optional[str] = Field(None, description="'m', 'f' or unset")
    socials: Optional[Dict[str, Any]] = Field(None, description="Platform name -> handle or URL")
    label: Optional[List[str]] = Field(None, description="Category tags")
    visits: int = Field(1, ge=0, description="Number of detail views")
    updated_on: Optional[int] = Field(None, description="Last create/update time, epoch milliseconds")


class InfluencerSummary(BaseModel):
    """Reduced projection of an influencer used by quick lookups."""
    id: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    label: Optional[List[str]] = None


class InfluencerData(BaseModel):
    """
    Client-editable part of an influencer record.

    Create and update both write every one of these fields; a field that is
    None is stored as null, which clears any previous value.
    """
    name: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    nationality: Optional[str] = None
    gender: Optional[str] = None
    socials: Optional[Dict[str, str]] = None
    label: Optional[List[str]] = None
