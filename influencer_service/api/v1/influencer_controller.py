"""
Influencer Controller
=====================

FastAPI controller for influencer endpoints.

Endpoints are plain ``def`` functions: the pymongo driver blocks, so
FastAPI runs each request in its threadpool.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from influencer_service.core.exceptions import (
    ClientInputError,
    InfluencerNotFoundError,
    InfluencerServiceError,
    StoreError,
)
from influencer_service.application.dto.influencer_dto import GlobalResponse, InfluencerPayload
from influencer_service.application.services.influencer_service import InfluencerService
from influencer_service.api.v1.dependencies import get_influencer_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["influencers"])

_ERROR_STATUS = {
    ClientInputError: status.HTTP_400_BAD_REQUEST,
    InfluencerNotFoundError: status.HTTP_404_NOT_FOUND,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _to_http_exception(error: InfluencerServiceError) -> HTTPException:
    """Map a service error to the matching HTTP status."""
    status_code = _ERROR_STATUS.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=str(error))


@router.get(
    "/influencers",
    response_model=GlobalResponse,
    summary="List influencers",
    description="""
    List influencers, most recently updated first.

    Filters combine with AND:
    - search: case-insensitive substring of the name
    - label: comma-separated labels, a record matches if it has any of them
    - gender: 'm' or 'f'; any other value is ignored

    Pagination: limit (default 6) and 1-based page (default 1).
    The response carries the total number of matches for pagination UIs.
    """
)
def list_influencers(
    search: Optional[str] = None,
    label: Optional[str] = None,
    gender: Optional[str] = None,
    limit: Optional[str] = None,
    page: Optional[str] = None,
    service: InfluencerService = Depends(get_influencer_service),
) -> GlobalResponse:
    """List influencers with optional filters."""
    try:
        influencers, total = service.list_influencers(
            search=search,
            label=label,
            gender=gender,
            limit=limit,
            page=page,
        )
    except InfluencerServiceError as e:
        raise _to_http_exception(e)

    return GlobalResponse(
        status=status.HTTP_200_OK,
        message="success",
        data={
            "influencers": [influencer.model_dump() for influencer in influencers],
            "total": total,
        },
    )


@router.get(
    "/influencers/quick-find",
    response_model=GlobalResponse,
    summary="Quick find influencers",
    description="Get up to 20 influencer summaries by a comma-separated list of ids."
)
def quick_find_influencers(
    ids: Optional[str] = Query(None, description="Comma-separated influencer ids"),
    service: InfluencerService = Depends(get_influencer_service),
) -> GlobalResponse:
    """Quick find influencer summaries."""
    try:
        summaries = service.quick_find(ids)
    except InfluencerServiceError as e:
        raise _to_http_exception(e)

    return GlobalResponse(
        status=status.HTTP_200_OK,
        message="success",
        data={"influencers": [summary.model_dump() for summary in summaries]},
    )


@router.get(
    "/influencers/{influencer_id}",
    response_model=GlobalResponse,
    summary="Get influencer by ID",
    description="Get a single influencer. Each call counts one visit; the returned record is the state before this visit."
)
def get_influencer(
    influencer_id: str,
    service: InfluencerService = Depends(get_influencer_service),
) -> GlobalResponse:
    """Get a specific influencer by ID."""
    try:
        influencer = service.get_influencer(influencer_id)
    except InfluencerServiceError as e:
        raise _to_http_exception(e)

    return GlobalResponse(
        status=status.HTTP_200_OK,
        message="OK",
        data={"influencer": influencer.model_dump()},
    )


@router.post(
    "/influencer",
    response_model=GlobalResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an influencer",
    description="""
    Add a new influencer.

    All fields are optional; missing fields are stored as null and unknown
    fields are ignored. The server sets updated_on and starts visits at 1.
    """
)
def add_influencer(
    payload: InfluencerPayload,
    service: InfluencerService = Depends(get_influencer_service),
) -> GlobalResponse:
    """Add a new influencer."""
    try:
        influencer = service.create_influencer(payload.to_data())
    except InfluencerServiceError as e:
        raise _to_http_exception(e)

    return GlobalResponse(
        status=status.HTTP_201_CREATED,
        message="Success add influencer",
        data={"influencer": influencer.model_dump()},
    )


@router.put(
    "/influencer/{influencer_id}",
    response_model=GlobalResponse,
    summary="Update an influencer",
    description="""
    Replace every editable field of an influencer.

    This is not a merge: fields missing from the payload are cleared.
    Visits are left untouched and updated_on is refreshed.
    """
)
def update_influencer(
    influencer_id: str,
    payload: InfluencerPayload,
    service: InfluencerService = Depends(get_influencer_service),
) -> GlobalResponse:
    """Update an influencer."""
    try:
        influencer = service.update_influencer(influencer_id, payload.to_data())
    except InfluencerServiceError as e:
        raise _to_http_exception(e)

    return GlobalResponse(
        status=status.HTTP_200_OK,
        message="Success update influencer",
        data={"influencer": influencer.model_dump()},
    )
