"""
MongoDB Influencer Repository
=============================

Concrete implementation of InfluencerRepository using MongoDB.
"""
import logging
import re
from contextlib import contextmanager
from typing import Any, ContextManager, Dict, Iterator, List, Optional, Tuple

import pymongo
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from influencer_service.core.exceptions import StoreError
from influencer_service.domain.constants.influencer_fields import InfluencerFields
from influencer_service.domain.models.influencer import (
    Influencer,
    InfluencerData,
    InfluencerSummary,
)
from influencer_service.domain.models.influencer_query import InfluencerQuery, Page
from influencer_service.domain.repositories.influencer_repository import InfluencerRepository
from influencer_service.utils.object_id import parse_object_id

logger = logging.getLogger(__name__)


def build_filter(query: InfluencerQuery) -> Dict[str, Any]:
    """Translate an InfluencerQuery into a MongoDB filter document."""
    filter_doc: Dict[str, Any] = {}

    if query.search:
        # Literal substring, case-insensitive
        filter_doc[InfluencerFields.NAME] = {"$regex": re.escape(query.search), "$options": "i"}

    if query.labels:
        filter_doc[InfluencerFields.LABEL] = {"$in": list(query.labels)}

    if query.gender:
        filter_doc[InfluencerFields.GENDER] = query.gender

    return filter_doc


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Re-raise driver errors as StoreError."""
    try:
        yield
    except PyMongoError as e:
        logger.exception(f"MongoDB {operation} failed")
        raise StoreError(f"{operation} failed: {e}") from e


class MongoInfluencerRepository(InfluencerRepository):
    """
    MongoDB implementation of InfluencerRepository.

    Handles all influencer persistence operations using MongoDB.
    """

    SUMMARY_PROJECTION = {field: 1 for field in InfluencerFields.SUMMARY}

    def __init__(self, collection: Collection, timeout_seconds: Optional[float] = None):
        """
        Initialize repository with the influencers collection.

        Args:
            collection: Influencers collection
            timeout_seconds: Deadline shared by all store calls inside request_scope()
        """
        self._collection = collection
        self._timeout_seconds = timeout_seconds

    def request_scope(self) -> ContextManager:
        """One pymongo deadline for every operation issued inside the scope."""
        return pymongo.timeout(self._timeout_seconds)

    def _to_entity(self, doc: dict) -> Influencer:
        """Convert MongoDB document to Influencer entity."""
        return Influencer(
            id=str(doc[InfluencerFields.MONGO_ID]),
            name=doc.get(InfluencerFields.NAME),
            bio=doc.get(InfluencerFields.BIO),
            avatar=doc.get(InfluencerFields.AVATAR),
            nationality=doc.get(InfluencerFields.NATIONALITY),
            gender=doc.get(InfluencerFields.GENDER),
            socials=doc.get(InfluencerFields.SOCIALS),
            label=doc.get(InfluencerFields.LABEL),
            # Documents written before visit counting have no field yet
            visits=doc.get(InfluencerFields.VISITS) or 0,
            updated_on=doc.get(InfluencerFields.UPDATED_ON),
        )

    def _to_summary(self, doc: dict) -> InfluencerSummary:
        """Convert a projected MongoDB document to an InfluencerSummary."""
        return InfluencerSummary(
            id=str(doc[InfluencerFields.MONGO_ID]),
            name=doc.get(InfluencerFields.NAME),
            avatar=doc.get(InfluencerFields.AVATAR),
            label=doc.get(InfluencerFields.LABEL),
        )

    def _to_document(self, data: InfluencerData, updated_on: int) -> dict:
        """Convert editable influencer data to a MongoDB document (every field written)."""
        return {
            InfluencerFields.NAME: data.name,
            InfluencerFields.BIO: data.bio,
            InfluencerFields.AVATAR: data.avatar,
            InfluencerFields.NATIONALITY: data.nationality,
            InfluencerFields.GENDER: data.gender,
            InfluencerFields.SOCIALS: data.socials,
            InfluencerFields.LABEL: data.label,
            InfluencerFields.UPDATED_ON: updated_on,
        }

    def find_page(self, query: InfluencerQuery, page: Page) -> Tuple[List[Influencer], int]:
        """Find a page of influencers, most recently updated first."""
        filter_doc = build_filter(query)
        with _store_errors("find"):
            cursor = (
                self._collection.find(filter_doc)
                .sort(InfluencerFields.UPDATED_ON, DESCENDING)
                .skip(page.skip)
                .limit(page.limit)
            )
            influencers = [self._to_entity(doc) for doc in cursor]
        with _store_errors("count"):
            total = self._collection.count_documents(filter_doc)
        return influencers, total

    def find_by_id(self, influencer_id: str) -> Optional[Influencer]:
        """Find an influencer by its ID."""
        with _store_errors("find_one"):
            doc = self._collection.find_one({InfluencerFields.MONGO_ID: parse_object_id(influencer_id)})
        return self._to_entity(doc) if doc else None

    def find_by_id_and_record_visit(self, influencer_id: str) -> Optional[Influencer]:
        """Increment visits in a single atomic update and return the pre-increment record."""
        with _store_errors("find_one_and_update"):
            doc = self._collection.find_one_and_update(
                {InfluencerFields.MONGO_ID: parse_object_id(influencer_id)},
                {"$inc": {InfluencerFields.VISITS: 1}},
                return_document=ReturnDocument.BEFORE,
            )
        return self._to_entity(doc) if doc else None

    def find_summaries(self, influencer_ids: Optional[List[str]], limit: int) -> List[InfluencerSummary]:
        """Find summaries for the given ids, or any summaries when ids is None."""
        filter_doc: Dict[str, Any] = {}
        if influencer_ids is not None:
            object_ids = [parse_object_id(influencer_id) for influencer_id in influencer_ids]
            filter_doc[InfluencerFields.MONGO_ID] = {"$in": object_ids}

        with _store_errors("find"):
            cursor = self._collection.find(filter_doc, self.SUMMARY_PROJECTION).limit(limit)
            return [self._to_summary(doc) for doc in cursor]

    def create(self, data: InfluencerData, updated_on: int) -> Influencer:
        """Insert a new influencer document."""
        doc = self._to_document(data, updated_on)
        doc[InfluencerFields.VISITS] = 1

        with _store_errors("insert_one"):
            result = self._collection.insert_one(doc)

        doc[InfluencerFields.MONGO_ID] = result.inserted_id
        return self._to_entity(doc)

    def replace_data(self, influencer_id: str, data: InfluencerData, updated_on: int) -> Optional[Influencer]:
        """Overwrite all editable fields of an influencer."""
        with _store_errors("find_one_and_update"):
            doc = self._collection.find_one_and_update(
                {InfluencerFields.MONGO_ID: parse_object_id(influencer_id)},
                {"$set": self._to_document(data, updated_on)},
                return_document=ReturnDocument.AFTER,
            )
        return self._to_entity(doc) if doc else None

    def exists(self, influencer_id: str) -> bool:
        """Check if an influencer exists."""
        with _store_errors("count"):
            count = self._collection.count_documents(
                {InfluencerFields.MONGO_ID: parse_object_id(influencer_id)},
                limit=1,
            )
        return count > 0
