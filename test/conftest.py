"""
Shared fixtures: an in-memory InfluencerRepository and a TestClient
wired to it through FastAPI dependency overrides.
"""
import copy
from typing import Dict, List, Optional, Tuple

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from influencer_service.application.services.influencer_service import InfluencerService
from influencer_service.api.v1.dependencies import get_influencer_service
from influencer_service.core.exceptions import StoreError
from influencer_service.domain.models.influencer import (
    Influencer,
    InfluencerData,
    InfluencerSummary,
)
from influencer_service.domain.models.influencer_query import InfluencerQuery, Page
from influencer_service.domain.repositories.influencer_repository import InfluencerRepository
from influencer_service.main import app
from influencer_service.utils.object_id import parse_object_id


class FakeInfluencerRepository(InfluencerRepository):
    """Dict-backed repository with the same matching rules as the Mongo one."""

    def __init__(self):
        self.records: Dict[str, dict] = {}
        self.fail = False

    def _check(self):
        if self.fail:
            raise StoreError("store unavailable")

    def _key(self, influencer_id: str) -> str:
        return str(parse_object_id(influencer_id))

    def _matches(self, record: dict, query: InfluencerQuery) -> bool:
        if query.search and query.search.lower() not in (record.get("name") or "").lower():
            return False
        if query.labels and not set(query.labels) & set(record.get("label") or []):
            return False
        if query.gender and record.get("gender") != query.gender:
            return False
        return True

    def find_page(self, query: InfluencerQuery, page: Page) -> Tuple[List[Influencer], int]:
        self._check()
        matching = [r for r in self.records.values() if self._matches(r, query)]
        matching.sort(key=lambda r: r.get("updated_on") or 0, reverse=True)
        window = matching[page.skip:page.skip + page.limit]
        return [Influencer(**copy.deepcopy(r)) for r in window], len(matching)

    def find_by_id(self, influencer_id: str) -> Optional[Influencer]:
        self._check()
        record = self.records.get(self._key(influencer_id))
        return Influencer(**copy.deepcopy(record)) if record else None

    def find_by_id_and_record_visit(self, influencer_id: str) -> Optional[Influencer]:
        self._check()
        record = self.records.get(self._key(influencer_id))
        if record is None:
            return None
        before = Influencer(**copy.deepcopy(record))
        record["visits"] += 1
        return before

    def find_summaries(self, influencer_ids: Optional[List[str]], limit: int) -> List[InfluencerSummary]:
        self._check()
        if influencer_ids is None:
            records = list(self.records.values())
        else:
            keys = {self._key(i) for i in influencer_ids}
            records = [r for k, r in self.records.items() if k in keys]
        return [
            InfluencerSummary(id=r["id"], name=r.get("name"), avatar=r.get("avatar"), label=r.get("label"))
            for r in records[:limit]
        ]

    def create(self, data: InfluencerData, updated_on: int) -> Influencer:
        self._check()
        influencer_id = str(ObjectId())
        self.records[influencer_id] = {
            "id": influencer_id,
            **data.model_dump(),
            "visits": 1,
            "updated_on": updated_on,
        }
        return Influencer(**copy.deepcopy(self.records[influencer_id]))

    def replace_data(self, influencer_id: str, data: InfluencerData, updated_on: int) -> Optional[Influencer]:
        self._check()
        record = self.records.get(self._key(influencer_id))
        if record is None:
            return None
        record.update(data.model_dump())
        record["updated_on"] = updated_on
        return Influencer(**copy.deepcopy(record))

    def exists(self, influencer_id: str) -> bool:
        self._check()
        return self._key(influencer_id) in self.records


@pytest.fixture
def repository() -> FakeInfluencerRepository:
    return FakeInfluencerRepository()


@pytest.fixture
def service(repository) -> InfluencerService:
    return InfluencerService(repository, default_page_limit=6, quick_find_limit=20)


@pytest.fixture
def client(service):
    """TestClient without startup events, so no MongoDB connection is made."""
    app.dependency_overrides[get_influencer_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add(repository):
    """Insert a record with an explicit updated_on so ordering is deterministic."""
    def _add(updated_on: int = 1_000, **fields) -> Influencer:
        return repository.create(InfluencerData(**fields), updated_on=updated_on)
    return _add
