"""
Tests for InfluencerService: listing, visits, quick find, create and update.
"""
from contextlib import contextmanager

import pytest

from influencer_service.core.exceptions import (
    ClientInputError,
    InfluencerNotFoundError,
    StoreError,
)
from influencer_service.domain.models.influencer import InfluencerData


# --- list ---


def test_list_defaults_to_six_newest_first(service, add):
    for i in range(8):
        add(updated_on=i, name=f"influencer {i}")

    influencers, total = service.list_influencers()

    assert total == 8
    assert [i.name for i in influencers] == [f"influencer {n}" for n in range(7, 1, -1)]


def test_list_page_skips_previous_pages(service, add):
    for i in range(7):
        add(updated_on=i, name=f"influencer {i}")

    influencers, total = service.list_influencers(limit="3", page="2")

    assert total == 7
    assert [i.name for i in influencers] == ["influencer 3", "influencer 2", "influencer 1"]


def test_list_last_page_can_be_short(service, add):
    for i in range(7):
        add(updated_on=i)

    influencers, _ = service.list_influencers(limit="3", page="3")

    assert len(influencers) == 1


@pytest.mark.parametrize("limit,page", [
    ("abc", None),
    (None, "two"),
    ("1.5", None),
    ("0", None),
    (None, "0"),
    ("-2", None),
    ("1_0", None),
    ("\u0661\u0662", None),
    (" 3", None),
    (str(2 ** 63), None),
    (None, str(10 ** 20)),
    ("1000", str(2 ** 62)),
])
def test_list_rejects_malformed_pagination(service, limit, page):
    with pytest.raises(ClientInputError):
        service.list_influencers(limit=limit, page=page)


def test_list_search_is_case_insensitive_substring(service, add):
    add(name="Raisa Andriana")
    add(name="Isyana Sarasvati")
    add(name="Deddy Corbuzier")

    influencers, total = service.list_influencers(search="SA")

    assert total == 2
    assert {i.name for i in influencers} == {"Raisa Andriana", "Isyana Sarasvati"}


def test_list_label_matches_any_of_the_given_labels(service, add):
    add(name="a", label=["artist"])
    add(name="b", label=["podcaster", "comedian"])
    add(name="c", label=["journalist"])
    add(name="d")

    influencers, total = service.list_influencers(label="artist,comedian")

    assert total == 2
    assert {i.name for i in influencers} == {"a", "b"}


@pytest.mark.parametrize("gender,expected", [("m", ["a"]), ("f", ["b"])])
def test_list_gender_filter(service, add, gender, expected):
    add(name="a", gender="m")
    add(name="b", gender="f")

    influencers, _ = service.list_influencers(gender=gender)

    assert [i.name for i in influencers] == expected


@pytest.mark.parametrize("gender", ["x", "male", "", "M", "F"])
def test_list_unknown_gender_is_ignored(service, add, gender):
    add(name="a", gender="m")
    add(name="b", gender="f")

    _, total = service.list_influencers(gender=gender)

    assert total == 2


def test_list_filters_combine_with_and(service, add):
    add(name="Raisa", gender="f", label=["artist"])
    add(name="Rafi", gender="m", label=["artist"])
    add(name="Rania", gender="f", label=["chef"])

    influencers, total = service.list_influencers(search="ra", label="artist", gender="f")

    assert total == 1
    assert influencers[0].name == "Raisa"


def test_list_store_failure_propagates(service, repository):
    repository.fail = True
    with pytest.raises(StoreError):
        service.list_influencers()


# --- get by id ---


def test_get_returns_record_before_visit_is_counted(service, add, repository):
    created = add(name="Raisa")

    first = service.get_influencer(created.id)
    second = service.get_influencer(created.id)

    assert first.visits == 1
    assert second.visits == 2
    assert repository.find_by_id(created.id).visits == 3


def test_get_counts_every_visit(service, add, repository):
    created = add()
    for _ in range(5):
        service.get_influencer(created.id)

    assert repository.find_by_id(created.id).visits == 6


@pytest.mark.parametrize("influencer_id", ["not-an-id", "000000000000000000000000", "65a1b2c3d4e5f60718293a4b"])
def test_get_unknown_or_invalid_id_is_not_found(service, influencer_id):
    with pytest.raises(InfluencerNotFoundError):
        service.get_influencer(influencer_id)


# --- quick find ---


def test_quick_find_ignores_invalid_ids(service, add):
    wanted = add(name="wanted", avatar="https://cdn.example.com/a.jpg", label=["artist"])
    add(name="other")

    summaries = service.quick_find(f"{wanted.id},not-an-id")

    assert len(summaries) == 1
    assert summaries[0].id == wanted.id
    assert summaries[0].name == "wanted"
    assert summaries[0].label == ["artist"]


def test_quick_find_is_capped_at_twenty(service, add):
    created = [add(name=str(i)) for i in range(25)]

    assert len(service.quick_find(",".join(c.id for c in created))) == 20
    assert len(service.quick_find()) == 20


def test_quick_find_without_ids_returns_unfiltered(service, add):
    add(name="a")
    add(name="b")

    assert {s.name for s in service.quick_find(None)} == {"a", "b"}


# --- create ---


def test_create_starts_visits_at_one_and_stamps_updated_on(service):
    created = service.create_influencer(InfluencerData(name="Raisa", label=["artist"]))

    assert created.visits == 1
    assert created.updated_on > 0
    fetched = service.get_influencer(created.id)
    assert fetched.visits == 1
    assert fetched.name == "Raisa"
    assert fetched.label == ["artist"]
    assert fetched.bio is None


def test_create_store_failure_propagates(service, repository):
    repository.fail = True
    with pytest.raises(StoreError):
        service.create_influencer(InfluencerData(name="Raisa"))


# --- update ---


def test_update_replaces_every_field(service, add, repository):
    created = add(name="Raisa", bio="Singer", label=["artist"], socials={"instagram": "raisa6690"})

    updated = service.update_influencer(created.id, InfluencerData(name="Raisa A."))

    assert updated.name == "Raisa A."
    assert updated.bio is None
    assert updated.label is None
    assert updated.socials is None
    assert repository.find_by_id(created.id).label is None


def test_update_keeps_visits_and_refreshes_updated_on(service, add):
    created = add(updated_on=1)
    service.get_influencer(created.id)

    updated = service.update_influencer(created.id, InfluencerData(name="new"))

    assert updated.visits == 2
    assert updated.updated_on > 1


def test_update_unknown_id_is_not_found(service, repository):
    with pytest.raises(InfluencerNotFoundError):
        service.update_influencer("65a1b2c3d4e5f60718293a4b", InfluencerData(name="x"))
    assert repository.records == {}


# --- request scope ---


def _track_scope(repository, monkeypatch, *methods):
    """Replace request_scope with a recording one and log whether each call ran inside it."""
    state = {"entered": 0, "active": False}
    calls = []

    @contextmanager
    def request_scope():
        state["entered"] += 1
        state["active"] = True
        try:
            yield
        finally:
            state["active"] = False

    def tracked(name):
        original = getattr(repository, name)

        def _call(*args, **kwargs):
            calls.append((name, state["active"]))
            return original(*args, **kwargs)
        return _call

    monkeypatch.setattr(repository, "request_scope", request_scope)
    for name in methods:
        monkeypatch.setattr(repository, name, tracked(name))
    return state, calls


def test_update_store_calls_share_one_request_scope(service, add, repository, monkeypatch):
    created = add(name="Raisa")
    state, calls = _track_scope(repository, monkeypatch, "exists", "replace_data")

    service.update_influencer(created.id, InfluencerData(name="new"))

    assert state["entered"] == 1
    assert calls == [("exists", True), ("replace_data", True)]


def test_get_runs_inside_request_scope(service, add, repository, monkeypatch):
    created = add()
    state, calls = _track_scope(repository, monkeypatch, "find_by_id_and_record_visit")

    service.get_influencer(created.id)

    assert state["entered"] == 1
    assert calls == [("find_by_id_and_record_visit", True)]
