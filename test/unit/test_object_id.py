import pytest
from bson import ObjectId

from influencer_service.utils.object_id import NIL_OBJECT_ID, parse_object_id


def test_parse_valid_hex():
    assert parse_object_id("65a1b2c3d4e5f60718293a4b") == ObjectId("65a1b2c3d4e5f60718293a4b")


def test_parse_strips_whitespace():
    assert parse_object_id(" 65a1b2c3d4e5f60718293a4b ") == ObjectId("65a1b2c3d4e5f60718293a4b")


@pytest.mark.parametrize("value", [None, "", "abc", "zzzzzzzzzzzzzzzzzzzzzzzz", "65a1b2c3d4e5f60718293a4b00"])
def test_parse_invalid_gives_nil(value):
    assert parse_object_id(value) == NIL_OBJECT_ID
    assert str(NIL_OBJECT_ID) == "0" * 24
