"""Tests for record decoding."""

import pytest

from keap_client.core.models import DecodeError
from keap_client.core.records import decode, decode_many, decoder_for
from keap_client.resources.contacts import Contact
from keap_client.resources.tags import Tag


def test_decode_known_and_unknown_fields():
    tag = decode(Tag, {"id": 5, "name": "VIP", "color": "gold"})

    assert tag.id == 5
    assert tag.name == "VIP"
    assert tag.extra == {"color": "gold"}


def test_decode_missing_required_field():
    with pytest.raises(DecodeError, match="name") as exc_info:
        decode(Tag, {"id": 5})

    assert exc_info.value.record_type == "Tag"


def test_decode_null_required_field():
    with pytest.raises(DecodeError):
        decode(Tag, {"id": 5, "name": None})


@pytest.mark.parametrize("data", [None, [], "VIP", 3])
def test_decode_rejects_non_objects(data):
    with pytest.raises(DecodeError, match="expected an object"):
        decode(Tag, data)


def test_optional_fields_default_to_none():
    contact = decode(Contact, {})

    assert contact.id is None
    assert contact.email_addresses is None


def test_required_fields():
    assert Tag.required_fields() == ["name"]
    assert Contact.required_fields() == []


def test_to_dict_drops_unset_and_keeps_extra():
    tag = decode(Tag, {"id": 5, "name": "VIP", "color": "gold"})

    assert tag.to_dict() == {"id": 5, "name": "VIP", "color": "gold"}
    assert Tag(name="New").to_dict() == {"name": "New"}


def test_decode_many():
    tags = decode_many(Tag, [{"name": "a"}, {"name": "b"}])

    assert [t.name for t in tags] == ["a", "b"]


def test_decode_many_rejects_non_array():
    with pytest.raises(DecodeError, match="expected an array"):
        decode_many(Tag, {"tags": []})


def test_decoder_for():
    decoder = decoder_for(Tag)

    assert decoder({"name": "x"}) == Tag(name="x")
