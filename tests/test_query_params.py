"""Tests for query string construction."""

import httpx

from keap_client.core.query_params import build_query, create_params, with_query


def test_create_params_returns_query_params():
    params = create_params({"limit": 10, "offset": 20})

    assert isinstance(params, httpx.QueryParams)
    assert params["limit"] == "10"
    assert params["offset"] == "20"


def test_none_values_are_omitted():
    assert build_query({"limit": 5, "email": None}) == "limit=5"


def test_empty_options():
    assert build_query(None) == ""
    assert build_query({}) == ""
    assert build_query({"name": None}) == ""


def test_booleans_are_lowercase():
    assert build_query({"active": True, "paid": False}) == "active=true&paid=false"


def test_lists_are_comma_joined():
    assert build_query({"ids": [1, 2, 3]}) == "ids=1%2C2%2C3"


def test_allowed_keys_filter_and_order():
    """Test that unknown keys are dropped and order follows the allow-list."""
    options = {"offset": 0, "bogus": "x", "limit": 10, "email": "a@b.com"}

    query = build_query(options, ["limit", "offset", "email"])

    assert query == "limit=10&offset=0&email=a%40b.com"


def test_values_are_percent_encoded():
    assert build_query({"given_name": "Ada Lovelace"}) == "given_name=Ada+Lovelace"


def test_with_query_appends_only_when_needed():
    assert with_query("v1/contacts", {"limit": 1}) == "v1/contacts?limit=1"
    assert with_query("v1/contacts", {"limit": None}) == "v1/contacts"
    assert with_query("v1/contacts", None) == "v1/contacts"
