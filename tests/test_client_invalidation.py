"""Tests for the client cache and the event-to-query mapping."""

import json

import pytest

from app.client import (
    ARTICLES_KEY,
    INVENTORY_COUNTS_KEY,
    ORDER_LINES_KEY,
    USERS_KEY,
    QueryCache,
    cache_keys_for,
    cache_keys_for_event,
    cache_keys_for_message,
)
from app.domain.entities import ChangeEvent, ResourceType


@pytest.mark.parametrize("resource_type", list(ResourceType))
def test_every_resource_type_invalidates_something(resource_type):
    assert cache_keys_for(resource_type)


def test_inventory_count_changes_invalidate_articles_too():
    assert cache_keys_for(ResourceType.INVENTORY_COUNT) == {INVENTORY_COUNTS_KEY, ARTICLES_KEY}
    message = {"type": "inventory_count_deleted", "data": {"id": "c", "articleId": "a"}}
    assert cache_keys_for_message(message) == {INVENTORY_COUNTS_KEY, ARTICLES_KEY}


def test_action_and_import_names_resolve_to_their_resource():
    assert cache_keys_for_message('{"type":"order_line_inventoried","data":{}}') == {
        ORDER_LINES_KEY
    }
    assert cache_keys_for_message('{"type":"articles_imported","data":[]}') == {
        ARTICLES_KEY,
        INVENTORY_COUNTS_KEY,
    }
    assert cache_keys_for_message(json.dumps({"type": "user_updated"})) == {USERS_KEY}


def test_unknown_suffix_of_a_known_resource_is_ignored():
    assert cache_keys_for_message('{"type": "user_bogus"}') == frozenset()
    assert cache_keys_for_message({"type": "article_foo", "data": {}}) == frozenset()


def test_data_cleared_invalidates_all_warehouse_data():
    expected = {ARTICLES_KEY, ORDER_LINES_KEY, INVENTORY_COUNTS_KEY}
    assert cache_keys_for_message('{"type":"data_cleared"}') == expected
    assert cache_keys_for_event(ChangeEvent.data_cleared()) == expected


@pytest.mark.parametrize("frame", ["not json", "[1, 2]", '{"type": "unknown_thing"}', "{}"])
def test_unknown_frames_invalidate_nothing(frame):
    assert cache_keys_for_message(frame) == frozenset()


def test_query_cache_refetches_only_after_invalidation():
    calls = []

    def fetch_articles():
        calls.append("articles")
        return [len(calls)]

    cache = QueryCache()
    cache.register(ARTICLES_KEY, fetch_articles)

    assert cache.is_stale(ARTICLES_KEY)
    assert cache.get(ARTICLES_KEY) == [1]
    assert cache.get(ARTICLES_KEY) == [1]
    assert not cache.is_stale(ARTICLES_KEY)

    assert cache.invalidate({ARTICLES_KEY, USERS_KEY}) == {ARTICLES_KEY}
    assert cache.is_stale(ARTICLES_KEY)
    assert cache.get(ARTICLES_KEY) == [2]
    assert calls == ["articles", "articles"]


def test_query_cache_notifies_listeners():
    cache = QueryCache()
    cache.register(USERS_KEY, list)
    cache.register(ORDER_LINES_KEY, list)
    notified = []
    cache.add_listener(notified.append)

    cache.invalidate({ORDER_LINES_KEY})
    cache.invalidate({"/api/unrelated"})
    cache.remove_listener(notified.append)
    cache.invalidate({USERS_KEY})

    assert notified == [frozenset({ORDER_LINES_KEY})]


def test_query_cache_rejects_unregistered_keys():
    with pytest.raises(KeyError):
        QueryCache().get(USERS_KEY)


def test_invalidation_during_a_fetch_keeps_the_entry_stale():
    cache = QueryCache()
    versions = iter(["before change", "after change"])

    def fetch_articles():
        value = next(versions)
        if value == "before change":
            cache.invalidate([ARTICLES_KEY])
        return value

    cache.register(ARTICLES_KEY, fetch_articles)

    assert cache.get(ARTICLES_KEY) == "before change"
    assert cache.is_stale(ARTICLES_KEY)
    assert cache.get(ARTICLES_KEY) == "after change"
    assert not cache.is_stale(ARTICLES_KEY)
