from concurrent.futures import ThreadPoolExecutor

import pytest

from src.repository import LinkStore

TEST_ID = "abc1234"
TEST_URL = "https://example.com"


# Fixtures
@pytest.fixture
def store():
    return LinkStore()


# Tests insert
def test_insert_new_id(store):
    assert store.insert(TEST_ID, TEST_URL) is True
    assert store.count() == 1

    [link] = store.list_all()
    assert link.id == TEST_ID
    assert link.target_url == TEST_URL
    assert link.visit_count == 0


def test_insert_collision_keeps_original(store):
    store.insert(TEST_ID, TEST_URL)

    assert store.insert(TEST_ID, "https://other.example.com") is False
    assert store.count() == 1
    assert store.list_all()[0].target_url == TEST_URL


def test_concurrent_inserts_of_same_id(store):
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda i: store.insert(TEST_ID, f"{TEST_URL}/{i}"), range(200)))

    assert results.count(True) == 1
    assert store.count() == 1


# Tests resolve_and_increment
def test_resolve_and_increment(store):
    store.insert(TEST_ID, TEST_URL)

    assert store.resolve_and_increment(TEST_ID) == TEST_URL
    assert store.resolve_and_increment(TEST_ID) == TEST_URL
    assert store.list_all()[0].visit_count == 2


def test_resolve_unknown_id(store):
    store.insert(TEST_ID, TEST_URL)

    assert store.resolve_and_increment("doesnotexist") is None
    assert store.count() == 1
    assert store.list_all()[0].visit_count == 0


def test_concurrent_increments_are_not_lost(store):
    store.insert(TEST_ID, TEST_URL)
    visits = 2000

    with ThreadPoolExecutor(max_workers=32) as pool:
        results = list(pool.map(lambda _: store.resolve_and_increment(TEST_ID), range(visits)))

    assert results == [TEST_URL] * visits
    assert store.list_all()[0].visit_count == visits


# Tests list_all / count
def test_empty_store(store):
    assert store.count() == 0
    assert store.list_all() == []


def test_list_all_is_idempotent(store):
    store.insert("aaaaaaa", "https://a.example.com")
    store.insert("bbbbbbb", "https://b.example.com")

    assert store.list_all() == store.list_all()


def test_list_all_returns_snapshots(store):
    store.insert(TEST_ID, TEST_URL)

    snapshot = store.list_all()
    snapshot[0].visit_count = 99
    store.resolve_and_increment(TEST_ID)

    assert snapshot[0].visit_count == 99
    assert store.list_all()[0].visit_count == 1
