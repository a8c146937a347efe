"""Tests for the in-memory headline store"""

import random
import threading

import pytest

from news_headlines_api.app.schemas.headline import HeadlineCreate, HeadlineUpdate
from news_headlines_api.app.services.errors import HeadlineNotFoundError, InvalidHeadlineError
from news_headlines_api.app.services.headline_service import SAMPLE_HEADLINES, HeadlineService


def make_store(start=1_700_000_000_000):
    """Store whose clock is frozen at ``start``"""
    return HeadlineService(clock=lambda: start)


def test_create_assigns_timestamp_id_and_default_url():
    store = make_store()

    headline = store.create_headline(HeadlineCreate(title="X"))

    assert headline.id == "1700000000000"
    assert headline.title == "X"
    assert headline.url == "#"
    assert "image_url" not in headline.model_fields_set
    assert len(store) == 1


def test_create_keeps_explicit_image_url():
    store = make_store()

    headline = store.create_headline(HeadlineCreate(title="X", imageUrl="https://img/1.png", url="https://a"))

    assert headline.image_url == "https://img/1.png"
    assert headline.url == "https://a"


def test_ids_unique_within_same_millisecond():
    store = make_store()

    ids = [store.create_headline(HeadlineCreate(title=f"t{i}")).id for i in range(5)]

    assert len(set(ids)) == 5


def test_deleted_id_is_not_reissued():
    store = make_store()
    first = store.create_headline(HeadlineCreate(title="a"))
    store.delete_headline(first.id)

    second = store.create_headline(HeadlineCreate(title="b"))

    assert second.id != first.id


def test_generated_id_skips_seeded_ids():
    store = HeadlineService([{"id": "42", "title": "seed"}], clock=lambda: 42)

    headline = store.create_headline(HeadlineCreate(title="new"))

    assert headline.id == "43"


@pytest.mark.parametrize("title", [None, ""])
def test_create_without_title_is_rejected(title):
    store = make_store()

    with pytest.raises(InvalidHeadlineError) as exc_info:
        store.create_headline(HeadlineCreate(title=title))

    assert exc_info.value.message == "Title is required"
    assert exc_info.value.status_code == 400
    assert len(store) == 0


def test_list_preserves_insertion_order():
    store = make_store()
    for title in ("first", "second", "third"):
        store.create_headline(HeadlineCreate(title=title))

    assert [h.title for h in store.list_headlines()] == ["first", "second", "third"]


def test_get_by_id_returns_created_record():
    store = make_store()
    created = store.create_headline(HeadlineCreate(title="X"))

    assert store.get_headline(created.id) == created


def test_get_missing_headline():
    with pytest.raises(HeadlineNotFoundError) as exc_info:
        make_store().get_headline("nope")

    assert exc_info.value.message == "Headline not found"
    assert exc_info.value.status_code == 404


def test_random_on_empty_store():
    with pytest.raises(HeadlineNotFoundError) as exc_info:
        make_store().get_random_headline()

    assert exc_info.value.message == "No headlines available"


def test_random_returns_current_member():
    store = HeadlineService(SAMPLE_HEADLINES, rng=random.Random(7))
    store.delete_headline("3")
    ids = {h.id for h in store.list_headlines()}

    for _ in range(50):
        assert store.get_random_headline().id in ids


def test_update_empty_title_and_url_keep_existing():
    store = make_store()
    created = store.create_headline(HeadlineCreate(title="Old", url="https://old"))

    updated = store.update_headline(created.id, HeadlineUpdate(title="", url=""))

    assert updated.title == "Old"
    assert updated.url == "https://old"


def test_update_replaces_supplied_fields():
    store = make_store()
    created = store.create_headline(HeadlineCreate(title="Old", imageUrl="https://img/old.png"))

    updated = store.update_headline(created.id, HeadlineUpdate(title="New", url="https://new"))

    assert updated.id == created.id
    assert updated.title == "New"
    assert updated.url == "https://new"
    assert updated.image_url == "https://img/old.png"
    assert store.get_headline(created.id) == updated


@pytest.mark.parametrize("value", ["", None])
def test_update_explicit_image_url_clears_it(value):
    store = make_store()
    created = store.create_headline(HeadlineCreate(title="T", imageUrl="https://img/1.png", url="https://a"))

    updated = store.update_headline(created.id, HeadlineUpdate(imageUrl=value))

    assert updated.image_url == value
    assert "image_url" in updated.model_fields_set
    assert updated.title == "T"
    assert updated.url == "https://a"


def test_update_without_image_url_keeps_it_absent():
    store = make_store()
    created = store.create_headline(HeadlineCreate(title="T"))

    updated = store.update_headline(created.id, HeadlineUpdate(title="T2"))

    assert "image_url" not in updated.model_fields_set


def test_update_missing_headline():
    with pytest.raises(HeadlineNotFoundError):
        make_store().update_headline("nope", HeadlineUpdate(title="x"))


def test_delete_returns_prior_state():
    store = make_store()
    created = store.create_headline(HeadlineCreate(title="X"))

    deleted = store.delete_headline(created.id)

    assert deleted == created
    assert len(store) == 0
    with pytest.raises(HeadlineNotFoundError):
        store.get_headline(created.id)


def test_delete_missing_leaves_store_unchanged():
    store = HeadlineService(SAMPLE_HEADLINES)
    before = store.list_headlines()

    with pytest.raises(HeadlineNotFoundError):
        store.delete_headline("nope")

    assert store.list_headlines() == before


def test_seed_rejects_duplicate_ids():
    store = HeadlineService(SAMPLE_HEADLINES)

    with pytest.raises(ValueError):
        store.seed([{"id": "1", "title": "dup"}])


def test_sample_headline_without_image():
    store = HeadlineService(SAMPLE_HEADLINES)

    assert len(store) == 6
    assert "image_url" not in store.get_headline("6").model_fields_set


def test_seed_defaults_missing_url():
    store = HeadlineService([{"id": "7", "title": "no link"}])

    headline = store.get_headline("7")

    assert headline.url == "#"
    assert headline.model_dump(by_alias=True, exclude_unset=True) == {"id": "7", "title": "no link", "url": "#"}


def run_in_threads(worker, count):
    threads = [threading.Thread(target=worker, args=(n,)) for n in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_concurrent_creates_get_distinct_ids():
    """Test creates from many threads in one millisecond never share an id"""
    store = make_store(start=5)
    created = []

    def worker(n):
        for i in range(200):
            created.append(store.create_headline(HeadlineCreate(title=f"t{n}-{i}")).id)

    run_in_threads(worker, 8)

    assert len(created) == 1600
    assert len(set(created)) == 1600
    assert len(store) == 1600


def test_concurrent_deletes_and_creates():
    """Test interleaved deletes and creates keep the collection consistent"""
    store = make_store(start=5)
    initial = [store.create_headline(HeadlineCreate(title=f"seed {i}")).id for i in range(400)]
    deleted = []
    created = []

    def worker(n):
        for headline_id in initial[n::4]:
            deleted.append(store.delete_headline(headline_id).id)
            created.append(store.create_headline(HeadlineCreate(title=f"new {headline_id}")).id)

    run_in_threads(worker, 4)

    remaining = [h.id for h in store.list_headlines()]
    assert sorted(deleted) == sorted(initial)
    assert sorted(remaining) == sorted(created)
    assert len(set(created)) == 400
    assert not set(created) & set(initial)
