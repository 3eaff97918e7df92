import pytest

from restaurant_orders.core.config import get_settings
from restaurant_orders.database import open_store
from restaurant_orders.services.store import (
    Collection,
    InMemoryStore,
    MongoStore,
    StoreError,
    get_store,
    reset_store,
)


def test_insert_assigns_id_and_find_one_returns_copy(store):
    result = store.insert(Collection.MENU, {"name": "Pizza", "price": 829.17})
    assert result.success
    assert result.inserted_id

    found = store.find_one(Collection.MENU, {"name": "Pizza"})
    assert found["_id"] == result.inserted_id
    found["price"] = 0
    assert store.find_one(Collection.MENU, {"name": "Pizza"})["price"] == 829.17


def test_find_one_not_found_is_none(store):
    assert store.find_one(Collection.CUSTOMERS, {"name": "Nobody"}) is None


def test_find_all_keeps_insertion_order_and_filters(store):
    for name in ["Tacos", "Pizza", "Tacos"]:
        store.insert(Collection.MENU, {"name": name, "price": 1.0})

    assert [d["name"] for d in store.find_all(Collection.MENU)] == ["Tacos", "Pizza", "Tacos"]
    assert len(list(store.find_all(Collection.MENU, {"name": "Tacos"}))) == 2


def test_push_appends_to_first_match_only(store):
    store.insert(Collection.CUSTOMERS, {"name": "Ana", "orderedItems": []})
    store.insert(Collection.CUSTOMERS, {"name": "Ana", "orderedItems": []})

    result = store.update_field(Collection.CUSTOMERS, {"name": "Ana"}, {"$push": {"orderedItems": "Pizza"}})
    assert result.success and result.matched_count == 1

    docs = list(store.find_all(Collection.CUSTOMERS))
    assert docs[0]["orderedItems"] == ["Pizza"]
    assert docs[1]["orderedItems"] == []


def test_update_without_match_reports_zero(store):
    result = store.update_field(Collection.CUSTOMERS, {"name": "Ghost"}, {"$set": {"totalAmount": 1.0}})
    assert result.success
    assert result.matched_count == 0


def test_unsupported_operator_rejected(store):
    with pytest.raises(ValueError):
        store.update_field(Collection.CUSTOMERS, {"name": "Ana"}, {"$inc": {"totalAmount": 1}})


def test_failing_store_reports_instead_of_raising():
    store = InMemoryStore(fail_writes=True)
    result = store.insert(Collection.MENU, {"name": "Pizza", "price": 1.0})
    assert not result.success
    assert "Simulated" in result.error_message
    assert store.find_one(Collection.MENU, {"name": "Pizza"}) is None


def test_closed_store_raises_on_read(store):
    store.close()
    assert not store.health_check()
    with pytest.raises(StoreError):
        store.find_one(Collection.MENU, {"name": "Pizza"})


def test_factory_uses_memory_store_in_development():
    store = get_store()
    assert isinstance(store, InMemoryStore)
    assert get_store() is store
    reset_store()
    assert get_store() is not store


def test_factory_uses_mongo_store_outside_development(monkeypatch):
    monkeypatch.setenv("ENV_MODE", "staging")
    get_settings.cache_clear()
    reset_store()
    store = get_store()
    try:
        assert isinstance(store, MongoStore)
        assert store.provider_name == "mongodb"
    finally:
        store.close()


def test_factory_defaults_to_mongo_store(monkeypatch):
    monkeypatch.delenv("ENV_MODE", raising=False)
    get_settings.cache_clear()
    reset_store()
    store = get_store()
    try:
        assert isinstance(store, MongoStore)
    finally:
        store.close()


def test_open_store_closes_on_exit(store):
    with open_store(store) as opened:
        assert opened is store
    assert not store.health_check()


def test_open_store_closes_when_body_raises(store):
    with pytest.raises(RuntimeError):
        with open_store(store):
            raise RuntimeError("boom")
    assert not store.health_check()


def test_open_store_unreachable_raises():
    with pytest.raises(StoreError):
        with open_store(InMemoryStore(available=False)):
            pass
