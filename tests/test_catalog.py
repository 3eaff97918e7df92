import pytest

from restaurant_orders.services.catalog import DEFAULT_MENU, Catalog
from restaurant_orders.services.store import Collection, InMemoryStore, StoreError


def test_seed_default_menu(catalog):
    result = catalog.seed_menu()

    assert result.success
    assert result.inserted == 10
    menu = catalog.list_menu()
    assert [item.name for item in menu] == [item.name for item in DEFAULT_MENU]
    assert catalog.find_item("Ice Cream").price == 290.50


def test_seeding_twice_duplicates_entries(catalog):
    catalog.seed_menu()
    catalog.seed_menu()

    names = [item.name for item in catalog.list_menu()]
    assert len(names) == 20
    assert names.count("Pizza") == 2


def test_find_item_is_exact_match(seeded_catalog):
    assert seeded_catalog.find_item("Pizza") is not None
    assert seeded_catalog.find_item("pizza") is None
    assert seeded_catalog.find_item("Waffles") is None


def test_list_menu_rereads_store(store, seeded_catalog):
    store.insert("menu", {"name": "Tacos", "price": 580.17})
    assert "Tacos" in [item.name for item in seeded_catalog.list_menu()]


def test_failed_write_stops_seeding():
    store = InMemoryStore(fail_writes=True)
    result = Catalog(store).seed_menu()

    assert not result.success
    assert result.inserted == 0
    assert "Pizza" in result.error_message


def test_missing_and_null_fields_read_as_zero_values(store, catalog):
    store.insert(Collection.MENU, {"name": "Mystery"})
    store.insert(Collection.MENU, {"name": None, "price": 12.5})

    menu = catalog.list_menu()

    assert [(item.name, item.price) for item in menu] == [("Mystery", 0.0), ("", 12.5)]
    assert catalog.find_item("Mystery").price == 0.0


def test_unreadable_menu_document_raises_store_error(store, catalog):
    store.insert(Collection.MENU, {"name": "Pizza", "price": "cheap"})

    with pytest.raises(StoreError):
        catalog.list_menu()
    with pytest.raises(StoreError):
        catalog.find_item("Pizza")
