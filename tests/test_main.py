from restaurant_orders.core.config import get_settings
from restaurant_orders.main import main
from restaurant_orders.services.store import Collection, InMemoryStore, MongoStore, WriteResult


def run_main(scripted, lines, argv=None, store=None):
    console = scripted(lines)
    status = main(argv or [], store=store, reader=console.read, writer=console.write)
    return status, console


def test_end_to_end_session(scripted):
    store = InMemoryStore()
    status, console = run_main(
        scripted, ["Pizza", "Pizza", "Burger", "done"], ["--customer-name", "Ana"], store
    )

    assert status == 0
    assert console.output[0] == "Menu items added to the database!"
    assert "Customer added: Ana" in console.output
    assert "Welcome to the Restaurant Ordering System!" in console.output
    assert console.output[-2] == "Total Customers:"
    assert console.output[-1] == (
        "Name: Ana, Phone: 1234567890, Orders: [Pizza Pizza Burger], Total Amount: Rs 2155.51"
    )
    # Store is released when the session ends
    assert not store.health_check()


def test_default_customer_and_unknown_item(scripted):
    status, console = run_main(scripted, ["Waffles", "Fries", "done"])

    assert status == 0
    assert "Item Waffles not found in menu" in console.output
    assert console.output[-1] == (
        "Name: Gadapa Raghavendra, Phone: 1234567890, Orders: [Fries], Total Amount: Rs 248.17"
    )


def test_skip_seed_leaves_menu_empty(scripted):
    store = InMemoryStore()
    status, console = run_main(scripted, ["Pizza", "done"], ["--skip-seed"], store)

    assert status == 0
    assert "Menu items added to the database!" not in console.output
    assert "Item Pizza not found in menu" in console.output


def test_seed_can_be_disabled_in_settings(monkeypatch, scripted):
    monkeypatch.setenv("SEED_MENU", "false")
    get_settings.cache_clear()

    status, console = run_main(scripted, ["done"])

    assert status == 0
    assert "Menu items added to the database!" not in console.output


def test_write_failure_exits_nonzero(scripted, capsys):
    status, console = run_main(scripted, ["done"], store=InMemoryStore(fail_writes=True))

    assert status == 1
    assert "Fatal: Error adding menu item Pizza" in capsys.readouterr().err
    assert "Customer added: Gadapa Raghavendra" not in console.output


def test_unreachable_store_exits_nonzero(scripted, capsys):
    status, console = run_main(scripted, [], store=InMemoryStore(available=False))

    assert status == 1
    assert "Failed to connect" in capsys.readouterr().err
    assert console.output == []


class RejectingUpdates(InMemoryStore):
    """Accepts inserts, refuses every update."""

    def update_field(self, collection, filter, update):
        return WriteResult(success=False, error_message="disk full")


def test_order_write_failure_aborts_without_rollback(scripted, capsys):
    store = RejectingUpdates()

    status, console = run_main(scripted, ["Pizza", "Burger", "done"], store=store)

    assert status == 1
    assert "Fatal: Error ordering item: disk full" in capsys.readouterr().err
    assert "Customer added: Gadapa Raghavendra" in console.output
    assert "Total Customers:" not in console.output
    # Registration and seeding stay written
    store._closed = False
    assert store.find_one(Collection.CUSTOMERS, {"name": "Gadapa Raghavendra"}) is not None


def test_empty_customer_name_is_accepted(scripted):
    store = InMemoryStore()
    status, console = run_main(scripted, ["Fries", "done"], ["--customer-name", ""], store)

    assert status == 0
    assert "Customer added: " in console.output
    assert console.output[-1] == (
        "Name: , Phone: 1234567890, Orders: [Fries], Total Amount: Rs 248.17"
    )


def test_default_mode_requires_mongodb(monkeypatch, scripted, capsys):
    monkeypatch.delenv("ENV_MODE", raising=False)
    get_settings.cache_clear()
    monkeypatch.setattr(MongoStore, "health_check", lambda self: False)

    status, console = run_main(scripted, ["done"])

    assert status == 1
    assert "Fatal: Failed to connect to mongodb store" in capsys.readouterr().err
    assert console.output == []


def test_unreadable_stored_customer_exits_nonzero(scripted, capsys):
    store = InMemoryStore()
    store.insert(Collection.CUSTOMERS, {"name": "Bob", "totalAmount": "plenty"})

    status, console = run_main(scripted, ["done"], store=store)

    assert status == 1
    assert "Fatal: Malformed Customer document" in capsys.readouterr().err
    assert "Customer added: Gadapa Raghavendra" in console.output
    assert "Total Customers:" not in console.output
