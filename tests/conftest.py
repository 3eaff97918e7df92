from pathlib import Path
import sys

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from restaurant_orders.core.config import Settings, get_settings
from restaurant_orders.schemas import MenuItem
from restaurant_orders.services.catalog import Catalog
from restaurant_orders.services.ledger import Ledger
from restaurant_orders.services.store import InMemoryStore, reset_store


@pytest.fixture(autouse=True)
def development_env(monkeypatch):
    """Every test starts from development settings and no cached store."""
    monkeypatch.setenv("ENV_MODE", "development")
    monkeypatch.delenv("SEED_MENU", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    get_settings.cache_clear()
    reset_store()
    yield
    get_settings.cache_clear()
    reset_store()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def catalog(store):
    return Catalog(store)


@pytest.fixture
def seeded_catalog(catalog):
    result = catalog.seed_menu([
        MenuItem(name="Pizza", price=829.17),
        MenuItem(name="Burger", price=497.17),
        MenuItem(name="Ice Cream", price=290.50),
    ])
    assert result.success
    return catalog


@pytest.fixture
def ledger(store, seeded_catalog):
    return Ledger(store, seeded_catalog)


@pytest.fixture
def ana(ledger):
    result = ledger.register_customer("Ana", "5550100")
    assert result.success
    return "Ana"


class ScriptedConsole:
    """Feeds canned input lines and captures printed output."""

    def __init__(self, lines):
        self._lines = iter(lines)
        self.output = []

    def read(self):
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError

    def write(self, line=""):
        self.output.append(line)


@pytest.fixture
def scripted():
    return ScriptedConsole
