from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from electrostock.errors import InvalidPrice, InvalidQuantity
from electrostock.models.enums import Category, Company, Direction
from electrostock.services.catalog import Catalog
from electrostock.services.ledger import TransactionLedger

T0 = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def item(ids, clock):
    return Catalog(id_factory=ids, clock=clock).create(
        Company.LG, Category.FRIDGE, "Double Door", {"capacity": "253 L"}, price=27000, stock=4
    )


def test_append_computes_total(item, ids, clock):
    ledger = TransactionLedger(id_factory=ids, clock=clock)
    entry = ledger.append(item, Direction.OUT, 3, 26500.5, counterparty_name="Mr. Rao", note="Diwali sale")
    assert entry.total_amount == 3 * 26500.5
    assert entry.item_id == item.id
    assert entry.item_name_snapshot == "Double Door"
    assert entry.counterparty_name == "Mr. Rao"


@pytest.mark.parametrize("quantity", [0, -2])
def test_append_rejects_non_positive_quantity(item, quantity):
    ledger = TransactionLedger()
    with pytest.raises(InvalidQuantity):
        ledger.append(item, Direction.IN, quantity, 100)
    assert len(ledger) == 0


@pytest.mark.parametrize("unit_price", [-1, float("nan"), float("-inf")])
def test_append_rejects_invalid_price(item, unit_price):
    ledger = TransactionLedger()
    with pytest.raises(InvalidPrice):
        ledger.append(item, Direction.IN, 1, unit_price)
    assert len(ledger) == 0


def test_all_is_most_recent_first(item, ids, clock):
    ledger = TransactionLedger(id_factory=ids, clock=clock)
    first = ledger.append(item, Direction.IN, 1, 100)
    second = ledger.append(item, Direction.OUT, 1, 120)
    assert ledger.all() == [second, first]


def test_equal_timestamps_keep_insertion_order(item, ids):
    ledger = TransactionLedger(id_factory=ids, clock=lambda: T0)
    a = ledger.append(item, Direction.IN, 1, 100)
    b = ledger.append(item, Direction.IN, 2, 100)
    c = ledger.append(item, Direction.OUT, 1, 100)
    assert ledger.all() == [c, b, a]


def test_all_returns_a_snapshot(item):
    ledger = TransactionLedger()
    ledger.append(item, Direction.IN, 1, 100)
    snapshot = ledger.all()
    ledger.append(item, Direction.IN, 1, 100)
    assert len(snapshot) == 1
    assert len(ledger.all()) == 2


def test_entries_are_immutable(item):
    entry = TransactionLedger().append(item, Direction.IN, 1, 100)
    with pytest.raises(ValidationError):
        entry.quantity = 5


def test_reload_preserves_order(item, ids, clock):
    ledger = TransactionLedger(id_factory=ids, clock=clock)
    ledger.append(item, Direction.IN, 1, 100)
    ledger.append(item, Direction.OUT, 1, 100)
    reloaded = TransactionLedger(ledger.all())
    assert reloaded.all() == ledger.all()


def test_for_item(item, ids, clock):
    other = item.model_copy(update={"id": "other"})
    ledger = TransactionLedger(id_factory=ids, clock=clock)
    mine = ledger.append(item, Direction.IN, 1, 100)
    ledger.append(other, Direction.IN, 1, 100)
    assert ledger.for_item(item.id) == [mine]
