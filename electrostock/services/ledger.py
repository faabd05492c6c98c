from collections.abc import Iterable

from electrostock.errors import InvalidQuantity
from electrostock.models.enums import Direction
from electrostock.schemas.item import StockItem
from electrostock.schemas.transaction import LedgerEntry
from electrostock.services.catalog import Clock, IdFactory, check_price, new_id, utcnow


class TransactionLedger:
    """Append-only log of stock movements.

    Entries are kept oldest-first internally; reads walk the list backwards so
    the newest entry comes first and ties keep their insertion order.
    """

    def __init__(self, entries: Iterable[LedgerEntry] = (), id_factory: IdFactory = new_id, clock: Clock = utcnow):
        # Persisted ledgers are stored newest-first
        self._entries: list[LedgerEntry] = list(reversed(list(entries)))
        self._id_factory = id_factory
        self._clock = clock

    def __len__(self) -> int:
        return len(self._entries)

    def append(
        self,
        item: StockItem,
        direction: Direction,
        quantity: int,
        unit_price: float,
        counterparty_name: str = "",
        note: str = "",
    ) -> LedgerEntry:
        if quantity <= 0:
            raise InvalidQuantity(f"Quantity must be positive, got {quantity}")
        check_price(unit_price, "Unit price")
        entry = LedgerEntry(
            id=self._id_factory(),
            item_id=item.id,
            item_name_snapshot=item.name,
            direction=direction,
            quantity=quantity,
            unit_price=unit_price,
            total_amount=quantity * unit_price,
            counterparty_name=counterparty_name or "",
            note=note or "",
            timestamp=self._clock(),
        )
        self._entries.append(entry)
        return entry

    def all(self) -> list[LedgerEntry]:
        return self._entries[::-1]

    def for_item(self, item_id: str) -> list[LedgerEntry]:
        return [e for e in reversed(self._entries) if e.item_id == item_id]
