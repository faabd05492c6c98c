"""Persistence port for the catalog and the ledger.

Both collections are stored whole, as JSON arrays, under fixed keys. The
inventory service reads them once at startup and writes them back after every
successful mutation.
"""
import logging
from typing import Protocol

from pydantic import TypeAdapter
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from electrostock.errors import PersistenceFailure
from electrostock.models.state import StateCollection
from electrostock.schemas.item import StockItem
from electrostock.schemas.transaction import LedgerEntry

logger = logging.getLogger(__name__)

CATALOG_KEY = "electro_products"
LEDGER_KEY = "electro_transactions"

_items_adapter = TypeAdapter(list[StockItem])
_entries_adapter = TypeAdapter(list[LedgerEntry])


class StateStore(Protocol):
    def load_catalog(self) -> list[StockItem] | None: ...

    def save_catalog(self, items: list[StockItem]) -> None: ...

    def load_ledger(self) -> list[LedgerEntry]: ...

    def save_ledger(self, entries: list[LedgerEntry]) -> None: ...


def dump_items(items: list[StockItem]) -> str:
    return _items_adapter.dump_json(items).decode()


def dump_entries(entries: list[LedgerEntry]) -> str:
    return _entries_adapter.dump_json(entries).decode()


class SqlStateStore:
    """Key-value rows in the ``state_collections`` table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def load_catalog(self) -> list[StockItem] | None:
        payload = self._read(CATALOG_KEY)
        if payload is None:
            return None
        return _items_adapter.validate_json(payload)

    def save_catalog(self, items: list[StockItem]) -> None:
        self._write(CATALOG_KEY, dump_items(items))

    def load_ledger(self) -> list[LedgerEntry]:
        payload = self._read(LEDGER_KEY)
        if payload is None:
            return []
        return _entries_adapter.validate_json(payload)

    def save_ledger(self, entries: list[LedgerEntry]) -> None:
        self._write(LEDGER_KEY, dump_entries(entries))

    def _read(self, key: str) -> str | None:
        db: Session = self._session_factory()
        try:
            row = db.get(StateCollection, key)
            return row.payload if row else None
        finally:
            db.close()

    def _write(self, key: str, payload: str) -> None:
        db: Session = self._session_factory()
        try:
            row = db.get(StateCollection, key)
            if row is None:
                row = StateCollection(key=key, payload=payload)
                db.add(row)
            else:
                row.payload = payload
            db.commit()
            logger.debug("Saved %s (%d bytes)", key, len(payload))
        except SQLAlchemyError as e:
            db.rollback()
            raise PersistenceFailure(f"Could not save {key}: {e}") from e
        finally:
            db.close()


class MemoryStateStore:
    """Keeps the serialized collections in a dict; handy for tests and demos."""

    def __init__(self):
        self.data: dict[str, str] = {}

    def load_catalog(self) -> list[StockItem] | None:
        if CATALOG_KEY not in self.data:
            return None
        return _items_adapter.validate_json(self.data[CATALOG_KEY])

    def save_catalog(self, items: list[StockItem]) -> None:
        self.data[CATALOG_KEY] = dump_items(items)

    def load_ledger(self) -> list[LedgerEntry]:
        if LEDGER_KEY not in self.data:
            return []
        return _entries_adapter.validate_json(self.data[LEDGER_KEY])

    def save_ledger(self, entries: list[LedgerEntry]) -> None:
        self.data[LEDGER_KEY] = dump_entries(entries)
