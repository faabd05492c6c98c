"""Reconciles the catalog and the ledger.

Every command runs under one lock: the identity lookup and the create-or-adjust
that follows it must not interleave with another writer. After the in-memory
change the whole state is handed to the persistence port once; a failed save
is logged and remembered but the in-memory state stays authoritative.
"""
import logging
import threading

from electrostock.config import settings
from electrostock.errors import InvalidQuantity, PersistenceFailure
from electrostock.models.enums import Category, Company, Direction
from electrostock.schemas.item import OversellWarning, StockItem
from electrostock.schemas.transaction import LedgerEntry
from electrostock.services.catalog import Catalog, Clock, IdFactory, new_id, utcnow
from electrostock.services.ledger import TransactionLedger
from electrostock.services.seed import seed_items
from electrostock.services.spec_schema import normalize_specs
from electrostock.services.state_store import StateStore

logger = logging.getLogger(__name__)

ARRIVAL_COUNTERPARTY = "Inventory Addition"
MERGED_NOTE = "Added via New Product Wizard (Merged)"
INITIAL_NOTE = "Initial Stock"


class InventoryService:
    def __init__(
        self,
        store: StateStore,
        catalog: Catalog | None = None,
        ledger: TransactionLedger | None = None,
        id_factory: IdFactory = new_id,
        clock: Clock = utcnow,
    ):
        self.store = store
        self.catalog = catalog if catalog is not None else Catalog(id_factory=id_factory, clock=clock)
        self.ledger = ledger if ledger is not None else TransactionLedger(id_factory=id_factory, clock=clock)
        self._lock = threading.RLock()
        # Save outcomes are tracked per thread so a request only sees its own
        self._local = threading.local()

    @classmethod
    def load(
        cls,
        store: StateStore,
        seed_on_empty: bool | None = None,
        id_factory: IdFactory = new_id,
        clock: Clock = utcnow,
    ) -> "InventoryService":
        """Build the service from saved state, falling back to the demo catalog."""
        if seed_on_empty is None:
            seed_on_empty = settings.SEED_ON_EMPTY
        items = store.load_catalog()
        if items is None:
            items = seed_items() if seed_on_empty else []
            logger.info("No saved catalog found, starting with %d seed items", len(items))
        entries = store.load_ledger()
        logger.info("Loaded %d items and %d ledger entries", len(items), len(entries))
        return cls(
            store,
            catalog=Catalog(items, id_factory=id_factory, clock=clock),
            ledger=TransactionLedger(entries, id_factory=id_factory, clock=clock),
            id_factory=id_factory,
            clock=clock,
        )

    @property
    def last_persistence_error(self) -> PersistenceFailure | None:
        """The save failure from the last command run on the calling thread, if any."""
        return getattr(self._local, "persistence_error", None)

    # --- reads (snapshots) ---

    def items(self) -> list[StockItem]:
        with self._lock:
            return self.catalog.all()

    def entries(self) -> list[LedgerEntry]:
        with self._lock:
            return self.ledger.all()

    def get_item(self, item_id: str) -> StockItem:
        with self._lock:
            return self.catalog.get(item_id)

    def item_history(self, item_id: str) -> list[LedgerEntry]:
        with self._lock:
            self.catalog.get(item_id)
            return self.ledger.for_item(item_id)

    def search_items(
        self,
        category: Category | None = None,
        term: str = "",
        spec_value: str | None = None,
    ) -> list[StockItem]:
        with self._lock:
            return self.catalog.search(category=category, term=term, spec_value=spec_value)

    def category_counts(self) -> dict[Category, int]:
        with self._lock:
            return self.catalog.category_counts()

    def spec_values(self, category: Category) -> list[str]:
        with self._lock:
            return self.catalog.available_spec_values(category)

    def suggest_names(self, company: Company, category: Category) -> list[str]:
        with self._lock:
            return self.catalog.suggest_names(company, category)

    # --- commands ---

    def describe_new_arrival(
        self,
        company: Company,
        category: Category,
        name: str,
        specifications: dict[str, str] | None,
        price: float,
        quantity: int,
        description: str = "",
    ) -> StockItem:
        """Merge the arrival into a matching item or create a new one."""
        company = Company(company)
        category = Category(category)
        if quantity < 0:
            raise InvalidQuantity(f"Arrival quantity cannot be negative: {quantity}")
        name = name.strip()
        specs = normalize_specs(category, specifications)

        with self._lock:
            existing = self.catalog.find_by_identity(company, category, name, specs)
            if existing is not None:
                # Validate the price before the stock moves
                self.catalog.set_price(existing.id, price)
                item = self.catalog.adjust_stock(existing.id, quantity)
                note = MERGED_NOTE
            else:
                item = self.catalog.create(
                    company=company,
                    category=category,
                    name=name,
                    specifications=specs,
                    price=price,
                    stock=quantity,
                    description=description,
                )
                note = INITIAL_NOTE

            # A zero-quantity arrival moves no stock, so it leaves no ledger trace
            if quantity > 0:
                self.ledger.append(
                    item,
                    Direction.IN,
                    quantity,
                    price,
                    counterparty_name=ARRIVAL_COUNTERPARTY,
                    note=note,
                )
            if existing is not None:
                logger.info("Merged %d x %s into item %s", quantity, name, item.id)
            else:
                logger.info("Created item %s (%s %s) with stock %d", item.id, company.value, name, quantity)
            self._persist()
            return item

    def record_transaction(
        self,
        item_id: str,
        direction: Direction,
        quantity: int,
        unit_price: float,
        counterparty_name: str = "",
        note: str = "",
    ) -> StockItem:
        """Receive or dispatch stock for an existing item."""
        if quantity <= 0:
            raise InvalidQuantity(f"Quantity must be positive, got {quantity}")
        direction = Direction(direction)

        with self._lock:
            item = self.catalog.get(item_id)
            if direction == Direction.OUT and quantity > item.stock:
                logger.warning(
                    "Dispatching %d of item %s with only %d in stock, clamping to zero",
                    quantity, item_id, item.stock,
                )
            # Append first: it validates the price and nothing has moved yet
            self.ledger.append(item, direction, quantity, unit_price, counterparty_name, note)
            delta = quantity if direction == Direction.IN else -quantity
            item = self.catalog.adjust_stock(item_id, delta)
            logger.info("%s %d x item %s, stock now %d", direction.value, quantity, item_id, item.stock)
            self._persist()
            return item

    def edit_item(self, item_id: str, changes: dict) -> StockItem:
        with self._lock:
            changes = dict(changes)
            if "specifications" in changes:
                category = changes.get("category") or self.catalog.get(item_id).category
                changes["specifications"] = normalize_specs(category, changes["specifications"])
            if "name" in changes and changes["name"] is not None:
                changes["name"] = changes["name"].strip()
            item = self.catalog.edit(item_id, changes)
            logger.info("Edited item %s: %s", item_id, ", ".join(sorted(changes)))
            self._persist()
            return item

    def remove_item(self, item_id: str) -> StockItem:
        with self._lock:
            item = self.catalog.remove(item_id)
            logger.info("Removed item %s (%s)", item_id, item.name)
            self._persist()
            return item

    def oversell_warning(self, item_id: str, quantity: int) -> OversellWarning | None:
        item = self.get_item(item_id)
        if quantity <= item.stock:
            return None
        return OversellWarning(
            item_id=item_id,
            available=item.stock,
            requested=quantity,
            message=f"Only {item.stock} in stock; recording this sale will set stock to 0.",
        )

    def _persist(self) -> None:
        try:
            self.store.save_catalog(self.catalog.all())
            self.store.save_ledger(self.ledger.all())
        except PersistenceFailure as e:
            logger.warning("Persisting inventory state failed: %s", e)
            self._local.persistence_error = e
        else:
            self._local.persistence_error = None
