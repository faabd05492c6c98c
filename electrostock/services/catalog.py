import math
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from electrostock.errors import IdentityConflict, InvalidPrice, InvalidQuantity, NotFound
from electrostock.models.enums import Category, Company
from electrostock.schemas.item import CompanyGroup, StockItem, identity_key
from electrostock.services.spec_schema import primary_spec_key

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]

# Fields an edit may touch; id and stock are never edited directly
EDITABLE_FIELDS = {"name", "company", "category", "specifications", "price", "description"}


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Catalog:
    """The set of stocked items, in insertion order.

    Records are replaced rather than mutated in place, so an item handed out
    earlier keeps describing the state it was read in.
    """

    def __init__(self, items: Iterable[StockItem] = (), id_factory: IdFactory = new_id, clock: Clock = utcnow):
        self._items: dict[str, StockItem] = {item.id: item for item in items}
        self._id_factory = id_factory
        self._clock = clock

    def __len__(self) -> int:
        return len(self._items)

    def all(self) -> list[StockItem]:
        return list(self._items.values())

    def get(self, item_id: str) -> StockItem:
        item = self._items.get(item_id)
        if item is None:
            raise NotFound("Item", item_id)
        return item

    def find_by_identity(
        self,
        company: Company,
        category: Category,
        name: str,
        specifications: dict[str, str] | None,
    ) -> StockItem | None:
        wanted = identity_key(company, category, name, specifications)
        for item in self._items.values():
            if item.identity_key == wanted:
                return item
        return None

    def create(
        self,
        company: Company,
        category: Category,
        name: str,
        specifications: dict[str, str] | None = None,
        price: float = 0.0,
        stock: int = 0,
        description: str = "",
    ) -> StockItem:
        if stock < 0:
            raise InvalidQuantity(f"Initial stock cannot be negative: {stock}")
        check_price(price)
        item = StockItem(
            id=self._id_factory(),
            name=name,
            company=company,
            category=category,
            specifications=dict(specifications or {}),
            price=price,
            stock=stock,
            description=description,
            last_updated=self._clock(),
        )
        self._items[item.id] = item
        return item

    def adjust_stock(self, item_id: str, delta: int) -> StockItem:
        item = self.get(item_id)
        # Stock floors at zero; overselling is clamped, not rejected
        return self._replace(item, stock=max(0, item.stock + delta))

    def set_price(self, item_id: str, price: float) -> StockItem:
        check_price(price)
        return self._replace(self.get(item_id), price=price)

    def edit(self, item_id: str, changes: dict) -> StockItem:
        """Apply attribute corrections. Never merges; refuses identity collisions."""
        item = self.get(item_id)
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")
        if "price" in changes:
            check_price(changes["price"])
        if "specifications" in changes:
            changes = {**changes, "specifications": dict(changes["specifications"] or {})}

        candidate = StockItem.model_validate({**item.model_dump(), **changes})
        if candidate.identity_key != item.identity_key:
            for other in self._items.values():
                if other.id != item.id and other.identity_key == candidate.identity_key:
                    raise IdentityConflict(other.id)
        return self._replace(item, **changes)

    def remove(self, item_id: str) -> StockItem:
        item = self.get(item_id)
        del self._items[item_id]
        return item

    # --- inventory screen queries ---

    def category_counts(self) -> dict[Category, int]:
        counts = {cat: 0 for cat in Category}
        for item in self._items.values():
            counts[item.category] += 1
        return counts

    def available_spec_values(self, category: Category) -> list[str]:
        key = primary_spec_key(category)
        if not key:
            return []
        values = {
            item.specifications[key]
            for item in self._items.values()
            if item.category == category and item.specifications.get(key)
        }
        return sorted(values)

    def search(
        self,
        category: Category | None = None,
        term: str = "",
        spec_value: str | None = None,
    ) -> list[StockItem]:
        term = term.lower()
        results = []
        for item in self._items.values():
            if category is not None and item.category != category:
                continue
            if term and term not in item.name.lower() and term not in item.company.value.lower():
                continue
            if spec_value is not None:
                key = primary_spec_key(item.category)
                if not key or item.specifications.get(key) != spec_value:
                    continue
            results.append(item)
        return results

    def suggest_names(self, company: Company, category: Category, limit: int = 5) -> list[str]:
        names: list[str] = []
        for item in self._items.values():
            if item.company == company and item.category == category and item.name not in names:
                names.append(item.name)
        return names[:limit]

    def _replace(self, item: StockItem, **changes) -> StockItem:
        updated = StockItem.model_validate({**item.model_dump(), **changes, "last_updated": self._clock()})
        self._items[item.id] = updated
        return updated


def group_by_company(items: Iterable[StockItem]) -> list[CompanyGroup]:
    groups: dict[Company, CompanyGroup] = {}
    for item in items:
        group = groups.get(item.company)
        if group is None:
            group = groups[item.company] = CompanyGroup(company=item.company, total_stock=0, items=[])
        group.items.append(item)
        group.total_stock += item.stock
    return list(groups.values())


def check_price(price: float, label: str = "Price") -> None:
    # NaN compares false against everything, so test finiteness explicitly
    if not math.isfinite(price) or price < 0:
        raise InvalidPrice(f"{label} must be a finite, non-negative number: {price}")
