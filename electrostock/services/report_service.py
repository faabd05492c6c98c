from collections.abc import Iterable, Sequence

from electrostock.config import settings
from electrostock.models.enums import Category, Direction
from electrostock.schemas.item import StockItem
from electrostock.schemas.report import CategoryStock, DashboardStats
from electrostock.schemas.transaction import LedgerEntry, LedgerTotals

# Dashboard display order; categories not listed follow in enumeration order
CATEGORY_ORDER = [
    Category.TV,
    Category.FRIDGE,
    Category.WASHING_MACHINE,
    Category.AC,
    Category.INVERTER,
    Category.BATTERY,
    Category.WATER_FILTER,
    Category.JUICER_MIXER,
    Category.TRANSFORMER,
]


def total_units(items: Iterable[StockItem]) -> int:
    return sum(i.stock for i in items)


def total_value(items: Iterable[StockItem]) -> float:
    return sum(i.stock * i.price for i in items)


def low_stock(items: Iterable[StockItem], threshold: int | None = None) -> list[StockItem]:
    if threshold is None:
        threshold = settings.LOW_STOCK_THRESHOLD
    return [i for i in items if i.stock <= threshold]


def category_rollup(items: Iterable[StockItem]) -> list[CategoryStock]:
    totals = {cat: 0 for cat in Category}
    for i in items:
        totals[i.category] += i.stock

    ordered = CATEGORY_ORDER + [cat for cat in Category if cat not in CATEGORY_ORDER]
    return [CategoryStock(category=cat, stock=totals[cat]) for cat in ordered if totals[cat] > 0]


def dashboard(items: Sequence[StockItem], threshold: int | None = None) -> DashboardStats:
    if threshold is None:
        threshold = settings.LOW_STOCK_THRESHOLD
    low = low_stock(items, threshold)
    return DashboardStats(
        total_items=len(items),
        total_units=total_units(items),
        total_value=round(total_value(items), 2),
        low_stock_threshold=threshold,
        low_stock_count=len(low),
        low_stock_items=low,
        by_category=category_rollup(items),
    )


def ledger_totals(entries: Iterable[LedgerEntry]) -> LedgerTotals:
    units_in = units_out = count = 0
    amount_in = amount_out = 0.0
    for e in entries:
        count += 1
        if e.direction == Direction.IN:
            units_in += e.quantity
            amount_in += e.total_amount
        else:
            units_out += e.quantity
            amount_out += e.total_amount
    return LedgerTotals(
        units_in=units_in,
        units_out=units_out,
        amount_in=round(amount_in, 2),
        amount_out=round(amount_out, 2),
        entry_count=count,
    )
