from datetime import datetime

from pydantic import BaseModel

from electrostock.models.enums import Direction
from electrostock.schemas.item import Price


class LedgerEntry(BaseModel):
    """Immutable record of one stock-affecting event."""

    id: str
    item_id: str
    item_name_snapshot: str
    direction: Direction
    quantity: int
    unit_price: float
    total_amount: float
    counterparty_name: str = ""
    note: str = ""
    timestamp: datetime

    model_config = {"frozen": True}


class TransactionCreate(BaseModel):
    item_id: str
    direction: Direction
    quantity: int
    unit_price: Price
    counterparty_name: str = ""
    note: str = ""


class LedgerTotals(BaseModel):
    units_in: int
    units_out: int
    amount_in: float
    amount_out: float
    entry_count: int
