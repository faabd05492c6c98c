from fastapi import APIRouter, Depends, HTTPException, Response

from electrostock.dependencies import get_inventory, report_persistence
from electrostock.errors import InvalidPrice, InvalidQuantity, NotFound
from electrostock.models.enums import Direction
from electrostock.schemas.item import StockItem
from electrostock.schemas.transaction import LedgerEntry, TransactionCreate
from electrostock.services.inventory_service import InventoryService

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("", response_model=list[LedgerEntry])
def list_transactions(
    direction: Direction | None = None,
    limit: int | None = None,
    inventory: InventoryService = Depends(get_inventory),
):
    """Ledger entries, most recent first."""
    entries = inventory.entries()
    if direction is not None:
        entries = [e for e in entries if e.direction == direction]
    if limit is not None:
        entries = entries[:limit]
    return entries


@router.post("", response_model=StockItem, status_code=201)
def record_transaction(
    data: TransactionCreate,
    response: Response,
    inventory: InventoryService = Depends(get_inventory),
):
    """Receive (IN) or sell (OUT) stock for an existing item."""
    try:
        item = inventory.record_transaction(
            item_id=data.item_id,
            direction=data.direction,
            quantity=data.quantity,
            unit_price=data.unit_price,
            counterparty_name=data.counterparty_name,
            note=data.note,
        )
    except NotFound:
        raise HTTPException(404, "Item not found")
    except (InvalidQuantity, InvalidPrice) as e:
        raise HTTPException(400, str(e))
    report_persistence(response, inventory)
    return item
