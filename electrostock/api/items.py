from fastapi import APIRouter, Depends, HTTPException, Response

from electrostock.dependencies import get_inventory, report_persistence
from electrostock.errors import IdentityConflict, InvalidPrice, InvalidQuantity, NotFound
from electrostock.models.enums import Category, Company
from electrostock.schemas.item import ArrivalCreate, CompanyGroup, ItemUpdate, OversellWarning, ShareLink, StockItem
from electrostock.schemas.transaction import LedgerEntry
from electrostock.services import report_service
from electrostock.services.catalog import group_by_company
from electrostock.services.inventory_service import InventoryService
from electrostock.services.share_service import share_link

router = APIRouter(prefix="/items", tags=["Items"])


@router.post("", response_model=StockItem, status_code=201)
def describe_new_arrival(
    data: ArrivalCreate,
    response: Response,
    inventory: InventoryService = Depends(get_inventory),
):
    """Add stock for a product description, merging into a matching item if one exists."""
    try:
        item = inventory.describe_new_arrival(
            company=data.company,
            category=data.category,
            name=data.name,
            specifications=data.specifications,
            price=data.price,
            quantity=data.quantity,
            description=data.description,
        )
    except (InvalidQuantity, InvalidPrice) as e:
        raise HTTPException(400, str(e))
    report_persistence(response, inventory)
    return item


@router.get("", response_model=list[StockItem])
def list_items(
    category: Category | None = None,
    q: str = "",
    spec: str | None = None,
    inventory: InventoryService = Depends(get_inventory),
):
    if category is None and not q and spec is None:
        return inventory.items()
    return inventory.search_items(category=category, term=q, spec_value=spec)


@router.get("/grouped", response_model=list[CompanyGroup])
def list_items_by_company(
    category: Category,
    q: str = "",
    spec: str | None = None,
    inventory: InventoryService = Depends(get_inventory),
):
    return group_by_company(inventory.search_items(category=category, term=q, spec_value=spec))


@router.get("/low-stock", response_model=list[StockItem])
def low_stock(threshold: int | None = None, inventory: InventoryService = Depends(get_inventory)):
    return report_service.low_stock(inventory.items(), threshold)


@router.get("/category-counts")
def category_counts(inventory: InventoryService = Depends(get_inventory)):
    return {cat.value: count for cat, count in inventory.category_counts().items()}


@router.get("/spec-values", response_model=list[str])
def spec_values(category: Category, inventory: InventoryService = Depends(get_inventory)):
    return inventory.spec_values(category)


@router.get("/suggestions", response_model=list[str])
def name_suggestions(company: Company, category: Category, inventory: InventoryService = Depends(get_inventory)):
    """Model names already stocked for this brand and category."""
    return inventory.suggest_names(company, category)


@router.get("/{item_id}", response_model=StockItem)
def get_item(item_id: str, inventory: InventoryService = Depends(get_inventory)):
    try:
        return inventory.get_item(item_id)
    except NotFound:
        raise HTTPException(404, "Item not found")


@router.patch("/{item_id}", response_model=StockItem)
def edit_item(
    item_id: str,
    data: ItemUpdate,
    response: Response,
    inventory: InventoryService = Depends(get_inventory),
):
    try:
        item = inventory.edit_item(item_id, data.model_dump(exclude_unset=True, exclude_none=True))
    except NotFound:
        raise HTTPException(404, "Item not found")
    except IdentityConflict as e:
        raise HTTPException(409, str(e))
    except InvalidPrice as e:
        raise HTTPException(400, str(e))
    report_persistence(response, inventory)
    return item


@router.delete("/{item_id}", status_code=204)
def remove_item(item_id: str, response: Response, inventory: InventoryService = Depends(get_inventory)):
    """Delete the item. Irreversible; its ledger entries are kept."""
    try:
        inventory.remove_item(item_id)
    except NotFound:
        raise HTTPException(404, "Item not found")
    report_persistence(response, inventory)


@router.get("/{item_id}/transactions", response_model=list[LedgerEntry])
def item_transactions(item_id: str, inventory: InventoryService = Depends(get_inventory)):
    try:
        return inventory.item_history(item_id)
    except NotFound:
        raise HTTPException(404, "Item not found")


@router.get("/{item_id}/oversell-check", response_model=OversellWarning | None)
def oversell_check(item_id: str, quantity: int, inventory: InventoryService = Depends(get_inventory)):
    """Warn before a sale that exceeds the stock on hand."""
    try:
        return inventory.oversell_warning(item_id, quantity)
    except NotFound:
        raise HTTPException(404, "Item not found")


@router.get("/{item_id}/share", response_model=ShareLink)
def share_item(item_id: str, inventory: InventoryService = Depends(get_inventory)):
    try:
        item = inventory.get_item(item_id)
    except NotFound:
        raise HTTPException(404, "Item not found")
    return share_link(item)
