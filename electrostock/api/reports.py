from fastapi import APIRouter, Depends

from electrostock.dependencies import get_inventory
from electrostock.models.enums import Category
from electrostock.schemas.report import CategorySchemaOut, CategoryStock, DashboardStats
from electrostock.schemas.transaction import LedgerTotals
from electrostock.services import report_service, spec_schema
from electrostock.services.inventory_service import InventoryService

router = APIRouter(tags=["Reports"])


@router.get("/reports/dashboard", response_model=DashboardStats)
def dashboard(threshold: int | None = None, inventory: InventoryService = Depends(get_inventory)):
    return report_service.dashboard(inventory.items(), threshold)


@router.get("/reports/categories", response_model=list[CategoryStock])
def category_rollup(inventory: InventoryService = Depends(get_inventory)):
    return report_service.category_rollup(inventory.items())


@router.get("/reports/transactions", response_model=LedgerTotals)
def transaction_totals(inventory: InventoryService = Depends(get_inventory)):
    return report_service.ledger_totals(inventory.entries())


@router.get("/categories/schema", response_model=list[CategorySchemaOut])
def category_schema():
    """Distinguishing spec field and suggested values for every category."""
    return [
        CategorySchemaOut(
            category=cat,
            primary_spec_key=spec_schema.primary_spec_key(cat),
            suggested_values=list(spec_schema.suggested_values(cat)),
            fields=spec_schema.spec_fields(cat),
        )
        for cat in Category
    ]
