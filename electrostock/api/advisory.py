from fastapi import APIRouter, Depends

from electrostock.dependencies import get_advisory, get_inventory
from electrostock.schemas.advisory import AdvisoryOut, ChatRequest, DescriptionRequest
from electrostock.services.advisory_service import AdvisoryClient
from electrostock.services.inventory_service import InventoryService
from electrostock.services.spec_schema import product_label

router = APIRouter(prefix="/advisory", tags=["Advisory"])


@router.post("/insights", response_model=AdvisoryOut)
async def insights(
    inventory: InventoryService = Depends(get_inventory),
    advisory: AdvisoryClient = Depends(get_advisory),
):
    return await advisory.summarize(inventory.items())


@router.post("/chat", response_model=AdvisoryOut)
async def chat(
    data: ChatRequest,
    inventory: InventoryService = Depends(get_inventory),
    advisory: AdvisoryClient = Depends(get_advisory),
):
    return await advisory.answer(data.query, inventory.items())


@router.post("/description", response_model=AdvisoryOut)
async def description(data: DescriptionRequest, advisory: AdvisoryClient = Depends(get_advisory)):
    """Draft a marketing description for a product being added."""
    company = data.company.value if data.company else ""
    label = product_label(company, data.name, data.specifications)
    return await advisory.describe_product(label, data.category.value)
