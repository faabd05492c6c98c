from fastapi import Request, Response

from electrostock.services.advisory_service import AdvisoryClient
from electrostock.services.inventory_service import InventoryService


def get_inventory(request: Request) -> InventoryService:
    return request.app.state.inventory


def get_advisory(request: Request) -> AdvisoryClient:
    return request.app.state.advisory


def report_persistence(response: Response, inventory: InventoryService) -> None:
    """Surface a failed save to the caller without failing the request."""
    if inventory.last_persistence_error is not None:
        response.headers["X-Persistence-Warning"] = str(inventory.last_persistence_error)
