class InventoryError(Exception):
    """Base class for errors raised by the inventory core."""


class NotFound(InventoryError):
    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class InvalidQuantity(InventoryError):
    pass


class InvalidPrice(InventoryError):
    pass


class IdentityConflict(InventoryError):
    """An edit would make two catalog items share one identity key."""

    def __init__(self, existing_id: str):
        super().__init__(f"Another item ({existing_id}) already has this company, category, name and specs")
        self.existing_id = existing_id


class AdvisoryServiceUnavailable(InventoryError):
    pass


class PersistenceFailure(InventoryError):
    pass
