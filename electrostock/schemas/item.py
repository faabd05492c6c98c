from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field

from electrostock.models.enums import Category, Company

IdentityKey = tuple[Company, Category, str, frozenset]

# Request prices; NaN and infinity would not survive a JSON round trip
Price = Annotated[float, Field(allow_inf_nan=False)]


def identity_key(company: Company, category: Category, name: str, specifications: dict[str, str] | None) -> IdentityKey:
    """The tuple that decides whether two descriptions are the same stocked item.

    Name is compared case-insensitively; company, category and spec values are
    exact. A missing spec mapping equals an empty one.
    """
    return (
        Company(company),
        Category(category),
        name.lower(),
        frozenset((specifications or {}).items()),
    )


class StockItem(BaseModel):
    id: str
    name: str
    company: Company
    category: Category
    specifications: dict[str, str] = {}
    price: float
    stock: int
    description: str = ""
    last_updated: datetime

    @property
    def identity_key(self) -> IdentityKey:
        return identity_key(self.company, self.category, self.name, self.specifications)


# --- API payloads ---

class ArrivalCreate(BaseModel):
    company: Company
    category: Category
    name: str
    specifications: dict[str, str] = {}
    price: Price = 0.0
    quantity: int = 0
    description: str = ""


class ItemUpdate(BaseModel):
    # stock is intentionally absent: stock only moves through transactions
    name: str | None = None
    company: Company | None = None
    category: Category | None = None
    specifications: dict[str, str] | None = None
    price: Price | None = None
    description: str | None = None


class CompanyGroup(BaseModel):
    company: Company
    total_stock: int
    items: list[StockItem]


class ShareLink(BaseModel):
    text: str
    url: str


class OversellWarning(BaseModel):
    item_id: str
    available: int
    requested: int
    message: str
