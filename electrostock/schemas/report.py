from pydantic import BaseModel

from electrostock.models.enums import Category
from electrostock.schemas.item import StockItem


class CategoryStock(BaseModel):
    category: Category
    stock: int


class DashboardStats(BaseModel):
    total_items: int
    total_units: int
    total_value: float
    low_stock_threshold: int
    low_stock_count: int
    low_stock_items: list[StockItem]
    by_category: list[CategoryStock]


class SpecField(BaseModel):
    key: str
    label: str
    suggestions: list[str] = []
    free_text: bool = False
    primary: bool = False


class CategorySchemaOut(BaseModel):
    category: Category
    primary_spec_key: str | None
    suggested_values: list[str]
    fields: list[SpecField]
