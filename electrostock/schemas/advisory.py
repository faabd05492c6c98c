from pydantic import BaseModel

from electrostock.models.enums import Category, Company


class ChatRequest(BaseModel):
    query: str


class DescriptionRequest(BaseModel):
    name: str
    category: Category
    company: Company | None = None
    specifications: dict[str, str] = {}


class AdvisoryOut(BaseModel):
    text: str
    fallback: bool = False
