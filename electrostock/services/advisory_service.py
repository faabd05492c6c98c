"""Client for the generative advisory service (Gemini REST API).

Nothing here raises to the caller: every failure is turned into a fixed,
human-readable fallback string. Calls are async and take a snapshot of the
catalog up front, so they never hold the inventory lock while waiting.
"""
import json
import logging

import httpx

from electrostock.config import settings
from electrostock.errors import AdvisoryServiceUnavailable
from electrostock.schemas.advisory import AdvisoryOut
from electrostock.schemas.item import StockItem

logger = logging.getLogger(__name__)

SUMMARY_NO_KEY = "API Key missing. Please check your settings."
SUMMARY_FAILED = "Failed to analyze inventory. Please try again later."
SUMMARY_EMPTY = "No insights generated."
CHAT_NO_KEY = "API Key missing."
CHAT_FAILED = "Sorry, I'm having trouble processing that right now."
CHAT_EMPTY = "I couldn't understand that."
DESCRIPTION_NO_KEY = "AI generation unavailable (Missing API Key)."
DESCRIPTION_FAILED = "Could not generate description at this time."


def project_items(items: list[StockItem]) -> list[dict]:
    """Reduced view sent to the model: no specs, no ledger."""
    return [
        {
            "name": i.name,
            "company": i.company.value,
            "category": i.category.value,
            "stock": i.stock,
            "price": i.price,
        }
        for i in items
    ]


def _summary_prompt(items: list[StockItem]) -> str:
    return (
        "Analyze the following electronics inventory list and provide 3 key actionable business insights.\n"
        "Focus on:\n"
        "1. Brand dominance (which companies have most stock/value).\n"
        "2. Category stock levels (critical low stock alerts).\n"
        "3. Missing opportunities (categories or brands underrepresented).\n\n"
        f"Inventory Data:\n{json.dumps(project_items(items))}\n\n"
        "Keep the response professional, concise, and formatted in Markdown bullet points. "
        "Use '₹' for currency."
    )


def _chat_prompt(query: str, items: list[StockItem]) -> str:
    return (
        "You are an intelligent inventory assistant for an electronics shop.\n"
        f"Here is the current inventory data: {json.dumps(project_items(items))}\n\n"
        f'User Query: "{query}"\n\n'
        "Answer the user's query based strictly on the provided data. Be helpful and brief.\n"
        "Use '₹' for currency."
    )


def _description_prompt(name: str, category: str) -> str:
    return (
        "I am adding a product to my electronics shop inventory.\n"
        f'Product Details: "{name}"\n'
        f'Category: "{category}"\n\n'
        "Please generate a concise, attractive 2-sentence marketing description suitable for an "
        "inventory app or e-commerce listing.\n\n"
        "Return in JSON format."
    )


class AdvisoryClient:
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = settings.GEMINI_API_KEY if api_key is None else api_key
        self.model = model or settings.GEMINI_MODEL
        self.base_url = (base_url or settings.GEMINI_API_URL).rstrip("/")
        self.timeout = timeout or settings.ADVISORY_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str, response_schema: dict | None = None) -> str:
        """Send one prompt and return the model's text. Raises AdvisoryServiceUnavailable."""
        if not self.configured:
            raise AdvisoryServiceUnavailable("GEMINI_API_KEY is not set")

        body: dict = {"contents": [{"parts": [{"text": prompt}]}]}
        if response_schema:
            body["generationConfig"] = {
                "responseMimeType": "application/json",
                "responseSchema": response_schema,
            }
        url = f"{self.base_url}/models/{self.model}:generateContent"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(url, json=body, headers={"x-goog-api-key": self.api_key})
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise AdvisoryServiceUnavailable(f"Advisory request failed: {e}") from e

        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            raise AdvisoryServiceUnavailable(f"Malformed advisory response: {e}") from e
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict))

    async def summarize(self, items: list[StockItem]) -> AdvisoryOut:
        if not self.configured:
            return AdvisoryOut(text=SUMMARY_NO_KEY, fallback=True)
        try:
            text = await self.generate(_summary_prompt(items))
        except AdvisoryServiceUnavailable as e:
            logger.error("Analysis error: %s", e)
            return AdvisoryOut(text=SUMMARY_FAILED, fallback=True)
        if not text:
            return AdvisoryOut(text=SUMMARY_EMPTY, fallback=True)
        return AdvisoryOut(text=text)

    async def answer(self, query: str, items: list[StockItem]) -> AdvisoryOut:
        if not self.configured:
            return AdvisoryOut(text=CHAT_NO_KEY, fallback=True)
        try:
            text = await self.generate(_chat_prompt(query, items))
        except AdvisoryServiceUnavailable as e:
            logger.error("Chat error: %s", e)
            return AdvisoryOut(text=CHAT_FAILED, fallback=True)
        if not text:
            return AdvisoryOut(text=CHAT_EMPTY, fallback=True)
        return AdvisoryOut(text=text)

    async def describe_product(self, name: str, category: str) -> AdvisoryOut:
        if not self.configured:
            logger.warning("GEMINI_API_KEY is missing, skipping description generation")
            return AdvisoryOut(text=DESCRIPTION_NO_KEY, fallback=True)
        schema = {
            "type": "OBJECT",
            "properties": {"description": {"type": "STRING"}},
            "required": ["description"],
        }
        try:
            raw = await self.generate(_description_prompt(name, category), response_schema=schema)
            if not raw:
                raise AdvisoryServiceUnavailable("No response from AI")
            description = json.loads(raw)["description"]
        except (AdvisoryServiceUnavailable, ValueError, KeyError, TypeError) as e:
            logger.error("AI generation error: %s", e)
            return AdvisoryOut(text=DESCRIPTION_FAILED, fallback=True)
        return AdvisoryOut(text=str(description))
