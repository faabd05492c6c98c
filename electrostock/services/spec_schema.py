"""Category -> specification schema.

Each category names the attribute that tells one variant from another (screen
size for a TV, tonnage for an AC, ...) along with the values the entry form
suggests for it.
"""
from electrostock.models.enums import Category
from electrostock.schemas.report import SpecField

SEMI_AUTOMATIC = "Semi-Automatic"
FULLY_AUTOMATIC = "Fully-Automatic"

CATEGORY_SPECS: dict[Category, list[SpecField]] = {
    Category.TV: [
        SpecField(key="screenSize", label="Screen Size", primary=True,
                  suggestions=['32"', '43"', '50"', '55"', '65"']),
    ],
    Category.AC: [
        SpecField(key="tonnage", label="Tonnage", primary=True,
                  suggestions=["0.8 Ton", "1.0 Ton", "1.5 Ton", "2.0 Ton"]),
    ],
    Category.FRIDGE: [
        SpecField(key="capacity", label="Capacity (L)", primary=True, free_text=True,
                  suggestions=["190 L", "253 L", "300 L", "500 L"]),
    ],
    Category.WASHING_MACHINE: [
        SpecField(key="type", label="Machine Type", primary=True,
                  suggestions=[SEMI_AUTOMATIC, FULLY_AUTOMATIC]),
        # Only offered for fully automatic machines
        SpecField(key="loadType", label="Load Type", suggestions=["Top Load", "Front Load"]),
        SpecField(key="capacity", label="Capacity (Kg)", free_text=True),
    ],
    Category.INVERTER: [
        SpecField(key="capacity", label="Capacity", primary=True, free_text=True,
                  suggestions=["900 VA", "1100 VA", "1500 VA"]),
    ],
    Category.BATTERY: [
        SpecField(key="capacity", label="Capacity", primary=True, free_text=True,
                  suggestions=["150 Ah", "200 Ah", "220 Ah"]),
    ],
    Category.TRANSFORMER: [
        SpecField(key="capacity", label="Capacity", primary=True, free_text=True,
                  suggestions=["4 KVA (1.5 Ton AC)", "5 KVA (2 Ton AC)", "Mainline"]),
    ],
}

# Spec keys included in a product label, in display order
SUMMARY_KEYS = ["tonnage", "capacity", "screenSize", "type", "loadType"]


def spec_fields(category: Category) -> list[SpecField]:
    return list(CATEGORY_SPECS.get(Category(category), []))


def primary_spec_key(category: Category) -> str | None:
    for field in CATEGORY_SPECS.get(Category(category), []):
        if field.primary:
            return field.key
    return None


def suggested_values(category: Category) -> tuple[str, ...]:
    for field in CATEGORY_SPECS.get(Category(category), []):
        if field.primary:
            return tuple(field.suggestions)
    return ()


def normalize_specs(category: Category, specs: dict[str, str] | None) -> dict[str, str]:
    """Trim values and drop empty ones so blank form fields don't split identities."""
    cleaned = {}
    for key, value in (specs or {}).items():
        value = str(value).strip()
        if value:
            cleaned[key] = value
    if Category(category) == Category.WASHING_MACHINE and cleaned.get("type") == SEMI_AUTOMATIC:
        cleaned.pop("loadType", None)
    return cleaned


def product_label(company: str, name: str, specs: dict[str, str] | None) -> str:
    """Brand, model and headline specs in one line, e.g. 'Voltas Split 1.5 Ton'."""
    specs = specs or {}
    parts = [company, name] + [specs[k] for k in SUMMARY_KEYS if specs.get(k)]
    return " ".join(p for p in parts if p)
