from urllib.parse import quote

from electrostock.schemas.item import ShareLink, StockItem

WHATSAPP_URL = "https://wa.me/?text="


def share_text(item: StockItem) -> str:
    specs = ", ".join(f"{k}: {v}" for k, v in item.specifications.items())
    return (
        "*ElectroStock Item Check* ⚡\n\n"
        f"*Product:* {item.company.value} {item.name}\n"
        f"*Category:* {item.category.value}\n"
        f"*Price:* ₹{item.price:,.0f}\n"
        f"*Specs:* {specs}\n"
        f"*Description:* {item.description}\n\n"
        "_Visit us for more details!_"
    )


def share_link(item: StockItem) -> ShareLink:
    text = share_text(item)
    return ShareLink(text=text, url=WHATSAPP_URL + quote(text, safe=""))
