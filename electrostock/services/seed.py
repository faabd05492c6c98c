"""Demo catalog loaded the first time the service starts with no saved state."""
from datetime import datetime, timezone

from electrostock.models.enums import Category, Company
from electrostock.schemas.item import StockItem

_SEEDED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)

_ROWS = [
    ("1", "Crystal 4K UHD", Company.SAMSUNG, Category.TV, {"screenSize": '43"'}, 32990, 8,
     "Crisp 4K picture with PurColor and a slim bezel-less design."),
    ("2", "Bravia X75L", Company.SONY, Category.TV, {"screenSize": '55"'}, 61990, 3,
     "Google TV with 4K HDR processing and Dolby Audio."),
    ("3", "Frost Free Double Door", Company.LG, Category.FRIDGE, {"capacity": "253 L"}, 27490, 6,
     "Smart inverter compressor with convertible freezer."),
    ("4", "Vitamagic Pro", Company.WHIRLPOOL, Category.FRIDGE, {"capacity": "190 L"}, 16990, 2,
     "Single door refrigerator with stabilizer-free operation."),
    ("5", "Ace Wash", Company.WHIRLPOOL, Category.WASHING_MACHINE,
     {"type": "Fully-Automatic", "loadType": "Top Load", "capacity": "7 Kg"}, 18490, 4,
     "Top load washer with ZPF technology for fast filling."),
    ("6", "Inverter Split", Company.VOLTAS, Category.AC, {"tonnage": "1.5 Ton"}, 38990, 5,
     "Adjustable cooling inverter AC with copper condenser."),
    ("7", "JTKM50 Split", Company.DAIKIN, Category.AC, {"tonnage": "1.0 Ton"}, 35490, 1,
     "Energy efficient split AC with PM 2.5 filter."),
    ("8", "Zelio+ 1100", Company.LUMINOUS, Category.INVERTER, {"capacity": "1100 VA"}, 7990, 7,
     "Pure sine wave home inverter with LCD display."),
    ("9", "Inverlast IL18039", Company.LUMINOUS, Category.BATTERY, {"capacity": "150 Ah"}, 13490, 9,
     "Tall tubular inverter battery with long backup."),
    ("10", "Grand Plus RO", Company.KENT, Category.WATER_FILTER, {}, 17500, 3,
     "RO + UV + UF purifier with TDS controller."),
    ("11", "Rex 500W", Company.BAJAJ, Category.JUICER_MIXER, {}, 2899, 12,
     "Three-jar mixer grinder with overload protection."),
    ("12", "Stabilizer VGSD", Company.VOLTAS, Category.TRANSFORMER, {"capacity": "4 KVA (1.5 Ton AC)"}, 3290, 4,
     "Voltage stabilizer sized for a 1.5 ton air conditioner."),
]


def seed_items() -> list[StockItem]:
    return [
        StockItem(
            id=item_id,
            name=name,
            company=company,
            category=category,
            specifications=specs,
            price=price,
            stock=stock,
            description=description,
            last_updated=_SEEDED_AT,
        )
        for item_id, name, company, category, specs, price, stock, description in _ROWS
    ]
