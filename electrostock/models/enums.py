from enum import Enum as PyEnum


class Company(str, PyEnum):
    SAMSUNG = "Samsung"
    VOLTAS = "Voltas"
    WHIRLPOOL = "Whirlpool"
    LG = "LG"
    DAIKIN = "Daikin"
    BAJAJ = "Bajaj"
    USHA = "Usha"
    SONY = "Sony"
    KENT = "Kent"
    PHILIPS = "Philips"
    LUMINOUS = "Luminous"
    OTHER = "Other"


class Category(str, PyEnum):
    # Declaration order is the natural order used by category rollups
    TV = "TV"
    FRIDGE = "Fridge"
    WASHING_MACHINE = "Washing Machine"
    AC = "AC"
    INVERTER = "Inverter"
    BATTERY = "Battery"
    WATER_FILTER = "Water Filter"
    JUICER_MIXER = "Juicer Mixer"
    TRANSFORMER = "Transformer"
    MICROWAVE = "Microwave Oven"
    WATER_HEATER = "Water Heater"
    OTHER = "Other"


class Direction(str, PyEnum):
    IN = "IN"  # stock received
    OUT = "OUT"  # stock sold / dispatched
