from enum import Enum


class MeasurementUnit(str, Enum):
    GRAM = "GRAM"
    KILOGRAM = "KILOGRAM"
    METER = "METER"
    YARD = "YARD"
    UNIT = "UNIT"


class Phase(str, Enum):
    SWATCH = "SWATCH"
    INITIAL_SAMPLE = "INITIAL_SAMPLE"
    FIT_SAMPLE = "FIT_SAMPLE"
    PRODUCTION_SAMPLE = "PRODUCTION_SAMPLE"
    PRODUCTION = "PRODUCTION"


class Role(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"
    PRODUCTION_MANAGER = "PRODUCTION_MANAGER"
    INVENTORY_MANAGER = "INVENTORY_MANAGER"


class ContactType(str, Enum):
    SUPPLIER = "SUPPLIER"
    MANUFACTURER = "MANUFACTURER"
    CUSTOMER = "CUSTOMER"
    OTHER = "OTHER"


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def open_statuses(cls) -> list["OrderStatus"]:
        return [cls.PENDING, cls.CONFIRMED, cls.SHIPPED]


class InventoryType(str, Enum):
    MATERIAL = "MATERIAL"
    PRODUCT = "PRODUCT"


class MovementType(str, Enum):
    RECEIVED = "RECEIVED"  # from orders
    CONSUMED = "CONSUMED"  # used in production
    ADJUSTED = "ADJUSTED"
    RETURNED = "RETURNED"  # to supplier
    SCRAPPED = "SCRAPPED"
