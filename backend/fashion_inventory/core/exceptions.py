"""Domain exceptions raised by repositories and services.

Routers translate these into HTTP responses; nothing below the API layer
raises HTTPException.
"""

from typing import Any


class InventoryError(Exception):
    """Base class for domain errors."""


class InvalidRequirementInput(InventoryError):
    """A material planning request entry is malformed.

    Attributes:
        entry_index: Position of the offending entry in the request, if known
        entry: The offending entry as received
    """

    def __init__(self, message: str, entry_index: int | None = None, entry: Any = None):
        super().__init__(message)
        self.entry_index = entry_index
        self.entry = entry


class MixedUnitRequirement(InvalidRequirementInput):
    """One material is required in different units by different products."""

    def __init__(self, material_id: str, units: list[str]):
        super().__init__(
            f"Material {material_id} is required in mixed units: {', '.join(units)}"
        )
        self.material_id = material_id
        self.units = units


class RequirementComputationFailed(InventoryError):
    """The catalog lookup behind a material planning request failed."""


class DuplicateRecordError(InventoryError):
    """A unique business key (SKU, email, order number) is already taken."""


class UnknownReferenceError(InventoryError):
    """A submitted record points at a material or product that does not exist."""


class RecordInUseError(InventoryError):
    """A record cannot be deleted while other records depend on it."""


class MaterialInUseError(RecordInUseError):
    pass


class ProductInUseError(RecordInUseError):
    pass


class InventoryInUseError(RecordInUseError):
    pass
