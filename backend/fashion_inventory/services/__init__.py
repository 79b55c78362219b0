from fashion_inventory.services.requirements import (
    Catalog,
    MaterialRequirement,
    MaterialRequirementsAggregator,
    RequirementEntry,
)
from fashion_inventory.services.export import requirements_to_csv

__all__ = [
    "Catalog",
    "MaterialRequirement",
    "MaterialRequirementsAggregator",
    "RequirementEntry",
    "requirements_to_csv",
]
