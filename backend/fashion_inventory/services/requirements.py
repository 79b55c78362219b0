"""Material requirements planning.

Turns a production plan (which products, how many units of each) into the
list of materials to buy. Every bill-of-materials line of a planned product
contributes `quantity_per_unit * planned_quantity` to its material's total.
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Protocol, Sequence

from fashion_inventory.core.config import settings
from fashion_inventory.core.exceptions import (
    InvalidRequirementInput,
    MixedUnitRequirement,
    RequirementComputationFailed,
)

logger = logging.getLogger(__name__)

MIXED_UNIT_WARN = "warn"
MIXED_UNIT_ERROR = "error"


class Catalog(Protocol):
    """Resolves bill-of-materials lines for a batch of products.

    Each returned association exposes `product_id`, `material_id`,
    `material` (the full record), `quantity` (per product unit) and `unit`.
    """

    async def find_associations_for_products(self, product_ids: set[str]) -> Sequence[Any]:
        ...


@dataclass
class RequirementEntry:
    """One line of a production plan."""

    product_id: str
    quantity: float


@dataclass
class MaterialRequirement:
    """Total amount of one material needed for a production plan.

    Attributes:
        material: The material record, for display
        total_quantity: Sum over every contributing BOM line
        unit: Unit of the first BOM line seen for this material
        mixed_units: True when other BOM lines used a different unit; their
            raw quantities are still summed into total_quantity
    """

    material: Any
    total_quantity: float
    unit: Any
    mixed_units: bool = False

    @property
    def material_id(self) -> str:
        return self.material.id


def _coerce_quantity(value: Any, index: int, raw: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise InvalidRequirementInput(
            f"Entry {index}: quantity must be a number, got {value!r}", index, raw
        )
    if isinstance(value, (int, float, Decimal)):
        try:
            quantity = float(value)
        except OverflowError:
            raise InvalidRequirementInput(
                f"Entry {index}: quantity must be finite, got {value!r}", index, raw
            ) from None
    elif isinstance(value, str):
        try:
            quantity = float(value.strip())
        except ValueError:
            raise InvalidRequirementInput(
                f"Entry {index}: quantity must be a number, got {value!r}", index, raw
            ) from None
    else:
        raise InvalidRequirementInput(
            f"Entry {index}: quantity must be a number, got {value!r}", index, raw
        )

    if not math.isfinite(quantity):
        raise InvalidRequirementInput(
            f"Entry {index}: quantity must be finite, got {value!r}", index, raw
        )
    if quantity < 0:
        raise InvalidRequirementInput(
            f"Entry {index}: quantity must not be negative, got {value!r}", index, raw
        )
    return quantity


def normalize_entry(raw: Any, index: int) -> RequirementEntry:
    """Validate one plan line given as a RequirementEntry, mapping or object.

    Mappings may use either `productId` or `product_id`.

    Raises:
        InvalidRequirementInput: If the product id is missing or the quantity
            is not a non-negative finite number
    """
    if isinstance(raw, Mapping):
        product_id = raw.get("productId", raw.get("product_id"))
        quantity = raw.get("quantity")
    else:
        product_id = getattr(raw, "product_id", None)
        quantity = getattr(raw, "quantity", None)

    if product_id is None or (isinstance(product_id, str) and not product_id.strip()):
        raise InvalidRequirementInput(f"Entry {index}: productId is required", index, raw)

    return RequirementEntry(
        product_id=str(product_id),
        quantity=_coerce_quantity(quantity, index, raw),
    )


class MaterialRequirementsAggregator:
    """Sums material requirements across a production plan.

    Stateless: an instance can serve concurrent calls. The only I/O is the
    single batched catalog lookup per call.
    """

    def __init__(self, catalog: Catalog, mixed_unit_policy: str | None = None):
        """Initialize the aggregator.

        Args:
            catalog: Source of bill-of-materials lines
            mixed_unit_policy: "warn" or "error"; defaults to
                settings.MIXED_UNIT_POLICY
        """
        policy = mixed_unit_policy or settings.MIXED_UNIT_POLICY
        if policy not in (MIXED_UNIT_WARN, MIXED_UNIT_ERROR):
            raise ValueError(f"Unknown mixed unit policy: {policy}")
        self.catalog = catalog
        self.mixed_unit_policy = policy

    async def compute_requirements(self, request: Iterable[Any]) -> list[MaterialRequirement]:
        """Compute the materials needed for a production plan.

        Entries naming the same product are applied independently and add
        up. Products that are unknown or have no BOM lines contribute
        nothing. Zero contributions are skipped, so a material reached only
        through zero quantities is left out of the result.

        Args:
            request: Plan lines; RequirementEntry objects or mappings with
                productId and quantity

        Returns:
            One MaterialRequirement per material, in first-seen order

        Raises:
            InvalidRequirementInput: If any entry is malformed (checked
                before the catalog is queried), or if mixed units are found
                under the "error" policy
            RequirementComputationFailed: If the catalog lookup fails
        """
        entries = [normalize_entry(raw, index) for index, raw in enumerate(request)]
        if not entries:
            return []

        product_ids = {entry.product_id for entry in entries}
        logger.debug(
            f"Computing material requirements for {len(entries)} entries "
            f"across {len(product_ids)} products"
        )

        try:
            associations = await self.catalog.find_associations_for_products(product_ids)
        except Exception as e:
            logger.exception("Catalog lookup failed while computing material requirements")
            raise RequirementComputationFailed(
                "Failed to calculate material requirements"
            ) from e

        by_product: dict[str, list[Any]] = {}
        for association in associations:
            by_product.setdefault(association.product_id, []).append(association)

        accumulator: dict[str, MaterialRequirement] = {}
        for entry in entries:
            for association in by_product.get(entry.product_id, ()):
                contribution = association.quantity * entry.quantity
                if contribution == 0:
                    continue

                requirement = accumulator.get(association.material_id)
                if requirement is None:
                    requirement = MaterialRequirement(
                        material=association.material,
                        total_quantity=0.0,
                        unit=association.unit,
                    )
                    accumulator[association.material_id] = requirement
                elif association.unit != requirement.unit:
                    self._flag_mixed_units(requirement, association)

                requirement.total_quantity += contribution

        return list(accumulator.values())

    def _flag_mixed_units(self, requirement: MaterialRequirement, association: Any) -> None:
        units = [_unit_name(requirement.unit), _unit_name(association.unit)]
        if self.mixed_unit_policy == MIXED_UNIT_ERROR:
            raise MixedUnitRequirement(association.material_id, units)

        if not requirement.mixed_units:
            logger.warning(
                f"Material {association.material_id} is required in mixed units "
                f"({', '.join(units)}); reporting {units[0]} without conversion"
            )
        requirement.mixed_units = True


def _unit_name(unit: Any) -> str:
    return getattr(unit, "value", str(unit))
