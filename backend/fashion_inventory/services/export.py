"""CSV export of material requirements."""

import csv
import io
from typing import Iterable

from fashion_inventory.services.requirements import MaterialRequirement

REQUIREMENTS_CSV_HEADER = ["Type", "Color", "Color Code", "Brand", "Required Quantity", "Unit"]
REQUIREMENTS_CSV_FILENAME = "required_materials.csv"


def requirements_to_csv(requirements: Iterable[MaterialRequirement]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(REQUIREMENTS_CSV_HEADER)
    for requirement in requirements:
        material = requirement.material
        writer.writerow([
            material.type,
            material.color,
            material.color_code,
            material.brand,
            f"{requirement.total_quantity:.2f}",
            getattr(requirement.unit, "value", requirement.unit),
        ])
    return buffer.getvalue()
