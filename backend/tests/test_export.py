"""Tests for the CSV export of material requirements."""

from types import SimpleNamespace

from fashion_inventory.models.enums import MeasurementUnit
from fashion_inventory.services.export import REQUIREMENTS_CSV_HEADER, requirements_to_csv
from fashion_inventory.services.requirements import MaterialRequirement


def test_header_only_for_empty_result():
    assert requirements_to_csv([]) == ",".join(REQUIREMENTS_CSV_HEADER) + "\n"


def test_rows_are_formatted():
    material = SimpleNamespace(
        id="M1", type="Merino Yarn", color="Navy, dark", color_code="101", brand="Drops"
    )
    csv_text = requirements_to_csv([
        MaterialRequirement(material=material, total_quantity=240, unit=MeasurementUnit.GRAM),
    ])

    lines = csv_text.splitlines()
    assert lines[0] == "Type,Color,Color Code,Brand,Required Quantity,Unit"
    assert lines[1] == 'Merino Yarn,"Navy, dark",101,Drops,240.00,GRAM'
