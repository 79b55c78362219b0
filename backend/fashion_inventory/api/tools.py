"""Planning tools: materials needed for a production run."""

import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.api.deps import get_current_user
from fashion_inventory.core.database import get_db
from fashion_inventory.core.exceptions import (
    InvalidRequirementInput,
    RequirementComputationFailed,
)
from fashion_inventory.repositories.catalog_repository import CatalogRepository
from fashion_inventory.schemas.tools import CalculateMaterialsRequest, MaterialRequirementResponse
from fashion_inventory.services.export import REQUIREMENTS_CSV_FILENAME, requirements_to_csv
from fashion_inventory.services.requirements import (
    MaterialRequirement,
    MaterialRequirementsAggregator,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/tools",
    tags=["tools"],
    dependencies=[Depends(get_current_user)],
)


def get_aggregator(db: AsyncSession = Depends(get_db)) -> MaterialRequirementsAggregator:
    return MaterialRequirementsAggregator(CatalogRepository(db))


async def _compute(
    req: CalculateMaterialsRequest,
    aggregator: MaterialRequirementsAggregator,
) -> list[MaterialRequirement]:
    try:
        return await aggregator.compute_requirements(req.products)
    except InvalidRequirementInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RequirementComputationFailed as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/calculate-materials", response_model=list[MaterialRequirementResponse])
async def calculate_materials(
    req: CalculateMaterialsRequest,
    aggregator: MaterialRequirementsAggregator = Depends(get_aggregator),
):
    """Total material requirements for a list of (productId, quantity) lines.

    Lines naming the same product add up. Unknown products contribute
    nothing.
    """
    requirements = await _compute(req, aggregator)
    logger.info(
        f"Calculated {len(requirements)} material requirement(s) "
        f"for {len(req.products)} product line(s)"
    )
    return [MaterialRequirementResponse.model_validate(r) for r in requirements]


@router.post("/calculate-materials/csv", response_class=PlainTextResponse)
async def calculate_materials_csv(
    req: CalculateMaterialsRequest,
    aggregator: MaterialRequirementsAggregator = Depends(get_aggregator),
):
    """Same as calculate-materials, as a CSV download."""
    requirements = await _compute(req, aggregator)
    return PlainTextResponse(
        requirements_to_csv(requirements),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{REQUIREMENTS_CSV_FILENAME}"'},
    )
