from fastapi import APIRouter, HTTPException, status

from textforge.dependencies import RegistryDep
from textforge.models.schemas import (
    ErrorResponse,
    TransformationInfo,
    TransformationListResponse,
    TransformMode,
)

router = APIRouter()


@router.get(
    "",
    response_model=TransformationListResponse,
    summary="List transformations",
    description="List catalog entries usable in a mode, in catalog order. `detect` lists everything.",
)
async def list_transformations(
    registry: RegistryDep,
    mode: TransformMode = TransformMode.DETECT,
) -> TransformationListResponse:
    descriptors = registry.list_by_capability(mode)
    return TransformationListResponse(
        mode=mode,
        total=len(descriptors),
        transformations=[TransformationInfo.model_validate(d) for d in descriptors],
    )


@router.get(
    "/{transformation_id}",
    response_model=TransformationInfo,
    responses={404: {"model": ErrorResponse, "description": "Unknown transformation"}},
    summary="Get a transformation",
)
async def get_transformation(
    transformation_id: str,
    registry: RegistryDep,
) -> TransformationInfo:
    descriptor = registry.lookup(transformation_id)
    if descriptor is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Transformation '{transformation_id}' not found",
        )
    return TransformationInfo.model_validate(descriptor)
