from fastapi import APIRouter

from textforge.dependencies import ContextDep, RegistryDep, SettingsDep, check_input_length
from textforge.models.schemas import (
    ConfidenceItem,
    ConfidenceResponse,
    DetectRequest,
    DetectResponse,
    ErrorResponse,
    LayersResponse,
    TransformationInfo,
)
from textforge.services.detection import FormatDetector

router = APIRouter()


@router.post(
    "",
    response_model=DetectResponse,
    responses={400: {"model": ErrorResponse, "description": "Input too long"}},
    summary="Detect possible encodings",
)
async def detect_encodings(
    request: DetectRequest,
    settings: SettingsDep,
    context: ContextDep,
    registry: RegistryDep,
) -> DetectResponse:
    check_input_length(request.input, settings)
    candidates = FormatDetector(registry, context).detect(request.input)
    return DetectResponse(candidates=[TransformationInfo.model_validate(d) for d in candidates])


@router.post(
    "/confidence",
    response_model=ConfidenceResponse,
    responses={400: {"model": ErrorResponse, "description": "Input too long"}},
    summary="Detect encodings with confidence scores",
)
async def detect_with_confidence(
    request: DetectRequest,
    settings: SettingsDep,
    context: ContextDep,
    registry: RegistryDep,
) -> ConfidenceResponse:
    check_input_length(request.input, settings)
    results = FormatDetector(registry, context).detect_with_confidence(request.input)
    return ConfidenceResponse(
        results=[
            ConfidenceItem(
                transformation=TransformationInfo.model_validate(r.transformation),
                confidence=r.confidence,
                reason=r.reason,
            )
            for r in results
        ]
    )


@router.post(
    "/layers",
    response_model=LayersResponse,
    responses={400: {"model": ErrorResponse, "description": "Input too long"}},
    summary="Peel nested encodings",
    description="Repeatedly decode with the first detected encoding and report each layer.",
)
async def detect_layers(
    request: DetectRequest,
    settings: SettingsDep,
    context: ContextDep,
    registry: RegistryDep,
) -> LayersResponse:
    check_input_length(request.input, settings)
    max_depth = request.max_depth or settings.multilayer_max_depth
    layers = FormatDetector(registry, context).detect_multi_layer(request.input, max_depth)
    return LayersResponse(layers=layers)
