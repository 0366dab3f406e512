from typing import Any

from fastapi import APIRouter, HTTPException, status

from textforge.core.exceptions import PipelineFormatError
from textforge.dependencies import ContextDep, RegistryDep, SettingsDep, check_input_length
from textforge.models.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    ExecuteRequest,
    ExecuteResponse,
    ExportRequest,
    ImportResponse,
    PipelineResultSchema,
    PipelineStepSchema,
    PipelineWarningSchema,
    PresetResponse,
)
from textforge.services.pipeline import analyze, execute, export_pipeline, import_pipeline
from textforge.services.pipeline.document import PipelinePreset, get_preset, list_presets
from textforge.services.pipeline.executor import PipelineStep, new_step_id

router = APIRouter()


def _to_steps(schemas: list[PipelineStepSchema]) -> list[PipelineStep]:
    return [
        PipelineStep(
            transformation_id=s.transformation_id,
            mode=s.mode,
            options=s.options or {},
            id=s.id or new_step_id(),
        )
        for s in schemas
    ]


def _to_schemas(steps: list[PipelineStep]) -> list[PipelineStepSchema]:
    return [
        PipelineStepSchema(
            id=s.id,
            transformation_id=s.transformation_id,
            mode=s.mode,
            options=s.options,
        )
        for s in steps
    ]


def _check_step_count(steps: list[PipelineStepSchema], max_steps: int) -> None:
    if len(steps) > max_steps:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Pipeline exceeds maximum of {max_steps} steps",
        )


def _preset_response(preset: PipelinePreset) -> PresetResponse:
    return PresetResponse(
        id=preset.id,
        name=preset.name,
        description=preset.description,
        steps=_to_schemas(preset.build_steps()),
    )


@router.post(
    "/execute",
    response_model=ExecuteResponse,
    responses={400: {"model": ErrorResponse, "description": "Input or pipeline too large"}},
    summary="Execute a pipeline",
    description=(
        "Run the steps in order. Failing steps are reported per step and do not "
        "stop the pipeline. Warnings from the risk analyzer are included."
    ),
)
async def execute_pipeline(
    request: ExecuteRequest,
    settings: SettingsDep,
    context: ContextDep,
    registry: RegistryDep,
) -> ExecuteResponse:
    check_input_length(request.input, settings)
    _check_step_count(request.steps, settings.max_pipeline_steps)

    steps = _to_steps(request.steps)
    execution = execute(request.input, steps, context, registry)
    warnings = analyze(steps, registry)

    return ExecuteResponse(
        results=[PipelineResultSchema.model_validate(r) for r in execution.results],
        final_output=execution.final_output,
        warnings=[PipelineWarningSchema.model_validate(w) for w in warnings],
    )


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze pipeline risk",
)
async def analyze_pipeline(
    request: AnalyzeRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> AnalyzeResponse:
    _check_step_count(request.steps, settings.max_pipeline_steps)
    warnings = analyze(_to_steps(request.steps), registry)
    return AnalyzeResponse(warnings=[PipelineWarningSchema.model_validate(w) for w in warnings])


@router.post(
    "/export",
    response_model=dict[str, Any],
    summary="Export a pipeline document",
)
async def export_pipeline_document(request: ExportRequest) -> dict[str, Any]:
    return export_pipeline(_to_steps(request.steps), request.name)


@router.post(
    "/import",
    response_model=ImportResponse,
    responses={400: {"model": ErrorResponse, "description": "Malformed pipeline document"}},
    summary="Import a pipeline document",
    description="Rebuild steps from an exported document. Every step gets a fresh id.",
)
async def import_pipeline_document(document: dict[str, Any]) -> ImportResponse:
    try:
        steps = import_pipeline(document)
    except PipelineFormatError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    return ImportResponse(steps=_to_schemas(steps))


@router.get(
    "/presets",
    response_model=list[PresetResponse],
    summary="List built-in presets",
)
async def get_presets() -> list[PresetResponse]:
    return [_preset_response(preset) for preset in list_presets()]


@router.get(
    "/presets/{preset_id}",
    response_model=PresetResponse,
    responses={404: {"model": ErrorResponse, "description": "Unknown preset"}},
    summary="Load a built-in preset",
)
async def load_preset(preset_id: str) -> PresetResponse:
    preset = get_preset(preset_id)
    if preset is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Preset '{preset_id}' not found",
        )
    return _preset_response(preset)
