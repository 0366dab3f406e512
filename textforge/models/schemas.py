from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class Reversibility(str, Enum):
    """Whether the original input can be recovered from a transformation's output."""

    REVERSIBLE = "reversible"
    PARTIAL = "partial"
    IRREVERSIBLE = "irreversible"


class RiskLevel(str, Enum):
    """How much a transformation is expected to damage or expose data."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class StepMode(str, Enum):
    """Direction a pipeline step is applied in."""

    ENCODE = "encode"
    DECODE = "decode"


class TransformMode(str, Enum):
    """Registry listing modes."""

    ENCODE = "encode"
    DECODE = "decode"
    DETECT = "detect"


class WarningType(str, Enum):
    """Pipeline risk warning categories."""

    IRREVERSIBLE = "irreversible"
    DATA_LOSS = "data-loss"
    CHAIN_RISK = "chain-risk"


# ============================================================================
# Registry Schemas
# ============================================================================


class TransformationInfo(BaseModel):
    """Public metadata of a catalog entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category: str
    description: str
    can_encode: bool
    can_decode: bool
    reversibility: Reversibility
    risk_level: RiskLevel


class TransformationListResponse(BaseModel):
    """Response schema for the catalog listing."""

    mode: TransformMode
    total: int
    transformations: list[TransformationInfo]


# ============================================================================
# Pipeline Schemas
# ============================================================================


class PipelineStepSchema(BaseModel):
    """A step as sent by a client."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    transformation_id: str = Field(alias="transformationId")
    mode: StepMode = StepMode.ENCODE
    options: dict[str, Any] | None = None


class PipelineResultSchema(BaseModel):
    """Per-step execution result."""

    model_config = ConfigDict(from_attributes=True)

    step_id: str
    input: str
    output: str
    success: bool
    error: str | None = None


class PipelineWarningSchema(BaseModel):
    """Risk analyzer warning."""

    model_config = ConfigDict(from_attributes=True)

    type: WarningType
    message: str
    step_ids: list[str]


class ExecuteRequest(BaseModel):
    """Request schema for /pipeline/execute."""

    input: str
    steps: list[PipelineStepSchema] = Field(default_factory=list)


class ExecuteResponse(BaseModel):
    """Response schema for /pipeline/execute."""

    results: list[PipelineResultSchema]
    final_output: str
    warnings: list[PipelineWarningSchema]


class AnalyzeRequest(BaseModel):
    """Request schema for /pipeline/analyze."""

    steps: list[PipelineStepSchema] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    """Response schema for /pipeline/analyze."""

    warnings: list[PipelineWarningSchema]


class ExportRequest(BaseModel):
    """Request schema for /pipeline/export."""

    name: str = "pipeline"
    steps: list[PipelineStepSchema] = Field(default_factory=list)


class ImportResponse(BaseModel):
    """Steps rebuilt from a pipeline document, with fresh ids."""

    steps: list[PipelineStepSchema]


class PresetResponse(BaseModel):
    """A built-in pipeline preset."""

    id: str
    name: str
    description: str
    steps: list[PipelineStepSchema]


# ============================================================================
# Detection Schemas
# ============================================================================


class DetectRequest(BaseModel):
    """Request schema for the detection endpoints."""

    input: str
    max_depth: int | None = Field(default=None, ge=1, le=10)


class DetectResponse(BaseModel):
    """Plain candidate list."""

    candidates: list[TransformationInfo]


class ConfidenceItem(BaseModel):
    """A candidate with a 0-100 confidence and a reason."""

    transformation: TransformationInfo
    confidence: int = Field(ge=0, le=100)
    reason: str


class ConfidenceResponse(BaseModel):
    """Confidence-scored candidates, highest first."""

    results: list[ConfidenceItem]


class LayersResponse(BaseModel):
    """Multi-layer decode trace."""

    layers: list[str]


# ============================================================================
# Generation Schemas
# ============================================================================


class GeneratedValue(BaseModel):
    """A securely generated value."""

    kind: str
    value: str


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    detail: str | None = None
    code: str | None = None
