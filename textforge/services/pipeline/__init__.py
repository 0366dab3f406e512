"""Pipeline execution, risk analysis and pipeline documents."""

from textforge.services.pipeline.analyzer import PipelineRiskAnalyzer, PipelineWarning, analyze
from textforge.services.pipeline.document import (
    compare_texts,
    dumps_pipeline,
    export_pipeline,
    import_pipeline,
    list_presets,
    load_preset,
)
from textforge.services.pipeline.executor import (
    PipelineExecution,
    PipelineResult,
    PipelineStep,
    execute,
)

__all__ = [
    "PipelineRiskAnalyzer",
    "PipelineWarning",
    "analyze",
    "compare_texts",
    "dumps_pipeline",
    "export_pipeline",
    "import_pipeline",
    "list_presets",
    "load_preset",
    "PipelineExecution",
    "PipelineResult",
    "PipelineStep",
    "execute",
]
