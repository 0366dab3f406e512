"""
Pipeline description documents, built-in presets and text comparison.

A document is ``{name, version, exportedAt, steps}``; each step is
``{transformationId, mode, options}``. Documents carry no step identity,
so every import or preset load assigns fresh ids.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from textforge.core.exceptions import PipelineFormatError
from textforge.models.schemas import StepMode
from textforge.services.pipeline.executor import PipelineStep

logger = logging.getLogger(__name__)

DOCUMENT_VERSION = "1.0"


def export_pipeline(steps: Iterable[PipelineStep], name: str = "pipeline") -> dict[str, Any]:
    return {
        "name": name,
        "version": DOCUMENT_VERSION,
        "exportedAt": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "steps": [
            {
                "transformationId": step.transformation_id,
                "mode": StepMode(step.mode).value,
                "options": dict(step.options or {}),
            }
            for step in steps
        ],
    }


def dumps_pipeline(steps: Iterable[PipelineStep], name: str = "pipeline") -> str:
    return json.dumps(export_pipeline(steps, name), indent=2, ensure_ascii=False)


def _step_from_document(entry: Any) -> PipelineStep:
    if not isinstance(entry, Mapping) or not isinstance(entry.get("transformationId"), str):
        raise PipelineFormatError("Invalid pipeline file format", {"step": repr(entry)})
    try:
        mode = StepMode(entry.get("mode") or StepMode.ENCODE)
    except ValueError as exc:
        raise PipelineFormatError("Invalid pipeline file format", {"mode": entry.get("mode")}) from exc
    options = entry.get("options") or {}
    if not isinstance(options, Mapping):
        raise PipelineFormatError("Invalid pipeline file format", {"options": repr(options)})
    return PipelineStep(transformation_id=entry["transformationId"], mode=mode, options=dict(options))


def import_pipeline(source: str | bytes | Mapping[str, Any]) -> list[PipelineStep]:
    """
    Rebuild steps from a document or its JSON text.

    Args:
        source: Parsed document or JSON text

    Returns:
        Steps with freshly generated ids

    Raises:
        PipelineFormatError: If the JSON is unparsable or ``steps`` is not a list
    """
    if isinstance(source, (str, bytes)):
        try:
            source = json.loads(source)
        except ValueError as exc:
            raise PipelineFormatError("Failed to parse pipeline file") from exc

    if not isinstance(source, Mapping) or not isinstance(source.get("steps"), list):
        raise PipelineFormatError("Invalid pipeline file format")

    steps = [_step_from_document(entry) for entry in source["steps"]]
    logger.debug("Imported pipeline %r with %d steps", source.get("name"), len(steps))
    return steps


# ============================================================================
# Built-in presets
# ============================================================================


@dataclass(frozen=True)
class PipelinePreset:
    id: str
    name: str
    description: str
    steps: tuple[tuple[str, StepMode], ...]

    def build_steps(self) -> list[PipelineStep]:
        return [PipelineStep(transformation_id=tid, mode=mode) for tid, mode in self.steps]


BUILT_IN_PRESETS: tuple[PipelinePreset, ...] = (
    PipelinePreset(
        "builtin-base64-hex", "Base64 → Hex", "Encode to Base64, then to Hex",
        (("base64", StepMode.ENCODE), ("hex", StepMode.ENCODE)),
    ),
    PipelinePreset(
        "builtin-rot13-base64", "ROT13 → Base64", "Apply ROT13, then Base64 encode",
        (("rot13", StepMode.ENCODE), ("base64", StepMode.ENCODE)),
    ),
    PipelinePreset(
        "builtin-url-base64", "URL → Base64", "URL encode, then Base64",
        (("url", StepMode.ENCODE), ("base64", StepMode.ENCODE)),
    ),
    PipelinePreset(
        "builtin-reverse-base64", "Reverse → Base64 → Hex", "Triple encoding for obfuscation",
        (("reverse", StepMode.ENCODE), ("base64", StepMode.ENCODE), ("hex", StepMode.ENCODE)),
    ),
    PipelinePreset(
        "builtin-analysis", "Full Analysis", "Character stats + Frequency analysis",
        (("char-stats", StepMode.ENCODE),),
    ),
)
_PRESETS_BY_ID = {preset.id: preset for preset in BUILT_IN_PRESETS}


def list_presets() -> list[PipelinePreset]:
    return list(BUILT_IN_PRESETS)


def get_preset(preset_id: str) -> PipelinePreset | None:
    return _PRESETS_BY_ID.get(preset_id)


def load_preset(preset_id: str) -> list[PipelineStep] | None:
    """Steps of a built-in preset with fresh ids, or None for unknown ids."""
    preset = get_preset(preset_id)
    return preset.build_steps() if preset else None


# ============================================================================
# Comparison
# ============================================================================


@dataclass
class TextComparison:
    added: int
    removed: int
    changed: int
    input_length: int
    output_length: int
    ratio: float


def compare_texts(input_text: str, output_text: str) -> TextComparison:
    """Distinct-character and length differences between two texts."""
    before = set(input_text)
    after = set(output_text)
    return TextComparison(
        added=len(after - before),
        removed=len(before - after),
        changed=abs(len(input_text) - len(output_text)),
        input_length=len(input_text),
        output_length=len(output_text),
        ratio=len(output_text) / (len(input_text) or 1),
    )
