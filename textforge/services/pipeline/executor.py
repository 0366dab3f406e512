"""
Pipeline execution.

Steps run strictly in order, each receiving the value produced by the last
step that succeeded. A failing step is recorded and skipped; the pipeline
itself never aborts.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable

from textforge.core.exceptions import TransformationNotFoundError, UnsupportedModeError
from textforge.models.schemas import StepMode
from textforge.services.context import TransformContext
from textforge.services.engines.registry import TransformationRegistry, get_registry

logger = logging.getLogger(__name__)


def new_step_id() -> str:
    return str(uuid.uuid4())


@dataclass
class PipelineStep:
    """One application of a transformation within a pipeline."""

    transformation_id: str
    mode: StepMode = StepMode.ENCODE
    options: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=new_step_id)


@dataclass
class PipelineResult:
    """Outcome of a single executed step."""

    step_id: str
    input: str
    output: str
    success: bool
    error: str | None = None


@dataclass
class PipelineExecution:
    results: list[PipelineResult]
    final_output: str


def execute(
    value: str,
    steps: Iterable[PipelineStep],
    context: TransformContext | None = None,
    registry: TransformationRegistry | None = None,
) -> PipelineExecution:
    """
    Run ``steps`` against ``value``.

    Args:
        value: Initial input text
        steps: Ordered pipeline steps
        context: Randomness and cache holder; a fresh one is used when omitted
        registry: Catalog to resolve ids against; defaults to the built-in one

    Returns:
        Per-step results and the last successfully produced value
    """
    context = context or TransformContext()
    registry = registry or get_registry()
    results: list[PipelineResult] = []
    current = value

    for step in steps:
        try:
            descriptor = registry.get(step.transformation_id)
            mode = StepMode(step.mode)
            func = descriptor.function_for(mode)
            if func is None:
                raise UnsupportedModeError(mode.value, descriptor.name)
            output = func(current, step.options or {}, context)
        except TransformationNotFoundError as exc:
            logger.warning("Step %s: unknown transformation %r", step.id, step.transformation_id)
            results.append(PipelineResult(step.id, current, current, False, exc.message))
            continue
        except Exception as exc:
            # Step failures are reported per step; the value does not advance.
            logger.warning("Step %s (%s) failed: %s", step.id, step.transformation_id, exc)
            results.append(PipelineResult(step.id, current, current, False, str(exc)))
            continue

        logger.debug("Step %s (%s %s) succeeded", step.id, step.transformation_id, mode.value)
        results.append(PipelineResult(step.id, current, output, True))
        current = output

    return PipelineExecution(results=results, final_output=current)
