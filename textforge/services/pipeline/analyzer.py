from dataclasses import dataclass, field
from typing import ClassVar, Iterable

from textforge.models.schemas import Reversibility, StepMode, WarningType
from textforge.services.engines.registry import TransformationRegistry, get_registry
from textforge.services.pipeline.executor import PipelineStep


@dataclass
class PipelineWarning:
    type: WarningType
    message: str
    step_ids: list[str] = field(default_factory=list)


class PipelineRiskAnalyzer:
    """
    Static reversibility checks over a step list.

    Every rule is evaluated on each call and a pipeline can produce several
    warnings of the same type. Steps with unknown ids are ignored.
    """

    HASH_IDS: ClassVar[frozenset[str]] = frozenset({"hash", "sha256", "sha512", "md5"})
    ANALYSIS_IDS: ClassVar[frozenset[str]] = frozenset({"frequency", "char-stats", "qrcode"})
    BASE_ENCODING_CATEGORY: ClassVar[str] = "Base Encoding"

    IRREVERSIBLE_MESSAGE: ClassVar[str] = (
        "⚠️ IRREVERSIBLE: This pipeline contains one-way transformations "
        "(hashes/analysis). Original data CANNOT be recovered!"
    )
    PARTIAL_MESSAGE: ClassVar[str] = (
        "⚡ PARTIAL LOSS: Some transformations may lose information "
        "(e.g., case, formatting, special characters)."
    )
    HASH_MESSAGE: ClassVar[str] = (
        "🔒 HASH DETECTED: Hash functions (MD5, SHA-256, SHA-512) produce fixed-length "
        "output. This is ONE-WAY encryption - you cannot decrypt the result!"
    )
    ANALYSIS_MESSAGE: ClassVar[str] = (
        "📊 ANALYSIS MODE: Analysis tools show statistics/patterns, not encoded data. "
        "Output is informational only."
    )
    CHAIN_MESSAGE: ClassVar[str] = (
        "⚠️ CHAIN RISK: Encoding after hashing may produce unexpected results. "
        "Hash output is already hexadecimal."
    )
    MULTIPLE_MESSAGE: ClassVar[str] = (
        "🔗 MULTIPLE IRREVERSIBLE: Multiple one-way transformations detected. "
        "Each step further destroys the original data."
    )

    def __init__(self, registry: TransformationRegistry | None = None):
        self.registry = registry or get_registry()

    def analyze(self, steps: Iterable[PipelineStep]) -> list[PipelineWarning]:
        """
        Produce warnings for a pipeline.

        Args:
            steps: Ordered pipeline steps

        Returns:
            Warnings in rule order
        """
        steps = list(steps)
        irreversible: list[str] = []
        partial: list[str] = []
        hashes: list[str] = []
        analyses: list[str] = []
        has_encoding = False

        for step in steps:
            descriptor = self.registry.lookup(step.transformation_id)
            if descriptor is None:
                continue

            if descriptor.reversibility == Reversibility.IRREVERSIBLE:
                irreversible.append(step.id)
            elif descriptor.reversibility == Reversibility.PARTIAL:
                partial.append(step.id)

            if descriptor.id in self.HASH_IDS:
                hashes.append(step.id)
            if descriptor.id in self.ANALYSIS_IDS:
                analyses.append(step.id)
            if descriptor.category == self.BASE_ENCODING_CATEGORY and step.mode == StepMode.ENCODE:
                has_encoding = True

        warnings = []
        if irreversible:
            warnings.append(PipelineWarning(WarningType.IRREVERSIBLE, self.IRREVERSIBLE_MESSAGE, irreversible))
        if partial:
            warnings.append(PipelineWarning(WarningType.DATA_LOSS, self.PARTIAL_MESSAGE, partial))
        if hashes:
            warnings.append(PipelineWarning(WarningType.IRREVERSIBLE, self.HASH_MESSAGE, hashes))
        if analyses:
            warnings.append(PipelineWarning(WarningType.IRREVERSIBLE, self.ANALYSIS_MESSAGE, analyses))

        # Covers the whole pipeline, unknown steps included.
        if hashes and has_encoding:
            warnings.append(
                PipelineWarning(WarningType.CHAIN_RISK, self.CHAIN_MESSAGE, [s.id for s in steps])
            )
        if len(irreversible) > 1:
            warnings.append(
                PipelineWarning(WarningType.CHAIN_RISK, self.MULTIPLE_MESSAGE, list(irreversible))
            )
        return warnings


def analyze(
    steps: Iterable[PipelineStep],
    registry: TransformationRegistry | None = None,
) -> list[PipelineWarning]:
    return PipelineRiskAnalyzer(registry).analyze(steps)
