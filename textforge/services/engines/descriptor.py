from dataclasses import dataclass
from typing import Any, Callable, Mapping

from textforge.models.schemas import Reversibility, RiskLevel, StepMode
from textforge.services.context import TransformContext

Options = Mapping[str, Any]

# (text, options, context) -> text; may raise.
Transform = Callable[[str, Options, TransformContext], str]


@dataclass(frozen=True)
class TransformationDescriptor:
    """
    Catalog record binding metadata to algorithm functions.

    ``can_encode``/``can_decode`` always agree with the presence of
    ``encode``/``decode``.
    """

    id: str
    name: str
    category: str
    description: str
    reversibility: Reversibility
    risk_level: RiskLevel
    encode: Transform | None = None
    decode: Transform | None = None

    @property
    def can_encode(self) -> bool:
        return self.encode is not None

    @property
    def can_decode(self) -> bool:
        return self.decode is not None

    def function_for(self, mode: StepMode | str) -> Transform | None:
        """Return the function implementing ``mode``, or None if unsupported."""
        return self.encode if StepMode(mode) == StepMode.ENCODE else self.decode
