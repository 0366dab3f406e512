"""Algorithm library, transformation catalog and registry."""

from textforge.services.engines.catalog import CATALOG
from textforge.services.engines.descriptor import TransformationDescriptor
from textforge.services.engines.registry import (
    TransformationRegistry,
    get_registry,
    reversibility_badge,
    risk_icon,
)

__all__ = [
    "CATALOG",
    "TransformationDescriptor",
    "TransformationRegistry",
    "get_registry",
    "reversibility_badge",
    "risk_icon",
]
