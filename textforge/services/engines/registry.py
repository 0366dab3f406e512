from typing import Iterable

from textforge.core.exceptions import TransformationNotFoundError
from textforge.models.schemas import Reversibility, RiskLevel, TransformMode
from textforge.services.engines.catalog import CATALOG
from textforge.services.engines.descriptor import TransformationDescriptor

REVERSIBILITY_BADGES: dict[Reversibility, tuple[str, str]] = {
    Reversibility.REVERSIBLE: ("Reversible", "badge-reversible"),
    Reversibility.PARTIAL: ("Partial", "badge-partial"),
    Reversibility.IRREVERSIBLE: ("Irreversible", "badge-irreversible"),
}

RISK_ICONS: dict[RiskLevel, str] = {
    RiskLevel.LOW: "●",
    RiskLevel.MEDIUM: "●●",
    RiskLevel.HIGH: "●●●",
}


class TransformationRegistry:
    """
    Read-only index over an ordered transformation catalog.

    Listings always come back in catalog declaration order.
    """

    def __init__(self, catalog: Iterable[TransformationDescriptor] = CATALOG):
        self._catalog: tuple[TransformationDescriptor, ...] = tuple(catalog)
        self._by_id: dict[str, TransformationDescriptor] = {}
        for descriptor in self._catalog:
            if descriptor.id in self._by_id:
                raise ValueError(f"Duplicate transformation id: {descriptor.id}")
            self._by_id[descriptor.id] = descriptor

    def lookup(self, transformation_id: str) -> TransformationDescriptor | None:
        """
        Find a descriptor by id.

        Args:
            transformation_id: Catalog key, e.g. ``"base64"``

        Returns:
            The descriptor or None if the id is unknown
        """
        return self._by_id.get(transformation_id)

    def get(self, transformation_id: str) -> TransformationDescriptor:
        """
        Like ``lookup`` but raises for unknown ids.

        Raises:
            TransformationNotFoundError: If the id is not in the catalog
        """
        descriptor = self.lookup(transformation_id)
        if descriptor is None:
            raise TransformationNotFoundError(transformation_id)
        return descriptor

    def list_by_capability(self, mode: TransformMode | str) -> list[TransformationDescriptor]:
        """
        List descriptors usable in a mode.

        Args:
            mode: ``encode`` and ``decode`` filter by capability; ``detect``
                returns the whole catalog

        Returns:
            Descriptors in catalog order
        """
        mode = TransformMode(mode)
        if mode == TransformMode.ENCODE:
            return [d for d in self._catalog if d.can_encode]
        if mode == TransformMode.DECODE:
            return [d for d in self._catalog if d.can_decode]
        return list(self._catalog)

    def get_by_category(self, category: str) -> list[TransformationDescriptor]:
        return [d for d in self._catalog if d.category == category]

    def categories(self) -> list[str]:
        """Distinct categories in order of first appearance."""
        return list(dict.fromkeys(d.category for d in self._catalog))

    def list_registered(self) -> list[str]:
        return [d.id for d in self._catalog]

    def is_registered(self, transformation_id: str) -> bool:
        return transformation_id in self._by_id

    def __len__(self) -> int:
        return len(self._catalog)

    def __iter__(self):
        return iter(self._catalog)


def reversibility_badge(reversibility: Reversibility | str) -> dict[str, str]:
    label, class_name = REVERSIBILITY_BADGES[Reversibility(reversibility)]
    return {"label": label, "className": class_name}


def risk_icon(risk_level: RiskLevel | str) -> str:
    return RISK_ICONS[RiskLevel(risk_level)]


registry = TransformationRegistry()


def get_registry() -> TransformationRegistry:
    """Process-wide registry over the built-in catalog."""
    return registry
