import random
from collections import OrderedDict
from dataclasses import dataclass, field

from textforge.core.config import Settings


@dataclass
class TransformContext:
    """
    Caller-owned state threaded through every transformation call.

    Holds the randomness source for intentionally randomized algorithms
    (zero-width density, emoji noise, synonym shuffle) and a bounded memo
    cache for expensive generated artifacts. Dropping the cache never
    changes results. Secure material (keys, salts, nonces) never comes
    from ``rng``.
    """

    rng: random.Random = field(default_factory=random.Random)
    cache: OrderedDict[tuple[str, str], str] = field(default_factory=OrderedDict)
    cache_size: int = 128
    kdf_iterations: int = 100_000
    kdf_salt: str = "RedConverterSalt2024"

    @classmethod
    def from_settings(cls, settings: Settings) -> "TransformContext":
        return cls(
            cache_size=settings.qr_cache_size,
            kdf_iterations=settings.kdf_iterations,
            kdf_salt=settings.kdf_default_salt,
        )

    @classmethod
    def seeded(cls, seed: int | str) -> "TransformContext":
        """Deterministic context for reproducible output."""
        return cls(rng=random.Random(seed))

    def cached(self, namespace: str, key: str) -> str | None:
        value = self.cache.get((namespace, key))
        if value is not None:
            self.cache.move_to_end((namespace, key))
        return value

    def remember(self, namespace: str, key: str, value: str) -> str:
        self.cache[(namespace, key)] = value
        self.cache.move_to_end((namespace, key))
        while len(self.cache) > self.cache_size:
            self.cache.popitem(last=False)
        return value
