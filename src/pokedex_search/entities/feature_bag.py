"""Feature bag domain entity."""

from collections.abc import Iterable
from dataclasses import dataclass


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values:
        text = value.strip()
        if text:
            seen.setdefault(text, None)
    return tuple(seen)


@dataclass(frozen=True)
class FeatureBag:
    """Structured features extracted from a free-text query.

    Each collection is an ordered set: duplicates and blank strings are
    dropped, first occurrence wins.

    Attributes:
        candidate_names: Pokémon names the model believes are described
        types: Elemental type tags (e.g. "Fire", "electric")
        abilities: Ability or move tags
        characteristics: Appearance and personality traits (not scored)
    """

    candidate_names: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    abilities: tuple[str, ...] = ()
    characteristics: tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        candidate_names: Iterable[str] = (),
        types: Iterable[str] = (),
        abilities: Iterable[str] = (),
        characteristics: Iterable[str] = (),
    ) -> "FeatureBag":
        """Build a bag from arbitrary iterables, normalizing each into an ordered set."""
        return cls(
            candidate_names=_ordered_unique(candidate_names),
            types=_ordered_unique(types),
            abilities=_ordered_unique(abilities),
            characteristics=_ordered_unique(characteristics),
        )

    @classmethod
    def empty(cls) -> "FeatureBag":
        """The bag returned when nothing could be extracted."""
        return cls()

    @property
    def has_traits(self) -> bool:
        """Whether the bag holds any scorable type or ability."""
        return bool(self.types or self.abilities)

    @property
    def is_empty(self) -> bool:
        return not (self.candidate_names or self.has_traits or self.characteristics)
