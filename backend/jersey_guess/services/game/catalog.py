"""Read-only view over the cricket players a game draws questions from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Entity:
    """One guessable player."""

    id: str
    name: str
    jersey: int
    hint: str
    team: str
    difficulty: str

    @classmethod
    def from_dict(cls, data: dict) -> 'Entity':
        return cls(
            id=str(data.get('id') or ''),
            name=data['name'],
            jersey=int(data['jersey']),
            hint=data.get('hint') or '',
            team=data.get('team') or '',
            difficulty=data['difficulty'],
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'jersey': self.jersey,
            'hint': self.hint,
            'team': self.team,
            'difficulty': self.difficulty,
        }


class Catalog:
    """Immutable collection of entities grouped by difficulty tier."""

    def __init__(self, entities: Iterable[Entity]) -> None:
        self._entities: tuple[Entity, ...] = tuple(entities)
        by_tier: dict[str, list[Entity]] = {}
        for entity in self._entities:
            by_tier.setdefault(entity.difficulty, []).append(entity)
        self._by_tier = {tier: tuple(items) for tier, items in by_tier.items()}

    @classmethod
    def from_dicts(cls, records: Iterable[dict]) -> 'Catalog':
        return cls(Entity.from_dict(record) for record in records)

    def all_entities(self) -> list[Entity]:
        return list(self._entities)

    def entities_for_tier(self, tier: str) -> list[Entity]:
        return list(self._by_tier.get(tier, ()))

    def __len__(self) -> int:
        return len(self._entities)
