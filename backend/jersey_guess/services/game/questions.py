"""Multiple-choice question generation."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .catalog import Catalog, Entity

logger = logging.getLogger(__name__)

OPTION_COUNT = 4


@dataclass(frozen=True, slots=True)
class Question:
    entity: Entity
    options: tuple[str, ...]
    correct_index: int

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]

    def to_dict(self) -> dict:
        """Client-facing view; the answer is only revealed after answering."""
        return {
            'jersey': self.entity.jersey,
            'hint': self.entity.hint,
            'team': self.entity.team,
            'difficulty': self.entity.difficulty,
            'options': list(self.options),
        }


def _distinct_names(entities: list[Entity]) -> set[str]:
    return {e.name for e in entities}


def distractor_pool(tier_pool: list[Entity], catalog: Catalog) -> list[Entity]:
    """Tier pool when it can fill every option on its own, else the whole catalog."""
    if len(_distinct_names(tier_pool)) >= OPTION_COUNT:
        return tier_pool
    return catalog.all_entities()


def generate_question(tier: str, catalog: Catalog, rng: random.Random | None = None) -> Question | None:
    """Build one question for ``tier``.

    Returns None when the catalog is empty. When the catalog holds fewer than
    four distinct names the question carries as many options as exist.
    """
    rng = rng or random.Random()
    pool = catalog.entities_for_tier(tier)
    if not pool:
        pool = catalog.all_entities()
        if not pool:
            logger.warning(f"[question-skip] tier={tier} catalog is empty")
            return None
        logger.info(f"[question-widen] tier={tier} has no players, using full catalog")

    entity = rng.choice(pool)
    # Discarded: the slot is decided by the shuffle below. Drawn so seeded
    # games replay the same random sequence.
    rng.randrange(OPTION_COUNT)

    options = [entity.name]
    source = distractor_pool(pool, catalog)
    remaining = _distinct_names(source) - {entity.name}
    while len(options) < OPTION_COUNT and remaining:
        candidate = rng.choice(source).name
        if candidate not in options:
            options.append(candidate)
            remaining.discard(candidate)

    rng.shuffle(options)
    return Question(entity=entity, options=tuple(options), correct_index=options.index(entity.name))
