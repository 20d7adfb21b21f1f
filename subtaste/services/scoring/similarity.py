from collections.abc import Callable

from subtaste.core.constants import (
    EXPLORATION_BONUS,
    EXPLORATION_DIVERSITY_THRESHOLD,
    NEUTRAL_SIMILARITY,
    TRAIT_DISTANCE_PENALTY,
    TRAIT_NAMES,
)
from subtaste.models.inputs import AestheticVector, BehavioralSignals, TraitVector
from subtaste.models.taxonomy import CategoryDefinition

AestheticScore = Callable[[AestheticVector], float]


def _toward_high(value: float, cutoff: float = 0.6) -> float:
    return 1.0 if value > cutoff else value


def _toward_low(value: float, cutoff: float = 0.4) -> float:
    return 1.0 if value < cutoff else 1.0 - value


# Each group: (keywords, score) alternatives, first matching alternative wins.
VISUAL_GROUPS: list[list[tuple[frozenset[str], AestheticScore]]] = [
    # darkness
    [
        (frozenset({"dark", "noir", "shadowy", "moody", "gothic"}), lambda a: _toward_high(a.darkness)),
        (frozenset({"bright", "golden", "warm-light", "glowing"}), lambda a: _toward_low(a.darkness)),
    ],
    # complexity
    [
        (frozenset({"maximal", "layered", "complex", "rich", "baroque"}), lambda a: _toward_high(a.complexity)),
        (frozenset({"minimal", "clean", "sparse", "simple"}), lambda a: _toward_low(a.minimal_vs_maximal)),
    ],
    # organic vs synthetic
    [
        (
            frozenset({"organic", "natural", "earthy", "botanical", "verdant"}),
            lambda a: _toward_low(a.organic_vs_synthetic),
        ),
        (
            frozenset({"synthetic", "chrome", "holographic", "digital", "neon"}),
            lambda a: _toward_high(a.organic_vs_synthetic),
        ),
    ],
]

MUSIC_GROUPS: list[list[tuple[frozenset[str], AestheticScore]]] = [
    # tempo
    [
        (frozenset({"slow", "ambient", "gentle", "flowing"}), lambda a: 1.0 if a.tempo_max < 100 else 0.5),
        (frozenset({"fast", "driving", "energetic", "high-energy"}), lambda a: 1.0 if a.tempo_min > 120 else 0.5),
    ],
    # energy
    [
        (
            frozenset({"intense", "powerful", "explosive", "maximalist"}),
            lambda a: _toward_high(a.energy_max, cutoff=0.7),
        ),
        (frozenset({"subtle", "gentle", "soft", "delicate"}), lambda a: _toward_low(a.energy_max, cutoff=0.5)),
    ],
    # acoustic vs digital
    [
        (frozenset({"acoustic", "organic", "folk", "natural"}), lambda a: _toward_low(a.acoustic_vs_digital)),
        (
            frozenset({"electronic", "synthetic", "digital", "processed"}),
            lambda a: _toward_high(a.acoustic_vs_digital),
        ),
    ],
]


class SimilarityScorer:
    """Scores one input against one category on three independent [0, 1] axes."""

    @staticmethod
    def score_trait(traits: TraitVector, category: CategoryDefinition) -> float:
        """
        Mean per-trait fit against the category's acceptable ranges.

        Inside a range scores 1.0; outside decays linearly with distance and floors at 0.
        """
        total = 0.0
        for name in TRAIT_NAMES:
            distance = category.trait_ranges[name].distance(traits.get(name))
            total += max(0.0, 1.0 - distance * TRAIT_DISTANCE_PENALTY)
        return total / len(TRAIT_NAMES)

    @staticmethod
    def score_aesthetic(aesthetics: AestheticVector, category: CategoryDefinition) -> float:
        """
        Score the aesthetic dimensions the category's keywords express a direction on.

        Dimensions the keywords say nothing about are skipped; no matched
        dimension at all gives the neutral score.
        """
        matched: list[float] = []
        for keywords, groups in (
            (category.visual_keywords, VISUAL_GROUPS),
            (category.music_keywords, MUSIC_GROUPS),
        ):
            tags = {k.lower() for k in keywords}
            for group in groups:
                for group_keywords, score in group:
                    if tags & group_keywords:
                        matched.append(score(aesthetics))
                        break

        if not matched:
            return NEUTRAL_SIMILARITY
        return sum(matched) / len(matched)

    @staticmethod
    def score_behavioral(behavior: BehavioralSignals | None, category: CategoryDefinition) -> float:
        """
        Tag overlap between the user's favorite tags and the category keywords.

        Args:
            behavior: Engagement metrics, or None for users without history.
            category: Category to score against.

        Returns:
            Score in [0, 1]; 0.5 when there is nothing to compare.
        """
        if behavior is None:
            return NEUTRAL_SIMILARITY

        category_tags = [k.lower() for k in category.keywords]
        user_tags = [t.lower() for t in behavior.favorite_tags if t]

        if user_tags and category_tags:
            overlap = sum(1 for tag in category_tags if any(ut in tag or tag in ut for ut in user_tags))
            score = min(overlap / len(category_tags), 1.0)
        else:
            score = NEUTRAL_SIMILARITY

        diversity = behavior.content_diversity
        if category.exploration_leaning and diversity is not None and diversity > EXPLORATION_DIVERSITY_THRESHOLD:
            score = min(score + EXPLORATION_BONUS, 1.0)

        return score
