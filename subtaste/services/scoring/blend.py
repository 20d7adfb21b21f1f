import math

from loguru import logger

from subtaste.core.constants import (
    AESTHETIC_WEIGHT,
    BEHAVIORAL_WEIGHT,
    BLEND_MIN_WEIGHT,
    BLEND_PRECISION,
    BLEND_TEMPERATURE,
    TRAIT_WEIGHT,
)
from subtaste.models.inputs import AestheticVector, BehavioralSignals, TraitVector
from subtaste.models.results import CategoryScore
from subtaste.models.taxonomy import Taxonomy
from subtaste.services.scoring.similarity import SimilarityScorer


class BlendComputer:
    """Turns per-category similarity into a primary category and a blend distribution."""

    @staticmethod
    def combine(trait: float, aesthetic: float, behavioral: float) -> float:
        return trait * TRAIT_WEIGHT + aesthetic * AESTHETIC_WEIGHT + behavioral * BEHAVIORAL_WEIGHT

    @staticmethod
    def score_categories(
        taxonomy: Taxonomy,
        traits: TraitVector,
        aesthetics: AestheticVector,
        behavior: BehavioralSignals | None = None,
    ) -> list[CategoryScore]:
        """Score every category in catalog order."""
        scores = []
        for category in taxonomy.categories:
            trait = SimilarityScorer.score_trait(traits, category)
            aesthetic = SimilarityScorer.score_aesthetic(aesthetics, category)
            behavioral = SimilarityScorer.score_behavioral(behavior, category)
            scores.append(
                CategoryScore(
                    category_id=category.id,
                    trait=trait,
                    aesthetic=aesthetic,
                    behavioral=behavioral,
                    combined=BlendComputer.combine(trait, aesthetic, behavioral),
                )
            )
        return scores

    @staticmethod
    def to_blend(scores: dict[str, float]) -> dict[str, float]:
        """
        Temperature-scaled softmax over combined scores.

        Entries at or below the materiality threshold are dropped and the
        rest rounded; survivors are not renormalised, so the sum may drift
        slightly from 1.

        Args:
            scores: Category id -> combined score, in catalog order.

        Returns:
            Category id -> blend weight, in catalog order.
        """
        if not scores:
            return {}

        max_score = max(scores.values())
        exps = {cid: math.exp((score - max_score) * BLEND_TEMPERATURE) for cid, score in scores.items()}
        total = sum(exps.values())

        blend = {}
        for cid, value in exps.items():
            weight = value / total
            if weight > BLEND_MIN_WEIGHT:
                blend[cid] = round(weight, BLEND_PRECISION)
        return blend

    @staticmethod
    def select_primary(scores: list[CategoryScore]) -> str:
        """Highest combined score; the first category in catalog order wins ties."""
        best = scores[0]
        for score in scores[1:]:
            if score.combined > best.combined:
                best = score
        return best.category_id

    @staticmethod
    def compute(
        taxonomy: Taxonomy,
        traits: TraitVector,
        aesthetics: AestheticVector,
        behavior: BehavioralSignals | None = None,
    ) -> tuple[str, dict[str, float], list[CategoryScore]]:
        scores = BlendComputer.score_categories(taxonomy, traits, aesthetics, behavior)
        primary = BlendComputer.select_primary(scores)
        blend = BlendComputer.to_blend({s.category_id: s.combined for s in scores})
        logger.debug(f"Primary category {primary} with {len(blend)} blend entries")
        return primary, blend, scores
