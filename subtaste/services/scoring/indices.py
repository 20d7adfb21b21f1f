import math

from subtaste.core.constants import (
    EMPTY_BLEND_COHERENCE,
    EXPLORATION_DIVERSITY_SHARE,
    EXPLORATION_TRAIT_SHARE,
)
from subtaste.models.inputs import BehavioralSignals, TraitVector
from subtaste.models.results import DerivedIndices
from subtaste.utils import clamp_index


class DerivedIndexComputer:
    """Scalar indices in [0, 100] derived from the blend and the trait vector."""

    @staticmethod
    def coherence(blend: dict[str, float], category_count: int) -> int:
        """
        Subtaste index: how concentrated the blend is.

        Normalised Shannon entropy (bits) against log2 of the taxonomy size,
        inverted so a single-category blend scores 100 and a uniform blend 0.
        """
        total = sum(blend.values())
        if not blend or total <= 0:
            return EMPTY_BLEND_COHERENCE

        entropy = 0.0
        for weight in blend.values():
            p = weight / total
            if p > 0:
                entropy -= p * math.log2(p)

        max_entropy = math.log2(category_count) if category_count > 1 else 0.0
        if max_entropy <= 0:
            return 100
        ratio = entropy / max_entropy
        return clamp_index((1 - ratio) * 100)

    @staticmethod
    def exploration(traits: TraitVector, behavior: BehavioralSignals | None = None) -> int:
        score = (
            traits.openness * 0.35
            + traits.novelty_seeking * 0.35
            + traits.risk_tolerance * 0.15
            + (1 - traits.neuroticism) * 0.15
        )
        if behavior is not None and behavior.content_diversity is not None:
            score = score * EXPLORATION_TRAIT_SHARE + behavior.content_diversity * EXPLORATION_DIVERSITY_SHARE
        return clamp_index(score * 100)

    @staticmethod
    def early_adoption(traits: TraitVector) -> int:
        score = (
            traits.openness * 0.30
            + traits.novelty_seeking * 0.35
            + traits.risk_tolerance * 0.25
            + traits.aesthetic_sensitivity * 0.10
        )
        return clamp_index(score * 100)

    @staticmethod
    def compute(
        blend: dict[str, float],
        category_count: int,
        traits: TraitVector,
        behavior: BehavioralSignals | None = None,
    ) -> DerivedIndices:
        return DerivedIndices(
            coherence=DerivedIndexComputer.coherence(blend, category_count),
            exploration=DerivedIndexComputer.exploration(traits, behavior),
            early_adoption=DerivedIndexComputer.early_adoption(traits),
        )
