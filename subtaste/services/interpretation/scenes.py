from subtaste.core.constants import (
    NEUTRAL_SIMILARITY,
    SCENE_CATEGORY_SATURATION,
    SCENE_CATEGORY_WEIGHT,
    SCENE_MIN_FIT,
    SCENE_TOP_N,
    SCENE_TRAIT_WEIGHT,
    TIMING_EARLY_WAVE,
    TIMING_GROWTH_PHASE,
    TIMING_MAINSTREAM,
)
from subtaste.models.inputs import TraitVector
from subtaste.models.results import AdoptionTiming, SceneFitResult, ScoringInput
from subtaste.models.taxonomy import SceneProfile
from subtaste.utils import round_half_up


def timing_bucket(early_adoption: int) -> AdoptionTiming:
    if early_adoption >= TIMING_EARLY_WAVE:
        return AdoptionTiming.EARLY_WAVE
    if early_adoption >= TIMING_GROWTH_PHASE:
        return AdoptionTiming.GROWTH_PHASE
    if early_adoption >= TIMING_MAINSTREAM:
        return AdoptionTiming.MAINSTREAM
    return AdoptionTiming.LATE_DISCOVERY


class SubcultureFitPredictor:
    """Ranks scene profiles by blend overlap and signed trait affinity."""

    @staticmethod
    def category_affinity(scene: SceneProfile, blend: dict[str, float]) -> float:
        total = sum(blend.get(cid, 0.0) for cid in scene.affinity_categories)
        return min(total * SCENE_CATEGORY_SATURATION, 1.0)

    @staticmethod
    def trait_affinity(scene: SceneProfile, traits: TraitVector) -> float:
        """Weighted mean of trait values; a negative weight favors low values."""
        total_weight = 0.0
        score = 0.0
        for trait, weight in scene.trait_weights.items():
            value = traits.get(trait)
            if weight >= 0:
                score += value * weight
            else:
                score += (1 - value) * abs(weight)
            total_weight += abs(weight)
        if total_weight == 0:
            return NEUTRAL_SIMILARITY
        return score / total_weight

    @staticmethod
    def fit_score(scene: SceneProfile, snapshot: ScoringInput) -> int:
        category = SubcultureFitPredictor.category_affinity(scene, snapshot.blend)
        trait = SubcultureFitPredictor.trait_affinity(scene, snapshot.traits)
        return round_half_up((category * SCENE_CATEGORY_WEIGHT + trait * SCENE_TRAIT_WEIGHT) * 100)

    @staticmethod
    def predict(scenes: tuple[SceneProfile, ...], snapshot: ScoringInput) -> list[SceneFitResult]:
        """
        Top scenes by fit, best first.

        Scenes below the minimum fit are dropped; an empty list is a valid
        outcome.
        """
        timing = timing_bucket(snapshot.indices.early_adoption)
        results = []
        for scene in scenes:
            score = SubcultureFitPredictor.fit_score(scene, snapshot)
            if score < SCENE_MIN_FIT:
                continue
            results.append(
                SceneFitResult(
                    id=scene.id,
                    name=scene.name,
                    score=score,
                    timing=timing,
                    reasoning=scene.description,
                )
            )
        results.sort(key=lambda r: r.score, reverse=True)
        return results[:SCENE_TOP_N]
