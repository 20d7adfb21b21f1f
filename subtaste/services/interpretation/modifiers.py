from collections.abc import Callable

from subtaste.core.constants import (
    ARCHETYPE_PHRASE_LIMIT,
    BEHAVIORAL_SUMMARY_LIMIT,
    DEFAULT_ARCHETYPE_PHRASE,
    DEFAULT_BEHAVIORAL_SUMMARY,
    DEFAULT_MODE_STRING,
    POLE_HIGH_THRESHOLD,
    POLE_LOW_THRESHOLD,
    POLE_MIDPOINT,
)
from subtaste.core.exceptions import TaxonomyError
from subtaste.models.results import ModifierResult, Pole, ScoringInput
from subtaste.models.taxonomy import ModifierDefinition
from subtaste.utils import clamp, round_half_up

ModifierFormula = Callable[[ScoringInput], float]


def _adoption_timing(snapshot: ScoringInput) -> float:
    traits, behavior = snapshot.traits, snapshot.behavior
    score = float(snapshot.indices.early_adoption)
    score += (traits.novelty_seeking - 0.5) * 20
    score += (traits.risk_tolerance - 0.5) * 10
    score -= (traits.conscientiousness - 0.5) * 10
    if behavior is not None and behavior.novelty_preference is not None:
        score += (behavior.novelty_preference - 0.5) * 20
    return score


def _engagement_depth(snapshot: ScoringInput) -> float:
    traits, behavior = snapshot.traits, snapshot.behavior
    # focused blend reads as depth
    score = float(snapshot.indices.coherence)
    score += (traits.conscientiousness - 0.5) * 20
    score -= (traits.openness - 0.5) * 10
    score += (1 - traits.novelty_seeking - 0.5) * 15
    if behavior is not None:
        if behavior.session_depth is not None:
            score += min(behavior.session_depth / 20, 1.0) * 20 - 10
        if behavior.content_diversity is not None:
            score += (1 - behavior.content_diversity - 0.5) * 20
    return score


def _engagement_pattern(snapshot: ScoringInput) -> float:
    traits, behavior = snapshot.traits, snapshot.behavior
    score = POLE_MIDPOINT
    score += (traits.conscientiousness - 0.5) * 30
    score += (1 - traits.novelty_seeking - 0.5) * 20
    score += (1 - traits.risk_tolerance - 0.5) * 15
    if behavior is not None:
        if behavior.reengagement_rate is not None:
            score += (behavior.reengagement_rate - 0.5) * 30
        if behavior.save_rate is not None:
            score += behavior.save_rate * 20
    return score


def _taste_coherence(snapshot: ScoringInput) -> float:
    score = float(snapshot.indices.coherence)
    weights = list(snapshot.blend.values())
    if weights:
        mean = sum(weights) / len(weights)
        variance = sum((w - mean) ** 2 for w in weights) / len(weights)
        score = score * 0.7 + max(weights) * 100 * 0.2 + (1 - min(variance * 4, 1.0)) * 100 * 0.1
    return score


def _social_orientation(snapshot: ScoringInput) -> float:
    traits, behavior = snapshot.traits, snapshot.behavior
    score = POLE_MIDPOINT
    score += (traits.extraversion - 0.5) * 30
    score += (traits.agreeableness - 0.5) * 20
    if behavior is not None and behavior.share_rate is not None:
        score += behavior.share_rate * 50
    return score


def _intensity_preference(snapshot: ScoringInput) -> float:
    traits, aesthetics = snapshot.traits, snapshot.aesthetics
    score = POLE_MIDPOINT
    score += (aesthetics.energy_center - 0.5) * 40
    score += (aesthetics.complexity - 0.5) * 20
    score += (aesthetics.minimal_vs_maximal - 0.5) * 20
    score += (traits.extraversion - 0.5) * 10
    score += (traits.novelty_seeking - 0.5) * 10
    return score


def _discovery_drive(snapshot: ScoringInput) -> float:
    behavior = snapshot.behavior
    score = float(snapshot.indices.exploration)
    if behavior is not None:
        if behavior.novelty_preference is not None:
            score = score * 0.7 + behavior.novelty_preference * 100 * 0.3
        if behavior.content_diversity is not None:
            score += (behavior.content_diversity - 0.5) * 20
    return score


MODIFIER_FORMULAS: dict[str, ModifierFormula] = {
    "adoption_timing": _adoption_timing,
    "engagement_depth": _engagement_depth,
    "engagement_pattern": _engagement_pattern,
    "taste_coherence": _taste_coherence,
    "social_orientation": _social_orientation,
    "intensity_preference": _intensity_preference,
    "discovery_drive": _discovery_drive,
}


def classify_pole(score: float) -> Pole:
    if score >= POLE_HIGH_THRESHOLD:
        return Pole.HIGH
    if score <= POLE_LOW_THRESHOLD:
        return Pole.LOW
    return Pole.BALANCED


class ModifierScorer:
    """Scores every modifier dimension of a taxonomy and labels its pole."""

    @staticmethod
    def check_formulas(definitions: tuple[ModifierDefinition, ...]) -> None:
        """Fail fast on a definition naming an unregistered formula."""
        unknown = [d.formula for d in definitions if d.formula not in MODIFIER_FORMULAS]
        if unknown:
            raise TaxonomyError(f"Unknown modifier formulas: {', '.join(unknown)}")

    @staticmethod
    def score_one(definition: ModifierDefinition, snapshot: ScoringInput) -> ModifierResult:
        # pole reads the unrounded score
        raw = clamp(MODIFIER_FORMULAS[definition.formula](snapshot))
        pole = classify_pole(raw)
        score = round_half_up(raw)

        if pole is Pole.HIGH:
            label = short_label = definition.high_label
            explanation, insight = definition.high_description, definition.high_insight
        elif pole is Pole.LOW:
            label = short_label = definition.low_label
            explanation, insight = definition.low_description, definition.low_insight
        else:
            label = f"{definition.high_label}/{definition.low_label}"
            short_label = "Balanced"
            explanation, insight = definition.balanced_description, definition.balanced_insight

        return ModifierResult(
            id=definition.id,
            score=score,
            pole=pole,
            label=label,
            short_label=short_label,
            explanation=explanation,
            insight=insight,
        )

    @staticmethod
    def score_all(definitions: tuple[ModifierDefinition, ...], snapshot: ScoringInput) -> list[ModifierResult]:
        return [ModifierScorer.score_one(definition, snapshot) for definition in definitions]


def _by_distance(results: list[ModifierResult]) -> list[ModifierResult]:
    # sorted() is stable, so equal distances keep catalog order
    return sorted(results, key=lambda r: abs(r.score - POLE_MIDPOINT), reverse=True)


def archetype_phrase(results: list[ModifierResult]) -> str:
    """Short labels of the two strongest non-balanced dimensions."""
    strong = _by_distance([r for r in results if r.pole is not Pole.BALANCED])[:ARCHETYPE_PHRASE_LIMIT]
    if not strong:
        return DEFAULT_ARCHETYPE_PHRASE
    return ", ".join(r.short_label for r in strong)


_MODE_PARTS: dict[str, dict[Pole, str]] = {
    "adoption_timing": {Pole.HIGH: "Early-Adopter", Pole.LOW: "Late-Wave"},
    "taste_coherence": {Pole.LOW: "High-Entropy", Pole.HIGH: "Coherent"},
    "engagement_depth": {Pole.HIGH: "Deep-Diver", Pole.LOW: "Explorer"},
}


def mode_string(results: list[ModifierResult]) -> str:
    """Compact one-liner, e.g. "Early-Adopter, High-Entropy mode"."""
    by_id = {r.id: r for r in results}
    parts = []
    for modifier_id, labels in _MODE_PARTS.items():
        result = by_id.get(modifier_id)
        if result is not None and result.pole in labels:
            parts.append(labels[result.pole])
    if not parts:
        return DEFAULT_MODE_STRING
    return ", ".join(parts) + " mode"


def behavioral_summary(results: list[ModifierResult]) -> str:
    """Insights of the non-balanced dimensions among the three most distinctive."""
    top = _by_distance(results)[:BEHAVIORAL_SUMMARY_LIMIT]
    insights = [r.insight for r in top if r.pole is not Pole.BALANCED]
    if not insights:
        return DEFAULT_BEHAVIORAL_SUMMARY
    return " ".join(insights)
