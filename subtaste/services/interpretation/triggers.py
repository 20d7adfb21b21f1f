from loguru import logger

from subtaste.core.constants import TRIGGER_MIN_MATCH, TRIGGER_NEAR_MISS_CREDIT, TRIGGER_NEAR_MISS_RATIO
from subtaste.models.inputs import BehavioralSignal
from subtaste.models.results import ScoringInput, TriggerMatch
from subtaste.models.taxonomy import (
    BlendThreshold,
    IndexBound,
    SignalMembership,
    TraitBound,
    TriggerDefinition,
    TriggerPredicate,
)
from subtaste.services.interpretation.signals import detect_signals


def _within(value: float, minimum: float | None, maximum: float | None) -> bool:
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


class TriggerMatcher:
    """Partial-credit matching of sub-state definitions against one scored input."""

    @staticmethod
    def score_predicate(
        predicate: TriggerPredicate,
        snapshot: ScoringInput,
        signals: frozenset[BehavioralSignal],
    ) -> float | None:
        """
        Points earned by one predicate, or None when it does not apply.

        Blend thresholds earn half credit at 70% of the minimum. Signal
        predicates only apply when behavioral data is present.
        """
        if isinstance(predicate, BlendThreshold):
            weight = snapshot.blend.get(predicate.category_id, 0.0)
            if weight >= predicate.minimum:
                return 1.0
            if weight >= predicate.minimum * TRIGGER_NEAR_MISS_RATIO:
                return TRIGGER_NEAR_MISS_CREDIT
            return 0.0
        if isinstance(predicate, TraitBound):
            value = snapshot.traits.get(predicate.trait)
            return 1.0 if _within(value, predicate.min, predicate.max) else 0.0
        if isinstance(predicate, IndexBound):
            value = snapshot.indices.get(predicate.index)
            return 1.0 if _within(value, predicate.min, predicate.max) else 0.0
        if isinstance(predicate, SignalMembership):
            if snapshot.behavior is None:
                return None
            return 1.0 if predicate.signal in signals else 0.0
        raise TypeError(f"Unsupported trigger predicate: {type(predicate).__name__}")

    @staticmethod
    def match_fraction(
        trigger: TriggerDefinition,
        snapshot: ScoringInput,
        signals: frozenset[BehavioralSignal] | None = None,
    ) -> float:
        """Points over applicable checks; 0 when no check applies."""
        if signals is None:
            signals = detect_signals(snapshot.behavior)

        points = 0.0
        checks = 0
        for predicate in trigger.predicates:
            earned = TriggerMatcher.score_predicate(predicate, snapshot, signals)
            if earned is None:
                continue
            points += earned
            checks += 1
        return points / checks if checks else 0.0

    @staticmethod
    def match(triggers: tuple[TriggerDefinition, ...], snapshot: ScoringInput) -> TriggerMatch | None:
        """
        Best matching sub-state at or above the minimum match fraction.

        Args:
            triggers: Definitions in catalog order; earlier ones win ties.
            snapshot: The scored input.

        Returns:
            The winning TriggerMatch, or None when nothing qualifies.
        """
        signals = detect_signals(snapshot.behavior)

        best: TriggerDefinition | None = None
        best_fraction = 0.0
        for trigger in triggers:
            fraction = TriggerMatcher.match_fraction(trigger, snapshot, signals)
            if fraction >= TRIGGER_MIN_MATCH and fraction > best_fraction:
                best, best_fraction = trigger, fraction

        if best is None:
            logger.debug("No sub-state reached the minimum match")
            return None

        logger.debug(f"Active sub-state {best.id} ({best_fraction:.2f})")
        return TriggerMatch(
            id=best.id,
            display_name=best.display_name,
            description=best.description,
            manifesto=best.manifesto,
            icon=best.icon,
            match_fraction=best_fraction,
        )
