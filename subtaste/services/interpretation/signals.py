from subtaste.core.constants import MIN_SESSIONS_FOR_BEHAVIOR
from subtaste.models.inputs import BehavioralSignal, BehavioralSignals


def detect_signals(behavior: BehavioralSignals | None) -> frozenset[BehavioralSignal]:
    """
    Derive discrete behavior tags from engagement metrics.

    Trend leading/following and impulse discovery have no detector yet and are
    never emitted here.
    """
    if behavior is None:
        return frozenset()

    signals: set[BehavioralSignal] = set()

    diversity = behavior.content_diversity
    if diversity is not None:
        if diversity > 0.7:
            signals.add(BehavioralSignal.HIGH_INTERACTION_DIVERSITY)
        elif diversity < 0.3:
            signals.add(BehavioralSignal.LOW_INTERACTION_DIVERSITY)

    if behavior.session_depth is not None and behavior.session_depth > 10:
        signals.add(BehavioralSignal.DEEP_ENGAGEMENT)

    if behavior.novelty_preference is not None and behavior.novelty_preference > 0.7:
        signals.add(BehavioralSignal.RAPID_EXPLORATION)

    if behavior.save_rate is not None and behavior.save_rate > 0.3:
        signals.add(BehavioralSignal.HIGH_SAVE_RATE)

    if behavior.share_rate is not None and behavior.share_rate > 0.2:
        signals.add(BehavioralSignal.HIGH_SHARE_RATE)

    if (
        behavior.session_count is not None
        and behavior.session_count > 10
        and behavior.reengagement_rate is not None
        and behavior.reengagement_rate > 0.6
    ):
        signals.add(BehavioralSignal.RITUAL_PATTERNS)

    categories = behavior.content_categories
    if categories is not None:
        if len(categories) > 5:
            signals.add(BehavioralSignal.CROSS_GENRE_BRIDGING)
        elif len(categories) <= 2:
            signals.add(BehavioralSignal.NICHE_DRILLING)

    return frozenset(signals)


def has_sufficient_behavioral_data(behavior: BehavioralSignals | None) -> bool:
    """Enough sessions plus at least one of diversity or session depth."""
    if behavior is None or behavior.session_count is None:
        return False
    if behavior.session_count < MIN_SESSIONS_FOR_BEHAVIOR:
        return False
    return behavior.content_diversity is not None or behavior.session_depth is not None
