"""
Tests for behavioral signal detection and the data sufficiency check.
"""

from __future__ import annotations

from subtaste.models.inputs import BehavioralSignal, BehavioralSignals
from subtaste.services.interpretation import detect_signals, has_sufficient_behavioral_data


def test_no_behavior_no_signals():
    assert detect_signals(None) == frozenset()


def test_engagement_thresholds():
    behavior = BehavioralSignals(
        content_diversity=0.8,
        session_depth=12,
        novelty_preference=0.75,
        save_rate=0.35,
        share_rate=0.25,
    )
    assert detect_signals(behavior) == {
        BehavioralSignal.HIGH_INTERACTION_DIVERSITY,
        BehavioralSignal.DEEP_ENGAGEMENT,
        BehavioralSignal.RAPID_EXPLORATION,
        BehavioralSignal.HIGH_SAVE_RATE,
        BehavioralSignal.HIGH_SHARE_RATE,
    }


def test_thresholds_are_strict():
    behavior = BehavioralSignals(content_diversity=0.7, session_depth=10, save_rate=0.3, share_rate=0.2)
    assert detect_signals(behavior) == frozenset()


def test_low_diversity():
    assert BehavioralSignal.LOW_INTERACTION_DIVERSITY in detect_signals(BehavioralSignals(content_diversity=0.1))


def test_ritual_patterns_need_sessions_and_reengagement():
    assert BehavioralSignal.RITUAL_PATTERNS in detect_signals(
        BehavioralSignals(session_count=11, reengagement_rate=0.7)
    )
    assert BehavioralSignal.RITUAL_PATTERNS not in detect_signals(
        BehavioralSignals(session_count=11, reengagement_rate=0.5)
    )
    assert BehavioralSignal.RITUAL_PATTERNS not in detect_signals(BehavioralSignals(reengagement_rate=0.9))


def test_category_breadth():
    wide = BehavioralSignals(content_categories=("a", "b", "c", "d", "e", "f"))
    narrow = BehavioralSignals(content_categories=("a", "b"))
    middle = BehavioralSignals(content_categories=("a", "b", "c"))
    assert BehavioralSignal.CROSS_GENRE_BRIDGING in detect_signals(wide)
    assert BehavioralSignal.NICHE_DRILLING in detect_signals(narrow)
    assert detect_signals(middle) == frozenset()


def test_undetected_tags_never_emitted():
    behavior = BehavioralSignals(
        content_diversity=1.0,
        session_depth=50,
        novelty_preference=1.0,
        save_rate=1.0,
        share_rate=1.0,
        session_count=100,
        reengagement_rate=1.0,
        content_categories=tuple("abcdefg"),
    )
    signals = detect_signals(behavior)
    assert BehavioralSignal.TREND_LEADING not in signals
    assert BehavioralSignal.TREND_FOLLOWING not in signals
    assert BehavioralSignal.IMPULSE_DISCOVERY not in signals


def test_sufficient_behavioral_data():
    assert has_sufficient_behavioral_data(BehavioralSignals(session_count=3, content_diversity=0.5))
    assert has_sufficient_behavioral_data(BehavioralSignals(session_count=5, session_depth=4))
    assert not has_sufficient_behavioral_data(BehavioralSignals(session_count=2, content_diversity=0.5))
    assert not has_sufficient_behavioral_data(BehavioralSignals(session_count=10))
    assert not has_sufficient_behavioral_data(None)
