"""
Tests for modifier formulas, pole labelling and the phrase helpers.
"""

from __future__ import annotations

import pytest

from subtaste.catalogs.modifiers import MODIFIERS
from subtaste.core.constants import DEFAULT_ARCHETYPE_PHRASE, DEFAULT_BEHAVIORAL_SUMMARY, DEFAULT_MODE_STRING
from subtaste.core.exceptions import TaxonomyError
from subtaste.models.inputs import AestheticVector, BehavioralSignals
from subtaste.models.results import ModifierResult, Pole
from subtaste.models.taxonomy import ModifierDefinition
from subtaste.services.interpretation import (
    ModifierScorer,
    archetype_phrase,
    behavioral_summary,
    classify_pole,
    mode_string,
)

DEFINITIONS = tuple(ModifierDefinition(**data) for data in MODIFIERS)


def _definition(modifier_id: str) -> ModifierDefinition:
    return next(d for d in DEFINITIONS if d.id == modifier_id)


def _result(modifier_id: str, score: int, insight: str = "") -> ModifierResult:
    pole = classify_pole(score)
    return ModifierResult(
        id=modifier_id,
        score=score,
        pole=pole,
        label=modifier_id,
        short_label=f"{modifier_id}-{pole.value}",
        explanation="",
        insight=insight or f"{modifier_id} insight",
    )


# --- Poles ---


@pytest.mark.parametrize(
    "score, pole",
    [
        (100, Pole.HIGH),
        (65, Pole.HIGH),
        (64, Pole.BALANCED),
        (50, Pole.BALANCED),
        (36, Pole.BALANCED),
        (35, Pole.LOW),
        (0, Pole.LOW),
    ],
)
def test_classify_pole(score, pole):
    assert classify_pole(score) == pole


def test_high_pole_uses_high_texts(make_snapshot, make_traits):
    snapshot = make_snapshot(traits=make_traits(extraversion=1.0, agreeableness=1.0))
    result = ModifierScorer.score_one(_definition("social_orientation"), snapshot)
    assert result.score == 75
    assert result.pole is Pole.HIGH
    assert result.label == result.short_label == "Taste Sharer"
    assert result.insight == _definition("social_orientation").high_insight


def test_low_pole_uses_low_texts(make_snapshot, make_traits):
    snapshot = make_snapshot(traits=make_traits(extraversion=0.0, agreeableness=0.0))
    result = ModifierScorer.score_one(_definition("social_orientation"), snapshot)
    assert result.score == 25
    assert result.pole is Pole.LOW
    assert result.label == "Taste Keeper"


def test_balanced_pole_joins_labels(make_snapshot):
    result = ModifierScorer.score_one(_definition("social_orientation"), make_snapshot())
    assert result.score == 50
    assert result.label == "Taste Sharer/Taste Keeper"
    assert result.short_label == "Balanced"
    assert result.explanation == _definition("social_orientation").balanced_description


@pytest.mark.parametrize(
    "offset, score",
    [
        (14.6, 65),  # raw 64.6
        (-14.6, 35),  # raw 35.4
    ],
)
def test_pole_uses_unrounded_score(make_snapshot, make_traits, offset, score):
    snapshot = make_snapshot(traits=make_traits(extraversion=0.5 + offset / 30))
    result = ModifierScorer.score_one(_definition("social_orientation"), snapshot)
    assert result.score == score
    assert result.pole is Pole.BALANCED
    assert result.short_label == "Balanced"
    assert archetype_phrase([result]) == DEFAULT_ARCHETYPE_PHRASE


def test_scores_are_clamped(make_snapshot, make_traits):
    snapshot = make_snapshot(
        traits=make_traits(extraversion=1.0, agreeableness=1.0),
        behavior=BehavioralSignals(share_rate=1.0),
    )
    assert ModifierScorer.score_one(_definition("social_orientation"), snapshot).score == 100


# --- Formulas ---


def test_neutral_snapshot_is_balanced_everywhere(make_snapshot):
    results = ModifierScorer.score_all(DEFINITIONS, make_snapshot())
    assert [r.id for r in results] == [d.id for d in DEFINITIONS]
    assert all(r.score == 50 for r in results)
    assert all(r.pole is Pole.BALANCED for r in results)
    assert archetype_phrase(results) == DEFAULT_ARCHETYPE_PHRASE
    assert mode_string(results) == DEFAULT_MODE_STRING
    assert behavioral_summary(results) == DEFAULT_BEHAVIORAL_SUMMARY


def test_single_category_blend_is_fully_coherent(make_snapshot):
    snapshot = make_snapshot(blend={"alpha": 1.0}, coherence=100)
    assert ModifierScorer.score_one(_definition("taste_coherence"), snapshot).score == 100


def test_adoption_timing_follows_early_adoption_index(make_snapshot):
    early = ModifierScorer.score_one(_definition("adoption_timing"), make_snapshot(early_adoption=80))
    late = ModifierScorer.score_one(_definition("adoption_timing"), make_snapshot(early_adoption=20))
    assert early.pole is Pole.HIGH
    assert late.pole is Pole.LOW


def test_discovery_drive_mixes_novelty_and_diversity(make_snapshot):
    behavior = BehavioralSignals(novelty_preference=1.0, content_diversity=1.0)
    result = ModifierScorer.score_one(_definition("discovery_drive"), make_snapshot(behavior=behavior))
    assert result.score == 75


def test_intensity_reads_energy_range(make_snapshot):
    loud = AestheticVector(energy_min=0.9, energy_max=1.0, complexity=0.9, minimal_vs_maximal=0.9)
    result = ModifierScorer.score_one(_definition("intensity_preference"), make_snapshot(aesthetics=loud))
    assert result.pole is Pole.HIGH


def test_check_formulas_rejects_unknown():
    bad = ModifierDefinition(**{**MODIFIERS[0], "formula": "astrology"})
    with pytest.raises(TaxonomyError, match="astrology"):
        ModifierScorer.check_formulas((bad,))


def test_check_formulas_accepts_built_ins():
    ModifierScorer.check_formulas(DEFINITIONS)


# --- Phrases ---


def test_archetype_phrase_takes_two_most_distinctive():
    results = [_result("a", 70), _result("b", 10), _result("c", 50), _result("d", 90)]
    assert archetype_phrase(results) == "b-low, d-high"


def test_archetype_phrase_ties_keep_catalog_order():
    results = [_result("a", 80), _result("b", 20), _result("c", 80)]
    assert archetype_phrase(results) == "a-high, b-low"


def test_mode_string_combines_known_dimensions():
    results = [
        _result("adoption_timing", 80),
        _result("taste_coherence", 20),
        _result("engagement_depth", 50),
    ]
    assert mode_string(results) == "Early-Adopter, High-Entropy mode"


def test_mode_string_lists_depth_last():
    results = [_result("engagement_depth", 90), _result("taste_coherence", 90)]
    assert mode_string(results) == "Coherent, Deep-Diver mode"


def test_behavioral_summary_uses_three_most_distinctive():
    results = [
        _result("a", 95, "First."),
        _result("b", 40, "Quiet."),
        _result("c", 10, "Second."),
        _result("d", 66, "Third."),
        _result("e", 35, "Fourth."),
    ]
    # top three by distance: a (45), c (40), d (16)
    assert behavioral_summary(results) == "First. Second. Third."


def test_behavioral_summary_ignores_balanced_entries_in_top_three():
    results = [_result("a", 90, "Strong."), _result("b", 60, "Mild."), _result("c", 55, "Milder.")]
    assert behavioral_summary(results) == "Strong."
