"""
Tests for per-category similarity scoring.
"""

from __future__ import annotations

import pytest

from subtaste.core.constants import TRAIT_NAMES
from subtaste.models.inputs import AestheticVector, BehavioralSignals
from subtaste.services.scoring import SimilarityScorer

# --- Trait similarity ---


def test_trait_inside_every_range_scores_one(make_traits, make_category):
    category = make_category(low=0.6, high=1.0)
    assert SimilarityScorer.score_trait(make_traits(**{n: 0.8 for n in TRAIT_NAMES}), category) == pytest.approx(1.0)


def test_trait_outside_range_decays_linearly(make_traits, make_category):
    """0.1 outside every range loses 0.2 per trait."""
    category = make_category(low=0.0, high=0.4)
    assert SimilarityScorer.score_trait(make_traits(), category) == pytest.approx(0.8)


def test_trait_far_outside_range_floors_at_zero(make_traits, make_category):
    category = make_category(low=0.0, high=0.4)
    traits = make_traits(**{n: 1.0 for n in TRAIT_NAMES})
    assert SimilarityScorer.score_trait(traits, category) == pytest.approx(0.0)


def test_trait_dimensions_weigh_equally(make_traits, make_category):
    """One trait 0.25 outside its range costs 0.5 of one eighth."""
    category = make_category(low=0.0, high=0.5)
    traits = make_traits(openness=0.75)
    assert SimilarityScorer.score_trait(traits, category) == pytest.approx(7.5 / 8)


# --- Aesthetic similarity ---


def test_aesthetic_without_directional_keywords_is_neutral(make_category):
    category = make_category(visual=("hazy",), music=("ethereal",))
    assert SimilarityScorer.score_aesthetic(AestheticVector(), category) == 0.5


def test_dark_keywords_reward_darkness(make_category):
    category = make_category(visual=("noir",))
    assert SimilarityScorer.score_aesthetic(AestheticVector(darkness=0.8), category) == pytest.approx(1.0)
    assert SimilarityScorer.score_aesthetic(AestheticVector(darkness=0.5), category) == pytest.approx(0.5)


def test_bright_keywords_reward_low_darkness(make_category):
    category = make_category(visual=("golden",))
    assert SimilarityScorer.score_aesthetic(AestheticVector(darkness=0.2), category) == pytest.approx(1.0)
    assert SimilarityScorer.score_aesthetic(AestheticVector(darkness=0.7), category) == pytest.approx(0.3)


def test_dark_group_wins_over_bright_in_same_category(make_category):
    """Only the first matching alternative of a group is scored."""
    category = make_category(visual=("dark", "bright"))
    assert SimilarityScorer.score_aesthetic(AestheticVector(darkness=0.9), category) == pytest.approx(1.0)


def test_slow_tempo_keywords(make_category):
    category = make_category(music=("slow",))
    slow = AestheticVector(tempo_min=60, tempo_max=90)
    assert SimilarityScorer.score_aesthetic(slow, category) == pytest.approx(1.0)
    assert SimilarityScorer.score_aesthetic(AestheticVector(), category) == pytest.approx(0.5)


def test_matched_dimensions_are_averaged(make_category):
    """Dark visual (1.0) and digital music (0.2) average to 0.6."""
    category = make_category(visual=("dark",), music=("electronic",))
    aesthetics = AestheticVector(darkness=0.9, acoustic_vs_digital=0.2)
    assert SimilarityScorer.score_aesthetic(aesthetics, category) == pytest.approx(0.6)


# --- Behavioral similarity ---


def test_behavioral_absent_is_neutral(make_category):
    assert SimilarityScorer.score_behavioral(None, make_category(visual=("dark",))) == 0.5


def test_behavioral_without_favorite_tags_is_neutral(make_category):
    behavior = BehavioralSignals(content_diversity=0.5)
    assert SimilarityScorer.score_behavioral(behavior, make_category(visual=("dark",))) == 0.5


def test_behavioral_tag_overlap_fraction(make_category):
    category = make_category(visual=("dark", "noir"))
    assert SimilarityScorer.score_behavioral(
        BehavioralSignals(favorite_tags=("Dark", "noir")), category
    ) == pytest.approx(1.0)
    # Substring match in either direction
    assert SimilarityScorer.score_behavioral(
        BehavioralSignals(favorite_tags=("darkwave",)), category
    ) == pytest.approx(0.5)


def test_exploration_bonus_requires_high_diversity(make_category):
    category = make_category(exploration_leaning=True)
    high = BehavioralSignals(content_diversity=0.9)
    low = BehavioralSignals(content_diversity=0.5)
    assert SimilarityScorer.score_behavioral(high, category) == pytest.approx(0.6)
    assert SimilarityScorer.score_behavioral(low, category) == pytest.approx(0.5)


def test_exploration_bonus_is_capped(make_category):
    category = make_category(visual=("dark",), exploration_leaning=True)
    behavior = BehavioralSignals(content_diversity=1.0, favorite_tags=("dark",))
    assert SimilarityScorer.score_behavioral(behavior, category) == pytest.approx(1.0)