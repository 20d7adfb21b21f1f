"""
Tests for the coherence, exploration and early-adoption indices.
"""

from __future__ import annotations

import pytest

from subtaste.core.constants import TRAIT_NAMES
from subtaste.models.inputs import BehavioralSignals
from subtaste.services.scoring import DerivedIndexComputer

# --- Coherence ---


def test_single_category_blend_is_fully_coherent():
    assert DerivedIndexComputer.coherence({"a": 1.0}, category_count=27) == 100


def test_uniform_blend_over_catalog_has_zero_coherence():
    blend = {f"c{i}": 0.125 for i in range(8)}
    assert DerivedIndexComputer.coherence(blend, category_count=8) == 0


def test_two_way_split_is_half_coherent_against_four_categories():
    assert DerivedIndexComputer.coherence({"a": 0.5, "b": 0.5}, category_count=4) == 50


def test_coherence_normalises_unnormalised_blend():
    """Weights summing to less than one are rescaled before the entropy."""
    assert DerivedIndexComputer.coherence({"a": 0.4, "b": 0.4}, category_count=4) == 50


def test_empty_blend_coherence_is_neutral():
    assert DerivedIndexComputer.coherence({}, category_count=27) == 50


# --- Exploration and early adoption ---


def test_neutral_traits_score_fifty(make_traits):
    traits = make_traits()
    assert DerivedIndexComputer.exploration(traits) == 50
    assert DerivedIndexComputer.early_adoption(traits) == 50


def test_diversity_blends_seventy_thirty(make_traits):
    behavior = BehavioralSignals(content_diversity=1.0)
    assert DerivedIndexComputer.exploration(make_traits(), behavior) == 65


def test_exploration_ignores_behavior_without_diversity(make_traits):
    behavior = BehavioralSignals(save_rate=0.9)
    assert DerivedIndexComputer.exploration(make_traits(), behavior) == 50


@pytest.mark.parametrize(
    "level, exploration, early_adoption",
    [
        (0.0, 15, 0),
        (1.0, 85, 100),
    ],
)
def test_boundary_vectors(make_traits, level, exploration, early_adoption):
    traits = make_traits(**{name: level for name in TRAIT_NAMES})
    assert DerivedIndexComputer.exploration(traits) == exploration
    assert DerivedIndexComputer.early_adoption(traits) == early_adoption


@pytest.mark.parametrize("level", [0.0, 1.0])
def test_indices_are_integers_in_range_on_boundaries(engine, make_traits, level):
    indices = engine.classify(make_traits(**{name: level for name in TRAIT_NAMES})).indices
    for value in (indices.coherence, indices.exploration, indices.early_adoption):
        assert isinstance(value, int)
        assert 0 <= value <= 100
