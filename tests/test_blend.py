"""
Tests for score combination, softmax blending and primary selection.
"""

from __future__ import annotations

import pytest

from subtaste.core.constants import TRAIT_NAMES
from subtaste.models.inputs import AestheticVector
from subtaste.models.results import CategoryScore
from subtaste.services.scoring import BlendComputer


def _score(category_id: str, combined: float) -> CategoryScore:
    return CategoryScore(category_id=category_id, trait=0.0, aesthetic=0.0, behavioral=0.0, combined=combined)


def test_combine_uses_fixed_weights():
    assert BlendComputer.combine(1.0, 1.0, 1.0) == pytest.approx(1.0)
    assert BlendComputer.combine(1.0, 0.0, 0.0) == pytest.approx(0.40)
    assert BlendComputer.combine(0.0, 1.0, 0.0) == pytest.approx(0.35)
    assert BlendComputer.combine(0.0, 0.0, 1.0) == pytest.approx(0.25)


def test_equal_scores_split_evenly():
    blend = BlendComputer.to_blend({"a": 0.7, "b": 0.7, "c": 0.7})
    assert blend == {"a": 0.333, "b": 0.333, "c": 0.333}


def test_temperature_sharpens_toward_best():
    """exp(-0.5) against exp(0): 0.622 / 0.378."""
    blend = BlendComputer.to_blend({"a": 0.5, "b": 0.4})
    assert blend == {"a": 0.622, "b": 0.378}


def test_sub_threshold_weights_dropped_without_renormalising():
    blend = BlendComputer.to_blend({"a": 1.0, "b": 0.0})
    assert blend == {"a": 0.993}
    assert sum(blend.values()) < 1.0


def test_empty_scores_give_empty_blend():
    assert BlendComputer.to_blend({}) == {}


def test_primary_tie_goes_to_first_in_catalog_order():
    scores = [_score("first", 0.8), _score("second", 0.8), _score("third", 0.5)]
    assert BlendComputer.select_primary(scores) == "first"


def test_primary_is_highest_combined_score():
    scores = [_score("first", 0.5), _score("second", 0.9), _score("third", 0.9)]
    assert BlendComputer.select_primary(scores) == "second"


def test_scores_follow_catalog_order(synthetic_taxonomy, make_traits):
    scores = BlendComputer.score_categories(synthetic_taxonomy, make_traits(), AestheticVector())
    assert [s.category_id for s in scores] == ["alpha", "beta", "gamma"]


def test_compute_picks_matching_category(synthetic_taxonomy, make_traits):
    traits = make_traits(**{name: 0.9 for name in TRAIT_NAMES})
    primary, blend, _ = BlendComputer.compute(synthetic_taxonomy, traits, AestheticVector())
    assert primary == "beta"
    assert blend["beta"] == max(blend.values())


@pytest.mark.parametrize("level", [0.0, 0.2, 0.5, 0.8, 1.0])
def test_blend_weights_bounded_and_primary_is_heaviest(engine, make_traits, level):
    traits = make_traits(**{name: level for name in TRAIT_NAMES})
    result = engine.classify(traits)
    assert result.blend
    assert all(0.0 < w <= 1.0 for w in result.blend.values())
    assert result.blend[result.primary] == max(result.blend.values())