"""
Shared fixtures: a small synthetic taxonomy, vector factories and snapshot builders.
"""

from __future__ import annotations

import pytest

from subtaste.catalogs.modifiers import MODIFIERS
from subtaste.core.constants import TRAIT_NAMES
from subtaste.models.inputs import AestheticVector, BehavioralSignals, TraitVector
from subtaste.models.results import Classification, DerivedIndices, ScoringInput
from subtaste.models.taxonomy import CategoryDefinition, Taxonomy
from subtaste.services.engine import TasteEngine
from subtaste.services.taxonomy_loader import build_taxonomy, load_taxonomy


def _ranges(low: float, high: float) -> dict[str, dict[str, float]]:
    return {name: {"min": low, "max": high} for name in TRAIT_NAMES}


@pytest.fixture
def make_traits():
    """TraitVector factory: every trait 0.5 unless overridden."""

    def _make(**overrides: float) -> TraitVector:
        values = {name: 0.5 for name in TRAIT_NAMES}
        values.update(overrides)
        return TraitVector(**values)

    return _make


@pytest.fixture
def make_category():
    def _make(
        category_id: str = "cat",
        low: float = 0.0,
        high: float = 1.0,
        visual: tuple[str, ...] = (),
        music: tuple[str, ...] = (),
        exploration_leaning: bool = False,
    ) -> CategoryDefinition:
        return CategoryDefinition(
            id=category_id,
            display_name=category_id.title(),
            trait_ranges=_ranges(low, high),
            visual_keywords=visual,
            music_keywords=music,
            exploration_leaning=exploration_leaning,
        )

    return _make


@pytest.fixture
def synthetic_data() -> dict:
    """Raw tables for a three-category taxonomy."""
    return {
        "name": "synthetic",
        "categories": [
            {
                "id": "alpha",
                "display_name": "Alpha",
                "trait_ranges": _ranges(0.0, 0.4),
                "visual_keywords": ["dark"],
            },
            {
                "id": "beta",
                "display_name": "Beta",
                "trait_ranges": _ranges(0.6, 1.0),
                "visual_keywords": ["bright"],
            },
            {
                "id": "gamma",
                "display_name": "Gamma",
                "trait_ranges": _ranges(0.3, 0.7),
                "exploration_leaning": True,
            },
        ],
        "triggers": [
            {
                "id": "beta_state",
                "display_name": "Beta State",
                "predicates": [
                    {"kind": "blend", "category_id": "beta", "minimum": 0.5},
                    {"kind": "trait", "trait": "openness", "min": 0.6},
                ],
            },
            {
                "id": "calm",
                "display_name": "Calm",
                "predicates": [
                    {"kind": "trait", "trait": "neuroticism", "max": 0.3},
                    {"kind": "signal", "signal": "deep_engagement"},
                ],
            },
        ],
        "modifiers": MODIFIERS,
        "scenes": [
            {
                "id": "beta_scene",
                "name": "Beta Scene",
                "description": "Where beta gathers",
                "affinity_categories": ["beta"],
                "trait_weights": {"openness": 1.0},
            },
            {
                "id": "alpha_scene",
                "name": "Alpha Scene",
                "description": "Where alpha gathers",
                "affinity_categories": ["alpha"],
                "trait_weights": {"openness": -1.0},
            },
        ],
    }


@pytest.fixture
def synthetic_taxonomy(synthetic_data) -> Taxonomy:
    return build_taxonomy(synthetic_data, source="synthetic")


@pytest.fixture
def synthetic_engine(synthetic_taxonomy) -> TasteEngine:
    return TasteEngine(synthetic_taxonomy)


@pytest.fixture(scope="session")
def constellations() -> Taxonomy:
    return load_taxonomy("constellations")


@pytest.fixture(scope="session")
def engine(constellations) -> TasteEngine:
    return TasteEngine(constellations)


@pytest.fixture
def make_snapshot(make_traits):
    """
    Build a ScoringInput directly, bypassing classification, so downstream
    layers can be tested against exact blend weights and indices.
    """

    def _make(
        traits: TraitVector | None = None,
        blend: dict[str, float] | None = None,
        coherence: int = 50,
        exploration: int = 50,
        early_adoption: int = 50,
        behavior: BehavioralSignals | None = None,
        aesthetics: AestheticVector | None = None,
        primary: str | None = None,
    ) -> ScoringInput:
        blend = blend or {}
        classification = Classification(
            primary=primary or next(iter(blend), "alpha"),
            blend=blend,
            indices=DerivedIndices(coherence=coherence, exploration=exploration, early_adoption=early_adoption),
        )
        return ScoringInput(
            traits=traits or make_traits(),
            aesthetics=aesthetics or AestheticVector(),
            behavior=behavior,
            classification=classification,
        )

    return _make
