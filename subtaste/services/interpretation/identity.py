"""
Structured breakdown of what drove a classification.

Emits ids, enums and weights only; turning them into prose belongs to the
presentation layer.
"""

from subtaste.core.constants import (
    DOMINANT_TRAIT_HIGH,
    DOMINANT_TRAIT_LIMIT,
    DOMINANT_TRAIT_LOW,
    SECONDARY_LIMIT,
    SECONDARY_MIN_WEIGHT,
    SECONDARY_NOTABLE,
    SECONDARY_STRONG,
    TRAIT_NAMES,
)
from subtaste.models.results import IdentityComponent, InfluenceIntensity, ScoringInput, SecondaryInfluence
from subtaste.models.taxonomy import Taxonomy


def _intensity(weight: float) -> InfluenceIntensity:
    if weight > SECONDARY_STRONG:
        return InfluenceIntensity.STRONG
    if weight > SECONDARY_NOTABLE:
        return InfluenceIntensity.NOTABLE
    return InfluenceIntensity.SUBTLE


def secondary_influences(primary: str, blend: dict[str, float]) -> list[SecondaryInfluence]:
    """Up to three non-primary categories with a material blend weight, heaviest first."""
    candidates = [(cid, w) for cid, w in blend.items() if cid != primary and w > SECONDARY_MIN_WEIGHT]
    candidates.sort(key=lambda item: item[1], reverse=True)
    return [
        SecondaryInfluence(category_id=cid, weight=weight, intensity=_intensity(weight))
        for cid, weight in candidates[:SECONDARY_LIMIT]
    ]


def _extremity(value: float) -> float:
    return abs(value - 0.5) * 2


def _trait_components(snapshot: ScoringInput) -> list[IdentityComponent]:
    dominant = []
    for name in TRAIT_NAMES:
        value = snapshot.traits.get(name)
        if value >= DOMINANT_TRAIT_HIGH or value <= DOMINANT_TRAIT_LOW:
            dominant.append((name, value))
    dominant.sort(key=lambda item: abs(item[1] - 0.5), reverse=True)

    return [
        IdentityComponent(
            kind="trait",
            key=name,
            value="high" if value >= DOMINANT_TRAIT_HIGH else "low",
            weight=_extremity(value),
            source="IRT-scored quiz responses",
        )
        for name, value in dominant[:DOMINANT_TRAIT_LIMIT]
    ]


def _aesthetic_components(snapshot: ScoringInput) -> list[IdentityComponent]:
    aesthetics = snapshot.aesthetics
    components = []

    if aesthetics.darkness > 0.7 or aesthetics.darkness < 0.3:
        components.append(
            IdentityComponent(
                kind="aesthetic",
                key="darkness",
                value="dark" if aesthetics.darkness > 0.7 else "bright",
                weight=_extremity(aesthetics.darkness),
                source="Quiz aesthetic questions",
            )
        )

    ovs = aesthetics.organic_vs_synthetic
    if ovs > 0.7 or ovs < 0.3:
        components.append(
            IdentityComponent(
                kind="aesthetic",
                key="organic_vs_synthetic",
                value="synthetic" if ovs > 0.7 else "organic",
                weight=_extremity(ovs),
                source="Quiz aesthetic questions",
            )
        )
    return components


def _behavioral_components(snapshot: ScoringInput) -> list[IdentityComponent]:
    behavior = snapshot.behavior
    if behavior is None:
        return []

    components = []
    if behavior.content_diversity is not None:
        diversity = behavior.content_diversity
        level = "high" if diversity > 0.6 else "low" if diversity < 0.4 else "moderate"
        components.append(
            IdentityComponent(
                kind="behavioral",
                key="content_diversity",
                value=level,
                weight=0.7,
                source="Interaction pattern analysis",
            )
        )
    if behavior.session_depth is not None:
        components.append(
            IdentityComponent(
                kind="behavioral",
                key="session_depth",
                value="deep" if behavior.session_depth > 10 else "shallow",
                weight=0.6,
                source="Session engagement metrics",
            )
        )
    return components


def identity_components(snapshot: ScoringInput, taxonomy: Taxonomy) -> list[IdentityComponent]:
    """
    Factors behind the result, grouped trait, aesthetic, behavioral, temporal, cross-modal.

    Args:
        snapshot: The scored input.
        taxonomy: Taxonomy the input was classified against, for the primary's display name.

    Returns:
        Components in group order.
    """
    components = _trait_components(snapshot) + _aesthetic_components(snapshot) + _behavioral_components(snapshot)

    early = snapshot.indices.early_adoption
    if early >= 70:
        tendency = "early_adopter"
    elif early <= 30:
        tendency = "late_wave"
    else:
        tendency = "mainstream"
    components.append(
        IdentityComponent(
            kind="temporal",
            key="adoption_tendency",
            value=tendency,
            weight=early / 100,
            source="Trait-derived prediction",
        )
    )

    primary = snapshot.classification.primary
    category = taxonomy.get_category(primary)
    components.append(
        IdentityComponent(
            kind="cross_modal",
            key="category_anchor",
            value=category.display_name if category else primary,
            weight=snapshot.blend.get(primary, 0.0),
            source="Multi-trait constellation matching",
        )
    )
    return components
