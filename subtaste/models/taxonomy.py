from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from subtaste.core.constants import TRAIT_NAMES
from subtaste.models.inputs import BehavioralSignal

IndexName = Literal["coherence", "exploration", "early_adoption"]


class _Definition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


def _check_trait(name: str) -> str:
    if name not in TRAIT_NAMES:
        raise ValueError(f"unknown trait '{name}'")
    return name


def _check_bounds(minimum: float | None, maximum: float | None) -> None:
    if minimum is None and maximum is None:
        raise ValueError("bound needs a min, a max, or both")
    if minimum is not None and maximum is not None and minimum > maximum:
        raise ValueError(f"min {minimum} is greater than max {maximum}")


class TraitRange(_Definition):
    """Acceptable [min, max] band for one trait."""

    min: float = Field(ge=0.0, le=1.0)
    max: float = Field(ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _ordered(self) -> "TraitRange":
        if self.min > self.max:
            raise ValueError(f"trait range min {self.min} is greater than max {self.max}")
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def distance(self, value: float) -> float:
        """Distance from the nearest edge of the range (0 when inside)."""
        if value < self.min:
            return self.min - value
        if value > self.max:
            return value - self.max
        return 0.0


class CategoryDefinition(_Definition):
    """One archetypal category of a taxonomy."""

    id: str = Field(min_length=1)
    display_name: str
    description: str = ""
    trait_ranges: dict[str, TraitRange] = Field(description="Trait name -> acceptable range, all traits required")
    visual_keywords: tuple[str, ...] = ()
    music_keywords: tuple[str, ...] = ()
    exploration_leaning: bool = Field(default=False, description="Bonus for users with high content diversity")
    example_scenes: tuple[str, ...] = ()

    @field_validator("trait_ranges")
    @classmethod
    def _covers_all_traits(cls, ranges: dict[str, TraitRange]) -> dict[str, TraitRange]:
        for name in ranges:
            _check_trait(name)
        missing = [name for name in TRAIT_NAMES if name not in ranges]
        if missing:
            raise ValueError(f"missing trait ranges: {', '.join(missing)}")
        return ranges

    @property
    def keywords(self) -> tuple[str, ...]:
        return self.visual_keywords + self.music_keywords


# Trigger predicates


class BlendThreshold(_Definition):
    kind: Literal["blend"] = "blend"
    category_id: str
    minimum: float = Field(gt=0.0, le=1.0)


class TraitBound(_Definition):
    kind: Literal["trait"] = "trait"
    trait: str
    min: float | None = Field(default=None, ge=0.0, le=1.0)
    max: float | None = Field(default=None, ge=0.0, le=1.0)

    @field_validator("trait")
    @classmethod
    def _known_trait(cls, name: str) -> str:
        return _check_trait(name)

    @model_validator(mode="after")
    def _has_bound(self) -> "TraitBound":
        _check_bounds(self.min, self.max)
        return self


class IndexBound(_Definition):
    kind: Literal["index"] = "index"
    index: IndexName
    min: int | None = Field(default=None, ge=0, le=100)
    max: int | None = Field(default=None, ge=0, le=100)

    @model_validator(mode="after")
    def _has_bound(self) -> "IndexBound":
        _check_bounds(self.min, self.max)
        return self


class SignalMembership(_Definition):
    kind: Literal["signal"] = "signal"
    signal: BehavioralSignal


TriggerPredicate = Annotated[
    Union[BlendThreshold, TraitBound, IndexBound, SignalMembership],
    Field(discriminator="kind"),
]


class TriggerDefinition(_Definition):
    """A sub-state (flavor) gated by partial-credit predicate matching."""

    id: str = Field(min_length=1)
    display_name: str
    description: str = ""
    manifesto: str = ""
    icon: str | None = None
    predicates: tuple[TriggerPredicate, ...] = Field(min_length=1)


class ModifierDefinition(_Definition):
    """
    A bipolar modifier dimension.

    `formula` names a scoring function registered in
    `subtaste.services.interpretation.modifiers.MODIFIER_FORMULAS`.
    """

    id: str = Field(min_length=1)
    formula: str
    high_label: str
    low_label: str
    high_description: str
    low_description: str
    balanced_description: str
    high_insight: str
    low_insight: str
    balanced_insight: str


class SceneProfile(_Definition):
    """A subculture/scene scored for fit against the blend and traits."""

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    affinity_categories: tuple[str, ...] = Field(min_length=1)
    trait_weights: dict[str, float] = Field(
        default_factory=dict, description="Signed weights; negative means a low trait value favors the scene"
    )

    @field_validator("trait_weights")
    @classmethod
    def _known_traits(cls, weights: dict[str, float]) -> dict[str, float]:
        for name in weights:
            _check_trait(name)
        return weights


def _duplicates(ids: list[str]) -> list[str]:
    seen: set[str] = set()
    dupes = []
    for item in ids:
        if item in seen and item not in dupes:
            dupes.append(item)
        seen.add(item)
    return dupes


class Taxonomy(_Definition):
    """
    Immutable bundle of every table the engine evaluates against.

    Catalog order is significant: it breaks ties in primary selection and
    trigger matching.
    """

    name: str
    categories: tuple[CategoryDefinition, ...] = Field(min_length=1)
    triggers: tuple[TriggerDefinition, ...] = ()
    modifiers: tuple[ModifierDefinition, ...] = ()
    scenes: tuple[SceneProfile, ...] = ()

    @model_validator(mode="after")
    def _cross_references(self) -> "Taxonomy":
        for label, items in (
            ("category", self.categories),
            ("trigger", self.triggers),
            ("modifier", self.modifiers),
            ("scene", self.scenes),
        ):
            dupes = _duplicates([item.id for item in items])
            if dupes:
                raise ValueError(f"duplicate {label} ids: {', '.join(dupes)}")

        known = set(self.category_ids)
        for trigger in self.triggers:
            for predicate in trigger.predicates:
                if isinstance(predicate, BlendThreshold) and predicate.category_id not in known:
                    raise ValueError(f"trigger '{trigger.id}' references unknown category '{predicate.category_id}'")
        for scene in self.scenes:
            unknown = [cid for cid in scene.affinity_categories if cid not in known]
            if unknown:
                raise ValueError(f"scene '{scene.id}' references unknown categories: {', '.join(unknown)}")
        return self

    @property
    def category_ids(self) -> list[str]:
        return [category.id for category in self.categories]

    def get_category(self, category_id: str) -> CategoryDefinition | None:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None
