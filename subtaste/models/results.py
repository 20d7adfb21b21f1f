from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from subtaste.models.inputs import AestheticVector, BehavioralSignals, TraitVector


class Pole(str, Enum):
    HIGH = "high"
    LOW = "low"
    BALANCED = "balanced"


class AdoptionTiming(str, Enum):
    EARLY_WAVE = "early_wave"
    GROWTH_PHASE = "growth_phase"
    MAINSTREAM = "mainstream"
    LATE_DISCOVERY = "late_discovery"


class InfluenceIntensity(str, Enum):
    STRONG = "strong"
    NOTABLE = "notable"
    SUBTLE = "subtle"


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class CategoryScore(_Result):
    """Per-category similarity breakdown."""

    category_id: str
    trait: float
    aesthetic: float
    behavioral: float
    combined: float


class DerivedIndices(_Result):
    coherence: int = Field(ge=0, le=100, description="Subtaste index: 100 = single-category blend")
    exploration: int = Field(ge=0, le=100)
    early_adoption: int = Field(ge=0, le=100)

    def get(self, name: str) -> int:
        return getattr(self, name)


class Classification(_Result):
    """Primary category, blend weights and derived indices for one input."""

    primary: str
    blend: dict[str, float] = Field(description="Category id -> weight, sub-threshold entries dropped")
    indices: DerivedIndices
    scores: tuple[CategoryScore, ...] = Field(default=(), description="Per-category scores in catalog order")

    @property
    def coherence(self) -> int:
        return self.indices.coherence

    @property
    def exploration(self) -> int:
        return self.indices.exploration

    @property
    def early_adoption(self) -> int:
        return self.indices.early_adoption


class ScoringInput(_Result):
    """Immutable snapshot the downstream layers evaluate against."""

    traits: TraitVector
    aesthetics: AestheticVector
    behavior: BehavioralSignals | None = None
    classification: Classification

    @property
    def blend(self) -> dict[str, float]:
        return self.classification.blend

    @property
    def indices(self) -> DerivedIndices:
        return self.classification.indices


class TriggerMatch(_Result):
    id: str
    display_name: str
    description: str
    manifesto: str
    icon: str | None = None
    match_fraction: float = Field(ge=0.0, le=1.0)


class ModifierResult(_Result):
    id: str
    score: int = Field(ge=0, le=100)
    pole: Pole
    label: str
    short_label: str
    explanation: str
    insight: str


class SceneFitResult(_Result):
    id: str
    name: str
    score: int
    timing: AdoptionTiming
    reasoning: str


class SecondaryInfluence(_Result):
    category_id: str
    weight: float
    intensity: InfluenceIntensity


class IdentityComponent(_Result):
    """One factor that drove the classification, with its relative weight."""

    kind: Literal["trait", "aesthetic", "behavioral", "temporal", "cross_modal"]
    key: str
    value: str
    weight: float
    source: str


class TasteReport(_Result):
    """Everything the engine derives from one profile."""

    profile_id: str | None = None
    taxonomy: str
    classification: Classification
    trigger: TriggerMatch | None = None
    modifiers: tuple[ModifierResult, ...] = ()
    archetype_phrase: str
    mode_string: str
    behavioral_summary: str
    scenes: tuple[SceneFitResult, ...] = ()
    secondary_influences: tuple[SecondaryInfluence, ...] = ()
    identity: tuple[IdentityComponent, ...] = ()
    has_sufficient_behavioral_data: bool = False
