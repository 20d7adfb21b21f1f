from enum import Enum
from typing import Any

from loguru import logger
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel


def _clamp(value: float, low: float, high: float, field: str | None = None) -> float:
    clamped = max(low, min(high, value))
    if clamped != value:
        logger.warning(f"Clamped {field or 'value'} from {value} to {clamped}")
    return clamped


class BehavioralSignal(str, Enum):
    """Discrete behavior tags derived from engagement metrics."""

    HIGH_INTERACTION_DIVERSITY = "high_interaction_diversity"
    LOW_INTERACTION_DIVERSITY = "low_interaction_diversity"
    RAPID_EXPLORATION = "rapid_exploration"
    DEEP_ENGAGEMENT = "deep_engagement"
    RITUAL_PATTERNS = "ritual_patterns"
    IMPULSE_DISCOVERY = "impulse_discovery"
    CROSS_GENRE_BRIDGING = "cross_genre_bridging"
    NICHE_DRILLING = "niche_drilling"
    TREND_LEADING = "trend_leading"
    TREND_FOLLOWING = "trend_following"
    HIGH_SAVE_RATE = "high_save_rate"
    HIGH_SHARE_RATE = "high_share_rate"


class TraitVector(BaseModel):
    """
    Psychometric traits (Big Five plus taste-specific extensions).

    Every dimension is required; values outside [0, 1] are clamped, not rejected.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    openness: float
    conscientiousness: float
    extraversion: float
    agreeableness: float
    neuroticism: float
    novelty_seeking: float
    aesthetic_sensitivity: float
    risk_tolerance: float

    @field_validator("*")
    @classmethod
    def _clamp_unit(cls, value: float, info: ValidationInfo) -> float:
        return _clamp(value, 0.0, 1.0, info.field_name)

    def get(self, trait: str, default: float | None = None) -> float | None:
        """Look up a trait by its snake_case name."""
        if trait in type(self).model_fields:
            return getattr(self, trait)
        return default

    def as_dict(self) -> dict[str, float]:
        return self.model_dump()


class AestheticVector(BaseModel):
    """
    Visual and music preferences.

    Defaults are the neutral quiz baseline. Unit dimensions clamp to [0, 1],
    tempo is in BPM, and inverted min/max pairs are swapped before clamping.
    """

    model_config = ConfigDict(frozen=True)

    # Visual
    darkness: float = Field(default=0.5, validation_alias=AliasChoices("darkness", "darknessPreference"))
    complexity: float = Field(default=0.5, validation_alias=AliasChoices("complexity", "complexityPreference"))
    symmetry: float = Field(default=0.5, validation_alias=AliasChoices("symmetry", "symmetryPreference"))
    organic_vs_synthetic: float = Field(
        default=0.5, validation_alias=AliasChoices("organic_vs_synthetic", "organicVsSynthetic")
    )
    minimal_vs_maximal: float = Field(
        default=0.5, validation_alias=AliasChoices("minimal_vs_maximal", "minimalVsMaximal")
    )

    # Music
    tempo_min: float = Field(default=80.0, validation_alias=AliasChoices("tempo_min", "tempoRangeMin"))
    tempo_max: float = Field(default=140.0, validation_alias=AliasChoices("tempo_max", "tempoRangeMax"))
    energy_min: float = Field(default=0.3, validation_alias=AliasChoices("energy_min", "energyRangeMin"))
    energy_max: float = Field(default=0.7, validation_alias=AliasChoices("energy_max", "energyRangeMax"))
    dissonance_tolerance: float = Field(
        default=0.3, validation_alias=AliasChoices("dissonance_tolerance", "harmonicDissonanceTolerance")
    )
    rhythm: float = Field(default=0.5, validation_alias=AliasChoices("rhythm", "rhythmPreference"))
    acoustic_vs_digital: float = Field(
        default=0.5, validation_alias=AliasChoices("acoustic_vs_digital", "acousticVsDigital")
    )

    @model_validator(mode="before")
    @classmethod
    def _order_ranges(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for low_name, high_name in (("tempo_min", "tempo_max"), ("energy_min", "energy_max")):
            low_key = cls._resolve_key(data, low_name)
            high_key = cls._resolve_key(data, high_name)
            if low_key is None and high_key is None:
                continue
            try:
                low = float(data[low_key]) if low_key else cls.model_fields[low_name].default
                high = float(data[high_key]) if high_key else cls.model_fields[high_name].default
            except (TypeError, ValueError):
                # Let field validation report the bad value
                continue
            if low > high:
                logger.warning(f"Swapped inverted {low_name}/{high_name} range ({low} > {high})")
                data[low_key or low_name] = high
                data[high_key or high_name] = low
        return data

    @classmethod
    def _resolve_key(cls, data: dict, field_name: str) -> str | None:
        alias = cls.model_fields[field_name].validation_alias
        candidates = [field_name]
        if isinstance(alias, AliasChoices):
            candidates.extend(c for c in alias.choices if isinstance(c, str))
        for key in candidates:
            if key in data:
                return key
        return None

    @field_validator(
        "darkness",
        "complexity",
        "symmetry",
        "organic_vs_synthetic",
        "minimal_vs_maximal",
        "energy_min",
        "energy_max",
        "dissonance_tolerance",
        "rhythm",
        "acoustic_vs_digital",
    )
    @classmethod
    def _clamp_unit(cls, value: float, info: ValidationInfo) -> float:
        return _clamp(value, 0.0, 1.0, info.field_name)

    @field_validator("tempo_min")
    @classmethod
    def _clamp_tempo_min(cls, value: float) -> float:
        return _clamp(value, 40.0, 200.0, "tempo_min")

    @field_validator("tempo_max")
    @classmethod
    def _clamp_tempo_max(cls, value: float) -> float:
        return _clamp(value, 60.0, 220.0, "tempo_max")

    @property
    def tempo_center(self) -> float:
        return (self.tempo_min + self.tempo_max) / 2

    @property
    def energy_center(self) -> float:
        return (self.energy_min + self.energy_max) / 2


class BehavioralSignals(BaseModel):
    """
    Sparse engagement metrics for returning users.

    Any field may be missing; consumers fall back to neutral defaults.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    content_diversity: float | None = None
    session_depth: float | None = None  # interactions per session
    reengagement_rate: float | None = None
    novelty_preference: float | None = None  # 0 = familiar, 1 = novel
    save_rate: float | None = None
    share_rate: float | None = None
    session_count: int | None = None
    days_since_first: int | None = None
    content_categories: tuple[str, ...] | None = None
    favorite_tags: tuple[str, ...] = ()

    @field_validator("content_diversity", "reengagement_rate", "novelty_preference", "save_rate", "share_rate")
    @classmethod
    def _clamp_rate(cls, value: float | None, info: ValidationInfo) -> float | None:
        if value is None:
            return None
        return _clamp(value, 0.0, 1.0, info.field_name)

    @field_validator("session_depth", "session_count", "days_since_first")
    @classmethod
    def _clamp_count(cls, value: float | int | None, info: ValidationInfo) -> float | int | None:
        if value is None or value >= 0:
            return value
        logger.warning(f"Clamped {info.field_name} from {value} to 0")
        return type(value)(0)


class ProfileInput(BaseModel):
    """One profile to score: quiz-derived vectors plus optional behavior."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    traits: TraitVector
    aesthetics: AestheticVector = Field(default_factory=AestheticVector)
    behavior: BehavioralSignals | None = None
