"""
Scoring constants shared across the engine. Fixed by design: none of these are
overridable per call or through settings.
"""

from typing import Final

# Trait dimensions every TraitVector and CategoryDefinition must cover
TRAIT_NAMES: Final[tuple[str, ...]] = (
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
    "novelty_seeking",
    "aesthetic_sensitivity",
    "risk_tolerance",
)

# Similarity
TRAIT_DISTANCE_PENALTY: Final[float] = 2.0  # score lost per unit outside a trait range
NEUTRAL_SIMILARITY: Final[float] = 0.5
EXPLORATION_DIVERSITY_THRESHOLD: Final[float] = 0.7
EXPLORATION_BONUS: Final[float] = 0.1

# Combined score weights (sum to 1.0)
TRAIT_WEIGHT: Final[float] = 0.40
AESTHETIC_WEIGHT: Final[float] = 0.35
BEHAVIORAL_WEIGHT: Final[float] = 0.25

# Blend conversion
BLEND_TEMPERATURE: Final[float] = 5.0
BLEND_MIN_WEIGHT: Final[float] = 0.01
BLEND_PRECISION: Final[int] = 3
# Largest taxonomy whose blend always keeps one entry above BLEND_MIN_WEIGHT
MAX_CATEGORIES: Final[int] = 99

# Derived indices
EMPTY_BLEND_COHERENCE: Final[int] = 50
EXPLORATION_TRAIT_SHARE: Final[float] = 0.7
EXPLORATION_DIVERSITY_SHARE: Final[float] = 0.3

# Trigger matching
TRIGGER_MIN_MATCH: Final[float] = 0.6
TRIGGER_NEAR_MISS_RATIO: Final[float] = 0.7
TRIGGER_NEAR_MISS_CREDIT: Final[float] = 0.5

# Modifier poles
POLE_HIGH_THRESHOLD: Final[float] = 65.0
POLE_LOW_THRESHOLD: Final[float] = 35.0
POLE_MIDPOINT: Final[float] = 50.0
ARCHETYPE_PHRASE_LIMIT: Final[int] = 2
BEHAVIORAL_SUMMARY_LIMIT: Final[int] = 3
DEFAULT_ARCHETYPE_PHRASE: Final[str] = "Balanced Explorer"
DEFAULT_MODE_STRING: Final[str] = "Adaptive mode"
DEFAULT_BEHAVIORAL_SUMMARY: Final[str] = "You engage with aesthetics in a balanced, adaptable way."

# Scene fit
SCENE_CATEGORY_SATURATION: Final[float] = 2.0
SCENE_CATEGORY_WEIGHT: Final[float] = 0.6
SCENE_TRAIT_WEIGHT: Final[float] = 0.4
SCENE_MIN_FIT: Final[int] = 40
SCENE_TOP_N: Final[int] = 5

# Adoption timing buckets (early-adoption index lower bounds)
TIMING_EARLY_WAVE: Final[int] = 75
TIMING_GROWTH_PHASE: Final[int] = 50
TIMING_MAINSTREAM: Final[int] = 30

# Secondary influences
SECONDARY_MIN_WEIGHT: Final[float] = 0.05
SECONDARY_LIMIT: Final[int] = 3
SECONDARY_STRONG: Final[float] = 0.25
SECONDARY_NOTABLE: Final[float] = 0.15

# Identity components
DOMINANT_TRAIT_HIGH: Final[float] = 0.7
DOMINANT_TRAIT_LOW: Final[float] = 0.3
DOMINANT_TRAIT_LIMIT: Final[int] = 3

# Behavioral data sufficiency
MIN_SESSIONS_FOR_BEHAVIOR: Final[int] = 3
