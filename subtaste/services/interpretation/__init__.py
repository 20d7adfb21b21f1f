"""
Interpretation layers computed from a classified input.

Sub-state triggers, modifier dimensions, scene fit and the identity
breakdown. Each layer reads the same immutable snapshot and none depends on
another.
"""

from subtaste.services.interpretation.identity import identity_components, secondary_influences
from subtaste.services.interpretation.modifiers import (
    MODIFIER_FORMULAS,
    ModifierScorer,
    archetype_phrase,
    behavioral_summary,
    classify_pole,
    mode_string,
)
from subtaste.services.interpretation.scenes import SubcultureFitPredictor, timing_bucket
from subtaste.services.interpretation.signals import detect_signals, has_sufficient_behavioral_data
from subtaste.services.interpretation.triggers import TriggerMatcher

__all__ = [
    "TriggerMatcher",
    "ModifierScorer",
    "MODIFIER_FORMULAS",
    "classify_pole",
    "SubcultureFitPredictor",
    "archetype_phrase",
    "mode_string",
    "behavioral_summary",
    "timing_bucket",
    "detect_signals",
    "has_sufficient_behavioral_data",
    "secondary_influences",
    "identity_components",
]
