"""
Classification scoring.

Similarity against each category, the temperature-scaled blend, and the
scalar indices derived from it.
"""

from subtaste.services.scoring.blend import BlendComputer
from subtaste.services.scoring.indices import DerivedIndexComputer
from subtaste.services.scoring.similarity import SimilarityScorer

__all__ = [
    "SimilarityScorer",
    "BlendComputer",
    "DerivedIndexComputer",
]
