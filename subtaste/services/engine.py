from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from loguru import logger

from subtaste.core.config import settings
from subtaste.models.inputs import AestheticVector, BehavioralSignals, ProfileInput, TraitVector
from subtaste.models.results import (
    Classification,
    ModifierResult,
    SceneFitResult,
    ScoringInput,
    TasteReport,
    TriggerMatch,
)
from subtaste.models.taxonomy import Taxonomy
from subtaste.services.interpretation import modifiers as modifier_phrases
from subtaste.services.interpretation.identity import identity_components, secondary_influences
from subtaste.services.interpretation.modifiers import ModifierScorer
from subtaste.services.interpretation.scenes import SubcultureFitPredictor
from subtaste.services.interpretation.signals import has_sufficient_behavioral_data
from subtaste.services.interpretation.triggers import TriggerMatcher
from subtaste.services.scoring.blend import BlendComputer
from subtaste.services.scoring.indices import DerivedIndexComputer
from subtaste.services.taxonomy_loader import default_taxonomy


class TasteEngine:
    """
    Classification engine bound to one immutable taxonomy.

    Every method is a pure function of its arguments and the taxonomy, so one
    engine can be shared across threads without locking.
    """

    def __init__(self, taxonomy: Taxonomy | None = None):
        self.taxonomy = taxonomy if taxonomy is not None else default_taxonomy()
        ModifierScorer.check_formulas(self.taxonomy.modifiers)

    def classify(
        self,
        traits: TraitVector,
        aesthetics: AestheticVector | None = None,
        behavior: BehavioralSignals | None = None,
    ) -> Classification:
        """
        Primary category, blend weights and the three derived indices.

        Args:
            traits: Psychometric trait vector.
            aesthetics: Aesthetic preferences; the neutral baseline when omitted.
            behavior: Optional engagement metrics.

        Returns:
            Classification with per-category scores in catalog order.
        """
        if aesthetics is None:
            aesthetics = AestheticVector()
        primary, blend, scores = BlendComputer.compute(self.taxonomy, traits, aesthetics, behavior)
        indices = DerivedIndexComputer.compute(blend, len(self.taxonomy.categories), traits, behavior)
        return Classification(primary=primary, blend=blend, indices=indices, scores=tuple(scores))

    def snapshot(
        self,
        traits: TraitVector,
        aesthetics: AestheticVector | None = None,
        behavior: BehavioralSignals | None = None,
    ) -> ScoringInput:
        """Classify and freeze everything the downstream layers read."""
        if aesthetics is None:
            aesthetics = AestheticVector()
        return ScoringInput(
            traits=traits,
            aesthetics=aesthetics,
            behavior=behavior,
            classification=self.classify(traits, aesthetics, behavior),
        )

    def match_trigger(self, snapshot: ScoringInput) -> TriggerMatch | None:
        return TriggerMatcher.match(self.taxonomy.triggers, snapshot)

    def score_modifiers(self, snapshot: ScoringInput) -> list[ModifierResult]:
        return ModifierScorer.score_all(self.taxonomy.modifiers, snapshot)

    @staticmethod
    def archetype_phrase(results: list[ModifierResult]) -> str:
        return modifier_phrases.archetype_phrase(results)

    @staticmethod
    def mode_string(results: list[ModifierResult]) -> str:
        return modifier_phrases.mode_string(results)

    @staticmethod
    def behavioral_summary(results: list[ModifierResult]) -> str:
        return modifier_phrases.behavioral_summary(results)

    def predict_scene_fit(self, snapshot: ScoringInput) -> list[SceneFitResult]:
        return SubcultureFitPredictor.predict(self.taxonomy.scenes, snapshot)

    def evaluate(
        self,
        traits: TraitVector,
        aesthetics: AestheticVector | None = None,
        behavior: BehavioralSignals | None = None,
        profile_id: str | None = None,
    ) -> TasteReport:
        """Run classification and every downstream layer on one snapshot."""
        snapshot = self.snapshot(traits, aesthetics, behavior)
        classification = snapshot.classification
        modifiers = self.score_modifiers(snapshot)

        report = TasteReport(
            profile_id=profile_id,
            taxonomy=self.taxonomy.name,
            classification=classification,
            trigger=self.match_trigger(snapshot),
            modifiers=tuple(modifiers),
            archetype_phrase=self.archetype_phrase(modifiers),
            mode_string=self.mode_string(modifiers),
            behavioral_summary=self.behavioral_summary(modifiers),
            scenes=tuple(self.predict_scene_fit(snapshot)),
            secondary_influences=tuple(secondary_influences(classification.primary, classification.blend)),
            identity=tuple(identity_components(snapshot, self.taxonomy)),
            has_sufficient_behavioral_data=has_sufficient_behavioral_data(behavior),
        )
        logger.debug(
            f"Evaluated {profile_id or 'profile'}: {classification.primary}"
            f" ({report.trigger.id if report.trigger else 'no sub-state'})"
        )
        return report

    def evaluate_profile(self, profile: ProfileInput | Mapping[str, Any]) -> TasteReport:
        if not isinstance(profile, ProfileInput):
            profile = ProfileInput.model_validate(profile)
        return self.evaluate(profile.traits, profile.aesthetics, profile.behavior, profile_id=profile.id)

    def evaluate_many(
        self,
        profiles: Iterable[ProfileInput | Mapping[str, Any]],
        max_workers: int | None = None,
    ) -> list[TasteReport]:
        """
        Score independent profiles on a thread pool.

        Results keep input order. Workers share nothing but the read-only taxonomy.
        """
        profiles = list(profiles)
        workers = max(1, max_workers or settings.BATCH_MAX_WORKERS)
        logger.info(f"Scoring {len(profiles)} profiles with {workers} workers")

        with ThreadPoolExecutor(max_workers=workers) as executor:
            reports = list(executor.map(self.evaluate_profile, profiles))

        logger.info(f"Scored {len(reports)} profiles")
        return reports
