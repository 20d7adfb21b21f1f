import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from subtaste.catalogs import archetypes, constellations
from subtaste.core.config import settings
from subtaste.core.constants import MAX_CATEGORIES
from subtaste.core.exceptions import TaxonomyError
from subtaste.models.taxonomy import Taxonomy
from subtaste.services.interpretation.modifiers import ModifierScorer

BUILTIN_TAXONOMIES: dict[str, dict[str, Any]] = {
    "constellations": constellations.TAXONOMY,
    "archetypes": archetypes.TAXONOMY,
}


def build_taxonomy(data: dict[str, Any], source: str = "<inline>") -> Taxonomy:
    """
    Validate raw taxonomy tables into an immutable Taxonomy.

    Args:
        data: Tables in the built-in catalog schema.
        source: Name or path used in log and error messages.

    Returns:
        The validated Taxonomy.

    Raises:
        TaxonomyError: If any definition is malformed or references something unknown.
    """
    try:
        taxonomy = Taxonomy.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid taxonomy {source}: {e.error_count()} error(s)\n{e}")
        raise TaxonomyError(f"Invalid taxonomy '{source}': {e}") from e

    if len(taxonomy.categories) > MAX_CATEGORIES:
        logger.error(f"Taxonomy {source} has {len(taxonomy.categories)} categories, limit is {MAX_CATEGORIES}")
        raise TaxonomyError(
            f"Taxonomy '{source}' has {len(taxonomy.categories)} categories; at most {MAX_CATEGORIES} are supported"
        )

    ModifierScorer.check_formulas(taxonomy.modifiers)

    logger.info(
        f"Loaded taxonomy {taxonomy.name}: {len(taxonomy.categories)} categories, "
        f"{len(taxonomy.triggers)} sub-states, {len(taxonomy.modifiers)} modifiers, {len(taxonomy.scenes)} scenes"
    )
    return taxonomy


@lru_cache(maxsize=None)
def load_taxonomy(name: str) -> Taxonomy:
    """Load a built-in taxonomy by name. Validated once per process."""
    data = BUILTIN_TAXONOMIES.get(name)
    if data is None:
        available = ", ".join(sorted(BUILTIN_TAXONOMIES))
        raise TaxonomyError(f"Unknown taxonomy '{name}'. Available: {available}")
    return build_taxonomy(data, source=name)


def load_taxonomy_file(path: str | Path) -> Taxonomy:
    """Load a taxonomy from a JSON file using the built-in catalog schema."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Cannot read taxonomy file {path}: {e}")
        raise TaxonomyError(f"Cannot read taxonomy file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Malformed taxonomy file {path}: {e}")
        raise TaxonomyError(f"Malformed taxonomy file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise TaxonomyError(f"Taxonomy file '{path}' must contain a JSON object")
    return build_taxonomy(data, source=str(path))


def default_taxonomy() -> Taxonomy:
    """Taxonomy selected by settings: TAXONOMY_PATH wins over DEFAULT_TAXONOMY."""
    if settings.TAXONOMY_PATH:
        return load_taxonomy_file(settings.TAXONOMY_PATH)
    return load_taxonomy(settings.DEFAULT_TAXONOMY)
