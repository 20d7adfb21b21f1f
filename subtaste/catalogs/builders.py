"""Shorthands for writing catalog tables as plain dicts."""

from subtaste.core.constants import TRAIT_NAMES


def trait_ranges(*bands: tuple[float, float]) -> dict[str, dict[str, float]]:
    """Bands in TRAIT_NAMES order: O, C, E, A, N, novelty, aesthetic, risk."""
    if len(bands) != len(TRAIT_NAMES):
        raise ValueError(f"expected {len(TRAIT_NAMES)} trait bands, got {len(bands)}")
    return {name: {"min": low, "max": high} for name, (low, high) in zip(TRAIT_NAMES, bands)}


def blend(category_id: str, minimum: float) -> dict:
    return {"kind": "blend", "category_id": category_id, "minimum": minimum}


def trait(name: str, low: float | None = None, high: float | None = None) -> dict:
    return {"kind": "trait", "trait": name, "min": low, "max": high}


def index(name: str, low: int | None = None, high: int | None = None) -> dict:
    return {"kind": "index", "index": name, "min": low, "max": high}


def signal(name: str) -> dict:
    return {"kind": "signal", "signal": name}
