"""
The 8-archetype taxonomy.

Sub-states and scenes are derived from the constellation tables: blend
predicates and scene affinities are remapped through CONSTELLATION_TO_ARCHETYPE.
"""

from subtaste.catalogs.builders import blend, trait_ranges
from subtaste.catalogs.constellations import SCENES as CONSTELLATION_SCENES
from subtaste.catalogs.constellations import TRIGGERS as CONSTELLATION_TRIGGERS
from subtaste.catalogs.modifiers import MODIFIERS

CONSTELLATION_TO_ARCHETYPE: dict[str, str] = {
    "somnexis": "vespyr",
    "astryde": "vespyr",
    "opalith": "vespyr",
    "vantoryx": "ignyx",
    "velocine": "ignyx",
    "nycataria": "ignyx",
    "luminth": "auryn",
    "lucidyne": "auryn",
    "aurivox": "auryn",
    "chromyne": "prismae",
    "prismant": "prismae",
    "iridrax": "prismae",
    "holofern": "prismae",
    "radianth": "solara",
    "holovain": "solara",
    "prismora": "solara",
    "obscyra": "crypta",
    "noctyra": "crypta",
    "glaceryl": "crypta",
    "nexyra": "vertex",
    "fluxeris": "vertex",
    "velisynth": "vertex",
    "silquor": "fluxus",
    "glemyth": "fluxus",
    "vireth": "fluxus",
    "glovern": "fluxus",
    "crysolen": "fluxus",
}

CATEGORIES: list[dict] = [
    {
        "id": "vespyr",
        "display_name": "VESPYR",
        "description": "The Sage. Twilight vision, dark academia meets mysticism.",
        "trait_ranges": trait_ranges(
            (0.7, 1.0), (0.4, 0.7), (0.1, 0.4), (0.5, 0.8), (0.3, 0.6), (0.3, 0.6), (0.8, 1.0), (0.2, 0.5)
        ),
        "visual_keywords": ["twilight", "muted", "layered", "atmospheric", "moody", "soft-focus", "candlelit"],
        "music_keywords": ["ambient", "ethereal", "sparse", "reverb-heavy", "contemplative", "drone"],
        "example_scenes": [
            "Reading by candlelight in a room full of old books",
            "Watching fog roll over a moonlit landscape",
            "A quiet cafe at dusk with rain on the windows",
        ],
    },
    {
        "id": "ignyx",
        "display_name": "IGNYX",
        "description": "The Rebel. Ignition crystallized, breaks rules with purpose.",
        "trait_ranges": trait_ranges(
            (0.6, 0.9), (0.1, 0.4), (0.5, 0.8), (0.1, 0.4), (0.3, 0.7), (0.7, 1.0), (0.5, 0.8), (0.8, 1.0)
        ),
        "visual_keywords": ["dark", "sharp", "industrial", "neon-accent", "distorted", "gritty", "urban"],
        "music_keywords": ["aggressive", "distorted", "industrial", "punk", "experimental", "harsh"],
        "exploration_leaning": True,
        "example_scenes": [
            "Neon signs flickering in a rain-soaked alley",
            "Underground club at 3am with strobing lights",
            "Graffiti-covered walls in an abandoned warehouse",
        ],
    },
    {
        "id": "auryn",
        "display_name": "AURYN",
        "description": "The Enlightened. Golden light with mythic weight.",
        "trait_ranges": trait_ranges(
            (0.8, 1.0), (0.5, 0.8), (0.4, 0.7), (0.7, 1.0), (0.1, 0.4), (0.5, 0.8), (0.7, 1.0), (0.4, 0.7)
        ),
        "visual_keywords": ["golden", "warm", "radiant", "natural", "sacred", "luminous", "harmonious"],
        "music_keywords": ["uplifting", "acoustic", "world", "healing", "melodic", "organic"],
        "example_scenes": [
            "Sunrise over ancient temple ruins",
            "Meditation garden with golden afternoon light",
            "Gathering around a fire under starlit sky",
        ],
    },
    {
        "id": "prismae",
        "display_name": "PRISMAE",
        "description": "The Artist. Refracted reality, pure creative energy.",
        "trait_ranges": trait_ranges(
            (0.9, 1.0), (0.2, 0.5), (0.4, 0.7), (0.4, 0.7), (0.4, 0.8), (0.7, 1.0), (0.9, 1.0), (0.5, 0.8)
        ),
        "visual_keywords": ["colorful", "layered", "abstract", "textured", "expressive", "bold", "saturated"],
        "music_keywords": ["complex", "emotional", "dynamic", "layered", "experimental", "melodic"],
        "example_scenes": [
            "Paint-splattered studio bathed in natural light",
            "Gallery opening with immersive installations",
            "Street art transforming urban concrete",
        ],
    },
    {
        "id": "solara",
        "display_name": "SOLARA",
        "description": "The Leader. Solar royalty, the main character who lifts others.",
        "trait_ranges": trait_ranges(
            (0.5, 0.8), (0.7, 1.0), (0.8, 1.0), (0.4, 0.7), (0.1, 0.4), (0.4, 0.7), (0.5, 0.8), (0.6, 0.9)
        ),
        "visual_keywords": ["bold", "luxe", "bright", "confident", "polished", "powerful", "radiant"],
        "music_keywords": ["anthem", "powerful", "upbeat", "confident", "production-heavy", "pop"],
        "example_scenes": [
            "Commanding a stage with spotlights blazing",
            "Penthouse view at sunset with champagne",
            "Leading a team through creative breakthrough",
        ],
    },
    {
        "id": "crypta",
        "display_name": "CRYPTA",
        "description": "The Hermit. Hidden chamber, encrypted soul.",
        "trait_ranges": trait_ranges(
            (0.5, 0.8), (0.4, 0.7), (0.0, 0.3), (0.3, 0.6), (0.4, 0.7), (0.3, 0.6), (0.7, 1.0), (0.2, 0.5)
        ),
        "visual_keywords": ["dark", "mysterious", "occult", "cyber", "gothic", "encrypted", "shadowy"],
        "music_keywords": ["dark", "minimal", "ritualistic", "electronic", "haunting", "industrial"],
        "example_scenes": [
            "Candlelit ritual in a velvet-draped room",
            "Coding in a dark room with multiple monitors",
            "Ancient library with forbidden sections",
        ],
    },
    {
        "id": "vertex",
        "display_name": "VERTEX",
        "description": "The Visionary. Apex point where futures converge.",
        "trait_ranges": trait_ranges(
            (0.8, 1.0), (0.4, 0.7), (0.4, 0.7), (0.3, 0.6), (0.2, 0.5), (0.8, 1.0), (0.6, 0.9), (0.7, 1.0)
        ),
        "visual_keywords": ["futuristic", "clean", "geometric", "tech", "minimal", "holographic", "precise"],
        "music_keywords": ["electronic", "glitchy", "synth", "progressive", "IDM", "forward-thinking"],
        "exploration_leaning": True,
        "example_scenes": [
            "Minimalist workspace with holographic displays",
            "Geometric architecture against digital sunset",
            "Laboratory where ideas become prototypes",
        ],
    },
    {
        "id": "fluxus",
        "display_name": "FLUXUS",
        "description": "The Connector. Constant flow, art movement meets adaptability.",
        "trait_ranges": trait_ranges(
            (0.6, 0.9), (0.3, 0.6), (0.7, 1.0), (0.6, 0.9), (0.3, 0.6), (0.5, 0.8), (0.5, 0.8), (0.4, 0.7)
        ),
        "visual_keywords": ["fluid", "organic", "flowing", "collaborative", "eclectic", "transitional", "mixed"],
        "music_keywords": ["fusion", "world", "jazz", "eclectic", "collaborative", "groove-based"],
        "exploration_leaning": True,
        "example_scenes": [
            "Global gathering where cultures collide and create",
            "Collaborative art project with diverse creators",
            "River meeting ocean at golden hour",
        ],
    },
]

# Sub-states gated on constellation blend weights get archetype equivalents;
# those without one (volatile, liminal) are not carried over.
_BLEND_REMAP: dict[str, list[dict]] = {
    "serene": [blend("vespyr", 0.15), blend("auryn", 0.15)],
    "ritual": [blend("crypta", 0.12)],
    "flux": [blend("fluxus", 0.15)],
    "insurgent": [blend("ignyx", 0.15)],
}


def _remap_triggers(triggers: list[dict]) -> list[dict]:
    remapped = []
    for trigger in triggers:
        predicates = trigger["predicates"]
        if not any(p["kind"] == "blend" for p in predicates):
            remapped.append(trigger)
        elif trigger["id"] in _BLEND_REMAP:
            kept = [p for p in predicates if p["kind"] != "blend"]
            remapped.append({**trigger, "predicates": _BLEND_REMAP[trigger["id"]] + kept})
    return remapped


def _remap_scenes(scenes: list[dict]) -> list[dict]:
    remapped = []
    for scene in scenes:
        affinities = list(dict.fromkeys(CONSTELLATION_TO_ARCHETYPE[cid] for cid in scene["affinity_categories"]))
        remapped.append({**scene, "affinity_categories": affinities})
    return remapped


TRIGGERS: list[dict] = _remap_triggers(CONSTELLATION_TRIGGERS)
SCENES: list[dict] = _remap_scenes(CONSTELLATION_SCENES)

TAXONOMY: dict = {
    "name": "archetypes",
    "categories": CATEGORIES,
    "triggers": TRIGGERS,
    "modifiers": MODIFIERS,
    "scenes": SCENES,
}
