"""
The 27-category constellation taxonomy with its sub-states and scenes.

Catalog order matters: it breaks ties in primary selection and trigger matching.
"""

from subtaste.catalogs.builders import blend, index, signal, trait, trait_ranges
from subtaste.catalogs.modifiers import MODIFIERS

EXPLORATION_LEANING = {"vantoryx", "fluxeris", "nexyra"}


def _category(cid: str, description: str, visual: list[str], music: list[str], ranges: dict, scenes: list[str]):
    return {
        "id": cid,
        "display_name": cid.capitalize(),
        "description": description,
        "trait_ranges": ranges,
        "visual_keywords": visual,
        "music_keywords": music,
        "exploration_leaning": cid in EXPLORATION_LEANING,
        "example_scenes": scenes,
    }


CATEGORIES: list[dict] = [
    _category(
        "somnexis",
        "Dreamy and introspective, drawn to liminal spaces and hazy aesthetics.",
        ["hazy", "soft-focus", "desaturated", "liminal", "twilight"],
        ["ambient", "slow", "ethereal", "reverb-heavy", "atmospheric"],
        trait_ranges((0.7, 1.0), (0.2, 0.5), (0.1, 0.4), (0.5, 0.8), (0.4, 0.7), (0.5, 0.8), (0.8, 1.0), (0.3, 0.6)),
        [
            "Somnexis club night: fog machines and slowed-down tracks",
            "Somnexis AI cover art: dreamlike portraits with soft blur",
            "Somnexis bedroom setup: fairy lights and gauze curtains",
        ],
    ),
    _category(
        "nycataria",
        "Nocturnal and mysterious, thriving in dark urban environments.",
        ["dark", "urban", "neon-accents", "noir", "shadowy"],
        ["bass-heavy", "industrial", "dark-electronic", "brooding", "nocturnal"],
        trait_ranges((0.6, 0.9), (0.3, 0.6), (0.2, 0.5), (0.3, 0.6), (0.5, 0.8), (0.6, 0.9), (0.7, 0.95), (0.5, 0.8)),
        [
            "Nycataria street photography: rain-slicked streets at 3am",
            "Nycataria DJ set: dark techno in a basement venue",
            "Nycataria fashion: black layers with subtle metallic details",
        ],
    ),
    _category(
        "holovain",
        "Futuristic and glamorous, embracing holographic and iridescent aesthetics.",
        ["holographic", "chrome", "high-gloss", "futuristic", "iridescent"],
        ["hyperpop", "glitchy", "synthetic", "high-energy", "processed-vocals"],
        trait_ranges((0.8, 1.0), (0.4, 0.7), (0.6, 0.9), (0.4, 0.7), (0.3, 0.6), (0.8, 1.0), (0.85, 1.0), (0.7, 1.0)),
        [
            "Holovain runway look: chrome bodysuit with prismatic overlays",
            "Holovain album art: 3D-rendered abstract forms",
            "Holovain rave: UV lights and holographic projections",
        ],
    ),
    _category(
        "obscyra",
        "Refined darkness with theatrical flair.",
        ["gothic", "velvet", "dramatic", "baroque", "deep-colors"],
        ["orchestral", "darkwave", "dramatic", "operatic", "cinematic"],
        trait_ranges((0.7, 0.95), (0.5, 0.8), (0.3, 0.6), (0.3, 0.6), (0.5, 0.8), (0.5, 0.8), (0.9, 1.0), (0.4, 0.7)),
        [
            "Obscyra couture: velvet gowns with Victorian silhouettes",
            "Obscyra soiree: candlelit gathering with chamber music",
            "Obscyra interior: dark wood, antiques, and moody lighting",
        ],
    ),
    _category(
        "holofern",
        "Where nature meets technology: organic-digital hybrids and bio-futurism.",
        ["bio-tech", "organic-digital", "verdant", "alien-nature", "bioluminescent"],
        ["nature-samples", "organic-electronic", "textured", "evolving", "ambient-techno"],
        trait_ranges((0.75, 1.0), (0.4, 0.7), (0.3, 0.6), (0.6, 0.9), (0.3, 0.6), (0.7, 0.95), (0.8, 1.0), (0.5, 0.8)),
        [
            "Holofern installation: living walls with embedded LEDs",
            "Holofern wearables: 3D-printed jewelry inspired by coral",
            "Holofern soundscape: forest recordings layered with synths",
        ],
    ),
    _category(
        "prismant",
        "Bold color maximalist with a love for geometric precision.",
        ["geometric", "bold-colors", "precise", "graphic", "high-contrast"],
        ["rhythmic", "structured", "colorful", "bright", "percussive"],
        trait_ranges((0.6, 0.9), (0.6, 0.9), (0.5, 0.8), (0.5, 0.8), (0.2, 0.5), (0.5, 0.8), (0.75, 1.0), (0.4, 0.7)),
        [
            "Prismant graphic design: bold shapes and Memphis-style palettes",
            "Prismant architecture: color-blocked interiors",
            "Prismant playlist: upbeat electronic with strong hooks",
        ],
    ),
    _category(
        "luminth",
        "Light-obsessed and optimistic, drawn to radiance and warmth.",
        ["golden", "warm-light", "glowing", "soft-radiance", "sunrise"],
        ["uplifting", "melodic", "warm", "hopeful", "acoustic-electronic"],
        trait_ranges((0.6, 0.9), (0.5, 0.8), (0.6, 0.9), (0.7, 1.0), (0.1, 0.4), (0.4, 0.7), (0.7, 0.95), (0.3, 0.6)),
        [
            "Luminth photography: golden hour portraits",
            "Luminth interior: warm wood and natural light flooding in",
            "Luminth festival: sunrise sets on the beach",
        ],
    ),
    _category(
        "crysolen",
        "Crystalline and precise, valuing clarity and structure.",
        ["crystalline", "faceted", "transparent", "mineral", "sharp"],
        ["precise", "clean", "digital", "metallic", "structured"],
        trait_ranges((0.5, 0.8), (0.7, 1.0), (0.3, 0.6), (0.4, 0.7), (0.3, 0.6), (0.4, 0.7), (0.7, 0.95), (0.3, 0.6)),
        [
            "Crysolen jewelry: geometric cut gemstones in minimal settings",
            "Crysolen product design: glass and crystal objects",
            "Crysolen sound: crisp, bell-like tones and precise beats",
        ],
    ),
    _category(
        "nexyra",
        "Connected and networked, thriving at the intersection of digital culture.",
        ["digital-native", "connected", "interface", "network", "data-viz"],
        ["internet-culture", "meme-aware", "remix", "post-internet", "genre-fluid"],
        trait_ranges((0.7, 1.0), (0.3, 0.6), (0.5, 0.8), (0.5, 0.8), (0.4, 0.7), (0.8, 1.0), (0.6, 0.9), (0.6, 0.9)),
        [
            "Nexyra moodboard: screenshot aesthetics and interface design",
            "Nexyra playlist: genre-hopping with heavy sampling",
            "Nexyra social: curated chaos across platforms",
        ],
    ),
    _category(
        "velocine",
        "Speed-obsessed and kinetic, drawn to motion and momentum.",
        ["motion-blur", "dynamic", "streamlined", "racing", "kinetic"],
        ["fast-tempo", "driving", "energetic", "adrenaline", "drum-heavy"],
        trait_ranges((0.5, 0.8), (0.4, 0.7), (0.7, 1.0), (0.4, 0.7), (0.2, 0.5), (0.7, 1.0), (0.5, 0.8), (0.8, 1.0)),
        [
            "Velocine photography: long exposure car lights",
            "Velocine fashion: aerodynamic sportswear",
            "Velocine rave: 160+ BPM sets and constant motion",
        ],
    ),
    _category(
        "astryde",
        "Cosmic and vast, drawn to space aesthetics and celestial themes.",
        ["cosmic", "celestial", "vast", "starfield", "nebular"],
        ["spacey", "expansive", "synth-pads", "cosmic-ambient", "otherworldly"],
        trait_ranges((0.8, 1.0), (0.3, 0.6), (0.2, 0.5), (0.5, 0.8), (0.4, 0.7), (0.6, 0.9), (0.8, 1.0), (0.5, 0.8)),
        [
            "Astryde visual: nebula photography and cosmic renders",
            "Astryde ambient: space-themed listening sessions",
            "Astryde fashion: iridescent fabrics evoking aurora",
        ],
    ),
    _category(
        "noctyra",
        "Ritualistic and mystical, drawn to occult aesthetics and ceremonial beauty.",
        ["occult", "ceremonial", "candlelit", "symbolic", "ritual"],
        ["ritualistic", "drone", "tribal", "hypnotic", "sacred"],
        trait_ranges((0.7, 1.0), (0.4, 0.7), (0.2, 0.5), (0.3, 0.6), (0.5, 0.8), (0.5, 0.8), (0.85, 1.0), (0.5, 0.8)),
        [
            "Noctyra altar: curated objects and candlelight",
            "Noctyra gathering: drone music and incense",
            "Noctyra aesthetic: sigils and sacred geometry",
        ],
    ),
    _category(
        "glemyth",
        "Fantastical and narrative-driven, living between folklore and imagination.",
        ["mythical", "storybook", "enchanted", "illustrative", "whimsical"],
        ["folk-influenced", "storytelling", "acoustic", "medieval", "fairy-tale"],
        trait_ranges((0.8, 1.0), (0.3, 0.6), (0.3, 0.6), (0.6, 0.9), (0.4, 0.7), (0.5, 0.8), (0.8, 1.0), (0.3, 0.6)),
        [
            "Glemyth illustration: enchanted forest scenes",
            "Glemyth fashion: flowing fabrics and handmade jewelry",
            "Glemyth music: folk ballads with fantastical lyrics",
        ],
    ),
    _category(
        "vireth",
        "Earthy and grounded, connected to natural materials and textures.",
        ["earthy", "textured", "raw", "natural-materials", "organic"],
        ["organic", "acoustic", "world-music", "earthy", "unprocessed"],
        trait_ranges((0.5, 0.8), (0.5, 0.8), (0.3, 0.6), (0.7, 1.0), (0.2, 0.5), (0.3, 0.6), (0.7, 0.95), (0.2, 0.5)),
        [
            "Vireth interior: clay, wood, and linen textiles",
            "Vireth craft: hand-thrown ceramics and natural dyes",
            "Vireth sound: field recordings and acoustic instruments",
        ],
    ),
    _category(
        "chromyne",
        "Color-synesthetic and sensation-driven, experiencing music as color.",
        ["synesthetic", "color-fields", "gradient", "fluid", "sensory"],
        ["colorful", "layered", "textural", "synth-rich", "immersive"],
        trait_ranges((0.8, 1.0), (0.3, 0.6), (0.4, 0.7), (0.5, 0.8), (0.4, 0.7), (0.6, 0.9), (0.9, 1.0), (0.4, 0.7)),
        [
            "Chromyne visual: abstract color gradients and flows",
            "Chromyne installation: multi-sensory immersive experience",
            'Chromyne playlist: tracks chosen by their "color"',
        ],
    ),
    _category(
        "opalith",
        "Subtle and shifting, drawn to iridescence and gentle transformation.",
        ["opalescent", "shifting", "subtle", "pearl", "delicate"],
        ["subtle", "shifting", "gentle", "evolving", "ambient-pop"],
        trait_ranges((0.6, 0.9), (0.5, 0.8), (0.3, 0.6), (0.6, 0.9), (0.3, 0.6), (0.4, 0.7), (0.85, 1.0), (0.2, 0.5)),
        [
            "Opalith jewelry: pearl and moonstone pieces",
            "Opalith interior: soft whites with hints of color",
            "Opalith ambient: slowly shifting soundscapes",
        ],
    ),
    _category(
        "fluxeris",
        "Change-embracing and fluid, thriving in transformation.",
        ["fluid", "morphing", "transitional", "liquid", "adaptive"],
        ["evolving", "generative", "shape-shifting", "experimental", "unpredictable"],
        trait_ranges((0.8, 1.0), (0.2, 0.5), (0.4, 0.7), (0.5, 0.8), (0.4, 0.7), (0.85, 1.0), (0.7, 0.95), (0.7, 1.0)),
        [
            "Fluxeris installation: reactive projections that morph",
            "Fluxeris fashion: modular clothing with transformable shapes",
            "Fluxeris music: generative compositions that never repeat",
        ],
    ),
    _category(
        "glovern",
        "Botanical and lush, drawn to verdant growth and plant aesthetics.",
        ["botanical", "lush", "green", "plant-life", "greenhouse"],
        ["organic", "gentle", "nature-inspired", "pastoral", "garden"],
        trait_ranges((0.6, 0.9), (0.5, 0.8), (0.3, 0.6), (0.7, 1.0), (0.2, 0.5), (0.3, 0.6), (0.7, 0.95), (0.2, 0.5)),
        [
            "Glovern interior: plant-filled rooms and botanical prints",
            "Glovern photography: macro shots of leaves and flowers",
            "Glovern ambient: morning garden soundscapes",
        ],
    ),
    _category(
        "vantoryx",
        "Vanguard and boundary-pushing, always at the cutting edge.",
        ["avant-garde", "experimental", "boundary-pushing", "unconventional", "provocative"],
        ["experimental", "avant-garde", "boundary-pushing", "challenging", "innovative"],
        trait_ranges((0.9, 1.0), (0.3, 0.6), (0.5, 0.8), (0.3, 0.6), (0.4, 0.7), (0.9, 1.0), (0.8, 1.0), (0.85, 1.0)),
        [
            "Vantoryx runway: designs that challenge the definition of clothing",
            "Vantoryx sound: noise compositions and deconstructed beats",
            "Vantoryx art: work that provokes and questions",
        ],
    ),
    _category(
        "silquor",
        "Luxurious and tactile, drawn to silk and flowing fabrics.",
        ["silky", "flowing", "luxurious", "draped", "tactile"],
        ["smooth", "sultry", "flowing", "sensual", "sophisticated"],
        trait_ranges((0.5, 0.8), (0.5, 0.8), (0.5, 0.8), (0.5, 0.8), (0.3, 0.6), (0.3, 0.6), (0.8, 1.0), (0.3, 0.6)),
        [
            "Silquor fashion: flowing silk garments in muted tones",
            "Silquor interior: velvet and satin textures throughout",
            "Silquor lounge: sophisticated cocktail music",
        ],
    ),
    _category(
        "iridrax",
        "Prismatic and intense, drawn to extreme iridescence and color shifting.",
        ["prismatic", "intense-iridescent", "oil-slick", "multi-spectral", "dazzling"],
        ["intense", "maximalist", "colorful", "overwhelming", "euphoric"],
        trait_ranges((0.7, 1.0), (0.3, 0.6), (0.7, 1.0), (0.4, 0.7), (0.3, 0.6), (0.8, 1.0), (0.8, 1.0), (0.7, 1.0)),
        [
            "Iridrax fashion: oil-slick fabrics and beetle-wing textures",
            "Iridrax rave: full-spectrum laser shows",
            "Iridrax makeup: extreme chromatic eye looks",
        ],
    ),
    _category(
        "prismora",
        "Light-refracting and architectural, drawn to structural prisms and clean geometry.",
        ["refractive", "architectural", "clean-lines", "light-play", "glass"],
        ["precise", "angular", "clean", "geometric", "minimal-electronic"],
        trait_ranges((0.6, 0.9), (0.7, 1.0), (0.4, 0.7), (0.4, 0.7), (0.2, 0.5), (0.5, 0.8), (0.75, 1.0), (0.4, 0.7)),
        [
            "Prismora architecture: glass structures with light-catching angles",
            "Prismora design: crystal awards and transparent objects",
            "Prismora sound: precise, crystalline electronic music",
        ],
    ),
    _category(
        "lucidyne",
        "Clarity-seeking and transparent, drawn to pure light and unfiltered truth.",
        ["clear", "transparent", "pure-light", "unfiltered", "pristine"],
        ["clear", "pure-tones", "unprocessed", "transparent", "honest"],
        trait_ranges((0.6, 0.9), (0.7, 1.0), (0.4, 0.7), (0.6, 0.9), (0.2, 0.5), (0.4, 0.7), (0.7, 0.95), (0.3, 0.6)),
        [
            "Lucidyne interior: white spaces with natural light",
            "Lucidyne photography: clean, unedited captures",
            "Lucidyne music: acoustic performances, minimal production",
        ],
    ),
    _category(
        "velisynth",
        "Synthetic and deliberately artificial, embracing the beauty of the unnatural.",
        ["synthetic", "artificial", "plastic", "deliberately-fake", "hyper-real"],
        ["synthetic", "artificial", "vocoder", "robotic", "post-human"],
        trait_ranges((0.7, 1.0), (0.4, 0.7), (0.5, 0.8), (0.3, 0.6), (0.3, 0.6), (0.7, 1.0), (0.7, 0.95), (0.6, 0.9)),
        [
            "Velisynth fashion: PVC and latex in candy colors",
            "Velisynth art: hyper-real 3D renders",
            "Velisynth music: heavily processed, obviously synthetic",
        ],
    ),
    _category(
        "aurivox",
        "Voice-centered and golden, drawn to the power of sound and vocal expression.",
        ["golden", "vocal-inspired", "resonant", "warm", "rich"],
        ["voice-focused", "choral", "golden-timbre", "resonant", "harmonic"],
        trait_ranges((0.6, 0.9), (0.5, 0.8), (0.5, 0.8), (0.6, 0.9), (0.3, 0.6), (0.4, 0.7), (0.8, 1.0), (0.3, 0.6)),
        [
            "Aurivox concert: choral performance in golden hall",
            "Aurivox interior: warm metallics and acoustic treatments",
            "Aurivox playlist: voice-forward tracks across genres",
        ],
    ),
    _category(
        "glaceryl",
        "Cool and crystalline, drawn to ice aesthetics and arctic beauty.",
        ["icy", "arctic", "crystalline-cold", "frost", "pale-blue"],
        ["cold", "sparse", "frozen", "minimal", "distant"],
        trait_ranges((0.5, 0.8), (0.6, 0.9), (0.2, 0.5), (0.4, 0.7), (0.3, 0.6), (0.4, 0.7), (0.75, 1.0), (0.3, 0.6)),
        [
            "Glaceryl photography: arctic landscapes and ice formations",
            "Glaceryl interior: pale blues and crystalline accents",
            "Glaceryl ambient: cold, sparse soundscapes",
        ],
    ),
    _category(
        "radianth",
        "Radiating and centerless, drawn to burst patterns and explosive light.",
        ["radiating", "burst-pattern", "explosive", "centerless", "emanating"],
        ["building", "explosive", "crescendo", "drop-heavy", "climactic"],
        trait_ranges((0.7, 1.0), (0.3, 0.6), (0.8, 1.0), (0.5, 0.8), (0.3, 0.6), (0.7, 1.0), (0.7, 0.95), (0.7, 1.0)),
        [
            "Radianth festival: main stage drop with pyrotechnics",
            "Radianth art: radial explosion patterns",
            "Radianth fashion: burst prints and starburst jewelry",
        ],
    ),
]


TRIGGERS: list[dict] = [
    {
        "id": "volatile",
        "display_name": "Volatile",
        "description": "Operating at high intensity with explosive energy bursts",
        "manifesto": "You seek moments of maximum impact and aren't afraid of sensory overload.",
        "icon": "⚡",
        "predicates": [
            blend("radianth", 0.15),
            blend("velocine", 0.15),
            blend("iridrax", 0.15),
            trait("risk_tolerance", low=0.7),
            trait("novelty_seeking", low=0.7),
        ],
    },
    {
        "id": "serene",
        "display_name": "Serene",
        "description": "Dwelling in calm contemplation and gentle aesthetics",
        "manifesto": "You find depth in stillness and beauty in subtlety.",
        "icon": "\U0001f319",
        "predicates": [
            blend("somnexis", 0.15),
            blend("opalith", 0.15),
            blend("glaceryl", 0.15),
            trait("neuroticism", high=0.3),
            trait("agreeableness", low=0.6),
        ],
    },
    {
        "id": "pioneer",
        "display_name": "Pioneer",
        "description": "Consistently at the frontier of emerging aesthetics",
        "manifesto": "You don't follow trends; you find things before they become trends.",
        "icon": "\U0001f52d",
        "predicates": [
            index("early_adoption", low=75),
            index("exploration", low=70),
            signal("trend_leading"),
            signal("rapid_exploration"),
        ],
    },
    {
        "id": "archaeologist",
        "display_name": "Archaeologist",
        "description": "Excavating deep into specific aesthetic territories",
        "manifesto": "You go deep rather than wide, uncovering hidden layers others miss.",
        "icon": "\U0001f50d",
        "predicates": [
            index("coherence", low=65),
            signal("deep_engagement"),
            signal("niche_drilling"),
            trait("conscientiousness", low=0.6),
            trait("openness", low=0.6),
        ],
    },
    {
        "id": "ritual",
        "display_name": "Ritual",
        "description": "Engaging with taste as ceremonial practice",
        "manifesto": "Your aesthetic experiences are intentional, almost sacred.",
        "icon": "\U0001f56f",
        "predicates": [
            blend("noctyra", 0.12),
            blend("obscyra", 0.12),
            signal("ritual_patterns"),
            signal("high_save_rate"),
            index("coherence", low=60),
        ],
    },
    {
        "id": "flux",
        "display_name": "Flux",
        "description": "Taste in constant transformation, resisting fixed identity",
        "manifesto": "You contain multitudes and refuse to be pinned down.",
        "icon": "\U0001f30a",
        "predicates": [
            blend("fluxeris", 0.15),
            blend("nexyra", 0.12),
            index("coherence", high=40),
            signal("high_interaction_diversity"),
            signal("cross_genre_bridging"),
        ],
    },
    {
        "id": "curator",
        "display_name": "Curator",
        "description": "Actively collecting and sharing aesthetic discoveries",
        "manifesto": "You build collections with intention and share them generously.",
        "icon": "\U0001f3a8",
        "predicates": [
            signal("high_save_rate"),
            signal("high_share_rate"),
            trait("aesthetic_sensitivity", low=0.75),
            trait("conscientiousness", low=0.5),
        ],
    },
    {
        "id": "hermit",
        "display_name": "Hermit",
        "description": "Cultivating taste in solitude, unconcerned with external validation",
        "manifesto": "Your aesthetic world is rich and private.",
        "icon": "\U0001f3d4",
        "predicates": [
            trait("extraversion", high=0.35),
            trait("aesthetic_sensitivity", low=0.7),
            signal("deep_engagement"),
            signal("low_interaction_diversity"),
        ],
    },
    {
        "id": "ascendant",
        "display_name": "Ascendant",
        "description": "On an upward trajectory of expanding taste horizons",
        "manifesto": "Your taste is actively evolving toward new territories.",
        "icon": "\U0001f680",
        "predicates": [
            index("exploration", low=80),
            index("early_adoption", low=70),
            trait("openness", low=0.8),
            trait("risk_tolerance", low=0.65),
        ],
    },
    {
        "id": "anchored",
        "display_name": "Anchored",
        "description": "Deeply rooted in a stable, well-defined aesthetic identity",
        "manifesto": "You know exactly what you like and why.",
        "icon": "⚓",
        "predicates": [
            index("coherence", low=75),
            trait("conscientiousness", low=0.6),
            signal("ritual_patterns"),
        ],
    },
    {
        "id": "liminal",
        "display_name": "Liminal",
        "description": "Dwelling in threshold spaces between defined aesthetics",
        "manifesto": "You're drawn to the in-between, the transitional, the not-quite.",
        "icon": "\U0001f32b",
        "predicates": [
            blend("somnexis", 0.12),
            blend("astryde", 0.12),
            blend("chromyne", 0.12),
            trait("openness", low=0.7),
            trait("neuroticism", low=0.4, high=0.7),
        ],
    },
    {
        "id": "insurgent",
        "display_name": "Insurgent",
        "description": "Actively challenging aesthetic conventions",
        "manifesto": "You don't just find new things; you question why things are the way they are.",
        "icon": "\U0001f525",
        "predicates": [
            blend("vantoryx", 0.15),
            trait("agreeableness", high=0.4),
            trait("risk_tolerance", low=0.75),
            signal("trend_leading"),
        ],
    },
]

SCENES: list[dict] = [
    {
        "id": "underground_electronic",
        "name": "Underground Electronic",
        "description": "Late-night clubs, warehouse parties, experimental sounds",
        "affinity_categories": ["nycataria", "velocine", "radianth", "iridrax"],
        "trait_weights": {"novelty_seeking": 1.0, "risk_tolerance": 0.8, "extraversion": 0.6},
    },
    {
        "id": "digital_art",
        "name": "Digital Art & Generative",
        "description": "NFT galleries, creative coding, algorithmic beauty",
        "affinity_categories": ["holovain", "chromyne", "nexyra", "prismora"],
        "trait_weights": {"openness": 1.0, "aesthetic_sensitivity": 0.9, "novelty_seeking": 0.7},
    },
    {
        "id": "ambient_contemplative",
        "name": "Ambient & Contemplative",
        "description": "Drone concerts, meditation spaces, liminal soundscapes",
        "affinity_categories": ["somnexis", "astryde", "glaceryl", "opalith"],
        "trait_weights": {"openness": 0.8, "aesthetic_sensitivity": 1.0, "neuroticism": 0.5},
    },
    {
        "id": "dark_gothic",
        "name": "Dark/Gothic Scene",
        "description": "Industrial nights, darkwave, Victorian aesthetics",
        "affinity_categories": ["obscyra", "nycataria", "noctyra"],
        "trait_weights": {"aesthetic_sensitivity": 1.0, "openness": 0.7, "agreeableness": -0.3},
    },
    {
        "id": "cottagecore_folk",
        "name": "Cottagecore & Folk",
        "description": "Folk festivals, craft communities, nature aesthetics",
        "affinity_categories": ["vireth", "glovern", "glemyth", "luminth"],
        "trait_weights": {"agreeableness": 1.0, "conscientiousness": 0.7, "neuroticism": -0.5},
    },
    {
        "id": "hyperpop",
        "name": "Hyperpop & Post-Internet",
        "description": "Discord servers, glitchy aesthetics, ironic sincerity",
        "affinity_categories": ["holovain", "nexyra", "fluxeris", "velisynth"],
        "trait_weights": {"novelty_seeking": 1.0, "risk_tolerance": 0.8, "openness": 0.9},
    },
    {
        "id": "avant_garde",
        "name": "Avant-Garde & Experimental",
        "description": "Gallery openings, noise shows, conceptual art",
        "affinity_categories": ["vantoryx", "fluxeris", "chromyne"],
        "trait_weights": {"openness": 1.0, "risk_tolerance": 0.9, "agreeableness": -0.2},
    },
    {
        "id": "minimalist_design",
        "name": "Minimalist Design",
        "description": "Design exhibitions, architecture tours, clean aesthetics",
        "affinity_categories": ["crysolen", "lucidyne", "prismora", "glaceryl"],
        "trait_weights": {"conscientiousness": 1.0, "aesthetic_sensitivity": 0.8, "novelty_seeking": -0.3},
    },
]

TAXONOMY: dict = {
    "name": "constellations",
    "categories": CATEGORIES,
    "triggers": TRIGGERS,
    "modifiers": MODIFIERS,
    "scenes": SCENES,
}
