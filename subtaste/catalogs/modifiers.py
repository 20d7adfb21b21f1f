"""Bipolar modifier dimensions shared by every built-in taxonomy."""

MODIFIERS: list[dict] = [
    {
        "id": "adoption_timing",
        "formula": "adoption_timing",
        "high_label": "Early Adopter",
        "low_label": "Late Wave",
        "high_description": "You discover trends before they peak, often while they're still underground.",
        "low_description": "You prefer validated aesthetics with established communities.",
        "balanced_description": "You balance discovery with cultural establishment.",
        "high_insight": "You're likely among the first 10% to engage with emerging scenes and sounds.",
        "low_insight": "You prefer waiting until something proves its staying power before diving in.",
        "balanced_insight": "You balance openness to new things with appreciation for the proven.",
    },
    {
        "id": "engagement_depth",
        "formula": "engagement_depth",
        "high_label": "Deep Diver",
        "low_label": "Surface Explorer",
        "high_description": "You go deep into specific aesthetics, becoming an expert in your niches.",
        "low_description": "You prefer broad exploration across many aesthetic territories.",
        "balanced_description": "You balance depth and breadth in your aesthetic explorations.",
        "high_insight": "You tend to become a connoisseur of specific aesthetics rather than a generalist.",
        "low_insight": "Your strength is connecting disparate aesthetic worlds through broad exploration.",
        "balanced_insight": "You know when to go deep and when to explore wide.",
    },
    {
        "id": "engagement_pattern",
        "formula": "engagement_pattern",
        "high_label": "Ritual Engager",
        "low_label": "Impulse Explorer",
        "high_description": "Your aesthetic engagement follows intentional patterns and routines.",
        "low_description": "You discover through spontaneous, intuition-led exploration.",
        "balanced_description": "You mix intentional curation with spontaneous discovery.",
        "high_insight": "You build lasting relationships with your aesthetic preferences through repeated engagement.",
        "low_insight": "You thrive on the thrill of unexpected discoveries and follow your curiosity freely.",
        "balanced_insight": "You create structure for your favorites while staying open to serendipity.",
    },
    {
        "id": "taste_coherence",
        "formula": "taste_coherence",
        "high_label": "Coherent Taste",
        "low_label": "High-Entropy Taste",
        "high_description": "Your preferences form a unified, internally consistent aesthetic identity.",
        "low_description": "Your taste spans many seemingly contradictory territories with ease.",
        "balanced_description": "Your taste has a recognizable core with interesting outliers.",
        "high_insight": "Someone could identify your taste from a random sample of your favorites.",
        "low_insight": "You contain multitudes; your taste defies easy categorization.",
        "balanced_insight": "You have a recognizable aesthetic center with room for exploration.",
    },
    {
        "id": "social_orientation",
        "formula": "social_orientation",
        "high_label": "Taste Sharer",
        "low_label": "Taste Keeper",
        "high_description": "You actively share and discuss your aesthetic discoveries with others.",
        "low_description": "Your aesthetic world is primarily personal and private.",
        "balanced_description": "You share selectively with those who will appreciate it.",
        "high_insight": "You likely curate playlists for friends and share finds enthusiastically.",
        "low_insight": "Your aesthetic experiences are intimate; you don't need external validation.",
        "balanced_insight": "You share with intention, choosing your audience carefully.",
    },
    {
        "id": "intensity_preference",
        "formula": "intensity_preference",
        "high_label": "Intensity Seeker",
        "low_label": "Subtlety Appreciator",
        "high_description": "You're drawn to bold, maximal, high-impact aesthetics.",
        "low_description": "You appreciate nuance, understatement, and quiet beauty.",
        "balanced_description": "You appreciate both bombast and subtlety in their proper contexts.",
        "high_insight": "You want aesthetics that make an impact and aren't afraid of sensory intensity.",
        "low_insight": "You find beauty in restraint and notice details others overlook.",
        "balanced_insight": "You can appreciate a whisper and a shout, each in its moment.",
    },
    {
        "id": "discovery_drive",
        "formula": "discovery_drive",
        "high_label": "Restless Discoverer",
        "low_label": "Settled Connoisseur",
        "high_description": "You are always hunting for the next unfamiliar sound or image.",
        "low_description": "You return to a trusted canon and savour it more each time.",
        "balanced_description": "You explore in bursts and settle in between.",
        "high_insight": "New territory energises you more than mastery of the familiar.",
        "low_insight": "Familiarity deepens your appreciation rather than dulling it.",
        "balanced_insight": "You let curiosity lead without losing your anchors.",
    },
]
