"""
Fixed vocabulary for query enrichment.

Every table here is a process-wide constant: frozensets and read-only
mappings built once at import time. Nothing in the pipeline writes to them.
"""

from __future__ import annotations

from types import MappingProxyType

from pixabay_search.domain.entities.image import PixabayCategory as C

# ─── Normalizer ─────────────────────────────────────────────────
# A token containing any of these (case-insensitive substring) is dropped.
EXCLUDED_WORDS: frozenset[str] = frozenset({"free", "pro", "child"})

# Punctuation trimmed from both ends of a token before filtering
TOKEN_STRIP_CHARS = "\"'`()[]{}<>.;:!?|/\\#*+=~^"

# Values accepted by the provider's ``colors`` filter
PIXABAY_COLORS: frozenset[str] = frozenset({
    "grayscale", "transparent", "red", "orange", "yellow", "green",
    "turquoise", "blue", "lilac", "pink", "white", "gray", "black", "brown",
})

# ─── Category Classifier ────────────────────────────────────────
# Priority bands:
#   5 = highly specific content type
#   4 = moderately specific
#   3 = geographic / regional
#   2 = generic descriptors

PRIORITY_SPECIFIC = 5
PRIORITY_MODERATE = 4
PRIORITY_GEOGRAPHIC = 3
PRIORITY_GENERIC = 2

_SPECIFIC_KEYWORDS: dict[C, tuple[str, ...]] = {
    C.HEALTH: (
        "medical", "medicine", "dental", "dentist", "teeth", "tooth",
        "healthcare", "health", "pharmacy", "surgery", "therapy",
    ),
    C.ANIMALS: (
        "pet", "pets", "dog", "dogs", "puppy", "cat", "cats", "kitten",
        "animal", "animals", "veterinary", "wildlife", "bird", "horse",
    ),
    C.COMPUTER: (
        "gadget", "gadgets", "smartphone", "laptop", "computer",
        "technology", "tech", "software", "electronics", "coding",
    ),
    C.INDUSTRY: (
        "industry", "industrial", "factory", "manufacturing",
        "construction", "engineering", "warehouse",
    ),
    C.FOOD: (
        "food", "restaurant", "recipe", "cooking", "kitchen", "cafe",
        "coffee", "bakery",
    ),
    C.FASHION: ("fashion", "clothing", "beauty", "makeup", "jewelry"),
    C.SPORTS: (
        "sports", "sport", "football", "soccer", "basketball", "cricket",
        "tennis", "fitness", "gym", "yoga",
    ),
    C.MUSIC: ("music", "concert", "guitar", "piano", "singer"),
    C.EDUCATION: ("education", "school", "university", "classroom", "student"),
    C.SCIENCE: ("science", "laboratory", "research", "chemistry", "physics"),
    C.RELIGION: ("religion", "church", "temple", "mosque", "prayer"),
    C.NATURE: ("nature", "forest", "mountain", "beach", "ocean", "landscape"),
    C.TRANSPORTATION: (
        "transportation", "car", "cars", "automobile", "automotive",
        "vehicle", "train", "airplane", "bus",
    ),
    C.BACKGROUNDS: ("backgrounds", "background", "wallpaper", "texture"),
    C.FEELINGS: ("feelings", "emotion", "emotions", "love", "happiness"),
    C.PEOPLE: ("people",),
    C.TRAVEL: ("travel",),
    C.BUILDINGS: ("buildings",),
    C.PLACES: ("places",),
}

_MODERATE_KEYWORDS: dict[C, tuple[str, ...]] = {
    C.HEALTH: ("doctor", "hospital", "clinic", "nurse", "patient"),
    C.BUILDINGS: (
        "property", "realestate", "house", "home", "apartment",
        "architecture", "interior",
    ),
    C.TRAVEL: ("hotel", "tourism", "vacation", "holiday", "resort"),
    C.BUSINESS: ("office", "finance", "bank", "corporate", "meeting"),
    C.PEOPLE: ("family", "wedding", "portrait", "woman", "man"),
}

_GEOGRAPHIC_KEYWORDS: tuple[str, ...] = (
    "china", "chinese", "india", "indian", "japan", "japanese", "korea",
    "korean", "asia", "asian", "europe", "european", "africa", "african",
    "america", "american", "usa", "arabic", "arab", "dubai", "london",
    "paris", "nepal", "city", "world", "international",
)

_GENERIC_KEYWORDS: dict[str, C] = {
    "news": C.BUSINESS,
    "media": C.BUSINESS,
    "magazine": C.BUSINESS,
    "business": C.BUSINESS,
    "lifestyle": C.PEOPLE,
}


def _build_category_table() -> MappingProxyType[str, tuple[C, int]]:
    table: dict[str, tuple[C, int]] = {}
    for word, category in _GENERIC_KEYWORDS.items():
        table[word] = (category, PRIORITY_GENERIC)
    for word in _GEOGRAPHIC_KEYWORDS:
        table[word] = (C.PLACES, PRIORITY_GEOGRAPHIC)
    for category, words in _MODERATE_KEYWORDS.items():
        for word in words:
            table[word] = (category, PRIORITY_MODERATE)
    for category, words in _SPECIFIC_KEYWORDS.items():
        for word in words:
            table[word] = (category, PRIORITY_SPECIFIC)
    return MappingProxyType(table)


# keyword (lowercase) -> (provider category, priority 1-5)
CATEGORY_KEYWORDS: MappingProxyType[str, tuple[C, int]] = _build_category_table()

# ─── Query Builder ──────────────────────────────────────────────

# Tier 1: specific content nouns, always retained
TIER1_CONTENT_NOUNS: frozenset[str] = frozenset(
    word
    for word, (_, priority) in CATEGORY_KEYWORDS.items()
    if priority >= PRIORITY_MODERATE
) | frozenset({
    "sunset", "sunrise", "flower", "flowers", "tree", "sky", "water",
    "camera", "phone", "money", "baby", "garden", "snow", "river",
})

# Tier 2: generic descriptors, fill remaining slots
TIER2_GENERIC: frozenset[str] = frozenset(_GENERIC_KEYWORDS) | frozenset({
    "blog", "daily", "latest", "trending", "online", "digital", "modern",
    "top", "best", "new", "today", "update", "updates", "report", "story",
    "article", "post", "general", "entertainment",
})

# Tier 3: geographic / regional terms, at most MAX_TIER3_TOKENS retained
TIER3_GEOGRAPHIC: frozenset[str] = frozenset(_GEOGRAPHIC_KEYWORDS)

MAX_QUERY_TOKENS = 5
MAX_TIER3_TOKENS = 2
MIN_SELECTED_TOKENS = 2
FALLBACK_TARGET_TOKENS = 3
FALLBACK_MIN_TOKEN_LENGTH = 3

# Context words are only appended while the string stays within this length,
# leaving headroom for the regional keyword and the final length cap.
BOOST_MAX_LENGTH = 80

# category -> (trigger words, context phrase)
CONTEXT_BOOSTS: MappingProxyType[C, tuple[frozenset[str], str]] = MappingProxyType({
    C.HEALTH: (
        frozenset({
            "dental", "dentist", "medical", "medicine", "clinic", "doctor",
            "hospital", "nurse", "patient", "health",
        }),
        "healthcare medical",
    ),
    C.ANIMALS: (
        frozenset({"pet", "dog", "cat", "puppy", "kitten", "veterinary"}),
        "pet animal",
    ),
    C.COMPUTER: (
        frozenset({
            "gadget", "smartphone", "laptop", "tech", "software", "electronics",
        }),
        "technology device",
    ),
    C.INDUSTRY: (
        frozenset({"factory", "manufacturing", "industrial", "construction"}),
        "industry worker",
    ),
    C.BUILDINGS: (
        frozenset({"property", "realestate", "apartment", "house", "home"}),
        "real estate",
    ),
    C.FOOD: (
        frozenset({"restaurant", "recipe", "cooking", "kitchen", "cafe"}),
        "food dish",
    ),
    C.SPORTS: (
        frozenset({
            "football", "soccer", "basketball", "cricket", "tennis", "fitness", "gym",
        }),
        "sports athlete",
    ),
    C.TRAVEL: (
        frozenset({"hotel", "tourism", "vacation", "holiday", "resort"}),
        "travel destination",
    ),
    C.EDUCATION: (
        frozenset({"school", "university", "classroom", "student"}),
        "education learning",
    ),
    C.BUSINESS: (
        frozenset({"office", "finance", "corporate", "meeting"}),
        "business workplace",
    ),
})

# ─── Language / Region Resolver ─────────────────────────────────

DEFAULT_LANGUAGE_CODE = "en"

_LANGUAGE_ALIASES: dict[str, tuple[str, ...]] = {
    "en": ("en", "english", "default"),
    "zh": ("zh", "china", "chinese"),
    "ar": ("ar", "rtl", "arabic"),
    "ja": ("ja", "japan", "japanese"),
    "ko": ("ko", "korea", "korean"),
    "es": ("es", "spanish", "spain"),
    "fr": ("fr", "french", "france"),
    "de": ("de", "german", "germany"),
    "it": ("it", "italian", "italy"),
    "pt": ("pt", "portuguese", "brazil"),
    "ru": ("ru", "russian", "russia"),
    "nl": ("nl", "dutch", "netherlands"),
    "tr": ("tr", "turkish", "turkey"),
    "vi": ("vi", "vietnamese", "vietnam"),
    "th": ("th", "thai", "thailand"),
    "id": ("id", "indonesian", "indonesia"),
    "pl": ("pl", "polish", "poland"),
}

# internal label (lowercase) -> provider language code
LANGUAGE_CODES: MappingProxyType[str, str] = MappingProxyType({
    alias: code
    for code, aliases in _LANGUAGE_ALIASES.items()
    for alias in aliases
})

# internal label (lowercase) -> keyword appended to the search string
REGION_KEYWORDS: MappingProxyType[str, str] = MappingProxyType({
    "china": "chinese",
    "japan": "japanese",
    "korea": "korean",
    "india": "indian",
    "rtl": "arabic",
    "arabic": "arabic",
    "africa": "african",
    "thailand": "thai",
    "vietnam": "vietnamese",
})

REGION_MAX_LENGTH = BOOST_MAX_LENGTH
