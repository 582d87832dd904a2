"""
Shared test fixtures for Sanskrit text layer tests.

Sample words in both scripts, including decomposed, malformed and
non-Sanskrit strings that every total operation must accept.
"""

DEVANAGARI_WORDS = [
    "राम",
    "गच्छति",
    "तिष्ठति",
    "कृष्ण",
    "संस्कृतम्",
    "रामः",
    "हँस",
    "वाक्",
]

IAST_WORDS = [
    "rāma",
    "kṛṣṇa",
    "saṃskṛtam",
    "rāmaḥ",
    "kailāsa",
    "vāk",
]

# (devanagari, iast) spellings of the same sounds
CROSS_SCRIPT_PAIRS = [
    ("राम", "rāma"),
    ("कृष्ण", "kṛṣṇa"),
    ("रामः", "rāmaḥ"),
    ("संस्कृतम्", "saṃskṛtam"),
    ("हँस", "haṃsa"),
    ("हँस", "haṁsa"),
    ("कैलास", "kailāsa"),
    ("भक्तिः", "bhaktiḥ"),
]

LOSSLESS_SAMPLES = DEVANAGARI_WORDS + IAST_WORDS + [
    "",
    " ",
    "  गच्छति  ",
    "rāma kṛṣṇa",
    "rāमa",
    "kr\u0323s\u0323n\u0323a",
    "\u0915\u093C\u092E\u0932",
    "\u0915\u094D\u200D\u0937",
    "्राम",
    "\u0301abc",
    "hello, world!",
    "१२३ ।",
    "😀 emoji",
    "a\u0000b",
]

