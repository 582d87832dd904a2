"""
Unicode character tables for Devanagari and IAST.

This module contains:
1. Devanagari letter, vowel sign and mark inventories
2. IAST letter inventories and the diacritics that distinguish IAST from
   plain Latin text, plus the ASCII conjuncts that signal IAST
3. Devanagari to IAST sound tables used for cross-script comparison
4. Pāṇinian vowel grades, places of articulation and savarṇa groups

Unicode Ranges:
- Devanagari: U+0900 - U+097F
- Combining Diacritical Marks: U+0300 - U+036F
"""
from typing import Dict, FrozenSet

# ============================================================================
# DEVANAGARI
# ============================================================================

DEVANAGARI_RANGE = range(0x0900, 0x0980)

CANDRABINDU = '\u0901'  # ँ
ANUSVARA = '\u0902'     # ं
VISARGA = '\u0903'      # ः
NUKTA = '\u093C'        # ़
AVAGRAHA = '\u093D'     # ऽ
VIRAMA = '\u094D'       # ्
OM = '\u0950'           # ॐ

ZWNJ = '\u200C'
ZWJ = '\u200D'

# Independent vowels to IAST
DEVANAGARI_INDEPENDENT_VOWELS: Dict[str, str] = {
    'अ': 'a',
    'आ': 'ā',
    'इ': 'i',
    'ई': 'ī',
    'उ': 'u',
    'ऊ': 'ū',
    'ऋ': 'ṛ',
    'ॠ': 'ṝ',
    'ऌ': 'ḷ',
    'ॡ': 'ḹ',
    'ए': 'e',
    'ऐ': 'ai',
    'ओ': 'o',
    'औ': 'au',
}

# Dependent vowel signs (mātrā) to IAST
DEVANAGARI_VOWEL_SIGNS: Dict[str, str] = {
    'ा': 'ā',
    'ि': 'i',
    'ी': 'ī',
    'ु': 'u',
    'ू': 'ū',
    'ृ': 'ṛ',
    'ॄ': 'ṝ',
    'ॢ': 'ḷ',
    'ॣ': 'ḹ',
    'े': 'e',
    'ै': 'ai',
    'ो': 'o',
    'ौ': 'au',
}

# Consonants to IAST (without the inherent vowel)
DEVANAGARI_CONSONANTS: Dict[str, str] = {
    # Velars
    'क': 'k', 'ख': 'kh', 'ग': 'g', 'घ': 'gh', 'ङ': 'ṅ',
    # Palatals
    'च': 'c', 'छ': 'ch', 'ज': 'j', 'झ': 'jh', 'ञ': 'ñ',
    # Retroflexes
    'ट': 'ṭ', 'ठ': 'ṭh', 'ड': 'ḍ', 'ढ': 'ḍh', 'ण': 'ṇ',
    # Dentals
    'त': 't', 'थ': 'th', 'द': 'd', 'ध': 'dh', 'न': 'n',
    # Labials
    'प': 'p', 'फ': 'ph', 'ब': 'b', 'भ': 'bh', 'म': 'm',
    # Semivowels
    'य': 'y', 'र': 'r', 'ल': 'l', 'ळ': 'ḻ', 'व': 'v',
    # Sibilants
    'श': 'ś', 'ष': 'ṣ', 'स': 's',
    # Aspirate
    'ह': 'h',
}

DEVANAGARI_MARK_SOUNDS: Dict[str, str] = {
    ANUSVARA: 'ṃ',
    CANDRABINDU: 'm\u0310',
    VISARGA: 'ḥ',
}

# Codepoint ranges beyond the tables above that still belong to each class
# (nukta letters, Marathi/Sindhi additions, Vedic vowel signs).
_INDEPENDENT_VOWEL_RANGES = ((0x0904, 0x0914), (0x0960, 0x0961), (0x0972, 0x0977))
_CONSONANT_RANGES = ((0x0915, 0x0939), (0x0958, 0x095F), (0x0978, 0x097F))
_VOWEL_SIGN_RANGES = (
    (0x093A, 0x093B),
    (0x093E, 0x094C),
    (0x094E, 0x094F),
    (0x0955, 0x0957),
    (0x0962, 0x0963),
)
# Udatta, anudatta, grave and acute accents
_ACCENT_RANGE = (0x0951, 0x0954)


def _in_ranges(char: str, ranges) -> bool:
    if len(char) != 1:
        return False
    code_point = ord(char)
    return any(start <= code_point <= end for start, end in ranges)


# ============================================================================
# IAST
# ============================================================================

IAST_VOWELS: FrozenSet[str] = frozenset({
    'a', 'ā', 'i', 'ī', 'u', 'ū', 'ṛ', 'ṝ', 'ḷ', 'ḹ', 'e', 'ai', 'o', 'au',
})

IAST_CONSONANTS: FrozenSet[str] = frozenset({
    'k', 'kh', 'g', 'gh', 'ṅ',
    'c', 'ch', 'j', 'jh', 'ñ',
    'ṭ', 'ṭh', 'ḍ', 'ḍh', 'ṇ',
    't', 'th', 'd', 'dh', 'n',
    'p', 'ph', 'b', 'bh', 'm',
    'y', 'r', 'l', 'ḻ', 'v',
    'ś', 'ṣ', 's', 'h',
})

IAST_ANUSVARA: FrozenSet[str] = frozenset({'ṃ', 'ṁ', 'm\u0310'})
IAST_VISARGA: FrozenSet[str] = frozenset({'ḥ'})

# Units spelled with two grapheme clusters: aspirates and diphthongs
IAST_DIGRAPHS: FrozenSet[str] = frozenset(
    unit for unit in (IAST_VOWELS | IAST_CONSONANTS) if len(unit) == 2
)

# ISO 15919 spellings accepted as their IAST equivalents
IAST_VARIANTS: Dict[str, str] = {
    'r\u0325': 'ṛ',
    'r\u0325\u0304': 'ṝ',
    'l\u0325': 'ḷ',
    'l\u0325\u0304': 'ḹ',
    'ṁ': 'ṃ',
    'm\u0310': 'ṃ',
}

# Precomposed letters that only occur in romanized Sanskrit
_IAST_DIACRITIC_LOWER = 'āīūṛṝḷḹṅñṭḍṇśṣḥṃṁḻ'
IAST_DIACRITIC_LETTERS: FrozenSet[str] = frozenset(
    _IAST_DIACRITIC_LOWER + _IAST_DIACRITIC_LOWER.upper()
)

# Combining marks used to spell IAST/ISO 15919 letters in decomposed form
IAST_COMBINING_MARKS: FrozenSet[str] = frozenset({
    '\u0301',  # acute (ś)
    '\u0303',  # tilde (ñ)
    '\u0304',  # macron (ā ī ū)
    '\u0307',  # dot above (ṅ ṁ)
    '\u0310',  # candrabindu
    '\u0323',  # dot below (ṛ ṭ ḍ ṇ ṣ ḥ ṃ)
    '\u0325',  # ring below (ISO 15919 vocalic r/l)
    '\u0331',  # macron below (ḻ)
})

# Conjuncts spelled in plain ASCII that mark romanized Sanskrit even without
# diacritics: geminate aspirates and aspirate + nasal/semivowel clusters.
# Clusters common in English spelling (st, tr, ng, ghn, thy, phr...) are
# left out so that English words stay Unknown.
IAST_CLUSTER_SIGNALS: FrozenSet[str] = frozenset({
    'cch', 'jjh', 'ddh', 'bbh',
    'dgh', 'dbh', 'bdh',
    'khy', 'khr',
    'dhn', 'dhm', 'dhy', 'dhv',
    'bhn', 'bhm', 'bhy', 'bhr', 'bhv',
    'njh', 'rjh',
})

# ============================================================================
# PĀṆINIAN CLASSIFICATION
# ============================================================================

VRDDHI_VOWELS: FrozenSet[str] = frozenset({'ā', 'ai', 'au'})
GUNA_VOWELS: FrozenSet[str] = frozenset({'a', 'e', 'o'})
IK_VOWELS: FrozenSet[str] = frozenset({'i', 'ī', 'u', 'ū', 'ṛ', 'ṝ', 'ḷ', 'ḹ'})

VOWEL_CATEGORIES: Dict[str, str] = {
    'a': 'basic-a',
    'ā': 'long-a',
    'i': 'high-front-short',
    'ī': 'high-front-long',
    'u': 'high-back-short',
    'ū': 'high-back-long',
    'ṛ': 'vocalic-r-short',
    'ṝ': 'vocalic-r-long',
    'ḷ': 'vocalic-l-short',
    'ḹ': 'vocalic-l-long',
    'e': 'front-mid',
    'ai': 'diphthong-ai',
    'o': 'back-mid',
    'au': 'diphthong-au',
}

ARTICULATION_CLASSES: Dict[str, FrozenSet[str]] = {
    'velar': frozenset({'k', 'kh', 'g', 'gh', 'ṅ'}),
    'palatal': frozenset({'c', 'ch', 'j', 'jh', 'ñ'}),
    'retroflex': frozenset({'ṭ', 'ṭh', 'ḍ', 'ḍh', 'ṇ'}),
    'dental': frozenset({'t', 'th', 'd', 'dh', 'n'}),
    'labial': frozenset({'p', 'ph', 'b', 'bh', 'm'}),
    'semivowel': frozenset({'y', 'r', 'l', 'v'}),
    'sibilant': frozenset({'ś', 'ṣ', 's', 'h'}),
    # Anusvāra and visarga
    'special': frozenset({'ṃ', 'ḥ'}),
}

# Savarṇa (homorganic) groups: the five stop classes with the vowels
# sharing their place of articulation
_VELAR_GROUP = frozenset({'k', 'kh', 'g', 'gh', 'ṅ', 'a', 'ā'})
_PALATAL_GROUP = frozenset({'c', 'ch', 'j', 'jh', 'ñ', 'i', 'ī', 'e', 'ai'})
_RETROFLEX_GROUP = frozenset({'ṭ', 'ṭh', 'ḍ', 'ḍh', 'ṇ', 'ṛ', 'ṝ'})
_DENTAL_GROUP = frozenset({'t', 'th', 'd', 'dh', 'n', 'l', 's'})
_LABIAL_GROUP = frozenset({'p', 'ph', 'b', 'bh', 'm', 'u', 'ū', 'o', 'au'})

SAVARNA_GROUPS: Dict[str, FrozenSet[str]] = {
    sound: group
    for group in (_VELAR_GROUP, _PALATAL_GROUP, _RETROFLEX_GROUP, _DENTAL_GROUP, _LABIAL_GROUP)
    for sound in group
}

# Semivowels and spirants pair with the vowels of their place only
SAVARNA_GROUPS.update({
    'y': frozenset({'y', 'i', 'ī', 'e', 'ai'}),
    'r': frozenset({'r', 'ṛ', 'ṝ'}),
    'v': frozenset({'v', 'u', 'ū', 'o', 'au'}),
    'ś': frozenset({'ś', 'i', 'ī', 'e', 'ai'}),
    'ṣ': frozenset({'ṣ', 'ṛ', 'ṝ'}),
    'h': frozenset({'h', 'a', 'ā'}),
})

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def is_devanagari_char(char: str) -> bool:
    """Check if character is in Devanagari Unicode range."""
    if not char:
        return False
    return ord(char[0]) in DEVANAGARI_RANGE


def is_devanagari_consonant(char: str) -> bool:
    """Check if character is a Devanagari consonant letter."""
    return _in_ranges(char, _CONSONANT_RANGES)


def is_devanagari_independent_vowel(char: str) -> bool:
    """Check if character is a Devanagari independent vowel letter."""
    return _in_ranges(char, _INDEPENDENT_VOWEL_RANGES)


def is_devanagari_vowel_sign(char: str) -> bool:
    """Check if character is a dependent vowel sign (mātrā)."""
    return _in_ranges(char, _VOWEL_SIGN_RANGES)


def is_devanagari_accent(char: str) -> bool:
    """Check if character is a Vedic accent mark."""
    return _in_ranges(char, (_ACCENT_RANGE,))


def is_latin_char(char: str) -> bool:
    """Check if character is a basic Latin letter (A-Z, a-z)."""
    if len(char) != 1:
        return False
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z')


def is_iast_diacritic_letter(char: str) -> bool:
    """Check if character is a precomposed IAST letter with a diacritic."""
    return char in IAST_DIACRITIC_LETTERS


def is_iast_combining_mark(char: str) -> bool:
    """Check if character is a combining diacritic used by IAST."""
    return char in IAST_COMBINING_MARKS


def count_iast_cluster_signals(text: str) -> int:
    """Count occurrences of IAST_CLUSTER_SIGNALS in text (case-insensitive)."""
    lowered = text.lower()
    return sum(lowered.count(pattern) for pattern in IAST_CLUSTER_SIGNALS)
