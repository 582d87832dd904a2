"""
Phoneme Classification.

Vowel and consonant predicates for single phonemes in either script, plus
the Pāṇinian vowel grades and savarṇa (homorganic) groups. Vowel grades:
- vṛddhi: ā, ai, au
- guṇa: a, e, o
- ik: i, ī, u, ū, ṛ, ṝ, ḷ, ḹ

Devanagari phonemes are looked up through their IAST sound, so 'आ', 'ा'
and 'ā' classify the same way.
"""
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from sanskrit_text.core.models import Phoneme
from sanskrit_text.data.script_mappings import (
    ARTICULATION_CLASSES,
    DEVANAGARI_CONSONANTS,
    DEVANAGARI_INDEPENDENT_VOWELS,
    DEVANAGARI_MARK_SOUNDS,
    DEVANAGARI_VOWEL_SIGNS,
    GUNA_VOWELS,
    IAST_CONSONANTS,
    IAST_VOWELS,
    IK_VOWELS,
    NUKTA,
    SAVARNA_GROUPS,
    VOWEL_CATEGORIES,
    VRDDHI_VOWELS,
    is_devanagari_consonant,
)
from sanskrit_text.services.phoneme_tokenizer import iast_key

PhonemeLike = Union[Phoneme, str]


def _sound(phoneme: Optional[PhonemeLike]) -> str:
    """IAST sound of one phoneme, or "" when it has none."""
    if isinstance(phoneme, Phoneme):
        phoneme = phoneme.text
    if not phoneme:
        return ""
    for table in (
        DEVANAGARI_INDEPENDENT_VOWELS,
        DEVANAGARI_VOWEL_SIGNS,
        DEVANAGARI_CONSONANTS,
        DEVANAGARI_MARK_SOUNDS,
    ):
        if phoneme in table:
            return iast_key(table[phoneme])
    return iast_key(phoneme)


def is_vowel(phoneme: PhonemeLike) -> bool:
    """Independent vowel or vowel sign in Devanagari, or an IAST vowel."""
    return _sound(phoneme) in IAST_VOWELS


def is_consonant(phoneme: PhonemeLike) -> bool:
    text = phoneme.text if isinstance(phoneme, Phoneme) else phoneme
    if text and is_devanagari_consonant(text[0]) and text[1:] in ("", NUKTA):
        return True
    return _sound(text) in IAST_CONSONANTS


def is_vrddhi(vowel: PhonemeLike) -> bool:
    return _sound(vowel) in VRDDHI_VOWELS


def is_guna(vowel: PhonemeLike) -> bool:
    return _sound(vowel) in GUNA_VOWELS


def is_ik_vowel(vowel: PhonemeLike) -> bool:
    return _sound(vowel) in IK_VOWELS


def vowel_category(vowel: PhonemeLike) -> Optional[str]:
    """
    Detailed category of a vowel, e.g. 'long-a', 'diphthong-ai',
    'vocalic-r-short'. None for non-vowels.
    """
    return VOWEL_CATEGORIES.get(_sound(vowel))


def primary_vowel_classification(vowel: PhonemeLike) -> str:
    """
    Primary grade of a vowel.

    Returns:
        'vṛddhi', 'guṇa', 'ik', 'vowel' or 'unknown'
    """
    if is_vrddhi(vowel):
        return 'vṛddhi'
    if is_guna(vowel):
        return 'guṇa'
    if is_ik_vowel(vowel):
        return 'ik'
    if is_vowel(vowel):
        return 'vowel'
    return 'unknown'


def articulation_class(phoneme: PhonemeLike) -> Optional[str]:
    """
    Place of articulation of a consonant.

    Returns:
        'velar', 'palatal', 'retroflex', 'dental', 'labial', 'semivowel',
        'sibilant', 'special' (anusvāra, visarga) or None
    """
    sound = _sound(phoneme)
    for name, members in ARTICULATION_CLASSES.items():
        if sound in members:
            return name
    return None


def classify_phonemes(phonemes: Iterable[PhonemeLike]) -> Dict[str, List[Tuple[int, str]]]:
    """
    Partition a phoneme sequence into vowels, consonants and others.

    Args:
        phonemes: Phonemes or plain strings, e.g. the output of tokenize()

    Returns:
        Dict with 'vowels', 'consonants' and 'other' lists of
        (index, text) pairs in input order
    """
    result: Dict[str, List[Tuple[int, str]]] = {
        'vowels': [],
        'consonants': [],
        'other': [],
    }
    for index, phoneme in enumerate(phonemes):
        text = phoneme.text if isinstance(phoneme, Phoneme) else phoneme
        if is_vowel(text):
            result['vowels'].append((index, text))
        elif is_consonant(text):
            result['consonants'].append((index, text))
        else:
            result['other'].append((index, text))
    return result


def savarna_group(phoneme: PhonemeLike) -> Optional[FrozenSet[str]]:
    """
    Sounds homorganic (savarṇa) with a phoneme, as IAST spellings.

    Stops share a group with the vowels of their place ('k' with 'a', 'ā').
    Semivowels and spirants only pair with their vowels ('y' with 'i', 'ī',
    'e', 'ai'), so the relation is not symmetric for them.

    Returns:
        Frozen set of IAST sounds, or None when the phoneme has no group
    """
    return SAVARNA_GROUPS.get(_sound(phoneme))


def are_savarna(first: PhonemeLike, second: PhonemeLike) -> bool:
    """Check whether second is in the savarṇa group of first, in any script."""
    group = savarna_group(first)
    return group is not None and _sound(second) in group
