"""
Phoneme Tokenization Service.

Splits a word into phoneme units without losing any text: joining the
returned units always reproduces the input exactly.

Devanagari is scanned codepoint by codepoint. Consonants are emitted without
their inherent vowel, so a dead consonant is simply a CONSONANT followed by a
VIRAMA. IAST is scanned by Unicode grapheme cluster (via the `regex` \\X
pattern) with maximal munch over the two-letter units (kh, gh, ..., ai, au).
"""
import logging
import unicodedata
from typing import Callable, Dict, List, Optional

import regex

from sanskrit_text.core.models import Phoneme, PhonemeAnalysis, PhonemeCategory, Script
from sanskrit_text.data.script_mappings import (
    ANUSVARA,
    CANDRABINDU,
    IAST_ANUSVARA,
    IAST_CONSONANTS,
    IAST_DIGRAPHS,
    IAST_VARIANTS,
    IAST_VISARGA,
    IAST_VOWELS,
    NUKTA,
    VIRAMA,
    VISARGA,
    ZWJ,
    ZWNJ,
    is_devanagari_char,
    is_devanagari_consonant,
    is_devanagari_independent_vowel,
    is_devanagari_vowel_sign,
)
from sanskrit_text.services.script_detector import ScriptDetector

logger = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r'\X')

# Units that attach to the preceding base in an orthographic cluster
_ATTACHING = frozenset({
    PhonemeCategory.VIRAMA,
    PhonemeCategory.DEPENDENT_VOWEL_SIGN,
    PhonemeCategory.ANUSVARA,
    PhonemeCategory.VISARGA,
})


def split_graphemes(text: str) -> List[str]:
    """Split text into extended grapheme clusters."""
    if not text:
        return []
    return _GRAPHEME.findall(text)


def iast_key(unit: str) -> str:
    """Lookup key for an IAST unit: lower-case, NFC, ISO 15919 folded."""
    key = unicodedata.normalize('NFC', unit.lower())
    return IAST_VARIANTS.get(key, key)


def _is_foreign_mark(char: str) -> bool:
    return unicodedata.category(char)[0] == 'M' and not is_devanagari_char(char)


def _is_letter_unit(phoneme: Phoneme) -> bool:
    """False for OTHER units that are not letters (spaces, dandas, digits)."""
    if phoneme.category != PhonemeCategory.OTHER:
        return True
    return unicodedata.category(phoneme.text[0])[0] == 'L'


def _tokenize_devanagari(word: str) -> List[Phoneme]:
    phonemes = []
    length = len(word)
    i = 0

    while i < length:
        char = word[i]
        end = i + 1

        if is_devanagari_consonant(char):
            category = PhonemeCategory.CONSONANT
            if end < length and word[end] == NUKTA:
                end += 1
        elif char == VIRAMA:
            category = PhonemeCategory.VIRAMA
            if end < length and word[end] in (ZWJ, ZWNJ):
                end += 1
        elif is_devanagari_vowel_sign(char):
            category = PhonemeCategory.DEPENDENT_VOWEL_SIGN
        elif is_devanagari_independent_vowel(char):
            category = PhonemeCategory.INDEPENDENT_VOWEL
        elif char in (ANUSVARA, CANDRABINDU):
            category = PhonemeCategory.ANUSVARA
        elif char == VISARGA:
            category = PhonemeCategory.VISARGA
        else:
            category = PhonemeCategory.OTHER
            while end < length and _is_foreign_mark(word[end]):
                end += 1

        phonemes.append(Phoneme(word[i:end], category, i))
        i = end

    return phonemes


def _iast_category(key: str) -> PhonemeCategory:
    if key in IAST_VOWELS:
        return PhonemeCategory.INDEPENDENT_VOWEL
    if key in IAST_CONSONANTS:
        return PhonemeCategory.CONSONANT
    if key in IAST_ANUSVARA:
        return PhonemeCategory.ANUSVARA
    if key in IAST_VISARGA:
        return PhonemeCategory.VISARGA
    return PhonemeCategory.OTHER


def _tokenize_iast(word: str) -> List[Phoneme]:
    clusters = split_graphemes(word)
    keys = [iast_key(c) for c in clusters]
    phonemes = []
    position = 0
    i = 0

    while i < len(clusters):
        text = clusters[i]
        key = keys[i]
        # Maximal munch: kh, gh, ch, jh, ṭh, ḍh, th, dh, ph, bh, ai, au
        if i + 1 < len(clusters) and key + keys[i + 1] in IAST_DIGRAPHS:
            text += clusters[i + 1]
            key += keys[i + 1]
            i += 1

        phonemes.append(Phoneme(text, _iast_category(key), position))
        position += len(text)
        i += 1

    return phonemes


def _tokenize_graphemes(word: str) -> List[Phoneme]:
    phonemes = []
    position = 0
    for cluster in split_graphemes(word):
        phonemes.append(Phoneme(cluster, PhonemeCategory.OTHER, position))
        position += len(cluster)
    return phonemes


_TOKENIZERS: Dict[Script, Callable[[str], List[Phoneme]]] = {
    Script.DEVANAGARI: _tokenize_devanagari,
    Script.IAST: _tokenize_iast,
    Script.MIXED: _tokenize_graphemes,
    Script.UNKNOWN: _tokenize_graphemes,
}

_missing = set(Script) - set(_TOKENIZERS)
if _missing:
    raise RuntimeError(f"No tokenizer registered for scripts: {sorted(s.value for s in _missing)}")


class PhonemeTokenizer:
    """
    Script-aware phoneme tokenizer.

    Tokenization is permissive: malformed input (dangling marks, foreign
    characters) produces OTHER units instead of errors. Run the WordValidator
    first when strictness matters.
    """

    def __init__(self, detector: Optional[ScriptDetector] = None):
        self.detector = detector or ScriptDetector()

    def tokenize(self, word: str, hint: Optional[Script] = None) -> List[Phoneme]:
        """
        Split a word into phonemes.

        Args:
            word: Word in any script
            hint: Script hint passed to detection

        Returns:
            List of Phoneme; "".join(p.text for p in result) == word
        """
        if not word:
            return []
        return self._tokenize(word, self.detector.detect(word, hint))

    def _tokenize(self, word: str, script: Script) -> List[Phoneme]:
        if not word:
            return []
        phonemes = _TOKENIZERS[script](word)
        logger.debug(f"Tokenized {word!r} as {script.value} into {len(phonemes)} phonemes")
        return phonemes

    def akshara_clusters(self, word: str, hint: Optional[Script] = None) -> List[str]:
        """
        Group phonemes into orthographic clusters.

        A cluster is a base (consonant, vowel or other) followed by any
        virama, vowel sign, anusvāra or visarga attached to it. In IAST a
        vowel joins the consonant before it. Whitespace separates clusters
        and is dropped.

        Example:
            akshara_clusters("गच्छति") == ["ग", "च्", "छ", "ति"]
        """
        script = self.detector.detect(word or "", hint)
        clusters: List[str] = []
        last: Optional[PhonemeCategory] = None

        for phoneme in self._tokenize(word, script):
            category = phoneme.category
            if category == PhonemeCategory.OTHER and phoneme.text.isspace():
                last = None
                continue

            attaches = last is not None and (
                category in _ATTACHING or
                (category == PhonemeCategory.INDEPENDENT_VOWEL and
                 last == PhonemeCategory.CONSONANT and
                 script == Script.IAST)
            )
            if attaches:
                clusters[-1] += phoneme.text
            else:
                clusters.append(phoneme.text)
            last = category

        return clusters

    def analyze_structure(self, word: str, hint: Optional[Script] = None) -> PhonemeAnalysis:
        """
        Summarize the phoneme structure of a word.

        A dead consonant is a consonant without a following vowel: a
        consonant + virama pair in Devanagari, a consonant not followed by a
        vowel in IAST. Whitespace, punctuation, digits and symbols are
        skipped, so "राम्।" still ends in a dead consonant.

        Args:
            word: Word to analyze
            hint: Script hint passed to detection

        Returns:
            PhonemeAnalysis
        """
        script = self.detector.detect(word or "", hint)
        phonemes = self._tokenize(word, script)

        counts: Dict[PhonemeCategory, int] = {}
        for phoneme in phonemes:
            counts[phoneme.category] = counts.get(phoneme.category, 0) + 1

        letters = [p for p in phonemes if _is_letter_unit(p)]
        dead_flags = [self._is_dead(letters, i, script) for i in range(len(letters))]
        if script == Script.DEVANAGARI:
            ends_dead = len(letters) >= 2 and dead_flags[-2]
        else:
            ends_dead = bool(dead_flags) and dead_flags[-1]

        return PhonemeAnalysis(
            word=word or "",
            script=script,
            phonemes=phonemes,
            category_counts=counts,
            dead_consonant_count=sum(dead_flags),
            ends_in_dead_consonant=ends_dead,
        )

    @staticmethod
    def _is_dead(letters: List[Phoneme], index: int, script: Script) -> bool:
        if letters[index].category != PhonemeCategory.CONSONANT:
            return False
        following = letters[index + 1] if index + 1 < len(letters) else None
        if script == Script.DEVANAGARI:
            return following is not None and following.category == PhonemeCategory.VIRAMA
        if script == Script.IAST:
            return following is None or following.category != PhonemeCategory.INDEPENDENT_VOWEL
        return False


def tokenize(word: str, hint: Optional[Script] = None) -> List[Phoneme]:
    """
    Convenience function to tokenize a word into phonemes.

    Args:
        word: Word to tokenize
        hint: Optional script hint

    Returns:
        List of Phoneme
    """
    tokenizer = PhonemeTokenizer()
    return tokenizer.tokenize(word, hint)


def akshara_clusters(word: str, hint: Optional[Script] = None) -> List[str]:
    """Convenience function to split a word into orthographic clusters."""
    tokenizer = PhonemeTokenizer()
    return tokenizer.akshara_clusters(word, hint)


def analyze_structure(word: str, hint: Optional[Script] = None) -> PhonemeAnalysis:
    """Convenience function to analyze the phoneme structure of a word."""
    tokenizer = PhonemeTokenizer()
    return tokenizer.analyze_structure(word, hint)
