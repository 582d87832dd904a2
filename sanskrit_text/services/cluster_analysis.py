"""
Conjunct and Syllable Analysis Service.

Works on the phoneme sequence produced by the PhonemeTokenizer:
1. Conjuncts (saṃyoga): consonants with no vowel between them. In Devanagari
   that is consonant + virama + consonant; in IAST, adjacent consonant letters
   (aspirates such as "bh" count as one consonant).
2. Syllables: one vowel nucleus with the consonants before it. Anusvāra,
   visarga and word-final consonants close the preceding syllable.

Only Devanagari and IAST words are analyzed; Mixed and Unknown text has no
recognized consonants and yields no conjuncts or syllables.
"""
import logging
from typing import List, Optional

from sanskrit_text.core.models import (
    Conjunct,
    ConjunctAnalysis,
    Phoneme,
    PhonemeCategory,
    Script,
)
from sanskrit_text.services.phoneme_tokenizer import PhonemeTokenizer

logger = logging.getLogger(__name__)

_SYLLABLE_CODA = frozenset({
    PhonemeCategory.ANUSVARA,
    PhonemeCategory.VISARGA,
    PhonemeCategory.VIRAMA,
})

# Phonemes after which a Devanagari consonant has no inherent vowel
_NO_INHERENT_VOWEL = frozenset({PhonemeCategory.VIRAMA, PhonemeCategory.DEPENDENT_VOWEL_SIGN})


def _devanagari_conjuncts(phonemes: List[Phoneme]) -> List[Conjunct]:
    conjuncts = []
    i = 0
    while i < len(phonemes):
        start = phonemes[i]
        if start.category != PhonemeCategory.CONSONANT:
            i += 1
            continue

        consonants = [start.text]
        end = i
        while (end + 2 < len(phonemes) and
               phonemes[end + 1].category == PhonemeCategory.VIRAMA and
               phonemes[end + 2].category == PhonemeCategory.CONSONANT):
            consonants.append(phonemes[end + 2].text)
            end += 2

        if len(consonants) > 1:
            text = "".join(p.text for p in phonemes[i:end + 1])
            conjuncts.append(Conjunct(text, start.position, consonants))
        i = end + 1

    return conjuncts


def _iast_conjuncts(phonemes: List[Phoneme]) -> List[Conjunct]:
    conjuncts = []
    run: List[Phoneme] = []

    for phoneme in phonemes + [None]:
        if phoneme is not None and phoneme.category == PhonemeCategory.CONSONANT:
            run.append(phoneme)
            continue
        if len(run) > 1:
            conjuncts.append(Conjunct(
                "".join(p.text for p in run),
                run[0].position,
                [p.text for p in run],
            ))
        run = []

    return conjuncts


class ClusterAnalyzer:
    """
    Finds conjuncts and splits words into syllables.

    Example:
        analyzer = ClusterAnalyzer()
        analyzer.syllabify("गच्छति")       # ["ग", "च्छ", "ति"]
        analyzer.find_conjuncts("kṛṣṇa")   # [Conjunct("ṣṇ", 2, ["ṣ", "ṇ"])]
    """

    def __init__(self, tokenizer: Optional[PhonemeTokenizer] = None):
        self.tokenizer = tokenizer or PhonemeTokenizer()

    def find_conjuncts(self, word: str, hint: Optional[Script] = None) -> List[Conjunct]:
        """
        Find every consonant cluster in a word, in order of position.

        Args:
            word: Word or phrase in Devanagari or IAST
            hint: Optional script hint

        Returns:
            List of Conjunct
        """
        analysis = self.tokenizer.analyze_structure(word, hint)
        if analysis.script == Script.DEVANAGARI:
            return _devanagari_conjuncts(analysis.phonemes)
        if analysis.script == Script.IAST:
            return _iast_conjuncts(analysis.phonemes)
        return []

    def has_conjunct(self, word: str, hint: Optional[Script] = None) -> bool:
        return bool(self.find_conjuncts(word, hint))

    def analyze_conjuncts(self, word: str, hint: Optional[Script] = None) -> ConjunctAnalysis:
        """Summarize conjunct usage (count, distinct spellings, density)."""
        word = word or ""
        script = self.tokenizer.detector.detect(word, hint)
        conjuncts = self.find_conjuncts(word, hint)
        logger.debug(f"Found {len(conjuncts)} conjuncts in {word!r}")
        return ConjunctAnalysis(word=word, script=script, conjuncts=conjuncts)

    def syllabify(self, word: str, hint: Optional[Script] = None) -> List[str]:
        """
        Split a word into syllables.

        Each syllable holds one vowel (written, or the inherent vowel of a
        Devanagari consonant) and the consonants before it. Whitespace,
        punctuation and digits separate words and are dropped.

        Example:
            syllabify("saṃskṛtam") == ["saṃ", "skṛ", "tam"]
        """
        analysis = self.tokenizer.analyze_structure(word, hint)
        if analysis.script not in (Script.DEVANAGARI, Script.IAST):
            return []

        phonemes = analysis.phonemes
        syllables: List[str] = []
        word_start = 0
        current = ""

        def close_word():
            nonlocal current, word_start
            if current:
                if len(syllables) > word_start:
                    syllables[-1] += current
                else:
                    syllables.append(current)
            current = ""
            word_start = len(syllables)

        for index, phoneme in enumerate(phonemes):
            category = phoneme.category
            if category == PhonemeCategory.OTHER:
                close_word()
                continue

            if category in _SYLLABLE_CODA and not current and len(syllables) > word_start:
                syllables[-1] += phoneme.text
                continue

            current += phoneme.text
            if self._has_nucleus(phonemes, index, analysis.script):
                syllables.append(current)
                current = ""

        close_word()
        return syllables

    def count_syllables(self, word: str, hint: Optional[Script] = None) -> int:
        return len(self.syllabify(word, hint))

    @staticmethod
    def _has_nucleus(phonemes: List[Phoneme], index: int, script: Script) -> bool:
        category = phonemes[index].category
        if category in (PhonemeCategory.INDEPENDENT_VOWEL, PhonemeCategory.DEPENDENT_VOWEL_SIGN):
            return True
        if script == Script.DEVANAGARI and category == PhonemeCategory.CONSONANT:
            following = phonemes[index + 1] if index + 1 < len(phonemes) else None
            return following is None or following.category not in _NO_INHERENT_VOWEL
        return False


def find_conjuncts(word: str, hint: Optional[Script] = None) -> List[Conjunct]:
    """
    Convenience function to find consonant clusters.

    Args:
        word: Word to analyze
        hint: Optional script hint

    Returns:
        List of Conjunct
    """
    analyzer = ClusterAnalyzer()
    return analyzer.find_conjuncts(word, hint)


def has_conjunct(word: str, hint: Optional[Script] = None) -> bool:
    analyzer = ClusterAnalyzer()
    return analyzer.has_conjunct(word, hint)


def analyze_conjuncts(word: str, hint: Optional[Script] = None) -> ConjunctAnalysis:
    analyzer = ClusterAnalyzer()
    return analyzer.analyze_conjuncts(word, hint)


def syllabify(word: str, hint: Optional[Script] = None) -> List[str]:
    """Convenience function to split a word into syllables."""
    analyzer = ClusterAnalyzer()
    return analyzer.syllabify(word, hint)


def count_syllables(word: str, hint: Optional[Script] = None) -> int:
    analyzer = ClusterAnalyzer()
    return analyzer.count_syllables(word, hint)
