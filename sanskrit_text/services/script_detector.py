"""
Script Detection Service.

Decides whether a string is written in Devanagari, IAST, a mix of both, or
neither. Detection is total: every input, including the empty string, gets
a Script value and nothing is raised.
"""
import logging
import unicodedata
from typing import Optional

from sanskrit_text import config
from sanskrit_text.core.models import Script, ScriptAnalysis
from sanskrit_text.data.script_mappings import (
    ZWJ,
    ZWNJ,
    count_iast_cluster_signals,
    is_devanagari_char,
    is_iast_combining_mark,
    is_iast_diacritic_letter,
    is_latin_char,
)

logger = logging.getLogger(__name__)

# Format characters that may sit inside a word without carrying script
_INVISIBLE_CHARS = frozenset({ZWJ, ZWNJ, '\u200B', '\uFEFF'})


class ScriptDetector:
    """
    Detects the script of input text.

    Supports detection of:
    - Devanagari (देवनागरी)
    - IAST (romanized Sanskrit with diacritics: rāma, kṛṣṇa)
    - Mixed (both of the above)
    - Unknown (neither, or bare ASCII without an IAST signal)

    An IAST signal is a diacritic letter, a combining IAST diacritic, or an
    ASCII conjunct that English spelling does not use ("cch" in gacchati).
    """

    def __init__(self, require_iast_diacritic: Optional[bool] = None):
        """
        Initialize script detector.

        Args:
            require_iast_diacritic: If True, Latin text without any IAST
                diacritic or conjunct signal is Unknown unless the caller
                passes an IAST hint.
                Defaults to config.IAST_REQUIRE_DIACRITIC
        """
        if require_iast_diacritic is None:
            require_iast_diacritic = getattr(config, 'IAST_REQUIRE_DIACRITIC', True)
        self.require_iast_diacritic = require_iast_diacritic
        logger.debug(
            f"ScriptDetector initialized with require_iast_diacritic={require_iast_diacritic}"
        )

    def _classify_char(self, char: str) -> str:
        """
        Classify a character by script.

        Returns:
            'devanagari', 'latin', 'iast_diacritic', 'ignored', or 'other'
        """
        if char.isspace() or char in _INVISIBLE_CHARS:
            return 'ignored'

        category = unicodedata.category(char)
        # Digits and punctuation, including Devanagari digits and dandas
        if category[0] in ('N', 'P'):
            return 'ignored'

        if is_devanagari_char(char):
            return 'devanagari'

        if is_iast_diacritic_letter(char) or is_iast_combining_mark(char):
            return 'iast_diacritic'

        if is_latin_char(char):
            return 'latin'

        return 'other'

    def analyze(self, text: str) -> ScriptAnalysis:
        """
        Analyze script composition of text.

        Args:
            text: Text to analyze

        Returns:
            ScriptAnalysis with per-class codepoint counts of the NFC form
        """
        text = unicodedata.normalize('NFC', text or '')

        devanagari = 0
        latin = 0
        iast_diacritic = 0
        ignored = 0
        other = 0

        for char in text:
            classification = self._classify_char(char)

            if classification == 'devanagari':
                devanagari += 1
            elif classification == 'latin':
                latin += 1
            elif classification == 'iast_diacritic':
                latin += 1
                iast_diacritic += 1
            elif classification == 'ignored':
                ignored += 1
            else:
                other += 1

        return ScriptAnalysis(
            total_chars=len(text),
            devanagari_chars=devanagari,
            latin_chars=latin,
            iast_diacritic_chars=iast_diacritic,
            ignored_chars=ignored,
            other_chars=other,
            iast_cluster_signals=count_iast_cluster_signals(text),
        )

    def detect(self, text: str, hint: Optional[Script] = None) -> Script:
        """
        Detect the script of text.

        Args:
            text: Input text to analyze
            hint: Script the caller expects. Only Script.IAST changes the
                outcome, by accepting bare ASCII letters as IAST.

        Returns:
            Script.DEVANAGARI, Script.IAST, Script.MIXED or Script.UNKNOWN
        """
        analysis = self.analyze(text)
        script = self._decide(analysis, hint)
        logger.debug(f"Detected script {script.value} for {text[:30]!r} (hint={hint})")
        return script

    def _decide(self, analysis: ScriptAnalysis, hint: Optional[Script]) -> Script:
        if analysis.has_devanagari and analysis.has_latin:
            return Script.MIXED
        if analysis.has_devanagari:
            return Script.DEVANAGARI
        if analysis.has_latin:
            if (analysis.has_iast_diacritics or analysis.has_iast_clusters or
                    hint == Script.IAST or not self.require_iast_diacritic):
                return Script.IAST
            return Script.UNKNOWN
        return Script.UNKNOWN

    def is_devanagari(self, text: str) -> bool:
        """Check if text is written in Devanagari only."""
        return self.detect(text) == Script.DEVANAGARI

    def is_iast(self, text: str, hint: Optional[Script] = None) -> bool:
        """Check if text is written in IAST only."""
        return self.detect(text, hint) == Script.IAST


def detect(text: str, hint: Optional[Script] = None) -> Script:
    """
    Convenience function to detect the script of text.

    Args:
        text: Text to analyze
        hint: Optional expected script

    Returns:
        Detected Script
    """
    detector = ScriptDetector()
    return detector.detect(text, hint)


def analyze_script(text: str) -> ScriptAnalysis:
    """
    Convenience function to analyze script composition.

    Args:
        text: Text to analyze

    Returns:
        ScriptAnalysis with counts
    """
    detector = ScriptDetector()
    return detector.analyze(text)


def is_devanagari(text: str) -> bool:
    return detect(text) == Script.DEVANAGARI


def is_iast(text: str, hint: Optional[Script] = None) -> bool:
    return detect(text, hint) == Script.IAST
