"""
Sanskrit Word Validation Module.

Structural checks a word must pass before any rule module looks at it:
non-empty, free of control characters, written in a recognized script, and
with every combining mark attached to a base letter.

Validation never modifies the word. Input cleanup lives in sanitize_input().
"""
import logging
import re
import unicodedata
from typing import Any, Iterable, List, Optional, Tuple

from sanskrit_text import config
from sanskrit_text.core.models import (
    SanitizationResult,
    Script,
    ValidationErrorKind,
    ValidationResult,
)
from sanskrit_text.data.script_mappings import (
    ANUSVARA,
    CANDRABINDU,
    NUKTA,
    VIRAMA,
    VISARGA,
    ZWJ,
    ZWNJ,
    is_devanagari_accent,
    is_devanagari_char,
    is_devanagari_consonant,
    is_devanagari_independent_vowel,
    is_devanagari_vowel_sign,
    is_iast_combining_mark,
    is_iast_diacritic_letter,
    is_latin_char,
)
from sanskrit_text.services.script_detector import ScriptDetector

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r'\s+')

# What the previous codepoint left a combining mark to attach to
_NONE = 'none'
_CONSONANT = 'consonant'
_VOWEL = 'vowel'
_VOWEL_SIGN = 'vowel_sign'
_VIRAMA = 'virama'
_NASAL = 'nasal'
_LATIN = 'latin'
_LETTER = 'letter'
_OTHER = 'other'

_NASAL_MARKS = frozenset({ANUSVARA, CANDRABINDU, VISARGA})


def _char_label(char: str) -> str:
    return unicodedata.name(char, f"U+{ord(char):04X}").lower()


class WordValidator:
    """
    Structural validator for Sanskrit words.

    Checks run in a fixed order and the first failure wins:
    1. Empty or whitespace-only input
    2. Control characters (other than whitespace)
    3. No whitespace-separated segment in Devanagari or IAST
    4. Combining marks without a base letter
    """

    def __init__(
        self,
        detector: Optional[ScriptDetector] = None,
        require_known_script: Optional[bool] = None,
    ):
        """
        Initialize word validator.

        Args:
            detector: ScriptDetector used for the script check
            require_known_script: Default for validate(). Defaults to
                config.REQUIRE_KNOWN_SCRIPT
        """
        if require_known_script is None:
            require_known_script = getattr(config, 'REQUIRE_KNOWN_SCRIPT', True)
        self.detector = detector or ScriptDetector()
        self.require_known_script = require_known_script

    def validate(
        self,
        word: str,
        require_known_script: Optional[bool] = None,
        hint: Optional[Script] = None,
    ) -> ValidationResult:
        """
        Validate the structure of a word.

        Args:
            word: Word to validate (not normalized)
            require_known_script: Reject words whose script is Unknown.
                Defaults to the validator's setting.
            hint: Script hint passed to detection

        Returns:
            ValidationResult; failed results carry error_kind, message and
            the index of the offending codepoint where there is one
        """
        if require_known_script is None:
            require_known_script = self.require_known_script

        if word is None or not word.strip():
            return self._fail(word or "", Script.UNKNOWN, ValidationErrorKind.EMPTY_INPUT,
                              "word is empty or whitespace-only")

        script = self.detector.detect(word, hint)

        position = self._find_control_char(word)
        if position is not None:
            return self._fail(
                word, script, ValidationErrorKind.DISALLOWED_CHARACTER,
                f"control character {_char_label(word[position])}", position,
            )

        if require_known_script and all(
            self.detector.detect(segment, hint) == Script.UNKNOWN
            for segment in word.split()
        ):
            return self._fail(
                word, script, ValidationErrorKind.UNRECOGNIZED_SCRIPT,
                "no Devanagari or IAST text found",
            )

        dangling = self._find_dangling_mark(word)
        if dangling is not None:
            position, reason = dangling
            return self._fail(word, script, ValidationErrorKind.DANGLING_COMBINING_MARK,
                              reason, position)

        return ValidationResult(word=word, is_valid=True, script=script)

    def _fail(
        self,
        word: str,
        script: Script,
        kind: ValidationErrorKind,
        message: str,
        position: Optional[int] = None,
    ) -> ValidationResult:
        logger.debug(f"Rejected {word!r}: {kind.value} ({message})")
        return ValidationResult(
            word=word,
            is_valid=False,
            script=script,
            error_kind=kind,
            message=message,
            position=position,
        )

    @staticmethod
    def _find_control_char(word: str) -> Optional[int]:
        for index, char in enumerate(word):
            if unicodedata.category(char) == 'Cc' and not char.isspace():
                return index
        return None

    def _find_dangling_mark(self, word: str) -> Optional[Tuple[int, str]]:
        """
        Scan codepoints and return (index, reason) for the first combining
        mark that has nothing to attach to.
        """
        state = _NONE

        for index, char in enumerate(word):
            if char in (ZWJ, ZWNJ):
                continue

            if is_devanagari_char(char):
                if is_devanagari_consonant(char):
                    state = _CONSONANT
                elif is_devanagari_independent_vowel(char):
                    state = _VOWEL
                elif char == NUKTA:
                    if state != _CONSONANT:
                        return index, "nukta does not follow a consonant"
                elif char == VIRAMA:
                    if state != _CONSONANT:
                        return index, "virama does not follow a consonant"
                    state = _VIRAMA
                elif is_devanagari_vowel_sign(char):
                    if state not in (_CONSONANT, _VOWEL):
                        return index, f"vowel sign {_char_label(char)} does not follow a consonant"
                    state = _VOWEL_SIGN
                elif char in _NASAL_MARKS:
                    if state not in (_CONSONANT, _VOWEL, _VOWEL_SIGN):
                        return index, f"{_char_label(char)} does not follow a letter or vowel sign"
                    state = _NASAL
                elif is_devanagari_accent(char) or unicodedata.category(char)[0] == 'M':
                    if state in (_NONE, _OTHER):
                        return index, f"{_char_label(char)} has no base letter"
                else:
                    # Avagraha, om, dandas, digits
                    state = _OTHER
                continue

            if is_iast_combining_mark(char):
                if state != _LATIN:
                    return index, f"{_char_label(char)} does not follow a Latin letter"
            elif unicodedata.category(char)[0] == 'M':
                if state in (_NONE, _OTHER):
                    return index, f"{_char_label(char)} has no base letter"
            elif is_latin_char(char) or is_iast_diacritic_letter(char):
                state = _LATIN
            elif unicodedata.category(char)[0] == 'L':
                state = _LETTER
            else:
                state = _OTHER

        return None

    def ensure_valid(
        self,
        word: str,
        require_known_script: Optional[bool] = None,
        hint: Optional[Script] = None,
    ) -> ValidationResult:
        """
        Validate a word and raise on failure.

        Raises:
            WordValidationError: subclass matching the failure kind
        """
        result = self.validate(word, require_known_script, hint)
        result.raise_for_error()
        return result


def sanitize_input(value: Any) -> SanitizationResult:
    """
    Coerce raw input into a clean word string.

    Non-string values are converted with str(); None is rejected. The text is
    trimmed, internal whitespace runs collapse to one space and the result is
    NFC-composed.

    Args:
        value: Raw input

    Returns:
        SanitizationResult
    """
    if value is None:
        return SanitizationResult(
            original=value,
            sanitized=None,
            success=False,
            error="Input is None",
        )

    type_converted = not isinstance(value, str)
    text = value if not type_converted else str(value)

    sanitized = _WHITESPACE_RUN.sub(' ', text.strip())
    sanitized = unicodedata.normalize('NFC', sanitized)

    return SanitizationResult(
        original=value,
        sanitized=sanitized,
        success=True,
        trimmed=sanitized != text,
        type_converted=type_converted,
    )


def sanitize_words(values: Iterable[Any]) -> List[SanitizationResult]:
    """Sanitize every value of a sequence, keeping failures in place."""
    results = [sanitize_input(value) for value in values]
    failures = sum(1 for r in results if not r.success)
    if failures:
        logger.debug(f"sanitize_words: {failures}/{len(results)} inputs rejected")
    return results


def validate(
    word: str,
    require_known_script: Optional[bool] = None,
    hint: Optional[Script] = None,
) -> ValidationResult:
    """
    Convenience function to validate a word.

    Args:
        word: Word to validate
        require_known_script: Reject Unknown-script words (default from config)
        hint: Optional script hint

    Returns:
        ValidationResult
    """
    validator = WordValidator()
    return validator.validate(word, require_known_script, hint)


def ensure_valid(
    word: str,
    require_known_script: Optional[bool] = None,
    hint: Optional[Script] = None,
) -> ValidationResult:
    """Convenience function to validate a word, raising on failure."""
    validator = WordValidator()
    return validator.ensure_valid(word, require_known_script, hint)
