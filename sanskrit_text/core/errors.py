"""
Custom exceptions for the Sanskrit text layer.

Only word validation reports hard failures; detection, tokenization and
normalization always return a value. Every exception carries an explicit
message explaining how to fix the input.
"""
from typing import Dict, Optional, Type

from sanskrit_text.core.models import ValidationErrorKind


class SanskritTextError(Exception):
    """Base exception for all Sanskrit text layer errors."""
    pass


class WordValidationError(SanskritTextError):
    """Base exception for words rejected by the validator."""

    kind: Optional[ValidationErrorKind] = None

    def __init__(self, word: str, reason: str = "", position: Optional[int] = None):
        message = f"Invalid Sanskrit word: {word!r}"
        if reason:
            message += f". Reason: {reason}"
        if position is not None:
            message += f" (at index {position})"
        message += f"\nFix: {self.fix_hint()}"
        super().__init__(message)
        self.word = word
        self.reason = reason
        self.position = position

    def fix_hint(self) -> str:
        return "Check the input word"


class EmptyInputError(WordValidationError):
    """Raised when the word is empty or whitespace-only."""

    kind = ValidationErrorKind.EMPTY_INPUT

    def fix_hint(self) -> str:
        return "Pass a non-empty word in Devanagari or IAST"


class DisallowedCharacterError(WordValidationError):
    """Raised when the word contains a control character."""

    kind = ValidationErrorKind.DISALLOWED_CHARACTER

    def fix_hint(self) -> str:
        return "Strip control characters from the input before validation"


class UnrecognizedScriptError(WordValidationError):
    """Raised when no Devanagari or IAST signal is found."""

    kind = ValidationErrorKind.UNRECOGNIZED_SCRIPT

    def fix_hint(self) -> str:
        return (
            "Write the word in Devanagari or in IAST with diacritics "
            "(e.g. 'rāma'), or pass an explicit script hint"
        )


class DanglingCombiningMarkError(WordValidationError):
    """Raised when a combining mark has no base letter to attach to."""

    kind = ValidationErrorKind.DANGLING_COMBINING_MARK

    def fix_hint(self) -> str:
        return "Make sure every vowel sign, virama, anusvāra, visarga or diacritic follows a letter"


ERROR_TYPES: Dict[ValidationErrorKind, Type[WordValidationError]] = {
    ValidationErrorKind.EMPTY_INPUT: EmptyInputError,
    ValidationErrorKind.DISALLOWED_CHARACTER: DisallowedCharacterError,
    ValidationErrorKind.UNRECOGNIZED_SCRIPT: UnrecognizedScriptError,
    ValidationErrorKind.DANGLING_COMBINING_MARK: DanglingCombiningMarkError,
}
