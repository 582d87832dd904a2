"""
Shared Sanskrit text layer.

Script detection (Devanagari / IAST), phoneme tokenization, structural word
validation and cross-script normalization for Sanskrit word forms.

Typical use:
    from sanskrit_text import validate, detect, tokenize, normalize, equivalent

    result = validate(word)
    if result:
        phonemes = tokenize(normalize(word))
"""
from sanskrit_text.core.models import (
    Conjunct,
    ConjunctAnalysis,
    NormalizationResult,
    Phoneme,
    PhonemeAnalysis,
    PhonemeCategory,
    SanitizationResult,
    Script,
    ScriptAnalysis,
    SoundClass,
    SoundUnit,
    ValidationErrorKind,
    ValidationResult,
)
from sanskrit_text.core.errors import (
    SanskritTextError,
    WordValidationError,
    EmptyInputError,
    DisallowedCharacterError,
    UnrecognizedScriptError,
    DanglingCombiningMarkError,
)
from sanskrit_text.services import *  # noqa: F401,F403
from sanskrit_text.services import __all__ as _services_all

__version__ = "0.1.0"

__all__ = [
    # Models
    'Conjunct',
    'ConjunctAnalysis',
    'NormalizationResult',
    'Phoneme',
    'PhonemeAnalysis',
    'PhonemeCategory',
    'SanitizationResult',
    'Script',
    'ScriptAnalysis',
    'SoundClass',
    'SoundUnit',
    'ValidationErrorKind',
    'ValidationResult',

    # Errors
    'SanskritTextError',
    'WordValidationError',
    'EmptyInputError',
    'DisallowedCharacterError',
    'UnrecognizedScriptError',
    'DanglingCombiningMarkError',
] + list(_services_all)
