"""
Script Normalization Service.

Normalizes Sanskrit words by:
1. Removing zero-width spaces and byte order marks
2. Applying canonical Unicode composition (NFC by default)
3. Trimming surrounding whitespace
4. Lower-casing IAST text (and the Latin part of mixed text)

No transliteration is performed: a Devanagari word stays Devanagari. Words
written in different scripts are compared through equivalent(), which maps
both sides to script-independent sound units.
"""
import logging
import unicodedata
from typing import Iterable, List, Optional

from sanskrit_text import config
from sanskrit_text.core.models import (
    NormalizationResult,
    Phoneme,
    PhonemeCategory,
    Script,
    SoundClass,
    SoundUnit,
)
from sanskrit_text.data.script_mappings import (
    DEVANAGARI_CONSONANTS,
    DEVANAGARI_INDEPENDENT_VOWELS,
    DEVANAGARI_MARK_SOUNDS,
    DEVANAGARI_VOWEL_SIGNS,
    OM,
    is_devanagari_char,
)
from sanskrit_text.services.phoneme_tokenizer import PhonemeTokenizer, iast_key
from sanskrit_text.services.script_detector import ScriptDetector
from sanskrit_text.services.word_validator import WordValidator

logger = logging.getLogger(__name__)

_ZERO_WIDTH = str.maketrans('', '', '\u200B\uFEFF')

_SOUND_CLASSES = {
    PhonemeCategory.INDEPENDENT_VOWEL: SoundClass.VOWEL,
    PhonemeCategory.DEPENDENT_VOWEL_SIGN: SoundClass.VOWEL,
    PhonemeCategory.CONSONANT: SoundClass.CONSONANT,
    PhonemeCategory.ANUSVARA: SoundClass.ANUSVARA,
    PhonemeCategory.VISARGA: SoundClass.VISARGA,
    PhonemeCategory.OTHER: SoundClass.OTHER,
}

# Phonemes after which a Devanagari consonant has no inherent vowel
_SUPPRESS_INHERENT = frozenset({PhonemeCategory.VIRAMA, PhonemeCategory.DEPENDENT_VOWEL_SIGN})

INHERENT_VOWEL = SoundUnit(SoundClass.VOWEL, 'a')

# The om ligature spells o + anusvāra
OM_SOUNDS = (SoundUnit(SoundClass.VOWEL, 'o'), SoundUnit(SoundClass.ANUSVARA, 'ṃ'))


def _devanagari_sound_value(phoneme: Phoneme) -> str:
    text = phoneme.text
    if phoneme.category == PhonemeCategory.CONSONANT:
        # Nukta consonants have no IAST value and compare by their own text
        return DEVANAGARI_CONSONANTS.get(text, text)
    if phoneme.category == PhonemeCategory.INDEPENDENT_VOWEL:
        return DEVANAGARI_INDEPENDENT_VOWELS.get(text, text)
    if phoneme.category == PhonemeCategory.DEPENDENT_VOWEL_SIGN:
        return DEVANAGARI_VOWEL_SIGNS.get(text, text)
    if phoneme.category in (PhonemeCategory.ANUSVARA, PhonemeCategory.VISARGA):
        return DEVANAGARI_MARK_SOUNDS.get(text, text)
    return text


class ScriptNormalizer:
    """
    Normalizes words and compares them across scripts.

    Rules:
    1. Normalization is idempotent: normalize(normalize(w)) == normalize(w)
    2. Only IAST/Mixed text is lower-cased
    3. Two words are equivalent when they spell the same sequence of sounds,
       whichever script each is written in
    """

    def __init__(
        self,
        normalization_form: Optional[str] = None,
        detector: Optional[ScriptDetector] = None,
        tokenizer: Optional[PhonemeTokenizer] = None,
        validator: Optional[WordValidator] = None,
    ):
        """
        Initialize script normalizer.

        Args:
            normalization_form: Unicode composition form (NFC or NFKC).
                               Defaults to config.UNICODE_NORMALIZATION_FORM
            detector: ScriptDetector shared with the tokenizer and validator
            tokenizer: PhonemeTokenizer used by to_sounds()
            validator: WordValidator used by equivalent()
        """
        if normalization_form is None:
            normalization_form = getattr(config, 'UNICODE_NORMALIZATION_FORM', 'NFC')

        valid_forms = list(getattr(config, 'COMPOSED_NORMALIZATION_FORMS', ('NFC', 'NFKC')))
        if normalization_form not in valid_forms:
            logger.warning(
                f"Invalid normalization form '{normalization_form}', "
                f"using 'NFC'. Valid forms: {valid_forms}"
            )
            normalization_form = 'NFC'

        self.normalization_form = normalization_form
        self.detector = detector or ScriptDetector()
        self.tokenizer = tokenizer or PhonemeTokenizer(self.detector)
        self.validator = validator or WordValidator(self.detector)
        logger.debug(f"ScriptNormalizer initialized with form='{normalization_form}'")

    def normalize(self, word: str, target: Optional[Script] = None) -> str:
        """
        Normalize a word.

        Args:
            word: Input word in Devanagari or IAST
            target: Script the caller expects; used as a detection hint only

        Returns:
            Normalized word ("" for empty input)
        """
        return self.normalize_for_comparison(word, target).normalized

    def normalize_for_comparison(
        self,
        text: str,
        target: Optional[Script] = None,
    ) -> NormalizationResult:
        """
        Normalize text and record each transformation that changed it.

        Transformations are reported in the order applied:
        'zero_width_removed', 'composed', 'trimmed', 'lowercased'.

        Args:
            text: Input text
            target: Optional script hint

        Returns:
            NormalizationResult
        """
        if not text or not isinstance(text, str):
            return NormalizationResult(
                original=text if isinstance(text, str) else "",
                normalized="",
                original_script=Script.UNKNOWN,
            )

        original_script = self.detector.detect(text, target)
        transformations = []

        normalized = text.translate(_ZERO_WIDTH)
        if normalized != text:
            transformations.append('zero_width_removed')

        composed = unicodedata.normalize(self.normalization_form, normalized)
        if composed != normalized:
            transformations.append('composed')
            normalized = composed

        # NFKC can map symbols to spaces, so trim after composing
        stripped = normalized.strip()
        if stripped != normalized:
            transformations.append('trimmed')
            normalized = stripped

        if self.detector.detect(normalized, target) in (Script.IAST, Script.MIXED):
            lowered = unicodedata.normalize(self.normalization_form, normalized.lower())
            if lowered != normalized:
                transformations.append('lowercased')
                normalized = lowered

        if transformations:
            logger.debug(f"Normalized {text!r} -> {normalized!r} ({', '.join(transformations)})")

        return NormalizationResult(
            original=text,
            normalized=normalized,
            original_script=original_script,
            transformations=transformations,
        )

    def batch_normalize(
        self,
        texts: Iterable[str],
        target: Optional[Script] = None,
    ) -> List[NormalizationResult]:
        """Normalize every text of a sequence."""
        return [self.normalize_for_comparison(text, target) for text in texts]

    def to_sounds(self, word: str, hint: Optional[Script] = None) -> List[SoundUnit]:
        """
        Map a word to script-independent sound units.

        Devanagari consonants carry their inherent 'a' unless a virama or a
        vowel sign follows. IAST units map to their own (lower-case,
        ISO 15919 folded) spelling. The om ligature maps to o + ṃ. Anything
        unrecognized becomes an OTHER unit holding its raw text.

        Args:
            word: Word to map (normalized first)
            hint: Optional script hint

        Returns:
            List of SoundUnit
        """
        normalized = self.normalize(word, hint)
        phonemes = self.tokenizer.tokenize(normalized, hint)

        sounds = []
        for index, phoneme in enumerate(phonemes):
            if phoneme.category == PhonemeCategory.VIRAMA:
                continue

            if phoneme.text == OM:
                sounds.extend(OM_SOUNDS)
                continue

            sound_class = _SOUND_CLASSES[phoneme.category]
            if sound_class == SoundClass.OTHER:
                sounds.append(SoundUnit(sound_class, phoneme.text))
                continue

            if is_devanagari_char(phoneme.text[0]):
                value = iast_key(_devanagari_sound_value(phoneme))
            else:
                value = iast_key(phoneme.text)
            sounds.append(SoundUnit(sound_class, value))

            if (phoneme.category == PhonemeCategory.CONSONANT and
                    is_devanagari_char(phoneme.text[0])):
                following = phonemes[index + 1] if index + 1 < len(phonemes) else None
                if following is None or following.category not in _SUPPRESS_INHERENT:
                    sounds.append(INHERENT_VOWEL)

        return sounds

    def equivalent(self, first: str, second: str) -> bool:
        """
        Check whether two words spell the same sounds.

        Both words must pass structural validation (unknown scripts allowed);
        empty or malformed input is never equivalent to anything.

        Args:
            first: First word, in any script
            second: Second word, in any script

        Returns:
            True if both map to the same sound sequence
        """
        for word in (first, second):
            if not isinstance(word, str):
                return False
            result = self.validator.validate(word, require_known_script=False)
            if not result:
                logger.debug(f"equivalent(): {word!r} rejected ({result.error_kind.value})")
                return False

        first_sounds = self.to_sounds(first)
        second_sounds = self.to_sounds(second)

        if len(first_sounds) != len(second_sounds):
            return False
        return all(a == b for a, b in zip(first_sounds, second_sounds))


def normalize(word: str, target: Optional[Script] = None) -> str:
    """
    Convenience function to normalize a word.

    Args:
        word: Word to normalize
        target: Optional script hint

    Returns:
        Normalized word
    """
    normalizer = ScriptNormalizer()
    return normalizer.normalize(word, target)


def normalize_for_comparison(text: str, target: Optional[Script] = None) -> NormalizationResult:
    normalizer = ScriptNormalizer()
    return normalizer.normalize_for_comparison(text, target)


def batch_normalize(texts: Iterable[str], target: Optional[Script] = None) -> List[NormalizationResult]:
    normalizer = ScriptNormalizer()
    return normalizer.batch_normalize(texts, target)


def to_sounds(word: str, hint: Optional[Script] = None) -> List[SoundUnit]:
    normalizer = ScriptNormalizer()
    return normalizer.to_sounds(word, hint)


def equivalent(first: str, second: str) -> bool:
    """
    Convenience function to compare two words across scripts.

    Example:
        equivalent("कृष्ण", "kṛṣṇa") is True
    """
    normalizer = ScriptNormalizer()
    return normalizer.equivalent(first, second)
