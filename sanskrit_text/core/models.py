"""
Data models for the Sanskrit text layer.

This module defines the value types produced by the detector, tokenizer,
validator and normalizer. All of them are created per call and never mutated
by the services that return them.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Script(str, Enum):
    """Script a string is written in."""
    DEVANAGARI = "Devanagari"
    IAST = "IAST"
    MIXED = "Mixed"
    UNKNOWN = "Unknown"


class PhonemeCategory(str, Enum):
    """Category of one segmentation unit."""
    INDEPENDENT_VOWEL = "independent_vowel"
    CONSONANT = "consonant"
    DEPENDENT_VOWEL_SIGN = "dependent_vowel_sign"
    VIRAMA = "virama"
    ANUSVARA = "anusvara"
    VISARGA = "visarga"
    OTHER = "other"


class SoundClass(str, Enum):
    """Script-independent class of a sound, used for cross-script comparison."""
    VOWEL = "vowel"
    CONSONANT = "consonant"
    ANUSVARA = "anusvara"
    VISARGA = "visarga"
    OTHER = "other"


class ValidationErrorKind(str, Enum):
    """Reasons a word can be rejected by the validator."""
    EMPTY_INPUT = "EmptyInput"
    DISALLOWED_CHARACTER = "DisallowedCharacter"
    UNRECOGNIZED_SCRIPT = "UnrecognizedScript"
    DANGLING_COMBINING_MARK = "DanglingCombiningMark"


@dataclass(frozen=True)
class Phoneme:
    """One segmentation unit of a word."""
    text: str
    category: PhonemeCategory
    position: int  # codepoint index in the source word

    def __post_init__(self):
        """Validate phoneme data."""
        if not self.text:
            raise ValueError("Phoneme text must be non-empty")
        if self.position < 0:
            raise ValueError(f"Position must be non-negative, got {self.position}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "text": self.text,
            "category": self.category.value,
            "position": self.position,
        }


@dataclass(frozen=True)
class SoundUnit:
    """A sound identified independently of the script it was written in."""
    sound_class: SoundClass
    value: str  # IAST spelling of the sound, or the raw text for OTHER


@dataclass
class ScriptAnalysis:
    """
    Codepoint composition of a string.

    Counts are taken over the NFC form of the input.
    """
    total_chars: int
    devanagari_chars: int
    latin_chars: int
    iast_diacritic_chars: int  # subset of latin_chars carrying an IAST diacritic
    ignored_chars: int  # whitespace, punctuation, digits
    other_chars: int
    iast_cluster_signals: int = 0  # ASCII conjuncts such as "cch" in gacchati

    @property
    def has_devanagari(self) -> bool:
        return self.devanagari_chars > 0

    @property
    def has_latin(self) -> bool:
        return self.latin_chars > 0

    @property
    def has_iast_diacritics(self) -> bool:
        return self.iast_diacritic_chars > 0

    @property
    def has_iast_clusters(self) -> bool:
        return self.iast_cluster_signals > 0

    @property
    def devanagari_ratio(self) -> float:
        """Ratio of Devanagari codepoints to all recognized codepoints."""
        recognized = self.devanagari_chars + self.latin_chars
        if recognized <= 0:
            return 0.0
        return self.devanagari_chars / recognized

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'total_chars': self.total_chars,
            'devanagari_chars': self.devanagari_chars,
            'latin_chars': self.latin_chars,
            'iast_diacritic_chars': self.iast_diacritic_chars,
            'ignored_chars': self.ignored_chars,
            'other_chars': self.other_chars,
            'iast_cluster_signals': self.iast_cluster_signals,
            'devanagari_ratio': self.devanagari_ratio,
        }


@dataclass
class ValidationResult:
    """Outcome of validating one word."""
    word: str
    is_valid: bool
    script: Script = Script.UNKNOWN
    error_kind: Optional[ValidationErrorKind] = None
    message: str = ""
    position: Optional[int] = None  # index of the offending codepoint, if any

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_for_error(self) -> None:
        """
        Raise the typed exception for a failed validation.

        Raises:
            WordValidationError: subclass matching error_kind
        """
        if self.is_valid:
            return
        from sanskrit_text.core.errors import ERROR_TYPES
        raise ERROR_TYPES[self.error_kind](self.word, self.message, self.position)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "is_valid": self.is_valid,
            "script": self.script.value,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "message": self.message,
            "position": self.position,
        }


@dataclass
class PhonemeAnalysis:
    """Structural summary of a tokenized word."""
    word: str
    script: Script
    phonemes: List[Phoneme]
    category_counts: Dict[PhonemeCategory, int]
    dead_consonant_count: int
    ends_in_dead_consonant: bool

    @property
    def vowel_count(self) -> int:
        """Written vowels (independent letters and vowel signs)."""
        return (
            self.category_counts.get(PhonemeCategory.INDEPENDENT_VOWEL, 0) +
            self.category_counts.get(PhonemeCategory.DEPENDENT_VOWEL_SIGN, 0)
        )

    @property
    def consonant_count(self) -> int:
        return self.category_counts.get(PhonemeCategory.CONSONANT, 0)

    @property
    def structure(self) -> str:
        """Hyphen-joined categories, whitespace excluded."""
        return "-".join(
            p.category.value for p in self.phonemes
            if not (p.category == PhonemeCategory.OTHER and p.text.isspace())
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "script": self.script.value,
            "phonemes": [p.text for p in self.phonemes],
            "category_counts": {k.value: v for k, v in self.category_counts.items()},
            "vowel_count": self.vowel_count,
            "consonant_count": self.consonant_count,
            "dead_consonant_count": self.dead_consonant_count,
            "ends_in_dead_consonant": self.ends_in_dead_consonant,
            "structure": self.structure,
        }


@dataclass
class Conjunct:
    """
    A consonant cluster (saṃyoga) found in a word.

    In Devanagari the text includes the joining viramas ("स्क"); in IAST it
    is the run of consonant letters ("sk").
    """
    text: str
    position: int  # codepoint offset of the first consonant
    consonants: List[str]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "text": self.text,
            "position": self.position,
            "consonants": list(self.consonants),
        }


@dataclass
class ConjunctAnalysis:
    """Conjunct usage in a word or phrase."""
    word: str
    script: Script
    conjuncts: List[Conjunct] = field(default_factory=list)

    @property
    def has_conjuncts(self) -> bool:
        return bool(self.conjuncts)

    @property
    def conjunct_count(self) -> int:
        return len(self.conjuncts)

    @property
    def unique_conjuncts(self) -> List[str]:
        """Distinct conjunct spellings in order of first appearance."""
        seen: List[str] = []
        for conjunct in self.conjuncts:
            if conjunct.text not in seen:
                seen.append(conjunct.text)
        return seen

    @property
    def density(self) -> float:
        """Conjuncts per non-whitespace codepoint."""
        length = sum(1 for char in self.word if not char.isspace())
        if length == 0:
            return 0.0
        return self.conjunct_count / length

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "script": self.script.value,
            "has_conjuncts": self.has_conjuncts,
            "conjunct_count": self.conjunct_count,
            "unique_conjuncts": self.unique_conjuncts,
            "density": self.density,
            "conjuncts": [c.to_dict() for c in self.conjuncts],
        }


@dataclass
class NormalizationResult:
    """Normalized text plus the transformations that produced it."""
    original: str
    normalized: str
    original_script: Script
    transformations: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return bool(self.normalized)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "original": self.original,
            "normalized": self.normalized,
            "original_script": self.original_script.value,
            "transformations": list(self.transformations),
            "is_valid": self.is_valid,
        }


@dataclass
class SanitizationResult:
    """Result of coercing raw input into a clean word string."""
    original: Any
    sanitized: Optional[str]
    success: bool
    error: str = ""
    trimmed: bool = False
    type_converted: bool = False
