"""
Sanskrit Text Services Module.

Combines script detection, word validation, phoneme tokenization,
normalization, conjunct and syllable analysis, and phoneme classification.

Dependency order:
- script_detector.py (leaf)
- phoneme_tokenizer.py, word_validator.py (use the detector)
- script_normalizer.py (uses all three)
- cluster_analysis.py (uses the tokenizer)
- classification.py (uses the character tables only)
"""
from sanskrit_text.services.script_detector import (
    ScriptDetector,
    detect,
    analyze_script,
    is_devanagari,
    is_iast,
)
from sanskrit_text.services.word_validator import (
    WordValidator,
    validate,
    ensure_valid,
    sanitize_input,
    sanitize_words,
)
from sanskrit_text.services.phoneme_tokenizer import (
    PhonemeTokenizer,
    tokenize,
    akshara_clusters,
    analyze_structure,
    split_graphemes,
)
from sanskrit_text.services.script_normalizer import (
    ScriptNormalizer,
    normalize,
    normalize_for_comparison,
    batch_normalize,
    to_sounds,
    equivalent,
)
from sanskrit_text.services.cluster_analysis import (
    ClusterAnalyzer,
    find_conjuncts,
    has_conjunct,
    analyze_conjuncts,
    syllabify,
    count_syllables,
)
from sanskrit_text.services.classification import (
    is_vowel,
    is_consonant,
    is_vrddhi,
    is_guna,
    is_ik_vowel,
    vowel_category,
    primary_vowel_classification,
    articulation_class,
    classify_phonemes,
    savarna_group,
    are_savarna,
)

__all__ = [
    # Script Detection
    'ScriptDetector',
    'detect',
    'analyze_script',
    'is_devanagari',
    'is_iast',

    # Validation
    'WordValidator',
    'validate',
    'ensure_valid',
    'sanitize_input',
    'sanitize_words',

    # Tokenization
    'PhonemeTokenizer',
    'tokenize',
    'akshara_clusters',
    'analyze_structure',
    'split_graphemes',

    # Normalization
    'ScriptNormalizer',
    'normalize',
    'normalize_for_comparison',
    'batch_normalize',
    'to_sounds',
    'equivalent',

    # Conjuncts and Syllables
    'ClusterAnalyzer',
    'find_conjuncts',
    'has_conjunct',
    'analyze_conjuncts',
    'syllabify',
    'count_syllables',

    # Classification
    'is_vowel',
    'is_consonant',
    'is_vrddhi',
    'is_guna',
    'is_ik_vowel',
    'vowel_category',
    'primary_vowel_classification',
    'articulation_class',
    'classify_phonemes',
    'savarna_group',
    'are_savarna',
]
