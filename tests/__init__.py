"""
Test suite for the Sanskrit text layer.

Test Structure:
--------------
- test_script_detector.py   : Script detection and composition analysis
- test_word_validator.py    : Structural validation and input sanitization
- test_phoneme_tokenizer.py : Phoneme segmentation, clusters, structure analysis
- test_script_normalizer.py : Normalization and cross-script equivalence
- test_cluster_analysis.py  : Conjunct detection and syllabification
- test_classification.py    : Vowel/consonant predicates, vowel grades, savarṇa groups
- test_end_to_end.py        : Full validate -> detect -> tokenize -> normalize flow
- test_config_errors.py     : Configuration values and exception messages
- fixtures/                 : Shared sample words

Running Tests:
-------------
Run all tests:
    python -m pytest tests

Run a specific test file:
    python -m pytest tests/test_phoneme_tokenizer.py -v
"""

from tests.fixtures import (
    DEVANAGARI_WORDS,
    IAST_WORDS,
    CROSS_SCRIPT_PAIRS,
    LOSSLESS_SAMPLES,
)

__all__ = [
    'DEVANAGARI_WORDS',
    'IAST_WORDS',
    'CROSS_SCRIPT_PAIRS',
    'LOSSLESS_SAMPLES',
]
