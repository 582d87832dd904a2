"""
Tests for phoneme tokenization.

Covers lossless segmentation, Devanagari and IAST unit boundaries,
orthographic clusters and structure analysis.
"""
import pytest

from sanskrit_text.core.models import Phoneme, PhonemeAnalysis, PhonemeCategory, Script
from sanskrit_text.services.phoneme_tokenizer import (
    PhonemeTokenizer,
    akshara_clusters,
    analyze_structure,
    split_graphemes,
    tokenize,
)
from tests.fixtures import LOSSLESS_SAMPLES

C = PhonemeCategory.CONSONANT
V = PhonemeCategory.VIRAMA
S = PhonemeCategory.DEPENDENT_VOWEL_SIGN
IV = PhonemeCategory.INDEPENDENT_VOWEL
O = PhonemeCategory.OTHER


def texts(phonemes):
    return [p.text for p in phonemes]


def categories(phonemes):
    return [p.category for p in phonemes]


class TestLosslessSegmentation:
    """Joining the phonemes always reproduces the input."""

    @pytest.mark.parametrize("word", LOSSLESS_SAMPLES)
    def test_reconstructs_input(self, word):
        assert "".join(texts(tokenize(word))) == word

    @pytest.mark.parametrize("word", LOSSLESS_SAMPLES)
    def test_reconstructs_input_with_iast_hint(self, word):
        assert "".join(texts(tokenize(word, hint=Script.IAST))) == word

    @pytest.mark.parametrize("word", LOSSLESS_SAMPLES)
    def test_positions_are_codepoint_offsets(self, word):
        for phoneme in tokenize(word):
            assert word[phoneme.position:phoneme.position + len(phoneme.text)] == phoneme.text

    def test_empty(self):
        assert tokenize("") == []


class TestDevanagariTokenization:
    """Test the codepoint scanner for Devanagari."""

    def setup_method(self):
        """Set up test fixture."""
        self.tokenizer = PhonemeTokenizer()

    def test_tishthati_has_dead_sha(self):
        phonemes = self.tokenizer.tokenize("तिष्ठति")

        assert texts(phonemes) == ["त", "ि", "ष", "्", "ठ", "त", "ि"]
        sha = texts(phonemes).index("ष")
        assert phonemes[sha].category == C
        assert phonemes[sha + 1].category == V

    def test_gacchati(self):
        phonemes = self.tokenizer.tokenize("गच्छति")

        assert texts(phonemes) == ["ग", "च", "्", "छ", "त", "ि"]
        assert categories(phonemes) == [C, C, V, C, C, S]
        assert [p.position for p in phonemes] == [0, 1, 2, 3, 4, 5]

    def test_inherent_vowel_not_emitted(self):
        assert texts(self.tokenizer.tokenize("राम")) == ["र", "ा", "म"]

    def test_independent_vowel(self):
        phonemes = self.tokenizer.tokenize("अग्निः")
        assert phonemes[0].category == IV

    def test_nukta_joins_consonant(self):
        phonemes = self.tokenizer.tokenize("\u0915\u093C\u092E\u0932")

        assert phonemes[0].text == "\u0915\u093C"
        assert phonemes[0].category == C
        assert len(phonemes) == 3

    def test_precomposed_nukta_consonant(self):
        assert self.tokenizer.tokenize("\u0958")[0].category == C

    def test_virama_keeps_joiner(self):
        phonemes = self.tokenizer.tokenize("\u0915\u094D\u200D\u0937")

        assert texts(phonemes) == ["\u0915", "\u094D\u200D", "\u0937"]
        assert phonemes[1].category == V

    def test_nasal_marks(self):
        assert categories(self.tokenizer.tokenize("हँस"))[1] == PhonemeCategory.ANUSVARA
        assert categories(self.tokenizer.tokenize("संस्कृतम्"))[1] == PhonemeCategory.ANUSVARA

    def test_visarga(self):
        assert self.tokenizer.tokenize("रामः")[-1].category == PhonemeCategory.VISARGA

    def test_dangling_mark_is_kept(self):
        """Tokenization is permissive; validation reports the problem."""
        phonemes = self.tokenizer.tokenize("्राम")
        assert phonemes[0].category == V
        assert texts(phonemes) == ["्", "र", "ा", "म"]

    def test_whitespace_and_danda_are_other(self):
        phonemes = self.tokenizer.tokenize("राम ।")
        assert categories(phonemes)[-2:] == [O, O]


class TestIastTokenization:
    """Test the grapheme scanner for IAST."""

    def setup_method(self):
        """Set up test fixture."""
        self.tokenizer = PhonemeTokenizer()

    def test_krishna(self):
        phonemes = self.tokenizer.tokenize("kṛṣṇa")

        assert texts(phonemes) == ["k", "ṛ", "ṣ", "ṇ", "a"]
        assert categories(phonemes) == [C, IV, C, C, IV]

    def test_aspirate_digraphs(self):
        phonemes = self.tokenizer.tokenize("bhakti", hint=Script.IAST)
        assert texts(phonemes) == ["bh", "a", "k", "t", "i"]

    def test_retroflex_aspirate(self):
        assert texts(self.tokenizer.tokenize("tiṣṭhati")) == ["t", "i", "ṣ", "ṭh", "a", "t", "i"]

    def test_diphthongs(self):
        phonemes = self.tokenizer.tokenize("kailāsa")

        assert texts(phonemes) == ["k", "ai", "l", "ā", "s", "a"]
        assert phonemes[1].category == IV

    def test_uppercase(self):
        phonemes = self.tokenizer.tokenize("Kṛṣṇa")
        assert phonemes[0].text == "K"
        assert phonemes[0].category == C

    def test_decomposed_letters_stay_whole(self):
        word = "kr\u0323s\u0323n\u0323a"
        phonemes = self.tokenizer.tokenize(word)

        assert texts(phonemes) == ["k", "r\u0323", "s\u0323", "n\u0323", "a"]
        assert categories(phonemes) == [C, IV, C, C, IV]
        assert [p.position for p in phonemes] == [0, 1, 3, 5, 7]

    def test_anusvara_and_visarga(self):
        phonemes = self.tokenizer.tokenize("saṃskṛtaḥ")
        assert phonemes[2].category == PhonemeCategory.ANUSVARA
        assert phonemes[-1].category == PhonemeCategory.VISARGA

    def test_never_emits_virama(self):
        for word in ["vāk", "kṛṣṇa", "saṃskṛtam"]:
            assert V not in categories(self.tokenizer.tokenize(word))


class TestOtherScripts:
    """Mixed and Unknown text falls back to one OTHER per grapheme."""

    def test_mixed(self):
        phonemes = tokenize("rāमa")

        assert texts(phonemes) == ["r", "ā", "म", "a"]
        assert all(p.category == O for p in phonemes)

    def test_unknown(self):
        phonemes = tokenize("rama")
        assert len(phonemes) == 4
        assert all(p.category == O for p in phonemes)

    def test_split_graphemes(self):
        assert split_graphemes("ra\u0304") == ["r", "a\u0304"]
        assert split_graphemes("") == []


class TestAksharaClusters:
    """Test orthographic clusters."""

    def test_gacchati(self):
        assert akshara_clusters("गच्छति") == ["ग", "च्", "छ", "ति"]

    def test_ignores_surrounding_whitespace(self):
        assert akshara_clusters("  गच्छति  ") == ["ग", "च्", "छ", "ति"]

    def test_phrase(self):
        assert akshara_clusters("राम कृष्ण") == ["रा", "म", "कृ", "ष्", "ण"]

    def test_iast_vowel_joins_consonant(self):
        assert akshara_clusters("rāma") == ["rā", "ma"]

    def test_visarga_attaches(self):
        assert akshara_clusters("रामः") == ["रा", "मः"]


class TestStructureAnalysis:
    """Test phoneme structure summaries."""

    def test_final_dead_consonant(self):
        analysis = analyze_structure("वाक्")

        assert isinstance(analysis, PhonemeAnalysis)
        assert analysis.script == Script.DEVANAGARI
        assert analysis.dead_consonant_count == 1
        assert analysis.ends_in_dead_consonant
        assert analysis.vowel_count == 1
        assert analysis.consonant_count == 2
        assert analysis.structure == "consonant-dependent_vowel_sign-consonant-virama"

    def test_internal_dead_consonant(self):
        analysis = analyze_structure("तिष्ठति")

        assert analysis.dead_consonant_count == 1
        assert not analysis.ends_in_dead_consonant
        assert analysis.category_counts[C] == 4

    def test_iast_final_consonant(self):
        analysis = analyze_structure("vāk")

        assert analysis.dead_consonant_count == 1
        assert analysis.ends_in_dead_consonant

    @pytest.mark.parametrize("word", ["राम्।", "वाक् ॥", "vāk.", "वाक्१"])
    def test_trailing_punctuation_ignored(self, word):
        assert analyze_structure(word).ends_in_dead_consonant

    def test_trailing_punctuation_without_dead_consonant(self):
        assert not analyze_structure("राम।").ends_in_dead_consonant

    def test_empty(self):
        analysis = analyze_structure("")
        assert analysis.phonemes == []
        assert analysis.dead_consonant_count == 0
        assert not analysis.ends_in_dead_consonant

    def test_to_dict(self):
        data = analyze_structure("राम").to_dict()

        assert data['script'] == "Devanagari"
        assert data['phonemes'] == ["र", "ा", "म"]
        assert data['category_counts'] == {"consonant": 2, "dependent_vowel_sign": 1}


class TestPhonemeModel:

    def test_empty_text_rejected(self):
        with pytest.raises(ValueError):
            Phoneme("", C, 0)

    def test_negative_position_rejected(self):
        with pytest.raises(ValueError):
            Phoneme("क", C, -1)

    def test_to_dict(self):
        assert Phoneme("क", C, 3).to_dict() == {"text": "क", "category": "consonant", "position": 3}
