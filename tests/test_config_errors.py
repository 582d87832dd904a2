"""
Tests for configuration values and exception messages.
"""
import typing
import unittest

from sanskrit_text import config
from sanskrit_text.core.errors import (
    ERROR_TYPES,
    DanglingCombiningMarkError,
    DisallowedCharacterError,
    EmptyInputError,
    SanskritTextError,
    UnrecognizedScriptError,
    WordValidationError,
)
from sanskrit_text.core.models import ValidationErrorKind, ValidationResult


class TestConfig(unittest.TestCase):
    """Test configuration parameters."""

    def test_config_parameters_exist(self):
        """Test all configuration parameters are defined."""
        self.assertTrue(hasattr(config, 'UNICODE_NORMALIZATION_FORM'))
        self.assertTrue(hasattr(config, 'COMPOSED_NORMALIZATION_FORMS'))
        self.assertTrue(hasattr(config, 'IAST_REQUIRE_DIACRITIC'))
        self.assertTrue(hasattr(config, 'REQUIRE_KNOWN_SCRIPT'))
        self.assertTrue(hasattr(config, 'LOG_LEVEL'))
        self.assertTrue(hasattr(config, 'LOG_FORMAT'))

    def test_config_parameter_types(self):
        """Test configuration parameter types."""
        self.assertIsInstance(config.UNICODE_NORMALIZATION_FORM, str)
        self.assertIsInstance(config.IAST_REQUIRE_DIACRITIC, bool)
        self.assertIsInstance(config.REQUIRE_KNOWN_SCRIPT, bool)
        self.assertIn('NFC', config.COMPOSED_NORMALIZATION_FORMS)

    def test_configure_logging(self):
        """Test logging setup accepts an explicit level."""
        config.configure_logging("DEBUG")
        self.assertIn(config.LOG_LEVEL, ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"))

    def test_configure_logging_level_is_optional(self):
        """Test the level argument is annotated as Optional."""
        hints = typing.get_type_hints(config.configure_logging)
        self.assertEqual(hints['level'], typing.Optional[str])


class TestErrors(unittest.TestCase):
    """Test exception hierarchy and messages."""

    def test_every_kind_has_an_exception(self):
        self.assertEqual(set(ERROR_TYPES), set(ValidationErrorKind))
        for kind, error_type in ERROR_TYPES.items():
            self.assertEqual(error_type.kind, kind)
            self.assertTrue(issubclass(error_type, WordValidationError))
            self.assertTrue(issubclass(error_type, SanskritTextError))

    def test_base_kind_is_optional(self):
        hints = typing.get_type_hints(WordValidationError)
        self.assertEqual(hints['kind'], typing.Optional[ValidationErrorKind])
        self.assertIsNone(WordValidationError.kind)

    def test_message_includes_fix(self):
        error = EmptyInputError("")
        self.assertIn("Invalid Sanskrit word: ''", str(error))
        self.assertIn("Fix:", str(error))

    def test_message_includes_reason_and_position(self):
        error = DisallowedCharacterError("a\x00b", "control character null", 1)
        message = str(error)

        self.assertIn("Reason: control character null", message)
        self.assertIn("(at index 1)", message)
        self.assertEqual(error.position, 1)
        self.assertEqual(error.word, "a\x00b")

    def test_fix_hints_differ(self):
        hints = {
            UnrecognizedScriptError("x").fix_hint(),
            DanglingCombiningMarkError("x").fix_hint(),
            EmptyInputError("x").fix_hint(),
            DisallowedCharacterError("x").fix_hint(),
        }
        self.assertEqual(len(hints), 4)

    def test_result_to_dict(self):
        result = ValidationResult(
            word="्राम",
            is_valid=False,
            error_kind=ValidationErrorKind.DANGLING_COMBINING_MARK,
            message="virama does not follow a consonant",
            position=0,
        )
        data = result.to_dict()

        self.assertEqual(data['error_kind'], "DanglingCombiningMark")
        self.assertEqual(data['script'], "Unknown")
        self.assertEqual(data['position'], 0)
        self.assertFalse(bool(result))


if __name__ == '__main__':
    unittest.main()
