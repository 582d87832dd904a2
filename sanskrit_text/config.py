"""
Configuration settings for the Sanskrit text layer.

Organized into logical sections:
1. Unicode Normalization
2. Script Detection
3. Validation
4. Logging

Every value can be overridden through an environment variable. Services read
these values when they are constructed and also accept explicit overrides.
"""
import logging
import os
from typing import Optional

# ============================================
# UNICODE NORMALIZATION
# ============================================

# Canonical composition form applied by ScriptNormalizer.
# Options: "NFC" (default), "NFKC". Decomposed forms are not accepted because
# normalized IAST must use precomposed letters where they exist.
UNICODE_NORMALIZATION_FORM = os.getenv("SANSKRIT_UNICODE_NORMALIZATION_FORM", "NFC").upper()
COMPOSED_NORMALIZATION_FORMS = ("NFC", "NFKC")

# ============================================
# SCRIPT DETECTION
# ============================================

# Bare ASCII text ("rama") is only accepted as IAST when it carries at least
# one IAST diacritic, contains an ASCII conjunct signal such as "cch"
# (gacchati), or the caller passes an explicit script hint.
# Set to "false" to classify every Latin-only string as IAST.
IAST_REQUIRE_DIACRITIC = os.getenv("SANSKRIT_IAST_REQUIRE_DIACRITIC", "true").lower() == "true"

# ============================================
# VALIDATION
# ============================================

# Default for validate(require_known_script=...)
REQUIRE_KNOWN_SCRIPT = os.getenv("SANSKRIT_REQUIRE_KNOWN_SCRIPT", "true").lower() == "true"

# ============================================
# LOGGING
# ============================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Apply the package log format to the root logger.

    The library never installs handlers on import; applications and scripts
    call this once at startup.

    Args:
        level: Log level name. Defaults to LOG_LEVEL.
    """
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
