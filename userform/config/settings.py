"""
Global form settings loaded from environment variables.

All settings have sensible defaults so the form works out of the box.
Override via environment variables.
"""

import os

# =============================================================================
# Validation Behaviour
# =============================================================================
# When false, a change event only clears the field's error and the field is
# re-checked on blur or submit.
VALIDATE_ON_CHANGE = os.getenv("VALIDATE_ON_CHANGE", "true").lower() in ("true", "1", "yes")

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")
