"""
Runtime configuration for protochain.

Values are plain module-level constants. Environment variables override
the defaults so the CLI can be tuned without editing code:

- PROTOCHAIN_LOG_LEVEL: logging level name used by the CLI (default WARNING)
"""

import os

# Logging level applied by the CLI when --log-level is not given
LOG_LEVEL = os.environ.get("PROTOCHAIN_LOG_LEVEL", "WARNING").upper()

# Level names accepted by --log-level and PROTOCHAIN_LOG_LEVEL
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Format string for records emitted through the CLI's root handler
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Number of rows used by the zigzag command when --rows is omitted
DEFAULT_ZIGZAG_ROWS = 3
