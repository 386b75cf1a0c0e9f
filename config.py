"""Search configuration and constants."""
import os
import logging


logger: 'logging.Logger' = logging.getLogger("kmp")

# Search configuration constants
LOG_PATH: str = os.path.join("data", "logs")
CONTEXT_WIDTH: int = 20  # characters shown on each side of a match
DEFAULT_WILDCARD: str = "?"
PDF_SUFFIX: str = ".pdf"
TEXT_ENCODING: str = "utf-8"
