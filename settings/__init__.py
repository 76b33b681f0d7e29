"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("BALLOT_DB_PATH", ":memory:")

# Logging
LOG_DIR = Path("logs")

# Ledger
DEFAULT_ADMIN = os.getenv("BALLOT_ADMIN", "deployer")
FIRST_BALLOT_ID = 1

# Sequences, ids and counts are stored as unsigned 64-bit integers
MAX_SEQ = 2**64 - 1

# Ballot limits
MIN_OPTIONS = 2
MAX_OPTIONS = 10
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_OPTION_LENGTH = 50
