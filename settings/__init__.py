"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("GOV_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("GOV_LOG_LEVEL", "INFO")

# API
API_BASE_URL = os.getenv("GOV_API_BASE_URL", "http://localhost:8080/api")
API_KEY = os.getenv("GOV_API_KEY") or None
API_TIMEOUT = int(os.getenv("GOV_API_TIMEOUT", "30"))

# Polling
MAX_CONCURRENT = int(os.getenv("GOV_MAX_CONCURRENT", "10"))
