"""Root conftest — shared test configuration."""

import os

# Keep test runs independent of a developer's local .env
os.environ.setdefault("ALBUMS_LOG_FORMAT", "text")
os.environ.setdefault("ALBUMS_SEED_CATALOG", "true")
