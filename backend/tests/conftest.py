"""Root conftest: shared test configuration."""

import os

# Pin settings so a developer's .env cannot change paging or CORS under test
os.environ.setdefault("DEFAULT_PAGE_SIZE", "10")
os.environ.setdefault("MAX_PAGE_SIZE", "100")
os.environ.setdefault("LOG_FORMAT", "text")
