from __future__ import annotations
import os

from dotenv import load_dotenv

load_dotenv()

# Seconds allowed for each outbound fetch (connect and read).
TIMEOUT = float(os.getenv("RSSGEN_TIMEOUT", "10"))

DEFAULT_OUTPUT = os.getenv("RSSGEN_OUTPUT", "rss-feeds.txt")

# Upper bound on sites resolved concurrently in batch mode.
WORKERS = int(os.getenv("RSSGEN_WORKERS", "4"))

LOG_LEVEL = os.getenv("RSSGEN_LOG_LEVEL", "WARNING").upper()
