from __future__ import annotations
from ..core import FailureKind, Result

FEED_TEMPLATE = "https://api.bitchute.com/feeds/rss/channel/{}"
SOURCE = "bitchute"

def resolve(url: str) -> Result:
    # https://www.bitchute.com/channel/biocharisma/ -> .../feeds/rss/channel/biocharisma
    parts = url.rstrip("/").split("/")
    for i in range(len(parts) - 1, -1, -1):
        if parts[i] == "channel":
            name = parts[i + 1] if i + 1 < len(parts) else ""
            if name:
                return Result.found(url, FEED_TEMPLATE.format(name), SOURCE)
            break
    return Result.failed(url, FailureKind.INVALID_URL, SOURCE)
