from __future__ import annotations
import requests

_FEED_TYPE_TOKENS = ("xml", "rss", "atom")
_FEED_BODY_MARKERS = ("<rss", "<feed")

def is_success(r: requests.Response) -> bool:
    return 200 <= r.status_code < 300

def looks_like_feed_type(content_type: str) -> bool:
    return any(tok in content_type for tok in _FEED_TYPE_TOKENS)

def looks_like_feed_text(body: str) -> bool:
    return any(tag in body for tag in _FEED_BODY_MARKERS)
