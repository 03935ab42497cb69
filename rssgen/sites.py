from __future__ import annotations
from .core import SiteCategory

# Checked in order; the first marker found in the lower-cased URL wins.
_MARKERS: tuple[tuple[SiteCategory, tuple[str, ...]], ...] = (
    (SiteCategory.YOUTUBE, ("youtube.com", "youtu.be")),
    (SiteCategory.SUBSTACK, ("substack.com",)),
    (SiteCategory.TELEGRAM, ("t.me", "telegram.me")),
    (SiteCategory.ODYSEE, ("odysee.com",)),
    (SiteCategory.BITCHUTE, ("bitchute.com",)),
    (SiteCategory.RUMBLE, ("rumble.com",)),
    (SiteCategory.BLOG, ("http",)),
)

def classify(url: str) -> SiteCategory:
    u = url.lower()
    for category, markers in _MARKERS:
        if any(m in u for m in markers):
            return category
    return SiteCategory.UNKNOWN
