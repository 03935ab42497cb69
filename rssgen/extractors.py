"""Pattern-based signal extraction from raw HTML.

Everything here works on the text of a page with regular expressions and
plain substring search. There is no DOM: the first match in document order
wins, and the alternation order of each pattern is its tie-break.
"""
from __future__ import annotations
import html
import re
from typing import Iterator, Optional

RSS_MIME = "application/rss+xml"
ATOM_MIME = "application/atom+xml"

OG_TITLE = 'property="og:title"'
CHANNEL_ID_META = 'itemprop="channelId"'

_CONTENT_ATTR = 'content="'

# Three shapes a YouTube page uses to carry its 24-character channel id.
CHANNEL_ID_RE = re.compile(
    r'channelId"\s*:\s*"([A-Za-z0-9_-]{24})"'
    r'|itemprop="channelId" content="([A-Za-z0-9_-]{24})"'
    r'|<meta itemprop="channelId" content="([A-Za-z0-9_-]{24})"'
)

ANCHOR_HREF_RE = re.compile(r"""(?:<a|<link)[^>]+href=["']([^"'>]+)["'][^>]*>""")

_SCHEME_RE = re.compile(r"^https?://", re.I)


def _alternate_link_re(mime_type: str, rel: bool) -> re.Pattern[str]:
    typ = re.escape(mime_type)
    if rel:
        return re.compile(
            rf"""<link[^>]+rel=["']alternate["'][^>]+type=["']{typ}["'][^>]+href=["']([^"']+)["']"""
        )
    return re.compile(rf"""<link[^>]+type=["']{typ}["'][^>]+href=["']([^"']+)["']""")


def alternate_link(body: str, mime_type: str, *, rel: bool = True) -> Optional[str]:
    """Return the href of the first ``<link>`` declaring *mime_type*.

    With ``rel=True`` the tag must also carry ``rel="alternate"`` ahead of the
    type attribute; the video platform lookup matches on type alone.
    """
    m = _alternate_link_re(mime_type, rel).search(body)
    return html.unescape(m.group(1)) if m else None


def meta_content(body: str, needle: str) -> Optional[str]:
    """Return the ``content="..."`` value following *needle* on the same line."""
    for line in body.splitlines():
        idx = line.find(needle)
        if idx < 0:
            continue
        start = line.find(_CONTENT_ATTR, idx)
        if start < 0:
            continue
        start += len(_CONTENT_ATTR)
        end = line.find('"', start)
        if end >= 0:
            return html.unescape(line[start:end])
    return None


def channel_id(body: str) -> Optional[str]:
    m = CHANNEL_ID_RE.search(body)
    if not m:
        return None
    return next(g for g in m.groups() if g is not None)


def anchor_hrefs(body: str) -> Iterator[str]:
    """Every href on an ``<a>`` or ``<link>`` tag, in document order."""
    for m in ANCHOR_HREF_RE.finditer(body):
        yield html.unescape(m.group(1))


def smells_like_feed(href: str) -> bool:
    h = href.lower()
    return "rss" in h or "atom" in h or h.endswith(".xml")


def absolutize(href: str, base_url: str) -> str:
    """Join *href* onto the page URL by string concatenation, not RFC 3986.

    Absolute hrefs pass through. Scheme-relative ones borrow the page's
    scheme. Root-relative and bare relative hrefs are appended to the page
    URL with its trailing slash trimmed.
    """
    if _SCHEME_RE.match(href):
        return href
    base = base_url.rstrip("/")
    if href.startswith("//"):
        scheme = base.split(":", 1)[0] if "://" in base else "https"
        return f"{scheme}:{href}"
    if href.startswith("/"):
        return base + href
    return f"{base}/{href}"
