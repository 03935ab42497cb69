"""Feed discovery for arbitrary sites.

Three tiers, each entered only when the previous one came up empty:

1. try well-known feed paths under the site URL;
2. read the page and look for ``<link rel="alternate">`` feed declarations;
3. try every ``<a>``/``<link>`` href on the page that smells like a feed.

Requests go out one at a time. A failed candidate (transport error, timeout,
non-2xx) just moves on to the next candidate.
"""
from __future__ import annotations
import logging
from typing import Iterable, Iterator, Optional

import requests

from ..core import FailureKind, Result
from ..extractors import ATOM_MIME, RSS_MIME, absolutize, alternate_link, anchor_hrefs, smells_like_feed
from ..http import get
from ..validators import is_success, looks_like_feed_text, looks_like_feed_type

logger = logging.getLogger(__name__)

FEED_SUFFIXES = ("/feed", "/feed/", "/rss", "/rss.xml", "/atom.xml", "/index.xml")

SOURCE = "autodiscovery"

def pattern_candidates(url: str) -> list[str]:
    base = url.rstrip("/")
    return [base if base.endswith(suffix) else base + suffix for suffix in FEED_SUFFIXES]

def _try_feed(candidate: str) -> Optional[str]:
    try:
        r = get(candidate, stream=True)
    except requests.RequestException as e:
        logger.debug("candidate %s failed: %s", candidate, e)
        return None
    with r:
        if not is_success(r):
            logger.debug("candidate %s rejected (status %s)", candidate, r.status_code)
            return None
        if looks_like_feed_type(r.headers.get("Content-Type", "").lower()):
            return candidate
        try:
            body = r.text
        except requests.RequestException as e:
            logger.debug("candidate %s body unreadable: %s", candidate, e)
            return None
    return candidate if looks_like_feed_text(body) else None

def _try_reachable(candidate: str) -> Optional[str]:
    try:
        r = get(candidate, stream=True)
    except requests.RequestException as e:
        logger.debug("link %s failed: %s", candidate, e)
        return None
    with r:
        return candidate if is_success(r) else None

def _first(candidates: Iterable[str], attempt) -> Optional[str]:
    for candidate in candidates:
        found = attempt(candidate)
        if found:
            return found
    return None

def link_candidates(body: str, url: str) -> Iterator[str]:
    for href in anchor_hrefs(body):
        if smells_like_feed(href):
            yield absolutize(href, url)

def declared_feed(body: str, url: str) -> Optional[str]:
    for mime in (RSS_MIME, ATOM_MIME):
        href = alternate_link(body, mime)
        if href:
            return absolutize(href, url)
    return None

def resolve_from_generic_page(url: str) -> Result:
    feed = _first(pattern_candidates(url), _try_feed)
    if feed:
        logger.info("feed for %s found by path guessing: %s", url, feed)
        return Result.found(url, feed, SOURCE + ":pattern")

    try:
        r = get(url, stream=True)
    except requests.RequestException as e:
        logger.info("could not fetch %s: %s", url, e)
        return Result.failed(url, FailureKind.INVALID_URL, SOURCE)
    with r:
        try:
            body = r.text
        except requests.RequestException as e:
            logger.info("could not read %s: %s", url, e)
            return Result.failed(url, FailureKind.RSS_NOT_FOUND, SOURCE)

    feed = declared_feed(body, url)
    if feed:
        logger.info("feed for %s declared in page: %s", url, feed)
        return Result.found(url, feed, SOURCE + ":alternate")

    feed = _first(link_candidates(body, url), _try_reachable)
    if feed:
        logger.info("feed for %s found among page links: %s", url, feed)
        return Result.found(url, feed, SOURCE + ":links")

    return Result.failed(url, FailureKind.RSS_NOT_FOUND, SOURCE)
