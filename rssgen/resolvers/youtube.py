from __future__ import annotations
import logging
import re
from typing import Optional

import requests

from ..core import FailureKind, Result
from ..extractors import CHANNEL_ID_META, OG_TITLE, RSS_MIME, alternate_link, channel_id, meta_content
from ..http import get

logger = logging.getLogger(__name__)

FEED_TEMPLATE = "https://www.youtube.com/feeds/videos.xml?channel_id={}"
UNKNOWN_CHANNEL = "Unknown Channel"
SOURCE = "youtube"

_CHANNEL_PATH_RE = re.compile(r"/channel/([^/?#]+)")

def feed_for_channel(channel: str) -> str:
    return FEED_TEMPLATE.format(channel)

def channel_from_url(url: str) -> Optional[str]:
    m = _CHANNEL_PATH_RE.search(url)
    return m.group(1) if m else None

def title_from_body(body: str) -> str:
    return meta_content(body, OG_TITLE) or UNKNOWN_CHANNEL

def channel_title(url: str) -> str:
    """Fetch *url* for its og:title. Never fails; falls back to a placeholder."""
    try:
        return title_from_body(get(url).text)
    except requests.RequestException as e:
        logger.debug("title lookup failed for %s: %s", url, e)
        return UNKNOWN_CHANNEL

def resolve(url: str) -> Result:
    cid = channel_from_url(url)
    if cid:
        return Result.found(url, feed_for_channel(cid), SOURCE)
    return discover(url)

def discover(url: str) -> Result:
    """Find the feed of a handle, custom or video URL by scanning its page."""
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

    feed = alternate_link(body, RSS_MIME, rel=False)
    if feed:
        return Result.found(url, feed, SOURCE + ":link", title_from_body(body))

    cid = meta_content(body, CHANNEL_ID_META)
    if cid:
        return Result.found(url, feed_for_channel(cid), SOURCE + ":meta", title_from_body(body))

    cid = channel_id(body)
    if cid:
        return Result.found(url, feed_for_channel(cid), SOURCE + ":scan", title_from_body(body))

    return Result.failed(url, FailureKind.RSS_NOT_FOUND, SOURCE)
