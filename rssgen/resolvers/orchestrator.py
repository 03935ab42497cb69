from __future__ import annotations
from typing import Callable

from ..core import FailureKind, Result, SiteCategory
from ..sites import classify
from . import bitchute, substack, telegram, unsupported, youtube
from .autodiscover import resolve_from_generic_page

def _unknown(url: str) -> Result:
    return Result.failed(url, FailureKind.UNKNOWN_SITE_TYPE, "classifier")

RESOLVERS: dict[SiteCategory, Callable[[str], Result]] = {
    SiteCategory.YOUTUBE: youtube.resolve,
    SiteCategory.SUBSTACK: substack.resolve,
    SiteCategory.TELEGRAM: telegram.resolve,
    SiteCategory.BITCHUTE: bitchute.resolve,
    SiteCategory.ODYSEE: unsupported.odysee,
    SiteCategory.RUMBLE: unsupported.rumble,
    SiteCategory.BLOG: resolve_from_generic_page,
    SiteCategory.UNKNOWN: _unknown,
}

def resolve(url: str, category: SiteCategory, *, fetch_title: bool = False) -> Result:
    """Run the one resolver registered for *category* against *url*.

    ``fetch_title`` makes a YouTube result carry the channel name even when the
    feed was built straight from a ``/channel/`` URL, at the cost of a fetch.
    """
    res = RESOLVERS[category](url)
    if fetch_title and res.ok and category is SiteCategory.YOUTUBE and res.title is None:
        res.title = youtube.channel_title(url)
    return res

def find_feed(input_str: str, *, fetch_title: bool = False) -> Result:
    s = (input_str or "").strip()
    if not s:
        return Result.failed(s, FailureKind.INVALID_URL, "input", "empty input")
    return resolve(s, classify(s), fetch_title=fetch_title)
