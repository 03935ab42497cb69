from __future__ import annotations
import re

from ..core import FailureKind, Result

SOURCE = "substack"

_HOST_END_RE = re.compile(r"[/?#]")

def resolve(url: str) -> Result:
    # e.g. https://example.substack.com/p/some-post?utm_source=x -> https://example.substack.com/feed
    _, sep, rest = url.partition("//")
    host = _HOST_END_RE.split(rest, 1)[0]
    if not sep or not host:
        return Result.failed(url, FailureKind.INVALID_URL, SOURCE)
    return Result.found(url, f"https://{host}/feed", SOURCE)
