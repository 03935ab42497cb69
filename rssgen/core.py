from __future__ import annotations
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class SiteCategory(str, Enum):
    YOUTUBE = "youtube"
    SUBSTACK = "substack"
    TELEGRAM = "telegram"
    BITCHUTE = "bitchute"
    ODYSEE = "odysee"
    RUMBLE = "rumble"
    BLOG = "blog"
    UNKNOWN = "unknown"


class FailureKind(str, Enum):
    INVALID_URL = "invalid_url"
    UNKNOWN_SITE_TYPE = "unknown_site_type"
    RSS_NOT_FOUND = "rss_not_found"
    IO_ERROR = "io_error"

    def message(self, detail: str) -> str:
        return _MESSAGES[self].format(detail)


_MESSAGES = {
    FailureKind.INVALID_URL: "Invalid URL: {}",
    FailureKind.UNKNOWN_SITE_TYPE: "Unknown site type: {}",
    FailureKind.RSS_NOT_FOUND: "RSS feed not found for: {}",
    FailureKind.IO_ERROR: "IO error: {}",
}


class RssGenError(Exception):
    def __init__(self, kind: FailureKind, detail: str, cause: BaseException | None = None):
        super().__init__(kind.message(detail))
        self.kind = kind
        self.detail = detail
        self.cause = cause


@dataclass
class Result:
    input: str
    feed_url: Optional[str]
    failure: Optional[FailureKind] = None
    source: Optional[str] = None      # resolver or discovery tier that answered
    notes: Optional[str] = None       # failure detail, e.g. "Odysee RSS not implemented"
    title: Optional[str] = None       # channel display name, video platform only

    @classmethod
    def found(cls, input: str, feed_url: str, source: str, title: Optional[str] = None) -> "Result":
        return cls(input, feed_url, source=source, title=title)

    @classmethod
    def failed(cls, input: str, failure: FailureKind, source: str, notes: Optional[str] = None) -> "Result":
        return cls(input, None, failure=failure, source=source, notes=notes)

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def error(self) -> Optional[str]:
        if self.failure is None:
            return None
        return self.failure.message(self.notes or self.input)

    def unwrap(self) -> str:
        if self.failure is not None:
            raise RssGenError(self.failure, self.notes or self.input)
        return self.feed_url

    def to_dict(self) -> dict:
        d = asdict(self)
        d["failure"] = self.failure.value if self.failure else None
        return d

    def __str__(self) -> str:
        return self.feed_url if self.ok else self.error
