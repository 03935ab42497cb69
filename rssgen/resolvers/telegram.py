from __future__ import annotations
import re

from ..core import FailureKind, Result

BRIDGE_TEMPLATE = "https://rsshub.app/telegram/channel/{}"
SOURCE = "telegram"

# t.me/name, t.me/s/name (web preview) and the telegram.me alias
_CHANNEL_RE = re.compile(r"(?:^|[/.])(?:t|telegram)\.me/(?:s/)?([^/?#]*)", re.I)

# First path segments that are Telegram features, not channel names.
# Invite links (t.me/+hash) are caught by the leading "+".
_RESERVED = {"joinchat", "addstickers", "addemoji", "addlist", "share", "proxy", "socks", "login", "confirmphone"}

def resolve(url: str) -> Result:
    m = _CHANNEL_RE.search(url)
    name = m.group(1) if m else ""
    if not name or name.startswith("+") or name.lower() in _RESERVED:
        return Result.failed(url, FailureKind.INVALID_URL, SOURCE)
    return Result.found(url, BRIDGE_TEMPLATE.format(name), SOURCE)
