from __future__ import annotations
from ..core import FailureKind, Result

# Platforms without a public feed convention. They still get a resolver so
# every category maps to something.

def odysee(url: str) -> Result:
    return Result.failed(url, FailureKind.RSS_NOT_FOUND, "odysee", "Odysee RSS not implemented")

def rumble(url: str) -> Result:
    return Result.failed(url, FailureKind.RSS_NOT_FOUND, "rumble", "Rumble RSS not implemented")
