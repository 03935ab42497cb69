"""Find the RSS/Atom feed behind a site URL."""
from .core import FailureKind, Result, RssGenError, SiteCategory
from .resolvers import find_feed, resolve
from .sites import classify

__version__ = "0.1.0"

__all__ = [
    "FailureKind",
    "Result",
    "RssGenError",
    "SiteCategory",
    "classify",
    "find_feed",
    "resolve",
]
