from .orchestrator import RESOLVERS, find_feed, resolve

__all__ = ["RESOLVERS", "find_feed", "resolve"]
