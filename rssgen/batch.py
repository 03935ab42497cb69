from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable

from .core import Result
from .resolvers import resolve
from .sites import classify

logger = logging.getLogger(__name__)

@dataclass
class BatchReport:
    feeds: list[Result] = field(default_factory=list)
    failures: list[Result] = field(default_factory=list)

    def unique_feeds(self) -> list[str]:
        return sorted({r.feed_url for r in self.feeds})

def site_lines(lines: Iterable[str]) -> list[str]:
    sites = []
    for line in lines:
        s = line.strip()
        if s and not s.startswith("#"):
            sites.append(s)
    return sites

def _resolve_one(site: str) -> Result:
    res = resolve(site, classify(site))
    if not res.ok:
        logger.info("no feed for %s: %s", site, res.error)
    return res

def resolve_many(lines: Iterable[str], workers: int = 1) -> BatchReport:
    """Resolve every site in *lines*; one site's failure never stops the rest.

    Sites run on up to *workers* threads. Each resolution is still sequential
    inside, and nothing is shared between them.
    """
    sites = site_lines(lines)
    report = BatchReport()
    if not sites:
        return report
    with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
        for res in pool.map(_resolve_one, sites):
            (report.feeds if res.ok else report.failures).append(res)
    return report
