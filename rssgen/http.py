from __future__ import annotations
import logging

import requests
import urllib3

from . import config

logger = logging.getLogger(__name__)

def get(url: str, *, allow_redirects: bool = True, timeout: float | None = None, stream: bool = False) -> requests.Response:
    """Plain GET: no custom headers, no cookies, the client's default redirect policy.

    Every failure surfaces as a ``requests.RequestException``; hosts urllib3
    cannot parse become ``InvalidURL``. With ``stream=True`` the body is left
    unread, so reading ``.text`` can still raise.
    """
    logger.debug("GET %s", url)
    try:
        return requests.get(url, timeout=timeout or config.TIMEOUT, allow_redirects=allow_redirects, stream=stream)
    except requests.RequestException:
        raise
    except (ValueError, urllib3.exceptions.HTTPError) as e:
        raise requests.exceptions.InvalidURL(f"{url}: {e}") from e
