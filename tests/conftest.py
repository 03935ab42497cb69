from __future__ import annotations
from typing import Union

import pytest
import requests

Page = Union[tuple, BaseException]


class _BrokenRaw:
    """Raw stream whose body read dies part way, like a cut chunked transfer."""

    def __init__(self, exc: BaseException):
        self.exc = exc

    def stream(self, *args, **kwargs):
        raise self.exc

    def close(self):
        pass


class FakeWeb:
    """Stands in for ``requests.get``: serves canned pages and logs every URL asked for."""

    def __init__(self):
        self.pages: dict[str, Page] = {}
        self.broken: dict[str, BaseException] = {}
        self.calls: list[str] = []
        self.default_error: BaseException | None = None

    def add(self, url: str, body: str = "", status: int = 200, content_type: str = "text/html; charset=utf-8"):
        self.pages[url] = (status, body, content_type)

    def fail(self, url: str, exc: BaseException | None = None):
        self.pages[url] = exc or requests.ConnectionError(f"cannot reach {url}")

    def cut_body(self, url: str, exc: BaseException, content_type: str = "text/html; charset=utf-8"):
        self.pages[url] = (200, None, content_type)
        self.broken[url] = exc

    def get(self, url, **kwargs):
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            raise self.default_error or requests.ConnectionError(f"no route to {url}")
        if isinstance(page, BaseException):
            raise page
        status, body, content_type = page
        r = requests.Response()
        r.status_code = status
        r.encoding = "utf-8"
        r.headers["Content-Type"] = content_type
        r.url = url
        if url in self.broken:
            r.raw = _BrokenRaw(self.broken[url])
        else:
            r._content = body.encode("utf-8")
            r._content_consumed = True
        return r


@pytest.fixture
def web(mocker):
    fake = FakeWeb()
    mocker.patch("rssgen.http.requests.get", side_effect=fake.get)
    return fake
