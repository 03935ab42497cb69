import pytest
from urllib3.exceptions import LocationParseError

from rssgen import FailureKind, RssGenError
from rssgen.batch import resolve_many, site_lines
from rssgen.io import read_sites, write_feeds


def test_site_lines_skips_blanks_and_comments():
    lines = ["# my sites", "", "  https://t.me/a  ", "\t", "#https://t.me/b", "https://t.me/c"]
    assert site_lines(lines) == ["https://t.me/a", "https://t.me/c"]


@pytest.mark.parametrize("workers", [1, 4])
def test_resolve_many_collects_feeds_and_failures(web, workers):
    report = resolve_many([
        "https://t.me/b",
        "https://example.substack.com",
        "not_a_url",
        "https://t.me/b",
        "https://rumble.com/c/x",
        "https://t.me/a",
    ], workers=workers)
    assert report.unique_feeds() == [
        "https://example.substack.com/feed",
        "https://rsshub.app/telegram/channel/a",
        "https://rsshub.app/telegram/channel/b",
    ]
    assert [r.input for r in report.failures] == ["not_a_url", "https://rumble.com/c/x"]
    assert report.failures[0].failure is FailureKind.UNKNOWN_SITE_TYPE
    assert web.calls == []


def test_resolve_many_empty():
    report = resolve_many(["", "# nothing"])
    assert report.feeds == [] and report.failures == []


def test_read_and_write_roundtrip_on_disk(tmp_path):
    src = tmp_path / "sites.txt"
    src.write_text("https://t.me/a\n\n# note\n", encoding="utf-8")
    assert read_sites(src) == ["https://t.me/a", "", "# note"]

    out = tmp_path / "feeds.txt"
    write_feeds(out, ["https://a.test/feed", "https://b.test/rss"])
    assert out.read_text(encoding="utf-8") == "https://a.test/feed\nhttps://b.test/rss\n"


def test_read_missing_file_is_io_error(tmp_path):
    with pytest.raises(RssGenError) as exc:
        read_sites(tmp_path / "missing.txt")
    assert exc.value.kind is FailureKind.IO_ERROR
    assert str(exc.value).startswith("IO error: ")
    assert isinstance(exc.value.cause, OSError)


def test_write_into_missing_directory_is_io_error(tmp_path):
    with pytest.raises(RssGenError) as exc:
        write_feeds(tmp_path / "nope" / "feeds.txt", ["x"])
    assert exc.value.kind is FailureKind.IO_ERROR


def test_one_unparseable_host_does_not_stop_the_batch(web):
    web.default_error = LocationParseError("a..b")
    report = resolve_many(["http://a..b/", "https://t.me/ok"], workers=2)
    assert report.unique_feeds() == ["https://rsshub.app/telegram/channel/ok"]
    assert [r.input for r in report.failures] == ["http://a..b/"]
    assert report.failures[0].failure is FailureKind.INVALID_URL
