from rssgen.extractors import (
    ATOM_MIME,
    OG_TITLE,
    RSS_MIME,
    absolutize,
    alternate_link,
    anchor_hrefs,
    channel_id,
    meta_content,
    smells_like_feed,
)

CID = "UCabcdefghijklmnopqrstuv"


def test_meta_content_reads_same_line():
    body = '<head>\n<meta property="og:title" content="Tom &amp; Jerry">\n</head>'
    assert meta_content(body, OG_TITLE) == "Tom & Jerry"


def test_meta_content_missing():
    assert meta_content('<meta property="og:title">\ncontent="x"', OG_TITLE) is None
    assert meta_content("<html></html>", OG_TITLE) is None


def test_alternate_link_needs_rel_by_default():
    body = '<link type="application/rss+xml" href="https://x.test/feed">'
    assert alternate_link(body, RSS_MIME) is None
    assert alternate_link(body, RSS_MIME, rel=False) == "https://x.test/feed"


def test_alternate_link_by_mime_type():
    body = (
        '<link rel="alternate" type="application/atom+xml" href="/atom">'
        '<link rel="alternate" type="application/rss+xml" href="/rss?a=1&amp;b=2">'
    )
    assert alternate_link(body, RSS_MIME) == "/rss?a=1&b=2"
    assert alternate_link(body, ATOM_MIME) == "/atom"


def test_channel_id_json_shape():
    assert channel_id('{"channelId" : "%s"}' % CID) == CID


def test_channel_id_itemprop_shape():
    assert channel_id('<div itemprop="channelId" content="%s">' % CID) == CID


def test_channel_id_wrong_length_ignored():
    assert channel_id('"channelId":"UCshort"') is None


def test_anchor_hrefs_in_document_order():
    body = '<a href="/one">1</a><link rel="x" href=\'/two\'><p href="/no"><a class="c" href="/three">'
    assert list(anchor_hrefs(body)) == ["/one", "/two", "/three"]


def test_smells_like_feed():
    assert smells_like_feed("/RSS")
    assert smells_like_feed("https://x.test/atom/")
    assert smells_like_feed("/sitemap.XML")
    assert not smells_like_feed("/about")


def test_absolutize():
    base = "https://blog.example.com/"
    assert absolutize("http://other.test/feed", base) == "http://other.test/feed"
    assert absolutize("/feed.xml", base) == "https://blog.example.com/feed.xml"
    assert absolutize("feed.xml", base) == "https://blog.example.com/feed.xml"
    assert absolutize("//cdn.test/rss", "http://blog.example.com") == "http://cdn.test/rss"
