from __future__ import annotations
import json
import streamlit as st

from rssgen import classify, find_feed
from rssgen.batch import resolve_many
from rssgen.config import WORKERS

st.set_page_config(page_title="Find RSS Feed", page_icon="📰")

with st.sidebar:
    st.header("How to Use This Tool")

    with st.expander("Single site", expanded=False):
        st.markdown("""
        Paste a site URL and click **Find RSS Feed**.

        - YouTube channel, handle and video pages
        - Substack newsletters
        - Telegram channels (served through RSSHub)
        - BitChute channels
        - Any other blog or news site, found by probing and page scanning
        """)

    with st.expander("Many sites", expanded=False):
        st.markdown("""
        Paste one URL per line. Blank lines and lines starting with `#` are
        skipped. The result is a sorted list of unique feed URLs you can
        download as a text file.
        """)

    with st.expander("Limitations", expanded=False):
        st.markdown("""
        - Odysee and Rumble have no public feed convention and always fail
        - Sites that hide their feed behind scripts may not be found
        - Every request waits up to the configured timeout, so slow sites take a while
        """)

st.title("Find RSS Feed")
st.caption("Paste a site URL. Returns the RSS/Atom feed URL if one can be found.")

single_tab, batch_tab = st.tabs(["Single site", "Many sites"])

with single_tab:
    with st.form("resolver"):
        user_input = st.text_input(
            "Site URL",
            placeholder="https://www.youtube.com/@veritasium",
        )
        want_title = st.checkbox("Look up the channel name (YouTube)")
        submitted = st.form_submit_button("Find RSS Feed")

    if submitted:
        site = (user_input or "").strip()
        st.write(f"**Detected site type:** `{classify(site).value}`")
        with st.spinner("Resolving..."):
            res = find_feed(site, fetch_title=want_title)
        if res.ok:
            st.success("Feed found")
            st.write("**RSS feed URL:**")
            st.code(res.feed_url, language=None)
            if res.title:
                st.write(f"**Channel:** {res.title}")
            st.link_button("Open feed", res.feed_url)
        else:
            st.error(res.error)

        st.divider()
        st.subheader("Debug JSON")
        st.code(json.dumps(res.to_dict(), ensure_ascii=False, indent=2), language="json")

with batch_tab:
    with st.form("batch"):
        sites_text = st.text_area("Site URLs, one per line", height=200)
        workers = st.number_input("Sites resolved at once", min_value=1, max_value=32, value=WORKERS)
        run_batch = st.form_submit_button("Find all feeds")

    if run_batch:
        with st.spinner("Resolving sites..."):
            report = resolve_many(sites_text.splitlines(), workers=int(workers))
        feeds = report.unique_feeds()
        st.success(f"{len(feeds)} feeds found, {len(report.failures)} sites failed")
        if feeds:
            st.code("\n".join(feeds), language=None)
            st.download_button(
                "Download rss-feeds.txt",
                data="\n".join(feeds) + "\n",
                file_name="rss-feeds.txt",
                mime="text/plain",
            )
        for res in report.failures:
            st.warning(f"Failed to generate RSS for: {res.input} ({res.error})")
