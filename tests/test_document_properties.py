"""Property-based tests for FeedDocument."""

import re
import xml.etree.ElementTree as ET
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

from hypothesis import given
from hypothesis import strategies as st

from rss_writer.document import DAY_NAMES, FeedDocument
from rss_writer.models import ChannelElements, DescribedItem, TitledItem

DATE_PATTERN = re.compile(
    r"(Mon|Tue|Wed|Thu|Fri|Sat|Sun), \d{2} "
    r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec) \d{4} \d{2}:\d{2}:\d{2} GMT"
)

safe_text = st.text(
    alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd", "Zs")),
    min_size=1,
    max_size=40,
).filter(lambda x: x.strip())

items_strategy = st.one_of(
    st.builds(lambda title: TitledItem(title=title), safe_text),
    st.builds(lambda description: DescribedItem(description=description), safe_text),
    st.builds(
        lambda title, description: TitledItem(title=title, description=description),
        safe_text,
        safe_text,
    ),
)


def render_channel(document: FeedDocument) -> ET.Element:
    return ET.fromstring(document.render()).find("channel")


class TestFeedDocumentProperties:
    """Property-based tests for FeedDocument."""

    @given(safe_text, safe_text, safe_text)
    def test_envelope_property(self, title, link, description):
        """
        For any channel description, the output starts with the XML
        declaration and has a single rss root with version 2.0.
        """
        result = FeedDocument(
            ChannelElements(title=title, link=link, description=description)
        ).render()

        assert result.startswith('<?xml version="1.0"?>\n')
        root = ET.fromstring(result)
        assert root.tag == "rss"
        assert root.get("version") == "2.0"
        assert len(root.findall("channel")) == 1
        assert root.find("channel").findtext("title") == title

    @given(st.sets(st.integers(min_value=-100, max_value=100)))
    def test_skip_hours_filter_property(self, skip_hours):
        """Only hours in [0, 23] are rendered, in ascending order."""
        document = FeedDocument(
            ChannelElements(title="t", link="l", description="d", skip_hours=skip_hours)
        )

        channel = render_channel(document)
        expected = sorted(h for h in skip_hours if 0 <= h <= 23)

        if expected:
            assert [int(h.text) for h in channel.findall("skipHours/hour")] == expected
        else:
            assert channel.find("skipHours") is None

    @given(st.sets(st.integers(min_value=-20, max_value=20)))
    def test_skip_days_filter_property(self, skip_days):
        """Only days in [0, 6] are rendered, as weekday names."""
        document = FeedDocument(
            ChannelElements(title="t", link="l", description="d", skip_days=skip_days)
        )

        channel = render_channel(document)
        expected = [DAY_NAMES[d] for d in sorted(skip_days) if 0 <= d <= 6]

        if expected:
            assert [d.text for d in channel.findall("skipDays/day")] == expected
        else:
            assert channel.find("skipDays") is None

    @given(st.lists(items_strategy, max_size=5), items_strategy)
    def test_added_item_is_last_property(self, initial_items, new_item):
        """An added item is rendered after all items present at construction."""
        document = FeedDocument(
            ChannelElements(title="t", link="l", description="d", items=initial_items)
        )

        document.add_item(new_item)

        rendered = render_channel(document).findall("item")
        assert len(rendered) == len(initial_items) + 1
        last = rendered[-1]
        assert last.findtext("title") == new_item.title
        assert last.findtext("description") == new_item.description

    @given(st.lists(items_strategy, max_size=5), st.lists(items_strategy, max_size=5))
    def test_clear_items_property(self, initial_items, added_items):
        """After clearing, no item elements are rendered."""
        document = FeedDocument(
            ChannelElements(title="t", link="l", description="d", items=initial_items)
        )
        for item in added_items:
            document.add_item(item)

        document.clear_items()

        assert render_channel(document).findall("item") == []

    @given(items_strategy)
    def test_absent_fields_not_rendered_property(self, item):
        """Fields left unset never appear as empty elements."""
        document = FeedDocument(
            ChannelElements(title="t", link="l", description="d", items=[item])
        )

        rendered = render_channel(document).find("item")

        expected = [tag for tag, value in (("title", item.title), ("description", item.description)) if value]
        assert [child.tag for child in rendered] == expected

    @given(
        st.datetimes(
            min_value=datetime(1970, 1, 1),
            max_value=datetime(2100, 1, 1),
            timezones=st.just(UTC),
        )
    )
    def test_pub_date_format_property(self, pub_date):
        """Dates always render in the fixed GMT form."""
        document = FeedDocument(
            ChannelElements(title="t", link="l", description="d", pub_date=pub_date)
        )

        text = render_channel(document).findtext("pubDate")

        assert DATE_PATTERN.fullmatch(text)
        assert parsedate_to_datetime(text) == pub_date.replace(microsecond=0)
