"""RSS 2.0 document building for RSS Writer."""

from datetime import datetime
from typing import Any

from .config import RenderConfig
from .dates import format_rfc822
from .logging_config import create_document_logger
from .models import Category, ChannelElements, Cloud, Image, Item, TextInput
from .xml_tree import build_xml

XML_DECLARATION = '<?xml version="1.0"?>\n'
RSS_VERSION = "2.0"

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
HOURS = range(24)


class FeedDocument:
    """An RSS 2.0 channel that can be rendered to XML text.

    The document copies every collection it is given, so later changes to
    the caller's lists do not leak into the output. Items can be appended
    or cleared after construction; everything else is fixed.

    Not safe for concurrent mutation without external synchronization.
    Concurrent calls to :meth:`render` are fine as long as no
    :meth:`add_item` or :meth:`clear_items` runs at the same time.
    """

    def __init__(
        self,
        channel: ChannelElements,
        render_config: RenderConfig | None = None,
        document_id: str | None = None,
    ):
        """Initialize the document from a channel description.

        Args:
            channel: Channel description, optionally with initial collections
            render_config: Output formatting options
            document_id: Identifier used for logging context
        """
        self.channel = channel
        self.render_config = render_config or RenderConfig()
        self.logger = create_document_logger("document", document_id)

        self._categories: list[Category] = list(channel.categories)
        self._images: list[Image] = list(channel.images)
        self._items: list[Item] = list(channel.items)
        self._skip_days: set[int] = set(channel.skip_days)
        self._skip_hours: set[int] = set(channel.skip_hours)

        self.logger.debug(
            "FeedDocument initialized",
            channel_title=channel.title,
            categories_count=len(self._categories),
            images_count=len(self._images),
            items_count=len(self._items),
        )

    @property
    def items(self) -> tuple[Item, ...]:
        """Items currently in the document, in rendering order."""
        return tuple(self._items)

    def add_item(self, item: Item) -> None:
        """Append an item after all items already in the document."""
        self._items.append(item)
        self.logger.log_item_added(item.title, len(self._items))

    def clear_items(self) -> None:
        """Remove every item from the document."""
        discarded = len(self._items)
        self._items = []
        self.logger.info("Items cleared", items_discarded=discarded)

    def render(self) -> str:
        """Render the document as RSS 2.0 XML text.

        Returns:
            XML text starting with the XML declaration line
        """
        skip_days = self._valid_skip_days()
        skip_hours = self._valid_skip_hours()
        tree = {
            "rss": {
                "@version": RSS_VERSION,
                "channel": self._channel_tree(skip_days, skip_hours),
            }
        }
        text = XML_DECLARATION + build_xml(tree, indent=self.render_config.indent) + "\n"

        self.logger.log_render(
            self.channel.title,
            {
                "items_count": len(self._items),
                "skip_days_dropped": len(self._skip_days) - len(skip_days),
                "skip_hours_dropped": len(self._skip_hours) - len(skip_hours),
            },
        )
        return text

    def __str__(self) -> str:
        return self.render()

    def _channel_tree(self, skip_days: list[int], skip_hours: list[int]) -> dict[str, Any]:
        channel = self.channel

        return {
            "title": channel.title,
            "link": channel.link,
            "description": channel.description,
            "language": channel.language,
            "copyright": channel.copyright,
            "managingEditor": channel.managing_editor,
            "webMaster": channel.web_master,
            "pubDate": _date_text(channel.pub_date),
            "lastBuildDate": _date_text(channel.last_build_date),
            "generator": channel.generator,
            "docs": channel.docs,
            "ttl": channel.ttl,
            "rating": channel.rating,
            "textInput": _text_input_tree(channel.text_input),
            "category": [_category_tree(category) for category in self._categories],
            "cloud": _cloud_tree(channel.cloud),
            "image": [_image_tree(image) for image in self._images],
            "item": [_item_tree(item) for item in self._items],
            "skipDays": {"day": [DAY_NAMES[day] for day in skip_days]} if skip_days else None,
            "skipHours": {"hour": skip_hours} if skip_hours else None,
        }

    def _valid_skip_days(self) -> list[int]:
        return sorted(day for day in self._skip_days if 0 <= day < len(DAY_NAMES))

    def _valid_skip_hours(self) -> list[int]:
        return sorted(hour for hour in self._skip_hours if hour in HOURS)


def _date_text(value: datetime | None) -> str | None:
    return format_rfc822(value) if value is not None else None


def _category_tree(category: Category) -> dict[str, Any]:
    return {"@domain": category.domain, "#text": category.text}


def _cloud_tree(cloud: Cloud | None) -> dict[str, Any] | None:
    if cloud is None:
        return None

    return {
        "@domain": cloud.domain,
        "@port": cloud.port,
        "@path": cloud.path,
        "@registerProcedure": cloud.register_procedure,
        "@protocol": cloud.protocol,
    }


def _image_tree(image: Image) -> dict[str, Any]:
    return {
        "url": image.url,
        "title": image.title,
        "link": image.link,
        "width": image.width,
        "height": image.height,
        "description": image.description,
    }


def _text_input_tree(text_input: TextInput | None) -> dict[str, Any] | None:
    if text_input is None:
        return None

    return {
        "title": text_input.title,
        "description": text_input.description,
        "name": text_input.name,
        "link": text_input.link,
    }


def _item_tree(item: Item) -> dict[str, Any]:
    return {
        "title": item.title,
        "description": item.description,
        "link": item.link,
        "author": item.author,
        "comments": item.comments,
        "category": [_category_tree(category) for category in item.categories],
        "enclosure": (
            {
                "@url": item.enclosure.url,
                "@length": item.enclosure.length,
                "@type": item.enclosure.type,
            }
            if item.enclosure
            else None
        ),
        "guid": (
            {
                # only ever rendered as "true"
                "@isPermaLink": True if item.guid.is_perma_link else None,
                "#text": item.guid.text,
            }
            if item.guid
            else None
        ),
        "pubDate": _date_text(item.pub_date),
        "source": (
            {"@url": item.source.url, "#text": item.source.text}
            if item.source
            else None
        ),
    }
