"""Data models for RSS Writer."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

CloudProtocol = Literal["http-post", "soap", "xml-rpc"]


@dataclass(frozen=True)
class Category:
    """A category for a channel or an item."""

    text: str
    domain: str | None = None


@dataclass(frozen=True)
class Cloud:
    """Registration details for the rssCloud update notification protocol."""

    domain: str
    port: int
    path: str
    register_procedure: str
    protocol: CloudProtocol


@dataclass(frozen=True)
class Image:
    """A GIF, JPEG or PNG image that can be displayed with the channel."""

    url: str
    title: str
    link: str
    width: int | None = None
    height: int | None = None
    description: str | None = None


@dataclass(frozen=True)
class TextInput:
    """A text input box that can be displayed with the channel."""

    title: str
    description: str
    name: str
    link: str


@dataclass(frozen=True)
class Enclosure:
    """A media object attached to an item."""

    url: str
    length: int  # bytes
    type: str


@dataclass(frozen=True)
class Guid:
    """Unique identifier of an item.

    ``is_perma_link`` is either ``True`` or unset; a guid is never marked
    as explicitly not being a permalink.
    """

    text: str
    is_perma_link: Literal[True] | None = None


@dataclass(frozen=True)
class Source:
    """The channel an item came from."""

    url: str
    text: str


@dataclass(frozen=True, kw_only=True)
class _ItemElements:
    link: str | None = None
    author: str | None = None
    categories: tuple[Category, ...] = ()
    comments: str | None = None
    enclosure: Enclosure | None = None
    guid: Guid | None = None
    pub_date: datetime | None = None
    source: Source | None = None

    def __post_init__(self):
        # tuple copy of the caller's categories
        object.__setattr__(self, "categories", tuple(self.categories))


@dataclass(frozen=True, kw_only=True)
class TitledItem(_ItemElements):
    """An item that always carries a title."""

    title: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class DescribedItem(_ItemElements):
    """An item that always carries a description."""

    description: str
    title: str | None = None


# An item needs a title, a description, or both.
Item = TitledItem | DescribedItem


@dataclass(frozen=True)
class ChannelElements:
    """Everything needed to describe a channel, including initial collections."""

    title: str
    link: str
    description: str
    language: str | None = None
    copyright: str | None = None
    managing_editor: str | None = None
    web_master: str | None = None
    pub_date: datetime | None = None
    last_build_date: datetime | None = None
    categories: Iterable[Category] = field(default_factory=list)
    generator: str | None = None
    docs: str | None = None
    cloud: Cloud | None = None
    ttl: int | None = None  # minutes
    images: Iterable[Image] = field(default_factory=list)
    rating: str | None = None
    text_input: TextInput | None = None
    skip_hours: Iterable[int] = field(default_factory=list)
    skip_days: Iterable[int] = field(default_factory=list)
    items: Iterable[Item] = field(default_factory=list)
