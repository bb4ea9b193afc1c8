"""Configuration management for RSS Writer."""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, get_args

from .dates import parse_date
from .logging_config import create_document_logger
from .models import (
    Category,
    ChannelElements,
    Cloud,
    CloudProtocol,
    DescribedItem,
    Enclosure,
    Guid,
    Image,
    Item,
    Source,
    TextInput,
    TitledItem,
)


@dataclass
class RenderConfig:
    """Configuration for rendering a document to text."""

    indent: str = "  "


class Config:
    """Loads a channel description and render settings from a JSON file."""

    # Default channel file path
    CHANNEL_FILE = "channel.json"

    def __init__(self, channel_file: str | Path | None = None):
        """Initialize configuration.

        Args:
            channel_file: Path of the JSON channel description
        """
        self.channel_file = Path(channel_file or self.CHANNEL_FILE)
        self.logger = create_document_logger("config")
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data

        if not self.channel_file.exists():
            raise FileNotFoundError(f"Channel file not found: {self.channel_file}")

        try:
            with open(self.channel_file, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in channel file: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("Channel file must contain a JSON object")

        self.logger.info(
            "Channel file loaded", channel_file=str(self.channel_file)
        )
        self._data = data
        return data

    def get_channel(self) -> ChannelElements:
        """Get the channel description."""
        return channel_from_dict(self._load())

    def get_render_config(self) -> RenderConfig:
        """Get render configuration."""
        render = self._load().get("render") or {}
        if not isinstance(render, dict):
            raise ValueError("\"render\" must be a JSON object")
        if "indent" in render:
            return RenderConfig(indent=render["indent"])
        return RenderConfig()


def channel_from_dict(data: Mapping[str, Any]) -> ChannelElements:
    """Build a channel description from a plain mapping.

    Keys use the feed's own element names (``managingEditor``,
    ``lastBuildDate``, ``skipHours`` ...).

    Raises:
        ValueError: If a required field is missing or a value is invalid
    """
    try:
        return ChannelElements(
            title=data["title"],
            link=data["link"],
            description=data["description"],
            language=data.get("language"),
            copyright=data.get("copyright"),
            managing_editor=data.get("managingEditor"),
            web_master=data.get("webMaster"),
            pub_date=_optional_date(data.get("pubDate")),
            last_build_date=_optional_date(data.get("lastBuildDate")),
            categories=[_category_from_dict(c) for c in (data.get("categories") or [])],
            generator=data.get("generator"),
            docs=data.get("docs"),
            cloud=_cloud_from_dict(data["cloud"]) if data.get("cloud") else None,
            ttl=data.get("ttl"),
            images=[_image_from_dict(i) for i in (data.get("images") or [])],
            rating=data.get("rating"),
            text_input=(
                TextInput(
                    title=data["textInput"]["title"],
                    description=data["textInput"]["description"],
                    name=data["textInput"]["name"],
                    link=data["textInput"]["link"],
                )
                if data.get("textInput")
                else None
            ),
            skip_hours=list(data.get("skipHours") or []),
            skip_days=list(data.get("skipDays") or []),
            items=[item_from_dict(i) for i in (data.get("items") or [])],
        )
    except KeyError as e:
        raise ValueError(f"Missing required channel field: {e.args[0]}") from e


def item_from_dict(data: Mapping[str, Any]) -> Item:
    """Build an item from a plain mapping.

    Raises:
        ValueError: If the item has neither a title nor a description
    """
    try:
        common = {
            "link": data.get("link"),
            "author": data.get("author"),
            "categories": [_category_from_dict(c) for c in (data.get("categories") or [])],
            "comments": data.get("comments"),
            "enclosure": (
                Enclosure(
                    url=data["enclosure"]["url"],
                    length=data["enclosure"]["length"],
                    type=data["enclosure"]["type"],
                )
                if data.get("enclosure")
                else None
            ),
            "guid": (
                Guid(
                    text=data["guid"]["text"],
                    is_perma_link=True if data["guid"].get("isPermaLink") is True else None,
                )
                if data.get("guid")
                else None
            ),
            "pub_date": _optional_date(data.get("pubDate")),
            "source": (
                Source(url=data["source"]["url"], text=data["source"]["text"])
                if data.get("source")
                else None
            ),
        }
    except KeyError as e:
        raise ValueError(f"Missing required item field: {e.args[0]}") from e

    if data.get("title") is not None:
        return TitledItem(
            title=data["title"], description=data.get("description"), **common
        )
    if data.get("description") is not None:
        return DescribedItem(description=data["description"], **common)

    raise ValueError("Item requires a title or a description")


def _category_from_dict(data: Mapping[str, Any]) -> Category:
    return Category(text=data["text"], domain=data.get("domain"))


def _cloud_from_dict(data: Mapping[str, Any]) -> Cloud:
    protocol = data["protocol"]
    if protocol not in get_args(CloudProtocol):
        raise ValueError(f"Unsupported cloud protocol: {protocol}")

    return Cloud(
        domain=data["domain"],
        port=data["port"],
        path=data["path"],
        register_procedure=data["registerProcedure"],
        protocol=protocol,
    )


def _image_from_dict(data: Mapping[str, Any]) -> Image:
    return Image(
        url=data["url"],
        title=data["title"],
        link=data["link"],
        width=data.get("width"),
        height=data.get("height"),
        description=data.get("description"),
    )


def _optional_date(value: Any):
    if value is None:
        return None
    return parse_date(value)
