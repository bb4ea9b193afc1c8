"""Shared fixtures for RSS Writer tests."""

import pytest

from rss_writer.models import ChannelElements


@pytest.fixture
def minimal_channel():
    """Channel with only the required fields."""
    return ChannelElements(
        title="GoUpstate.com News Headlines",
        link="http://www.goupstate.com/",
        description="The latest news from GoUpstate.com, a Spartanburg Herald-Journal Web site.",
    )
