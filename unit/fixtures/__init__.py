"""Test fixtures and enums for unit testing."""

from enum import Enum


class BillSection(str, Enum):
    """Parts of a bill lookup page a test can leave out."""

    TITLE = "title"
    SPONSORS = "sponsors"
    ATTRIBUTES = "attributes"
    KEYWORDS = "keywords"
    HISTORY = "history"
    VOTES = "votes"
    SUMMARY = "summary"


class MemberId(str, Enum):
    """Common member IDs for testing."""

    LAMBETH = "436"
    POTTS = "694"
    BERGER = "390"
