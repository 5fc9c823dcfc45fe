"""A parser for the bill RSS feeds (filed, last action, chaptered, ...)."""

import logging
import re

from components.models import Chamber, FeedEntry
from components.topics import is_health_related
from components.utils import decode_entities, extract_field, require_text

logger = logging.getLogger(__name__)

ITEM_RX = re.compile(r"<item(?:\s[^>]*)?>([\s\S]*?)</item>", re.I)
BILL_PREFIX_RX = re.compile(r"^([HS][BRJC]?)\s*(\d+)", re.I)
TITLE_SEPARATOR = " - "


def derive_bill_number(title: str) -> str:
    """Normalize the bill number at the start of a feed title.

    "H2 - Medicaid Transformation" -> "H 2", "SB 12 - ..." -> "SB 12".
    Titles without a recognizable prefix fall back to the text before the
    first " - ".
    """
    m = BILL_PREFIX_RX.match(title)
    if m:
        return f"{m.group(1).upper()} {m.group(2)}"
    return title.split(TITLE_SEPARATOR, 1)[0].strip()


def derive_display_title(title: str) -> str:
    """Everything after the first " - ", or the whole title."""
    _, sep, rest = title.partition(TITLE_SEPARATOR)
    return (rest.strip() if sep else "") or title


def derive_chamber(title: str) -> Chamber:
    """Chamber from the first character of the raw title."""
    if title.startswith("H"):
        return Chamber.HOUSE
    if title.startswith("S"):
        return Chamber.SENATE
    return Chamber.UNKNOWN


def parse_entry(item_xml: str) -> FeedEntry:
    """Build a FeedEntry from the body of one <item> element.

    Missing elements leave their fields empty; nothing here raises.
    """
    title = extract_field(item_xml, "title")
    link = extract_field(item_xml, "link")
    synopsis = decode_entities(extract_field(item_xml, "description"))
    publication_date = extract_field(item_xml, "pubDate")
    bill_number = derive_bill_number(title)
    return FeedEntry(
        id=link or f"{bill_number}-{publication_date}",
        bill_number=bill_number,
        title=derive_display_title(title),
        synopsis=synopsis,
        link=link,
        publication_date=publication_date,
        chamber=derive_chamber(title),
        is_health_related=is_health_related(title, synopsis),
    )


def parse_feed(document_text: str) -> list[FeedEntry]:
    """Parse an RSS document into one FeedEntry per <item>, in order."""
    require_text(document_text)
    entries = [parse_entry(m.group(1)) for m in ITEM_RX.finditer(document_text)]
    logger.debug("Parsed %d feed entries", len(entries))
    return entries
