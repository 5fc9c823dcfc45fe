"""Extracts sponsors, history, votes, keywords and titles from a bill page.

The bill lookup page is loosely formatted prose: each field is found by its
label, and every section is extracted on its own so a missing or mangled
section never blocks the others.
"""

from __future__ import annotations

import logging
import re
from functools import partial
from typing import Callable, Optional, TypeVar

from components.models import (
    ActionHistoryEntry,
    BillDetail,
    Chamber,
    Sponsor,
    VoteRecord,
)
from components.sections import FieldGroup, find_section, until
from components.utils import (
    NCLEG_BASE,
    collapse_whitespace,
    member_url,
    require_text,
    search_group,
    to_int,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

PRIMARY_MARKER = "(Primary)"
SPONSOR_LINK_RX = re.compile(r"\[([^\]]+)\]\(/Members/Biography/([HS])/(\d+)\)")
FULL_TITLE_RX = re.compile(
    r"(?:House|Senate)\s+Bill\s+\d+\s*\[([^\]]+)\]", re.I
)
SUMMARY_LINK = r"/Legislation/Bills/Summaries/{year}/[^\s\"')\]]+"
MARKDOWN_LINK_RX = re.compile(r"\[([^\]]+)\]\([^)]*\)")

SECTION_LABELS = (
    "Sponsors", "Attributes", "Counties", "Statutes", "Keywords",
    "History", "Documents", "Votes",
)
_LABELS = "|".join(SECTION_LABELS)
# "Label:" at the start of a line, in any case
_LABEL_LINE = rf"^[ \t]*(?:{_LABELS}):"
# A title-case label alone on its line; upper-case keywords like COUNTIES are not
_BARE_LABEL_LINE = rf"^[ \t]*(?-i:{_LABELS})[ \t\r]*$"
_HEADING_LINE = r"^[ \t]*#{1,6}"
_SECTION_ENDS = (_HEADING_LINE, _LABEL_LINE, _BARE_LABEL_LINE)
_BLANK_LINE = re.compile(r"\r?\n[ \t\r]*\n")


def _normalize_action(text: str) -> str:
    """Single-line action text without a trailing Documents: fragment."""
    action = collapse_whitespace(text)
    return re.sub(r"\s*Documents:.*$", "", action, flags=re.I).strip()


def _first_line(text: str) -> str:
    return text.strip().split("\n", 1)[0].strip()


HISTORY_ROW = FieldGroup(
    name="history",
    pattern=re.compile(
        r"Date:\s*(?P<date>\d{1,2}/\d{1,2}/\d{4})"
        + until("Date:")
        + r"Chamber:\s*(?P<chamber>House|Senate)\b"
        + until("Date:")
        + r"Action:\s*(?P<action>(?:(?!Documents:|Date:)[\s\S])*)",
        re.I,
    ),
    normalizers={"action": _normalize_action, "chamber": Chamber.parse},
    required=("date", "action"),
)

VOTE_ROW = FieldGroup(
    name="votes",
    pattern=re.compile(
        r"Date:\s*(?P<date>\d{1,2}/\d{1,2}/\d{4}[^\n]*?)\s*(?=Subject:|\n)"
        + until("Date:")
        + r"Subject:\s*(?P<subject>[^\n]*?)\s*(?=Aye:|\n|\Z)"
        + until("Date:")
        + r"Aye:[ \t]*(?P<aye>\d+|\S*)"
        + until("Date:")
        + r"\bNo:[ \t]*(?P<no>\d+|\S*)"
        + until("Date:")
        + r"Result:\s*\[(?P<result>[^\]]+)\]",
        re.I,
    ),
    normalizers={
        "date": _first_line,
        "subject": str.strip,
        "aye": to_int,
        "no": to_int,
        "result": str.strip,
    },
    required=("result",),
)


def parse_sponsors(text: str, base_url: str = NCLEG_BASE) -> list[Sponsor]:
    """Extract the sponsor list in document order.

    Sponsors are primary until a "(Primary)" marker has been passed. The
    scan is a fold over the ordered link matches with a single flag that
    only ever goes from primary to co-sponsor.
    """
    section = find_section(
        text, "Sponsors:", ("Attributes:", "Keywords:", "Counties:")
    )
    if section is None:
        return []
    marker_at = section.find(PRIMARY_MARKER)
    sponsors: list[Sponsor] = []
    primary = True
    for m in SPONSOR_LINK_RX.finditer(section):
        if primary and 0 <= marker_at < m.start():
            primary = False
        name, chamber_code, member_id = m.group(1).strip(), m.group(2), m.group(3)
        sponsors.append(
            Sponsor(
                name=name,
                chamber=Chamber.from_code(chamber_code),
                member_id=member_id,
                primary=primary,
                profile_url=member_url(
                    "Biography", chamber_code, member_id, base_url
                ),
            )
        )
    return sponsors


def parse_history(text: str) -> list[ActionHistoryEntry]:
    """Extract action history rows from the History section."""
    section = find_section(
        text, "History", end_patterns=(r"^\s*(?:#{1,6}\s*)?Votes\b",)
    )
    if section is None:
        return []
    return [
        ActionHistoryEntry(
            date=str(row["date"]), chamber=row["chamber"], action=str(row["action"])
        )
        for row in HISTORY_ROW.match_all(section)
    ]


def parse_votes(text: str) -> list[VoteRecord]:
    """Extract roll-call vote records anywhere in the page."""
    return [
        VoteRecord(
            date=str(row["date"]),
            subject=str(row["subject"]),
            aye=to_int(row["aye"]),
            no=to_int(row["no"]),
            result=str(row["result"]),
        )
        for row in VOTE_ROW.match_all(text)
    ]


def parse_keywords(text: str) -> list[str]:
    """Extract the keyword list (semicolon or newline separated)."""
    section = find_section(text, "Keywords:", end_patterns=_SECTION_ENDS)
    if section is None:
        return []
    labels = {label.lower() for label in SECTION_LABELS}
    keywords: list[str] = []
    for fragment in re.split(r"[;\n]", section):
        keyword = MARKDOWN_LINK_RX.sub(r"\1", fragment).strip()
        if not keyword or keyword.startswith("#"):
            continue
        if keyword.endswith(":") and keyword[:-1].strip().lower() in labels:
            continue
        keywords.append(keyword)
    return keywords


def parse_attributes(text: str) -> str:
    """Extract the free-text Attributes field, up to a blank line or label."""
    section = find_section(text, "Attributes:", end_patterns=_SECTION_ENDS)
    if section is None:
        return ""
    return _BLANK_LINE.split(section.lstrip(), maxsplit=1)[0].strip()


def parse_full_title(text: str) -> str:
    """Long title from the "House Bill 2 [An Act ...]" heading."""
    return search_group(FULL_TITLE_RX, text)


def parse_summary_url(
    text: str, base_url: str = NCLEG_BASE, session_year: Optional[str] = None
) -> str:
    """Absolute URL of the linked bill summary document, if any.

    With a session year, only summaries filed under that year count.
    """
    year = re.escape(str(session_year)) if session_year else r"\d{4}"
    m = re.search(SUMMARY_LINK.format(year=year), text)
    return f"{base_url.rstrip('/')}{m.group(0)}" if m else ""


def _run_section(name: str, extractor: Callable[[str], T], text: str, default: T) -> T:
    """Run one section extractor, containing any failure to that section."""
    try:
        return extractor(text)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Bill detail section '%s' failed: %s", name, e)
        return default


def parse_bill_detail(
    document_text: str,
    base_url: str = NCLEG_BASE,
    session_year: Optional[str] = None,
) -> BillDetail:
    """Extract every known section of a bill lookup page.

    Args:
        document_text: Raw bill page text
        base_url: Site root used for sponsor profile and summary URLs
        session_year: Only accept a summary link for this session, if set

    Returns:
        BillDetail; sections not found on the page are left empty
    """
    text = require_text(document_text)
    detail = BillDetail(
        full_title=_run_section("title", parse_full_title, text, ""),
        attributes=_run_section("attributes", parse_attributes, text, ""),
        sponsors=tuple(
            _run_section("sponsors", partial(parse_sponsors, base_url=base_url), text, [])
        ),
        history=tuple(_run_section("history", parse_history, text, [])),
        votes=tuple(_run_section("votes", parse_votes, text, [])),
        keywords=tuple(_run_section("keywords", parse_keywords, text, [])),
        summary_url=_run_section(
            "summary",
            partial(parse_summary_url, base_url=base_url, session_year=session_year),
            text,
            "",
        ),
    )
    logger.debug(
        "Bill detail: %d sponsor(s), %d action(s), %d vote(s), %d keyword(s)",
        len(detail.sponsors),
        len(detail.history),
        len(detail.votes),
        len(detail.keywords),
    )
    return detail
