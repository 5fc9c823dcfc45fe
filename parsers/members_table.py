"""A parser for the tabular layout of the chamber member list."""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup  # type: ignore
from bs4.element import Tag  # type: ignore

from components.interfaces import MemberListParser, MemberListStrategy
from components.models import Chamber, MemberRecord, Party
from components.utils import NCLEG_BASE, member_urls, require_text, search_group, to_int

logger = logging.getLogger(__name__)

BIO_HREF_RX = re.compile(r"Biography/([HS])/(\d+)", re.I)
PARTY_RX = re.compile(r"\(([RD])\)")
DISTRICT_RX = re.compile(r"District\s*(\d+)", re.I)
PHONE_RX = re.compile(r"(\d{3}[-.\s]?\d{3}[-.\s]?\d{4})")
PARTY_CELLS = {"R": "R", "D": "D", "REPUBLICAN": "R", "DEMOCRAT": "D"}


class MemberTableParser(MemberListParser):
    """Parser for the roster rendered as one table row per member."""

    strategy = MemberListStrategy.TABLE
    location = "Member list table (one <tr> per member)"

    @staticmethod
    def _row_anchor(row: Tag) -> Optional[tuple[str, str, str]]:
        """Chamber code, id and display name from the row's biography link.

        Photo links carry no text, so the first biography link with a
        visible label wins.
        """
        for a in row.find_all("a", href=BIO_HREF_RX):
            m = BIO_HREF_RX.search(str(a.get("href", "")))
            name = " ".join(a.get_text(" ", strip=True).split())
            if m and name:
                return m.group(1).upper(), m.group(2), name
        return None

    @staticmethod
    def _party_code(row: Tag, row_text: str) -> str:
        """Best-effort party letter: "(R)" in the text, or a bare party cell."""
        code = search_group(PARTY_RX, row_text)
        if code:
            return code
        for cell in row.find_all(["td", "th"]):
            code = PARTY_CELLS.get(cell.get_text(strip=True).upper(), "")
            if code:
                return code
        return ""

    @classmethod
    def parse(
        cls, document_text: str, chamber: Chamber, base_url: str = NCLEG_BASE
    ) -> list[MemberRecord]:
        """Parse every table row that links to a member biography.

        Each record's chamber comes from its biography link, so a mixed
        roster stays consistent; the chamber argument is only validated.
        """
        require_text(document_text)
        chamber = Chamber.parse(chamber)
        soup = BeautifulSoup(document_text, "html.parser")
        members: list[MemberRecord] = []
        for row in soup.find_all("tr"):
            anchor = cls._row_anchor(row)
            if anchor is None:
                continue
            chamber_code, member_id, name = anchor
            row_text = row.get_text(" ", strip=True)
            party = Party.from_code(cls._party_code(row, row_text))
            members.append(
                MemberRecord(
                    id=member_id,
                    name=name,
                    party=party.value if party else "",
                    party_code=party.code if party else "",
                    chamber=Chamber.from_code(chamber_code),
                    chamber_code=chamber_code,
                    district=to_int(search_group(DISTRICT_RX, row_text)),
                    phone=search_group(PHONE_RX, row_text),
                    **member_urls(chamber_code, member_id, base_url),
                )
            )
        members = cls.dedupe(members)
        logger.debug("Parsed %d %s member row(s)", len(members), chamber.value)
        return members
