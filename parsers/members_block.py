"""A parser for the card layout of the chamber member list."""

import logging
import re

from components.interfaces import MemberListParser, MemberListStrategy
from components.models import Chamber, MemberRecord, Party
from components.utils import NCLEG_BASE, member_urls, require_text, search_group, to_int

logger = logging.getLogger(__name__)

HEADSHOT_RX = re.compile(r"\[!\[Headshot of")
BIO_ID_RX = re.compile(r"Members/Biography/[HS]/(\d+)")
NAME_RX = re.compile(r"\[([^\]]+)\]\(/Members/Biography/[HS]/\d+\)")
PARTY_RX = re.compile(r"\(([RD])\)")
DISTRICT_RX = re.compile(r"District\s+(\d+)")
COUNTY_RX = re.compile(r"\[([^\]]+)\]\(/Members/CountyRepresentation/[^)]+\)")
OFFICE_RX = re.compile(r"\*\*Office\*\*:\s*Rm\.\s*([^\n*]+)")
PHONE_RX = re.compile(r"\*\*Phone\*\*:\s*([\d()\s-]+)")
ASSISTANT_RX = re.compile(r"\*\*Assistant\*\*:\s*([^\n*]+)")


class MemberBlockParser(MemberListParser):
    """Parser for the roster where each member is a headshot card."""

    strategy = MemberListStrategy.BLOCK
    location = "Member list cards (one headshot caption per member)"

    @staticmethod
    def _parse_block(
        block: str, chamber: Chamber, base_url: str
    ) -> MemberRecord | None:
        """Build a record from one card, or None if it has no name."""
        member_id = search_group(BIO_ID_RX, block)
        name = search_group(NAME_RX, block)
        if not member_id or not name:
            return None
        party = Party.from_code(search_group(PARTY_RX, block))
        office = search_group(OFFICE_RX, block)
        return MemberRecord(
            id=member_id,
            name=name,
            party=party.value if party else "",
            party_code=party.code if party else "",
            chamber=chamber,
            chamber_code=chamber.code,
            district=to_int(search_group(DISTRICT_RX, block)),
            counties=tuple(m.group(1).strip() for m in COUNTY_RX.finditer(block)),
            office=f"Rm. {office}" if office else "",
            phone=search_group(PHONE_RX, block),
            assistant=search_group(ASSISTANT_RX, block),
            **member_urls(chamber.code, member_id, base_url),
        )

    @classmethod
    def parse(
        cls, document_text: str, chamber: Chamber, base_url: str = NCLEG_BASE
    ) -> list[MemberRecord]:
        """Split the page at each headshot caption and parse every card."""
        require_text(document_text)
        chamber = Chamber.parse(chamber)
        members: list[MemberRecord] = []
        for block in HEADSHOT_RX.split(document_text):
            if "Members/Biography" not in block:
                continue
            record = cls._parse_block(block, chamber, base_url)
            if record is None:
                logger.debug("Skipping member card without a name link")
                continue
            members.append(record)
        members = cls.dedupe(members)
        logger.debug("Parsed %d %s member card(s)", len(members), chamber.value)
        return members
