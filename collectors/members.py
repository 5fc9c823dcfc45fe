"""Collect member records from a chamber roster page."""

import logging
from typing import Iterable

from components.interfaces import MemberListParser, MemberListStrategy
from components.models import Chamber, MemberRecord, MemberSummary, Party
from components.utils import NCLEG_BASE
from parsers.members_block import MemberBlockParser
from parsers.members_table import MemberTableParser

logger = logging.getLogger(__name__)

MEMBER_PARSERS: dict[MemberListStrategy, type[MemberListParser]] = {
    parser.strategy: parser for parser in (MemberBlockParser, MemberTableParser)
}


def parse_member_list(
    document_text: str,
    chamber: Chamber | str,
    strategy: MemberListStrategy | str = MemberListStrategy.BLOCK,
    base_url: str = NCLEG_BASE,
) -> list[MemberRecord]:
    """Parse a roster page with the layout the caller says it has.

    The layout is never guessed from the document; pick the strategy from
    config or the call site.
    """
    parser = MEMBER_PARSERS[MemberListStrategy.parse(strategy)]
    logger.debug("Parsing %s roster with %s", chamber, parser.__name__)
    return parser.parse(document_text, Chamber.parse(chamber), base_url)


def sort_members(members: Iterable[MemberRecord]) -> list[MemberRecord]:
    """Order members by last name (stable for ties)."""
    return sorted(members, key=lambda m: m.last_name.casefold())


def summarize_members(members: Iterable[MemberRecord]) -> MemberSummary:
    """Count members per chamber and party."""
    members = list(members)
    return MemberSummary(
        total=len(members),
        house=sum(1 for m in members if m.chamber is Chamber.HOUSE),
        senate=sum(1 for m in members if m.chamber is Chamber.SENATE),
        republican=sum(1 for m in members if m.party_code == Party.REPUBLICAN.code),
        democrat=sum(1 for m in members if m.party_code == Party.DEMOCRAT.code),
    )
