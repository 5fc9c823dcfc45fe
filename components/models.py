"""Data models for records extracted from the NC General Assembly website."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Chamber(str, Enum):
    """Legislative chamber a bill, action or member belongs to."""

    HOUSE = "House"
    SENATE = "Senate"
    UNKNOWN = "Unknown"

    @property
    def code(self) -> str:
        """Single-letter code used in site URLs ("H", "S")."""
        return {Chamber.HOUSE: "H", Chamber.SENATE: "S"}.get(self, "")

    @staticmethod
    def from_code(code: str) -> Chamber:
        """Get the chamber for a URL letter code."""
        match code.strip().upper():
            case "H":
                return Chamber.HOUSE
            case "S":
                return Chamber.SENATE
            case _:
                return Chamber.UNKNOWN

    @staticmethod
    def parse(value: Chamber | str) -> Chamber:
        """Get a House/Senate chamber from an enum, name or letter code."""
        if isinstance(value, Chamber):
            chamber = value
        else:
            cleaned = str(value).strip().lower()
            chamber = {
                "house": Chamber.HOUSE,
                "h": Chamber.HOUSE,
                "senate": Chamber.SENATE,
                "s": Chamber.SENATE,
            }.get(cleaned, Chamber.UNKNOWN)
        if chamber is Chamber.UNKNOWN:
            raise ValueError(f"Invalid chamber: {value!r}")
        return chamber


class Party(str, Enum):
    """Party affiliation shown next to a member's name."""

    REPUBLICAN = "Republican"
    DEMOCRAT = "Democrat"

    @property
    def code(self) -> str:
        """Single-letter party marker ("R", "D")."""
        return self.value[0]

    @staticmethod
    def from_code(code: str) -> Party | None:
        """Get the party for a marker letter, or None if unrecognized."""
        return {"R": Party.REPUBLICAN, "D": Party.DEMOCRAT}.get(
            code.strip().upper()
        )


@dataclass(frozen=True)
class FeedEntry:
    """One bill item from an RSS feed."""

    id: str  # link, or "{bill_number}-{publication_date}" without one
    bill_number: str  # e.g. "H 2"
    title: str  # display title, bill number prefix removed
    synopsis: str
    link: str
    publication_date: str  # literal pubDate text
    chamber: Chamber
    is_health_related: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON wire shape."""
        return {
            "id": self.id,
            "billNumber": self.bill_number,
            "title": self.title,
            "synopsis": self.synopsis,
            "link": self.link,
            "publicationDate": self.publication_date,
            "chamber": self.chamber.value,
            "isHealthRelated": self.is_health_related,
        }


@dataclass(frozen=True)
class Sponsor:
    """A member listed in a bill's Sponsors section."""

    name: str
    chamber: Chamber
    member_id: str
    primary: bool
    profile_url: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON wire shape."""
        return {
            "name": self.name,
            "chamber": self.chamber.value,
            "memberId": self.member_id,
            "primary": self.primary,
            "profileUrl": self.profile_url,
        }


@dataclass(frozen=True)
class ActionHistoryEntry:
    """A single row of a bill's action history."""

    date: str  # kept as printed on the page, e.g. "2/12/2025"
    chamber: Chamber
    action: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON wire shape."""
        return {
            "date": self.date,
            "chamber": self.chamber.value,
            "action": self.action,
        }


@dataclass(frozen=True)
class VoteRecord:
    """A roll-call vote listed on a bill page."""

    date: str
    subject: str
    aye: int
    no: int
    result: str  # "PASS", "FAIL", ...

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON wire shape."""
        return {
            "date": self.date,
            "subject": self.subject,
            "aye": self.aye,
            "no": self.no,
            "result": self.result,
        }


@dataclass(frozen=True)
class BillDetail:
    """Everything extracted from a single bill lookup page.

    Each part is extracted independently, so any of them may be empty while
    the others are populated.
    """

    full_title: str = ""
    attributes: str = ""
    sponsors: tuple[Sponsor, ...] = ()
    history: tuple[ActionHistoryEntry, ...] = ()
    votes: tuple[VoteRecord, ...] = ()
    keywords: tuple[str, ...] = ()
    summary_url: str = ""

    @property
    def primary_sponsors(self) -> tuple[Sponsor, ...]:
        """Sponsors listed ahead of the "(Primary)" marker."""
        return tuple(s for s in self.sponsors if s.primary)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON wire shape."""
        return {
            "fullTitle": self.full_title,
            "attributes": self.attributes,
            "sponsors": [s.to_dict() for s in self.sponsors],
            "history": [h.to_dict() for h in self.history],
            "votes": [v.to_dict() for v in self.votes],
            "keywords": list(self.keywords),
            "summaryUrl": self.summary_url,
        }


@dataclass(frozen=True)
class MemberRecord:
    """A member of the House or Senate from a chamber roster page."""

    id: str  # numeric member id from the biography link
    name: str
    party: str  # "Republican", "Democrat", or "" when not shown
    party_code: str  # "R", "D", or ""
    chamber: Chamber
    chamber_code: str  # "H" or "S"
    district: int = 0  # 0 when unknown
    counties: tuple[str, ...] = ()
    office: str = ""
    phone: str = ""
    assistant: str = ""
    photo_url: str = ""
    profile_url: str = ""
    committees_url: str = ""
    votes_url: str = ""
    bills_url: str = ""

    @property
    def last_name(self) -> str:
        """Last whitespace-separated token of the display name."""
        parts = self.name.split()
        return parts[-1] if parts else ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON wire shape."""
        return {
            "id": self.id,
            "name": self.name,
            "party": self.party,
            "partyCode": self.party_code,
            "chamber": self.chamber.value,
            "chamberCode": self.chamber_code,
            "district": self.district,
            "counties": list(self.counties),
            "office": self.office,
            "phone": self.phone,
            "assistant": self.assistant,
            "photoUrl": self.photo_url,
            "profileUrl": self.profile_url,
            "committeesUrl": self.committees_url,
            "votesUrl": self.votes_url,
            "billsUrl": self.bills_url,
        }


@dataclass(frozen=True)
class MemberSummary:
    """Head counts over a member list."""

    total: int = 0
    house: int = 0
    senate: int = 0
    republican: int = 0
    democrat: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to the JSON wire shape."""
        return {
            "total": self.total,
            "house": self.house,
            "senate": self.senate,
            "republican": self.republican,
            "democrat": self.democrat,
        }
