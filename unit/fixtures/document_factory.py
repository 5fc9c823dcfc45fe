"""Factory for creating test feed, bill page and roster documents."""

from typing import Optional, Sequence

from unit.fixtures import BillSection


class DocumentFactory:
    """Factory for building raw documents the way the site renders them."""

    @staticmethod
    def create_feed_item(
        title: str = "H2 - Medicaid Transformation",
        link: Optional[str] = "https://x/h2",
        description: Optional[str] = "Expands Medicaid coverage.",
        pub_date: Optional[str] = "Mon, 01 Jan 2025 00:00:00",
        cdata: bool = False,
    ) -> str:
        """Create one <item> element; None leaves an element out."""

        def element(tag: str, body: Optional[str]) -> str:
            if body is None:
                return ""
            if cdata:
                body = f"<![CDATA[{body}]]>"
            return f"<{tag}>{body}</{tag}>"

        return (
            "<item>"
            + element("title", title)
            + element("link", link)
            + element("description", description)
            + element("pubDate", pub_date)
            + "</item>"
        )

    @staticmethod
    def create_feed(items: Sequence[str]) -> str:
        """Wrap items in an RSS channel."""
        body = "\n".join(items)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            "<rss version=\"2.0\"><channel>\n"
            "<title>NCGA Bills Filed</title>\n"
            "<link>https://www.ncleg.gov</link>\n"
            f"{body}\n"
            "</channel></rss>"
        )

    @staticmethod
    def create_sponsors(
        primary: Sequence[tuple[str, str]] = (
            ("Donny Lambeth", "436"),
            ("Larry Potts", "694"),
        ),
        cosponsors: Sequence[tuple[str, str]] = (
            ("Wayne Sasser", "749"),
            ("Kristin Baker", "760"),
        ),
        chamber_code: str = "H",
    ) -> str:
        """Create a Sponsors section with one "(Primary)" marker."""

        def links(people: Sequence[tuple[str, str]]) -> str:
            return " ".join(
                f"[{name}](/Members/Biography/{chamber_code}/{member_id})"
                for name, member_id in people
            )

        text = f"Sponsors:\n{links(primary)} (Primary)\n"
        if cosponsors:
            text += f"{links(cosponsors)}\n"
        return text

    @staticmethod
    def create_history_row(
        action_date: str = "2/12/2025",
        chamber: str = "House",
        action: str = "Filed",
        documents: bool = False,
    ) -> str:
        """Create one action history row."""
        row = f"Date: {action_date}\nChamber: {chamber}\nAction: {action}\n"
        if documents:
            row += "Documents: [Filed](/Sessions/2025/Bills/House/PDF/H2v0.pdf)\n"
        return row + "\n"

    @staticmethod
    def create_vote_row(
        vote_date: str = "3/5/2025 10:14 AM",
        subject: str = "Second Reading",
        aye: int = 61,
        no: int = 2,
        result: str = "PASS",
    ) -> str:
        """Create one roll-call vote row."""
        return (
            f"Date: {vote_date}\n"
            f"Subject: {subject}\n"
            f"Aye: {aye}\n"
            f"No: {no}\n"
            f"Result: [{result}](/Legislation/Votes/RollCallVoteTranscript/2025/H/42)\n"
            "\n"
        )

    @staticmethod
    def create_bill_detail(
        bill_number: int = 2,
        full_title: str = "Medicaid Transformation and Access Act",
        omit: Sequence[BillSection] = (),
        sponsors: Optional[str] = None,
        history: Optional[Sequence[str]] = None,
        votes: Optional[Sequence[str]] = None,
    ) -> str:
        """Create a bill lookup page; sections in omit are left out."""
        parts = []
        if BillSection.TITLE not in omit:
            parts.append(f"# House Bill {bill_number} [{full_title}]\n\n")
        if BillSection.SPONSORS not in omit:
            parts.append((sponsors or DocumentFactory.create_sponsors()) + "\n")
        if BillSection.ATTRIBUTES not in omit:
            parts.append("Attributes: Public; Ratified\n\n")
        parts.append("Counties: No counties specifically cited\n\n")
        if BillSection.KEYWORDS not in omit:
            parts.append(
                "Keywords:\n"
                "HEALTH; MEDICAID; [INSURANCE](/Legislation/Keywords/INSURANCE)\n\n"
            )
        if BillSection.HISTORY not in omit:
            rows = history
            if rows is None:
                rows = [
                    DocumentFactory.create_history_row(documents=True),
                    DocumentFactory.create_history_row(
                        "2/13/2025", "House", "Passed 1st Reading"
                    ),
                    DocumentFactory.create_history_row(
                        "3/20/2025", "Senate", "Ref To Com On Rules and Operations"
                    ),
                ]
            parts.append("## History\n\n" + "".join(rows))
        if BillSection.VOTES not in omit:
            rows = votes
            if rows is None:
                rows = [DocumentFactory.create_vote_row()]
            parts.append("## Votes\n\n" + "".join(rows))
        if BillSection.SUMMARY not in omit:
            parts.append(
                f"[Bill Summary](/Legislation/Bills/Summaries/2025/H{bill_number})\n"
            )
        return "".join(parts)

    @staticmethod
    def create_member_card(
        name: Optional[str] = "Donny Lambeth",
        member_id: str = "436",
        chamber_code: str = "H",
        party: Optional[str] = "R",
        district: int = 75,
        counties: Sequence[str] = ("Forsyth",),
        office: str = "2301 Legislative Building",
        phone: str = "(919) 733-5747",
        assistant: str = "Jane Doe",
    ) -> str:
        """Create one headshot card; name=None drops the name link."""
        bio = f"/Members/Biography/{chamber_code}/{member_id}"
        alt = name or "Vacant Seat"
        lines = [
            f"[![Headshot of {alt}](/Members/MemberImage/{chamber_code}/"
            f"{member_id}/Low)]({bio})"
        ]
        if name is not None:
            lines.append(f"[{name}]({bio})" + (f" ({party})" if party else ""))
        lines.append(f"District {district}")
        lines.extend(
            f"[{county}](/Members/CountyRepresentation/{chamber_code}/{i})"
            for i, county in enumerate(counties, start=1)
        )
        lines.append(f"**Office**: Rm. {office}")
        lines.append(f"**Phone**: {phone}")
        lines.append(f"**Assistant**: {assistant}")
        return "\n".join(lines) + "\n\n"

    @staticmethod
    def create_member_cards(cards: Sequence[str]) -> str:
        """Wrap cards in a roster page."""
        return "# House Members\n\nFilter by county\n\n" + "".join(cards)

    @staticmethod
    def create_member_row(
        name: Optional[str] = "Phil Berger",
        member_id: str = "390",
        chamber_code: str = "S",
        party: str = "R",
        district: int = 26,
        phone: str = "919-733-5708",
    ) -> str:
        """Create one roster table row; name=None leaves only a photo link."""
        bio = f"/Members/Biography/{chamber_code}/{member_id}"
        anchor = f'<a href="{bio}"><img src="/Members/MemberImage/{chamber_code}/{member_id}/Low"/></a>'
        if name is not None:
            anchor += f'<a href="{bio}">{name}</a>'
        return (
            f"<tr><td>{anchor}</td><td>{party}</td>"
            f"<td>District {district}</td><td>{phone}</td></tr>"
        )

    @staticmethod
    def create_member_table(rows: Sequence[str]) -> str:
        """Wrap rows in a roster table with a header row."""
        body = "\n".join(rows)
        return (
            "<html><body><table>\n"
            "<tr><th>Name</th><th>Party</th><th>District</th><th>Phone</th></tr>\n"
            f"{body}\n"
            "</table></body></html>"
        )
