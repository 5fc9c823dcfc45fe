"""Test RSS feed parsing."""

import pytest

from components.models import Chamber
from parsers.feed_rss import derive_bill_number, derive_display_title, parse_feed
from unit.fixtures.document_factory import DocumentFactory


class TestFeedEntries:
    """Test splitting a feed into entries."""

    def test_single_entry(self, document_factory: DocumentFactory):
        """Test the canonical single-entry feed."""
        feed = document_factory.create_feed([document_factory.create_feed_item()])
        entries = parse_feed(feed)
        assert len(entries) == 1
        entry = entries[0]
        assert entry.bill_number == "H 2"
        assert entry.title == "Medicaid Transformation"
        assert entry.chamber == Chamber.HOUSE
        assert entry.is_health_related
        assert entry.link == "https://x/h2"
        assert entry.id == "https://x/h2"
        assert entry.publication_date == "Mon, 01 Jan 2025 00:00:00"

    def test_order_and_chamber(self, document_factory):
        """Test entries keep document order and chamber follows the title."""
        titles = ["S12 - Bridge Repair", "H7 - Hospital Funding", "SJR3 - Honor"]
        feed = document_factory.create_feed(
            [document_factory.create_feed_item(title=t, link=None) for t in titles]
        )
        entries = parse_feed(feed)
        assert [e.chamber for e in entries] == [
            Chamber.SENATE,
            Chamber.HOUSE,
            Chamber.SENATE,
        ]
        assert [e.title for e in entries] == ["Bridge Repair", "Hospital Funding", "Honor"]

    def test_channel_title_ignored(self, document_factory):
        """Test only <item> bodies become entries."""
        assert parse_feed(document_factory.create_feed([])) == []

    def test_cdata_description(self, document_factory):
        """Test CDATA bodies are read and entities decoded."""
        item = document_factory.create_feed_item(
            description="Health &amp; Human Services", cdata=True
        )
        entry = parse_feed(document_factory.create_feed([item]))[0]
        assert entry.synopsis == "Health & Human Services"
        assert entry.bill_number == "H 2"


class TestMalformedEntries:
    """Test entries missing parts still come through."""

    def test_missing_date(self, document_factory):
        """Test a missing date leaves the field empty."""
        item = document_factory.create_feed_item(pub_date=None)
        entries = parse_feed(document_factory.create_feed([item]))
        assert len(entries) == 1
        assert entries[0].publication_date == ""
        assert entries[0].bill_number == "H 2"

    def test_id_without_link(self, document_factory):
        """Test the id falls back to bill number and date."""
        item = document_factory.create_feed_item(link=None)
        entry = parse_feed(document_factory.create_feed([item]))[0]
        assert entry.id == "H 2-Mon, 01 Jan 2025 00:00:00"

    def test_id_stable_across_fetches(self, document_factory):
        """Test the same item parsed twice gets the same id."""
        item = document_factory.create_feed_item(link=None)
        feed = document_factory.create_feed([item])
        assert parse_feed(feed)[0].id == parse_feed(feed)[0].id

    def test_empty_item(self):
        """Test an empty item yields a record of empty fields."""
        entry = parse_feed("<item></item>")[0]
        assert entry.title == ""
        assert entry.bill_number == ""
        assert entry.chamber == Chamber.UNKNOWN
        assert not entry.is_health_related

    def test_garbage_document(self):
        """Test a document without items gives an empty list."""
        assert parse_feed("not a feed at all") == []

    def test_none_rejected(self):
        """Test None input raises TypeError."""
        with pytest.raises(TypeError):
            parse_feed(None)


class TestTitleDerivation:
    """Test bill number and display title derivation."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("H2 - Medicaid Transformation", "H 2"),
            ("S 45 - Rural Clinics", "S 45"),
            ("HB12 - Dental Care", "HB 12"),
            ("sb7 - Lowercase", "SB 7"),
            ("Resolution 3 - Honoring", "Resolution 3"),
        ],
    )
    def test_bill_number(self, title, expected):
        """Test the leading prefix and number are normalized."""
        assert derive_bill_number(title) == expected

    def test_display_title_without_separator(self):
        """Test the whole title is used when there is no separator."""
        assert derive_display_title("Untitled Bill") == "Untitled Bill"

    def test_display_title_splits_once(self):
        """Test only the first separator splits."""
        assert derive_display_title("H2 - Health - Care") == "Health - Care"
