"""Test the label-anchored extraction combinators."""

import re

from components.sections import FieldGroup, find_section, until


class TestFindSection:
    """Test isolating the text after a label."""

    def test_missing_label(self):
        """Test an absent label gives None rather than an empty section."""
        assert find_section("Keywords: HEALTH", "Sponsors:") is None

    def test_earliest_end_label_wins(self):
        """Test the section stops at the first of several boundaries."""
        text = "Sponsors: A B Counties: Wake Attributes: Public"
        section = find_section(text, "Sponsors:", ("Attributes:", "Counties:"))
        assert section == " A B "

    def test_runs_to_end_without_boundary(self):
        """Test a section with no closing label runs to the end."""
        assert find_section("Keywords: HEALTH; CARE", "Keywords:") == " HEALTH; CARE"

    def test_label_case_insensitive(self):
        """Test labels match regardless of case."""
        assert find_section("SPONSORS: A", "Sponsors:") == " A"

    def test_end_pattern_anchored_to_line(self):
        """Test regex boundaries can be anchored to line starts."""
        text = "History\nAction: Filed Votes pending\n## Votes\nDate: 1/1/2025"
        section = find_section(text, "History", end_patterns=(r"^\s*#{1,6}",))
        assert section == "\nAction: Filed Votes pending\n"

    def test_empty_section(self):
        """Test a label directly followed by its boundary is empty, not None."""
        assert find_section("Keywords:Counties: Wake", "Keywords:", ("Counties:",)) == ""


class TestUntil:
    """Test the non-crossing filler fragment."""

    def test_does_not_cross_label(self):
        """Test a template can't bridge two groups."""
        rx = re.compile("A:" + until("A:") + "B:")
        assert rx.search("A: x B:")
        assert rx.search("A: x A: y B:").start() == 5


class TestFieldGroup:
    """Test repeating groups of labeled fields."""

    ROW = re.compile(r"Name:\s*(?P<name>\w*)" + until("Name:") + r"Count:\s*(?P<count>\S+)")

    def test_groups_in_order(self):
        """Test every group is returned in document order."""
        group = FieldGroup("rows", self.ROW, normalizers={"count": int})
        rows = group.match_all("Name: a Count: 1\nName: b Count: 2")
        assert rows == [{"name": "a", "count": 1}, {"name": "b", "count": 2}]

    def test_normalizer_failure_keeps_raw(self):
        """Test a failing normalizer leaves the raw capture in place."""
        group = FieldGroup("rows", self.ROW, normalizers={"count": int})
        rows = group.match_all("Name: a Count: many")
        assert rows == [{"name": "a", "count": "many"}]

    def test_required_field_missing(self):
        """Test groups missing a required field are dropped."""
        group = FieldGroup("rows", self.ROW, required=("name",))
        rows = group.match_all("Name: Count: 1\nName: b Count: 2")
        assert rows == [{"name": "b", "count": "2"}]

    def test_no_matches(self):
        """Test text without any group yields an empty list."""
        assert FieldGroup("rows", self.ROW).match_all("nothing here") == []
