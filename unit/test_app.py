"""Test the command-line entry point end to end."""

import json

import pytest

from app import Mode, extract, main


@pytest.mark.integration
class TestApp:
    """Test loading, extracting and printing one document."""

    def test_feed(self, tmp_path, config, document_factory, capsys):
        """Test a feed file prints a success envelope."""
        path = tmp_path / "filed.xml"
        path.write_text(
            document_factory.create_feed([document_factory.create_feed_item()]),
            encoding="utf-8",
        )
        assert main(config, Mode(kind="feed", source=str(path))) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["success"] is True
        assert out["source"] == str(path)
        assert out["fetchedAt"]
        assert out["count"] == 1
        assert out["bills"][0]["billNumber"] == "H 2"

    def test_bill(self, config, document_factory):
        """Test a bill page envelope carries every section."""
        out = extract(
            config, Mode(kind="bill", source="h2.md"), document_factory.create_bill_detail()
        )
        assert out["success"] is True
        assert len(out["sponsors"]) == 4
        assert out["votes"][0]["result"] == "PASS"

    def test_bill_summary_uses_session_year(self, make_config, document_factory):
        """Test the configured session year scopes the summary link."""
        page = document_factory.create_bill_detail()
        mode = Mode(kind="bill", source="h2.md")
        current = extract(make_config({"session_year": "2025"}), mode, page)
        other = extract(make_config({"session_year": "2023"}), mode, page)
        assert current["summaryUrl"].endswith("/Summaries/2025/H2")
        assert other["summaryUrl"] == ""

    def test_members_sorted_with_summary(self, make_config, document_factory):
        """Test the roster is sorted and summarized."""
        cfg = make_config({"members": {"strategy": "table"}})
        page = document_factory.create_member_table(
            [
                document_factory.create_member_row("Phil Berger", "390"),
                document_factory.create_member_row("Ann Adams", "11", party="D"),
            ]
        )
        out = extract(cfg, Mode(kind="members", source="s.html", chamber="Senate"), page)
        assert [m["name"] for m in out["members"]] == ["Ann Adams", "Phil Berger"]
        assert out["summary"] == {
            "total": 2,
            "house": 0,
            "senate": 2,
            "republican": 1,
            "democrat": 1,
        }

    def test_strategy_flag_overrides_config(self, config, document_factory):
        """Test --strategy wins over members.strategy."""
        page = document_factory.create_member_table([document_factory.create_member_row()])
        mode = Mode(kind="members", source="s.html", chamber="Senate", strategy="table")
        assert len(extract(config, mode, page)["members"]) == 1

    def test_load_failure(self, tmp_path, config, capsys):
        """Test an unreadable source prints a failure envelope and exits 1."""
        source = str(tmp_path / "missing.xml")
        assert main(config, Mode(kind="feed", source=source)) == 1
        out = json.loads(capsys.readouterr().out)
        assert out["success"] is False
        assert out["source"] == source
        assert out["error"]
