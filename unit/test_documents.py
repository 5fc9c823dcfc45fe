"""Test loading documents from disk and over HTTP."""

from unittest.mock import Mock, patch

import pytest
import requests  # type: ignore

from collectors.documents import DocumentError, is_url, load_document


def _response(text="<rss/>", error=None):
    response = Mock()
    response.text = text
    response.raise_for_status.side_effect = error
    return response


class TestLoadDocument:
    """Test the two document sources."""

    def test_local_file(self, tmp_path, config):
        """Test a path is read as UTF-8 text."""
        path = tmp_path / "feed.xml"
        path.write_text("<item><title>H2 - Ação</title></item>", encoding="utf-8")
        assert load_document(str(path), config) == (
            "<item><title>H2 - Ação</title></item>"
        )

    def test_missing_file(self, tmp_path, config):
        """Test an unreadable path raises DocumentError."""
        with pytest.raises(DocumentError):
            load_document(str(tmp_path / "missing.xml"), config)

    def test_url_fetch(self, make_config):
        """Test a URL is fetched once with the configured agent and timeout."""
        cfg = make_config({"user_agent": "TestAgent/2.0", "request_timeout": 7})
        with patch.object(requests.Session, "get", return_value=_response()) as get:
            text = load_document("https://www.ncleg.gov/RSS/Filed", cfg)
        assert text == "<rss/>"
        get.assert_called_once_with(
            "https://www.ncleg.gov/RSS/Filed",
            timeout=7,
            headers={"User-Agent": "TestAgent/2.0"},
        )

    def test_http_error(self, config):
        """Test an error status raises DocumentError."""
        response = _response(error=requests.HTTPError("404 Client Error"))
        with patch.object(requests.Session, "get", return_value=response):
            with pytest.raises(DocumentError, match="404"):
                load_document("https://www.ncleg.gov/missing", config)

    def test_connection_error(self, config):
        """Test a network failure raises DocumentError."""
        with patch.object(
            requests.Session, "get", side_effect=requests.ConnectionError("refused")
        ):
            with pytest.raises(DocumentError):
                load_document("http://localhost:1/feed", config)

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("https://www.ncleg.gov", True),
            ("HTTP://x", True),
            ("feeds/filed.xml", False),
            ("/tmp/https.xml", False),
        ],
    )
    def test_is_url(self, source, expected):
        """Test URLs are told apart from paths."""
        assert is_url(source) is expected
