"""Load raw documents for the extractors from disk or the legislature site."""

import logging
from pathlib import Path

import requests  # type: ignore

from components.interfaces import Config

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """A document could not be read or fetched."""


def is_url(source: str) -> bool:
    """Whether source looks like an http(s) URL rather than a path."""
    return source.lower().startswith(("http://", "https://"))


def fetch_text(url: str, cfg: Config, session: requests.Session | None = None) -> str:
    """GET a page and return its body text.

    One attempt only; retry and caching policy belong to whoever calls this.
    """
    s = session or requests.Session()
    logger.info("Fetching %s", url)
    try:
        r = s.get(
            url,
            timeout=cfg.request_timeout,
            headers={"User-Agent": cfg.user_agent},
        )
        r.raise_for_status()
    except requests.RequestException as e:
        raise DocumentError(f"Could not fetch {url}: {e}") from e
    finally:
        if session is None:
            s.close()
    return r.text


def load_document(source: str, cfg: Config) -> str:
    """Read a document from a local path or URL."""
    if is_url(source):
        return fetch_text(source, cfg)
    path = Path(source)
    logger.info("Reading %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentError(f"Could not read {path}: {e}") from e
