"""Extracts bills and members from NC General Assembly pages as JSON."""

import json
import logging
import sys
from argparse import ArgumentParser
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from collectors.documents import DocumentError, load_document
from collectors.members import parse_member_list, sort_members, summarize_members
from components.interfaces import Config
from parsers.bill_detail import parse_bill_detail
from parsers.feed_rss import parse_feed

logger = logging.getLogger(__name__)


@dataclass
class Mode:
    """Command-line arguments"""

    kind: str = "feed"
    """Document type to extract: feed, bill or members"""
    source: str = ""
    """Local file path or http(s) URL of the document"""
    chamber: str = "House"
    """Chamber of a member roster (House or Senate)"""
    strategy: Optional[str] = None
    """Member roster layout (block or table); defaults to config.yaml"""
    config: str = "config.yaml"
    """Path to config.yaml"""
    verbose: bool = False
    """Log at DEBUG level"""


def _envelope(source: str, **payload: Any) -> dict[str, Any]:
    """Wrap extracted records with fetch metadata."""
    return {
        "success": True,
        "fetchedAt": datetime.now(timezone.utc).isoformat(),
        "source": source,
        **payload,
    }


def extract(cfg: Config, mode: Mode, document_text: str) -> dict[str, Any]:
    """Run the extractor for the requested document type."""
    match mode:
        case Mode(kind="feed"):
            entries = parse_feed(document_text)
            logger.info("Extracted %d feed entries", len(entries))
            return _envelope(
                mode.source,
                count=len(entries),
                bills=[e.to_dict() for e in entries],
            )
        case Mode(kind="bill"):
            detail = parse_bill_detail(
                document_text,
                base_url=cfg.base_url,
                session_year=cfg.session_year,
            )
            return _envelope(mode.source, **detail.to_dict())
        case Mode(kind="members", chamber=chamber, strategy=strategy):
            members = sort_members(
                parse_member_list(
                    document_text,
                    chamber,
                    strategy or cfg.members.strategy,
                    base_url=cfg.base_url,
                )
            )
            logger.info("Extracted %d %s member(s)", len(members), chamber)
            return _envelope(
                mode.source,
                members=[m.to_dict() for m in members],
                summary=summarize_members(members).to_dict(),
            )
        case _:
            raise ValueError(f"Unknown document type: {mode.kind!r}")


def main(cfg: Config, mode: Mode) -> int:
    """Entry point: load, extract and print one document."""
    try:
        document_text = load_document(mode.source, cfg)
    except DocumentError as e:
        logger.error("%s", e)
        print(json.dumps({"success": False, "error": str(e), "source": mode.source}))
        return 1
    print(json.dumps(extract(cfg, mode, document_text), indent=2))
    return 0


if __name__ == "__main__":
    parser = ArgumentParser(description="NC General Assembly document extractor")
    parser.add_argument(
        "kind", choices=("feed", "bill", "members"), help="Document type to extract"
    )
    parser.add_argument("source", help="Local file path or http(s) URL")
    parser.add_argument(
        "-c",
        "--chamber",
        default="House",
        choices=("House", "Senate"),
        help="Chamber of a member roster",
    )
    parser.add_argument(
        "--strategy",
        choices=("block", "table"),
        default=None,
        help="Member roster layout (defaults to members.strategy in config.yaml)",
    )
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log at DEBUG level"
    )
    args = parser.parse_args()
    run_mode = Mode(**vars(args))
    logging.basicConfig(
        level=logging.DEBUG if run_mode.verbose else logging.INFO,
        format="%(asctime)s [%(threadName)-12s] %(levelname)-8s %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    sys.exit(main(Config(run_mode.config), run_mode))
