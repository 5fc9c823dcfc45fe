"""Base interface for member roster parsers and the config.yaml wrapper."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
import logging

from yaml import safe_load  # type: ignore

from components.models import Chamber, MemberRecord
from components.utils import NCLEG_BASE

logger = logging.getLogger(__name__)


class MemberListStrategy(str, Enum):
    """Which layout of the chamber roster page a parser understands."""

    BLOCK = "block"
    """Card layout: one headshot caption per member"""
    TABLE = "table"
    """Tabular layout: one <tr> per member"""

    @staticmethod
    def parse(value: MemberListStrategy | str) -> MemberListStrategy:
        """Get a strategy from its enum value or name."""
        if isinstance(value, MemberListStrategy):
            return value
        try:
            return MemberListStrategy(str(value).strip().lower())
        except ValueError as e:
            raise ValueError(
                f"Unknown member list strategy: {value!r} "
                f"(expected one of {[s.value for s in MemberListStrategy]})"
            ) from e


class MemberListParser(ABC):
    """Base interface that all roster parsers must implement."""

    # Mandatory fields for each implementation of this interface:
    strategy: MemberListStrategy
    """Must declare which roster layout it parses"""
    location: str
    """Plaintext, human-readable description of the layout"""

    def __init_subclass__(cls, **kwargs):
        """Ensures each subclass sets required class attributes at startup"""
        super().__init_subclass__(**kwargs)
        if not hasattr(cls, "strategy"):
            raise TypeError(f"{cls.__name__} must set class attribute 'strategy'")
        if not isinstance(getattr(cls, "strategy"), MemberListStrategy):
            raise TypeError(
                f"{cls.__name__}.strategy must be a MemberListStrategy enum value"
            )
        if not hasattr(cls, "location"):
            raise TypeError(f"{cls.__name__} must set class attribute 'location'")
        if not isinstance(getattr(cls, "location"), str):
            raise TypeError(f"{cls.__name__}.location must be a str")

    @classmethod
    @abstractmethod
    def parse(
        cls, document_text: str, chamber: Chamber, base_url: str = NCLEG_BASE
    ) -> list[MemberRecord]:
        """Parse a roster document.

        Args:
            document_text: Raw roster page text
            chamber: Chamber the roster belongs to
            base_url: Site root used for derived member URLs

        Returns:
            Member records in document order, nameless entries dropped
        """

    @staticmethod
    def dedupe(members: list[MemberRecord]) -> list[MemberRecord]:
        """Keep the first record for each (chamber code, id) pair."""
        seen: set[tuple[str, str]] = set()
        unique: list[MemberRecord] = []
        for member in members:
            key = (member.chamber_code, member.id)
            if key in seen:
                logger.debug("Dropping duplicate member %s/%s", *key)
                continue
            seen.add(key)
            unique.append(member)
        return unique


class Config:
    """Provides an interface and safe defaults for config.yaml values."""

    def __init__(self, config_path: str):
        with open(config_path, "r", encoding="utf-8") as f:
            self.config: dict[str, str | dict[str, str]] = safe_load(f) or {}

    @property
    def base_url(self) -> str:
        """Base URL for the legislature website."""
        return str(self.config.get("base_url", NCLEG_BASE)).rstrip("/")

    @property
    def session_year(self) -> str:
        """Legislative session year."""
        return str(self.config.get("session_year", "2025"))

    @property
    def user_agent(self) -> str:
        """User-Agent header sent when fetching documents."""
        return str(self.config.get("user_agent", "NCLegTracker/1.0"))

    @property
    def request_timeout(self) -> int:
        """Seconds to wait for a document fetch."""
        return int(self.config.get("request_timeout", 20))

    class Members:
        """Member roster configuration."""

        def __init__(self, config: dict[str, str | dict[str, str]]) -> None:
            self.members = config.get("members", {}) or {}

        @property
        def strategy(self) -> MemberListStrategy:
            """Which roster layout to parse."""
            return MemberListStrategy.parse(self.members.get("strategy", "block"))

    @property
    def members(self) -> Config.Members:
        """Member roster configuration."""
        return Config.Members(self.config)
