"""Label-anchored extraction combinators.

The site's pages have no stable schema: a field is whatever sits between its
label and the next label. These helpers express that once so the feed, bill
and roster extractors don't each hand-roll it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

logger = logging.getLogger(__name__)


def _alternation(labels: Iterable[str]) -> str:
    """Regex alternation of literal labels."""
    return "|".join(re.escape(label) for label in labels)


def until(*labels: str) -> str:
    """Regex fragment for a lazy run of text that never crosses a label.

    Used between the pieces of a repeating group so one group can't swallow
    the start of the next.
    """
    return rf"(?:(?!{_alternation(labels)})[\s\S])*?"


def find_section(
    text: str,
    start_label: str,
    end_labels: Iterable[str] = (),
    end_patterns: Iterable[str] = (),
) -> Optional[str]:
    """Return the text between a label and the earliest following boundary.

    Args:
        text: Document text
        start_label: Literal label opening the section (case-insensitive)
        end_labels: Literal labels that close the section
        end_patterns: Extra regex boundaries (e.g. anchored headings)

    Returns:
        Section body (possibly ""), or None if start_label is absent
    """
    start = re.search(re.escape(start_label), text, re.I)
    if not start:
        return None
    body = text[start.end():]
    boundaries = [re.escape(label) for label in end_labels]
    boundaries.extend(end_patterns)
    if boundaries:
        end = re.search("|".join(boundaries), body, re.I | re.M)
        if end:
            body = body[: end.start()]
    return body


@dataclass
class FieldGroup:
    """A repeating group of labeled fields, e.g. one vote or history row.

    Each group has:
    - A compiled template with named groups, scanned left to right
    - Normalizers applied per named field after a match
    - Required fields; a group missing any of them after normalization
      is dropped
    """

    name: str
    pattern: re.Pattern
    normalizers: dict[str, Callable[[str], object]] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def match_all(self, text: str) -> list[dict[str, object]]:
        """Extract every group in document order.

        Args:
            text: Text to scan

        Returns:
            One dict of normalized field values per kept match
        """
        groups: list[dict[str, object]] = []
        for match in self.pattern.finditer(text):
            data: dict[str, object] = {
                key: (value or "") for key, value in match.groupdict().items()
            }
            for field_name, normalizer in self.normalizers.items():
                if field_name not in data:
                    continue
                try:
                    data[field_name] = normalizer(data[field_name])
                except (TypeError, ValueError, AttributeError) as e:
                    # Keep the raw capture; one odd row shouldn't end the scan
                    logger.debug(
                        "%s: normalizer for %s failed: %s", self.name, field_name, e
                    )
            if any(not data.get(req) for req in self.required):
                continue
            groups.append(data)
        logger.debug("%s: %d group(s) matched", self.name, len(groups))
        return groups
