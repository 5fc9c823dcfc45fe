"""Text primitives shared by every extractor."""

import re
from typing import Any

NCLEG_BASE = "https://www.ncleg.gov"

# Named and numeric escapes the site emits in feed descriptions
_ENTITIES: dict[str, str] = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&#x27;": "'",
    "&apos;": "'",
}
_ENTITY_RX = re.compile("|".join(re.escape(e) for e in _ENTITIES), re.I)

MEMBER_RESOURCES: dict[str, str] = {
    "photo_url": "MemberImage",
    "profile_url": "Biography",
    "committees_url": "Committees",
    "votes_url": "Votes",
    "bills_url": "IntroducedBills",
}


def require_text(text: Any, what: str = "document_text") -> str:
    """Reject None and non-string input before any extraction runs."""
    if text is None:
        raise TypeError(f"{what} must be a str, not None")
    if not isinstance(text, str):
        raise TypeError(f"{what} must be a str, not {type(text).__name__}")
    return text


def extract_field(text: str, label: str) -> str:
    """Return the body of the first <label>...</label> element.

    A CDATA-wrapped body wins over the plain form, since CDATA content may
    hold characters that would otherwise read as markup.

    Args:
        text: Markup to search
        label: Element name, e.g. "title"

    Returns:
        Trimmed body text, or "" if the element is absent
    """
    tag = re.escape(label)
    cdata = re.search(
        rf"<{tag}(?:\s[^>]*)?>\s*<!\[CDATA\[([\s\S]*?)\]\]>\s*</{tag}>", text
    )
    if cdata:
        return cdata.group(1).strip()
    plain = re.search(rf"<{tag}(?:\s[^>]*)?>([\s\S]*?)</{tag}>", text)
    return plain.group(1).strip() if plain else ""


def decode_entities(text: str) -> str:
    """Decode the fixed entity set until nothing decodable is left.

    Running to a fixed point means double-escaped input ("&amp;lt;") is
    fully decoded and a second call is always a no-op.
    """
    while True:
        decoded = _ENTITY_RX.sub(lambda m: _ENTITIES[m.group(0).lower()], text)
        if decoded == text:
            return decoded
        text = decoded


def collapse_whitespace(text: str) -> str:
    """Join all lines and runs of whitespace into single spaces."""
    return re.sub(r"\s+", " ", text).strip()


def to_int(value: Any, default: int = 0) -> int:
    """Parse an integer count, falling back to default on junk."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def search_group(pattern: re.Pattern, text: str, group: int = 1) -> str:
    """First match of pattern in text, trimmed group, or "" if none."""
    m = pattern.search(text)
    if not m or m.group(group) is None:
        return ""
    return m.group(group).strip()


def member_url(
    resource: str, chamber_code: str, member_id: str, base_url: str = NCLEG_BASE
) -> str:
    """Build a /Members/{resource}/{chamber}/{id} URL.

    The photo resource carries a trailing "/Low" size selector.
    """
    url = f"{base_url.rstrip('/')}/Members/{resource}/{chamber_code}/{member_id}"
    if resource == "MemberImage":
        url += "/Low"
    return url


def member_urls(
    chamber_code: str, member_id: str, base_url: str = NCLEG_BASE
) -> dict[str, str]:
    """All derived member URLs keyed by MemberRecord field name."""
    return {
        field_name: member_url(resource, chamber_code, member_id, base_url)
        for field_name, resource in MEMBER_RESOURCES.items()
    }
