import re
from typing import Iterable

_NON_TAG_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")


def generate_tag(name: str) -> str:
    """Slug used as a short reference for a product or model, e.g. "Red Dress 2" -> "red-dress-2"."""
    tag = _NON_TAG_CHARS.sub("", name.lower()).strip()
    tag = _WHITESPACE.sub("-", tag)
    tag = _DASHES.sub("-", tag)
    return tag.strip("-")


def generate_unique_name(base_name: str, existing_names: Iterable[str]) -> str:
    """Return base_name, or base_name with the next free numeric suffix.

    existing_names are the owner's other records; comparison is case-insensitive
    and the bare name counts as number 1.
    """
    trimmed = base_name.strip()
    names = [n for n in existing_names if n]
    if not any(n.lower() == trimmed.lower() for n in names):
        return trimmed

    pattern = re.compile(rf"^{re.escape(trimmed)}( \d+)?$", re.IGNORECASE)
    highest = 1
    for name in names:
        match = pattern.match(name)
        if match:
            number = int(match.group(1)) if match.group(1) else 1
            highest = max(highest, number)

    return f"{trimmed} {highest + 1}"
