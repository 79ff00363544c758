import re
from typing import Tuple

DEFAULT_QUALITY = "hdtv"

_EPISODE_ID_PATTERN = re.compile(r"S[0-9]{2}E[0-9]{2}")
_QUALITY_PATTERN = re.compile(r"[0-9]{3,4}p")


def _first_match(pattern: re.Pattern, label: str) -> str:
    match = pattern.search(label)
    return match.group(0) if match else ""


def extract_episode_id(label: str) -> str:
    """First "S##E##" token in label, or "" if there is none."""
    return _first_match(_EPISODE_ID_PATTERN, label)


def extract_quality(label: str) -> str:
    """First resolution token ("720p", "1080p") in label, or ""."""
    return _first_match(_QUALITY_PATTERN, label)


def quality_or_default(label: str) -> str:
    return extract_quality(label) or DEFAULT_QUALITY


def episode_key(label: str) -> Tuple[str, str]:
    """
    Build the (identifier, quality) join key for a release label.

    Args:
        label (str): Anchor text or magnet title, e.g. "Show S02E05 1080p"

    Returns:
        Tuple[str, str]: ("S02E05", "1080p"); quality falls back to "hdtv"
    """
    return extract_episode_id(label), quality_or_default(label)
