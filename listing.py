"""
Listing correlator for eztv show pages.

A show page lists every release as a table row. Inside a row the link to the
episode page and the magnet link are sibling anchors without any explicit
pairing, so both are joined through the (episode identifier, quality) key
parsed from their labels: the visible text of the episode link and the
``title`` attribute of the magnet link.
"""

import logging
from typing import Iterable

from bs4 import BeautifulSoup, Tag

from models import EpisodeIndex, EpisodeVariant
from release_tokens import episode_key

logger = logging.getLogger(__name__)

EPISODE_ROW_SELECTOR = "tr.forum_header_border"
MAGNET_CLASS = "magnet"


def _has_class(tag: Tag, name: str) -> bool:
    return name in (tag.get("class") or [])


def _row_anchors(row: Tag) -> Iterable[Tag]:
    """Anchors nested below the row's child elements, in document order."""
    for child in row.find_all(True, recursive=False):
        yield from child.find_all("a")


def _add_episode_link(index: EpisodeIndex, anchor: Tag, label: str) -> bool:
    href = anchor.get("href")
    if href is None:
        return False

    identifier, quality = episode_key(label)
    existing = index.get(identifier, quality)
    if existing is not None:
        # magnet ist evtl. schon vorher gekommen
        existing.title = label
        existing.url = href
    else:
        index.put(identifier, quality, EpisodeVariant(title=label, url=href))
    return True


def _add_magnet_link(index: EpisodeIndex, anchor: Tag) -> bool:
    label = anchor.get("title")
    if label is None:
        return False
    href = anchor.get("href")
    if href is None:
        return False

    identifier, quality = episode_key(label)
    existing = index.get(identifier, quality)
    if existing is not None and existing.title and existing.url:
        existing.magnet = href
    else:
        index.put(identifier, quality, EpisodeVariant(magnet=href))
    return True


def correlate_rows(rows: Iterable[Tag]) -> EpisodeIndex:
    """
    Pair episode links and magnet links of the given rows into an EpisodeIndex.

    Single pass in document order. Anchors with text are episode links,
    text-less anchors with the "magnet" class are magnet links, everything
    else is ignored. Anchors missing a required attribute are skipped.

    Args:
        rows (Iterable[Tag]): Episode rows in document order

    Returns:
        EpisodeIndex: identifier -> quality -> variant
    """
    index = EpisodeIndex()
    linked = magnets = ignored = 0

    for row in rows:
        for anchor in _row_anchors(row):
            text = anchor.get_text()
            if text != "":
                added = _add_episode_link(index, anchor, text)
                linked += added
            elif _has_class(anchor, MAGNET_CLASS):
                added = _add_magnet_link(index, anchor)
                magnets += added
            else:
                added = False
            ignored += not added

    logger.debug(
        f"Correlated {len(index)} variants ({linked} episode links, {magnets} magnets, {ignored} skipped)"
    )
    return index


def correlate_document(soup: BeautifulSoup) -> EpisodeIndex:
    """Run the correlator over all episode rows of a show page."""
    return correlate_rows(soup.select(EPISODE_ROW_SELECTOR))
