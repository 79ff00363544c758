from dataclasses import dataclass, field
from typing import Optional, Dict, Iterator, List, Tuple

@dataclass(frozen=True)
class ShowSummary:
    title: str
    url: str                       # relativer Pfad, z.B. "/shows/123/foo/"

    def to_dict(self) -> Dict[str, str]:
        return {'title': self.title, 'url': self.url}


@dataclass
class EpisodeVariant:
    title: str = ""
    url: str = ""                  # Episoden-Seite
    magnet: str = ""               # magnet:?xt=...

    def to_dict(self) -> Dict[str, str]:
        return {'title': self.title, 'url': self.url, 'magnet': self.magnet}


@dataclass
class EpisodeDetail:
    """Full metadata of a single episode. No query builds this yet."""
    title: str = ""
    url: str = ""
    description: str = ""
    cover: str = ""
    magnet: str = ""
    ratio: float = 0.0             # seed/leech

    def to_dict(self) -> Dict:
        return {
            'title': self.title,
            'url': self.url,
            'description': self.description,
            'cover': self.cover,
            'magnet': self.magnet,
            'ratio': self.ratio,
        }


@dataclass
class EpisodeIndex:
    """
    Two-level store: episode identifier ("S01E02") -> quality ("720p", "hdtv") -> variant.

    An empty identifier is a regular key.
    """
    entries: Dict[str, Dict[str, EpisodeVariant]] = field(default_factory=dict)

    def get(self, identifier: str, quality: str) -> Optional[EpisodeVariant]:
        """Return the variant stored at (identifier, quality), or None if there is none."""
        return self.entries.get(identifier, {}).get(quality)

    def put(self, identifier: str, quality: str, variant: EpisodeVariant) -> None:
        """Store variant at (identifier, quality), replacing any previous entry."""
        self.entries.setdefault(identifier, {})[quality] = variant

    def identifiers(self) -> List[str]:
        return list(self.entries)

    def qualities(self, identifier: str) -> List[str]:
        return list(self.entries.get(identifier, {}))

    def __iter__(self) -> Iterator[Tuple[str, str, EpisodeVariant]]:
        for identifier, by_quality in self.entries.items():
            for quality, variant in by_quality.items():
                yield identifier, quality, variant

    def __len__(self) -> int:
        return sum(len(by_quality) for by_quality in self.entries.values())

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, str]]]:
        return {
            identifier: {quality: variant.to_dict() for quality, variant in by_quality.items()}
            for identifier, by_quality in self.entries.items()
        }


@dataclass
class ShowDetail:
    title: str
    url: str
    cover: str = ""
    episodes: EpisodeIndex = field(default_factory=EpisodeIndex)

    def to_dict(self) -> Dict:
        return {
            'title': self.title,
            'url': self.url,
            'cover': self.cover,
            'episodes': self.episodes.to_dict(),
        }
