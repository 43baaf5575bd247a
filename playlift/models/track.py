from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class SortedTrack:
    """Flattened view of a playlist track, as returned to the browser."""

    name: Optional[str]
    artists: List[str] = field(default_factory=list)
    album: Optional[str] = None
    uri: Optional[str] = None
    external_url: Optional[str] = None

    @classmethod
    def from_playlist_item(cls, item: Dict[str, Any]) -> Optional["SortedTrack"]:
        """
        Build a track from a raw ``/playlists/{id}/tracks`` item.

        Returns None when the item carries no track (removed or
        unavailable content).
        """
        track = (item or {}).get("track")
        if not track:
            return None

        return cls(
            name=track.get("name"),
            artists=[
                (artist or {}).get("name") or ""
                for artist in track.get("artists") or []
            ],
            album=(track.get("album") or {}).get("name"),
            uri=track.get("uri"),
            external_url=(track.get("external_urls") or {}).get("spotify"),
        )

    @property
    def sort_key(self) -> str:
        """First artist's name, case-folded; empty when there is none."""
        return self.artists[0].casefold() if self.artists else ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def tracks_from_items(items: Iterable[Dict[str, Any]]) -> List[SortedTrack]:
    """Map raw playlist items to tracks, dropping empty items."""
    tracks = []
    skipped = 0
    for item in items:
        track = SortedTrack.from_playlist_item(item)
        if track is None:
            skipped += 1
            continue
        tracks.append(track)
    if skipped:
        logger.debug(f"Skipped {skipped} playlist items without a track")
    return tracks


def sort_by_first_artist(tracks: Iterable[SortedTrack]) -> List[SortedTrack]:
    """
    Order tracks by first artist name, ignoring case.

    ``sorted`` is stable, so tracks by the same artist keep the order
    they had in the playlist.
    """
    return sorted(tracks, key=lambda t: t.sort_key)
