from playlift.models.track import (
    SortedTrack,
    tracks_from_items,
    sort_by_first_artist,
)

__all__ = [
    "SortedTrack",
    "tracks_from_items",
    "sort_by_first_artist",
]
