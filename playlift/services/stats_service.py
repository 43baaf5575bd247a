"""
Listening-stats aggregation.

Turns the top-artists and top-tracks pages into a short summary: the
first few names of each, and the most common genres across the top
artists.
"""

from typing import Any, Dict, Iterable, List, Optional

TOP_N = 5


class StatsService:
    """Pure functions over Spotify top-items responses."""

    @staticmethod
    def count_genres(artists: Iterable[Dict[str, Any]]) -> Dict[str, int]:
        """
        Count genre tags across artists.

        Keys are kept in the order each genre is first seen.

        Example:
            >>> StatsService.count_genres([
            ...     {"genres": ["pop", "rock"]},
            ...     {"genres": ["pop"]},
            ...     {"genres": ["jazz"]},
            ... ])
            {'pop': 2, 'rock': 1, 'jazz': 1}
        """
        counts: Dict[str, int] = {}
        for artist in artists:
            for genre in (artist or {}).get("genres") or []:
                counts[genre] = counts.get(genre, 0) + 1
        return counts

    @staticmethod
    def top_genres(counts: Dict[str, int], n: int = TOP_N) -> List[str]:
        """
        Return the ``n`` most frequent genres, highest count first.

        Ties keep first-seen order: the sort is stable over the
        insertion-ordered mapping.
        """
        ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
        return [genre for genre, _ in ranked[:n]]

    @staticmethod
    def top_names(items: Iterable[Dict[str, Any]], n: int = TOP_N) -> List[str]:
        """Return the ``name`` of the first ``n`` items."""
        names = []
        for item in items:
            if len(names) >= n:
                break
            names.append((item or {}).get("name"))
        return names

    @staticmethod
    def summarize(
        top_artists: Optional[Dict[str, Any]],
        top_tracks: Optional[Dict[str, Any]],
        n: int = TOP_N,
    ) -> Dict[str, Any]:
        """
        Build the listening summary from two top-items pages.

        ``genre_counts`` is a list of ``[genre, count]`` pairs in first-seen
        order; a JSON object would be re-sorted by the encoder.
        ``total_listening_hours`` is always None: Spotify exposes no data
        to compute it from.
        """
        artists = (top_artists or {}).get("items") or []
        tracks = (top_tracks or {}).get("items") or []
        genre_counts = StatsService.count_genres(artists)

        return {
            "top_artists": StatsService.top_names(artists, n),
            "top_tracks": StatsService.top_names(tracks, n),
            "top_genres": StatsService.top_genres(genre_counts, n),
            "genre_counts": [
                [genre, count] for genre, count in genre_counts.items()
            ],
            "total_listening_hours": None,
        }
