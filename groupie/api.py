"""Client for the remote concert API."""

from __future__ import annotations

import json
import re
import urllib.error
import urllib.request
from typing import Any

from groupie.models import (
    Artist,
    ArtistDetail,
    ConcertDate,
    LocationEntry,
    parse_artists,
    parse_dates,
    parse_locations,
    parse_relation,
)

__all__ = [
    "API_BASE",
    "ARTISTS_URL",
    "DATES_URL",
    "LOCATIONS_URL",
    "RELATION_URL",
    "ApiError",
    "fetch_json",
    "get_artists",
    "artist_detail",
    "get_dates",
    "get_locations",
]

API_BASE = "https://groupietrackers.herokuapp.com/api"
ARTISTS_URL = f"{API_BASE}/artists"
DATES_URL = f"{API_BASE}/dates"
LOCATIONS_URL = f"{API_BASE}/locations"
RELATION_URL = f"{API_BASE}/relation"

TIMEOUT = 30

_INTEGER = re.compile(r"[+-]?[0-9]+")


class ApiError(Exception):
    """Raised when the API cannot be reached or returns unusable data."""


def fetch_json(url: str) -> Any:
    """GET ``url`` and return its decoded JSON body."""
    try:
        with urllib.request.urlopen(url, timeout=TIMEOUT) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        raise ApiError(f"request failed with status code {exc.code}") from exc
    except OSError as exc:
        raise ApiError(f"request to {url} failed: {exc}") from exc
    try:
        return json.loads(body)
    except ValueError as exc:
        raise ApiError(f"invalid JSON from {url}: {exc}") from exc


def _parsed(parser, payload: Any):
    try:
        return parser(payload)
    except ValueError as exc:
        raise ApiError(f"unexpected data: {exc}") from exc


def get_artists(url: str = ARTISTS_URL) -> list[Artist]:
    """Fetch the artists listing at ``url``."""
    return _parsed(parse_artists, fetch_json(url))


def _parse_id(artist_id: str | int) -> int:
    if isinstance(artist_id, int) and not isinstance(artist_id, bool):
        return artist_id
    text = str(artist_id)
    if not _INTEGER.fullmatch(text):
        raise ApiError(f"unable to parse artist ID: {text!r}")
    return int(text)


def artist_detail(artist_id: str | int) -> ArtistDetail:
    """Return the artist with ``artist_id`` and its dates grouped by location."""
    wanted = _parse_id(artist_id)
    try:
        artists = get_artists(ARTISTS_URL)
    except ApiError as exc:
        raise ApiError(f"unable to fetch artists: {exc}") from exc

    for artist in artists:
        if artist.id == wanted:
            try:
                relation = _parsed(
                    parse_relation, fetch_json(f"{RELATION_URL}/{artist.id}")
                )
            except ApiError as exc:
                raise ApiError(f"unable to fetch relation data: {exc}") from exc
            return ArtistDetail.from_artist(artist, relation)
    raise ApiError(f"artist not found for ID {artist_id}")


def get_dates() -> list[ConcertDate]:
    """Fetch concert dates and append the matching artist names to each entry."""
    dates = _parsed(parse_dates, fetch_json(DATES_URL))
    names = {artist.id: artist.name for artist in get_artists(ARTISTS_URL)}

    for concert in dates:
        for raw_id in list(concert.artists):
            if not _INTEGER.fullmatch(raw_id):
                raise ApiError(f"unable to convert artist ID to an integer: {raw_id!r}")
            name = names.get(int(raw_id))
            if name is not None:
                concert.artists.append(name)
    return dates


def get_locations() -> list[LocationEntry]:
    """Fetch the concert locations of every artist."""
    return _parsed(parse_locations, fetch_json(LOCATIONS_URL))