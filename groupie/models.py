"""Data records served by the concert API and the parsers that build them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

__all__ = [
    "Artist",
    "ArtistDetail",
    "ConcertDate",
    "LocationEntry",
    "parse_artists",
    "parse_dates",
    "parse_locations",
    "parse_relation",
]


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"expected a JSON object for {what}, got {type(value).__name__}")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _str_list_value(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list of strings, got {value!r}")
    items = []
    for item in value:
        if item is None:
            items.append("")
        elif isinstance(item, str):
            items.append(item)
        else:
            raise ValueError(f"field {key!r} must hold only strings, got {item!r}")
    return items


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    return _str_list_value(data.get(key), key)


def _records(payload: Any, what: str) -> list[Any]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ValueError(f"expected a JSON array of {what}, got {type(payload).__name__}")
    return payload


def _index(payload: Any, what: str) -> list[Any]:
    if payload is None:
        return []
    return _records(_mapping(payload, what).get("index"), what)


@dataclass
class Artist:
    """One entry of the artists listing."""

    id: int = 0
    name: str = ""
    image_url: str = ""
    members: list[str] = field(default_factory=list)
    year_creation: int = 0
    first_album: str = ""
    locations_url: str = ""
    concert_dates_url: str = ""
    relations_url: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "Artist":
        record = _mapping(data, "artist")
        return cls(
            id=_int(record, "id"),
            name=_str(record, "name"),
            image_url=_str(record, "image"),
            members=_str_list(record, "members"),
            year_creation=_int(record, "creationDate"),
            first_album=_str(record, "firstAlbum"),
            locations_url=_str(record, "locations"),
            concert_dates_url=_str(record, "concertDates"),
            relations_url=_str(record, "relation"),
        )


@dataclass
class ArtistDetail:
    """An artist together with the concert dates grouped by location."""

    id: int = 0
    name: str = ""
    image_url: str = ""
    members: list[str] = field(default_factory=list)
    year_creation: int = 0
    first_album: str = ""
    dates_locations: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_artist(
        cls, artist: Artist, dates_locations: Mapping[str, list[str]]
    ) -> "ArtistDetail":
        return cls(
            id=artist.id,
            name=artist.name,
            image_url=artist.image_url,
            members=list(artist.members),
            year_creation=artist.year_creation,
            first_album=artist.first_album,
            dates_locations={k: list(v) for k, v in dates_locations.items()},
        )


@dataclass
class ConcertDate:
    """Concert dates of one artist, with the names of the artists involved."""

    id: int = 0
    dates: list[str] = field(default_factory=list)
    artists: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "ConcertDate":
        record = _mapping(data, "concert date")
        return cls(
            id=_int(record, "id"),
            dates=_str_list(record, "dates"),
            artists=_str_list(record, "artists"),
        )


@dataclass
class LocationEntry:
    """Concert locations of one artist."""

    id: int = 0
    locations: list[str] = field(default_factory=list)
    dates_url: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "LocationEntry":
        record = _mapping(data, "location")
        return cls(
            id=_int(record, "id"),
            locations=_str_list(record, "locations"),
            dates_url=_str(record, "dates"),
        )


def parse_artists(payload: Any) -> list[Artist]:
    """Build artists from the decoded JSON array of the artists listing."""
    return [Artist.from_json(item) for item in _records(payload, "artists")]


def parse_dates(payload: Any) -> list[ConcertDate]:
    """Build concert dates from the decoded ``{"index": [...]}`` document."""
    return [ConcertDate.from_json(item) for item in _index(payload, "concert dates")]


def parse_locations(payload: Any) -> list[LocationEntry]:
    """Build location entries from the decoded ``{"index": [...]}`` document."""
    return [LocationEntry.from_json(item) for item in _index(payload, "locations")]


def parse_relation(payload: Any) -> dict[str, list[str]]:
    """Return the ``datesLocations`` mapping of a relation document."""
    if payload is None:
        return {}
    value = _mapping(payload, "relation").get("datesLocations")
    if value is None:
        return {}
    mapping = _mapping(value, "datesLocations")
    return {str(key): _str_list_value(dates, key) for key, dates in mapping.items()}