"""Indexes that group artists by concert date and by concert location."""

from __future__ import annotations

import os
from typing import Iterable

import jinja2

from groupie.api import (
    ARTISTS_URL,
    DATES_URL,
    ApiError,
    fetch_json,
    get_artists,
    get_locations,
)
from groupie.models import LocationEntry, parse_dates

__all__ = [
    "artist_name_by_id",
    "date_to_artists",
    "location_to_artists",
    "reverse_locations",
    "save_reversed_locations_html",
]


def _artist_names() -> dict[int, str]:
    """Map artist ids to names; an unreachable API yields an empty mapping."""
    try:
        artists = get_artists(ARTISTS_URL)
    except ApiError:
        return {}
    names: dict[int, str] = {}
    for artist in artists:
        names.setdefault(artist.id, artist.name)
    return names


def artist_name_by_id(artist_id: int) -> str:
    """Return the name of the artist with ``artist_id``, or ``""`` if unknown."""
    return _artist_names().get(artist_id, "")


def date_to_artists() -> dict[str, list[str]]:
    """Group artist names under the first concert date of each artist."""
    try:
        concerts = parse_dates(fetch_json(DATES_URL))
    except ValueError as exc:
        raise ApiError(f"unexpected data: {exc}") from exc

    names = _artist_names()
    index: dict[str, list[str]] = {}
    for concert in concerts:
        name = names.get(concert.id, "")
        if not name:
            continue
        if not concert.dates:
            raise ApiError(f"no concert dates for artist ID {concert.id}")
        index.setdefault(concert.dates[0], []).append(name)
    return index


def location_to_artists() -> dict[str, list[str]]:
    """Group artist names under the first concert location of each artist."""
    entries = get_locations()
    names = _artist_names()
    index: dict[str, list[str]] = {}
    for entry in entries:
        name = names.get(entry.id, "")
        if not name:
            continue
        if not entry.locations:
            raise ApiError(f"no concert locations for artist ID {entry.id}")
        index.setdefault(entry.locations[0], []).append(name)
    return index


def reverse_locations(locations: Iterable[LocationEntry]) -> dict[str, list[int]]:
    """Map every location to the ids of the artists playing there."""
    reversed_index: dict[str, list[int]] = {}
    for entry in locations:
        for location in entry.locations:
            reversed_index.setdefault(location, []).append(entry.id)
    return reversed_index


def save_reversed_locations_html(
    locations: Iterable[LocationEntry],
    output_path: str | os.PathLike[str],
    templates_dir: str | os.PathLike[str] = "templates",
) -> None:
    """Render ``locations.html`` with the reversed locations into ``output_path``."""
    reversed_index = reverse_locations(locations)
    env = jinja2.Environment(loader=jinja2.FileSystemLoader(os.fspath(templates_dir)))
    template = env.get_template("locations.html")
    with open(output_path, "w", encoding="utf-8") as handle:
        handle.write(template.render(locations=reversed_index))