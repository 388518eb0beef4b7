import pytest

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

QUEEN = {
    "id": 1,
    "image": "https://img.example.com/queen.jpeg",
    "name": "Queen",
    "members": ["Freddie Mercury", "Brian May"],
    "creationDate": 1970,
    "firstAlbum": "14-12-1973",
    "locations": "https://api.example.com/locations/1",
    "concertDates": "https://api.example.com/dates/1",
    "relation": "https://api.example.com/relation/1",
}


def test_parse_artists_maps_every_field():
    (artist,) = parse_artists([QUEEN])
    assert artist == Artist(
        id=1,
        name="Queen",
        image_url="https://img.example.com/queen.jpeg",
        members=["Freddie Mercury", "Brian May"],
        year_creation=1970,
        first_album="14-12-1973",
        locations_url="https://api.example.com/locations/1",
        concert_dates_url="https://api.example.com/dates/1",
        relations_url="https://api.example.com/relation/1",
    )


def test_parse_artists_keeps_order():
    second = dict(QUEEN, id=2, name="SOJA")
    artists = parse_artists([QUEEN, second])
    assert [a.id for a in artists] == [1, 2]
    assert [a.name for a in artists] == ["Queen", "SOJA"]


def test_missing_fields_take_zero_values():
    (artist,) = parse_artists([{"id": 3}])
    assert artist == Artist(id=3)


def test_unknown_fields_are_ignored():
    (artist,) = parse_artists([dict(QUEEN, extra="ignored")])
    assert artist.name == "Queen"


def test_null_payload_gives_empty_list():
    assert parse_artists(None) == []
    assert parse_dates(None) == []
    assert parse_locations(None) == []
    assert parse_relation(None) == {}


@pytest.mark.parametrize(
    "payload",
    [
        {"id": 1},
        [{"id": "1"}],
        [{"id": True}],
        [{"id": 1.5}],
        [{"name": 5}],
        [{"members": "Freddie"}],
        [{"members": [1, 2]}],
        ["not an object"],
    ],
)
def test_parse_artists_rejects_wrong_types(payload):
    with pytest.raises(ValueError):
        parse_artists(payload)


def test_parse_dates_reads_index():
    payload = {"index": [{"id": 1, "dates": ["*23-08-2019", "22-08-2019"]}]}
    assert parse_dates(payload) == [
        ConcertDate(id=1, dates=["*23-08-2019", "22-08-2019"], artists=[])
    ]


def test_parse_dates_rejects_non_list_index():
    with pytest.raises(ValueError):
        parse_dates({"index": {"id": 1}})


def test_parse_locations_reads_index():
    payload = {
        "index": [
            {
                "id": 4,
                "locations": ["north_carolina-usa", "georgia-usa"],
                "dates": "https://api.example.com/dates/4",
            }
        ]
    }
    assert parse_locations(payload) == [
        LocationEntry(
            id=4,
            locations=["north_carolina-usa", "georgia-usa"],
            dates_url="https://api.example.com/dates/4",
        )
    ]


def test_parse_locations_missing_index_is_empty():
    assert parse_locations({}) == []


def test_parse_relation_returns_mapping():
    payload = {"id": 1, "datesLocations": {"london-uk": ["14-12-2019"], "paris-france": []}}
    assert parse_relation(payload) == {"london-uk": ["14-12-2019"], "paris-france": []}


def test_parse_relation_rejects_bad_values():
    with pytest.raises(ValueError):
        parse_relation({"datesLocations": {"london-uk": "14-12-2019"}})
    with pytest.raises(ValueError):
        parse_relation(["london-uk"])


def test_artist_detail_copies_artist_fields():
    (artist,) = parse_artists([QUEEN])
    relation = {"london-uk": ["14-12-2019"]}
    detail = ArtistDetail.from_artist(artist, relation)
    assert (detail.id, detail.name, detail.image_url) == (
        artist.id,
        artist.name,
        artist.image_url,
    )
    assert detail.members == artist.members
    assert detail.year_creation == artist.year_creation
    assert detail.first_album == artist.first_album
    assert detail.dates_locations == relation
    relation["london-uk"].append("later")
    assert detail.dates_locations == {"london-uk": ["14-12-2019"]}