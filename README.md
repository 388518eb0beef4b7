# groupie

A small web site for browsing bands and artists, their members, first
albums and concerts. It fetches its data live from the Groupie Trackers
API.

## Pages

- `/` lists every artist (template `index.html`, context `artists`).
- `/artists/<id>` shows one artist with concert dates grouped by location
  (template `artists.html`, context `artist`). An unknown or malformed ID
  gives a 404 page.
- `/dates` groups artist names under the first concert date of each
  artist (template `dates.html`, context `dates`).
- `/locations` groups artist names under the first concert location of
  each artist (template `locations.html`, context `locations`).
  `/locations/` and anything below it redirect there permanently (301).
- `/static/...` serves files from the static directory.

The `/dates` and `/locations` indexes are fetched once and then kept for
the life of the application.

Requests to these pages with a method other than GET get a 405 page.
Unknown paths get a 404 page. Failing to reach the API gives a 500 page.
Error pages are rendered from `error.html` with `title` and `message`;
if that template cannot be rendered, the error text is sent as plain
text.

## Installing

```
pip install .
```

## Running

```
groupie
```

Options:

- `--host` interface to listen on (default `0.0.0.0`)
- `--port` port to listen on (default `8080`)
- `--templates` templates directory (default `templates`)
- `--static` static files directory (default `static`)

Both directories are taken relative to the current directory. The
package does not ship any templates or static files; you supply
`index.html`, `artists.html`, `dates.html`, `locations.html` and
`error.html` yourself.

## Using it from Python

```python
from groupie.server import create_app
from groupie.api import get_artists, artist_detail, get_dates, get_locations
from groupie.indexes import date_to_artists, location_to_artists, reverse_locations

app = create_app("templates", "static")

detail = artist_detail("1")
print(detail.name, detail.dates_locations)

by_location = reverse_locations(get_locations())  # location -> artist ids
```

- `groupie.models` holds the records `Artist`, `ArtistDetail`,
  `ConcertDate` and `LocationEntry`, and the parsers `parse_artists`,
  `parse_dates`, `parse_locations` and `parse_relation`, which raise
  `ValueError` on data of the wrong shape.
- `groupie.api` fetches data: `fetch_json`, `get_artists`,
  `artist_detail`, `get_dates` and `get_locations`. `ApiError` is raised
  when the API cannot be reached, answers with an error status, returns
  unusable data, or has no artist with the requested ID.
- `groupie.indexes` builds the grouped views: `artist_name_by_id`,
  `date_to_artists`, `location_to_artists`, `reverse_locations`, and
  `save_reversed_locations_html`, which renders `locations.html` with the
  reversed index into a file.

## Tests

```
pip install .[test]
pytest
```