"""Web site and API client for browsing artists, concert dates and locations from the Groupie Trackers API."""

__version__ = "0.1.0"