"""Web front end listing artists, concert dates and concert locations."""

from __future__ import annotations

import argparse
import os

from flask import Flask, Response, redirect, render_template, request
from jinja2 import TemplateError

from groupie.api import ApiError, artist_detail, get_artists
from groupie.indexes import date_to_artists, location_to_artists

__all__ = ["create_app", "main"]

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

_NOT_FOUND = ("ERREUR 404", "Page non trouvée")
_NOT_ALLOWED = ("ERREUR 405", "Méthode non autorisée")
_INTERNAL = ("ERREUR 500", "Erreur interne du serveur")


def create_app(
    templates_dir: str | os.PathLike[str] = "templates",
    static_dir: str | os.PathLike[str] = "static",
) -> Flask:
    """Build the web application serving pages from ``templates_dir``."""
    app = Flask(
        __name__,
        template_folder=os.path.abspath(templates_dir),
        static_folder=os.path.abspath(static_dir),
        static_url_path="/static",
    )
    cache: dict[str, dict[str, list[str]]] = {}

    def error_page(status: int, title: str, message: str) -> Response:
        try:
            body = render_template("error.html", title=title, message=message)
        except TemplateError as exc:
            return Response(str(exc), status=status, mimetype="text/plain")
        return Response(body, status=status, mimetype="text/html")

    def page(template: str, **context) -> Response | str:
        try:
            return render_template(template, **context)
        except TemplateError:
            return error_page(500, *_INTERNAL)

    def not_allowed() -> Response:
        return error_page(405, *_NOT_ALLOWED)

    @app.errorhandler(404)
    def _not_found(_exc):
        return error_page(404, *_NOT_FOUND)

    @app.errorhandler(405)
    def _method_not_allowed(_exc):
        return not_allowed()

    @app.route("/", defaults={"path": ""}, methods=_ALL_METHODS, endpoint="home")
    @app.route("/<path:path>", methods=_ALL_METHODS, endpoint="home")
    def home(path: str):
        if request.method != "GET":
            return not_allowed()
        if path:
            return error_page(404, *_NOT_FOUND)
        try:
            artists = get_artists()
        except ApiError:
            return error_page(500, *_INTERNAL)
        return page("index.html", artists=artists)

    @app.route(
        "/artists/", defaults={"artist_id": ""}, methods=_ALL_METHODS, endpoint="artist"
    )
    @app.route("/artists/<path:artist_id>", methods=_ALL_METHODS, endpoint="artist")
    def artist(artist_id: str):
        if request.method != "GET":
            return not_allowed()
        try:
            detail = artist_detail(artist_id)
        except ApiError:
            return error_page(404, *_NOT_FOUND)
        return page("artists.html", artist=detail)

    @app.route("/dates", methods=_ALL_METHODS, endpoint="dates")
    def dates():
        if request.method != "GET":
            return not_allowed()
        data = cache.get("dates")
        if data is None:
            try:
                data = date_to_artists()
            except ApiError:
                return error_page(
                    500,
                    "ERREUR 500",
                    "Erreur lors de la récupération des dates de concert",
                )
            cache["dates"] = data
        return page("dates.html", dates=data)

    @app.route(
        "/locations/", defaults={"rest": ""}, methods=_ALL_METHODS, endpoint="to_locations"
    )
    @app.route("/locations/<path:rest>", methods=_ALL_METHODS, endpoint="to_locations")
    def to_locations(rest: str):
        return redirect("/locations", code=301)

    @app.route("/locations", methods=_ALL_METHODS, endpoint="locations")
    def locations():
        if request.method != "GET":
            return not_allowed()
        data = cache.get("locations")
        if data is None:
            try:
                data = location_to_artists()
            except ApiError:
                return error_page(
                    500,
                    "ERREUR 500",
                    "Erreur lors de la récupération des emplacements",
                )
            cache["locations"] = data
        return page("locations.html", locations=data)

    return app


def main(argv: list[str] | None = None) -> int:
    """Start the web server."""
    parser = argparse.ArgumentParser(
        prog="groupie", description="Serve artists, concert dates and locations."
    )
    parser.add_argument("--host", default="0.0.0.0", help="interface to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument("--templates", default="templates", help="templates directory")
    parser.add_argument("--static", default="static", help="static files directory")
    args = parser.parse_args(argv)

    app = create_app(args.templates, args.static)
    print(f"Le serveur a démarré sous http://localhost:{args.port}")
    app.run(host=args.host, port=args.port)
    return 0