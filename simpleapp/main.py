"""Simple web application entry point.

This module exposes a small Flask application with three routes: a rendered
welcome page, a greeting that echoes the ``name`` query parameter, and a fixed
application-info document. Running it starts a development web server.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from flask import Flask, Response, jsonify, render_template, request
from loguru import logger

from simpleapp.config import Settings, get_settings
from simpleapp.logging_config import setup_logging

WELCOME_MESSAGE = "Welcome to Simple Spring Boot Web App!"
DEFAULT_NAME = "World"


@dataclass(frozen=True)
class AppInfo:
    """Fixed application metadata returned by ``/api/info``."""

    name: str
    version: str
    description: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def app_info() -> AppInfo:
    return AppInfo(
        name="Simple Spring Boot App",
        version="1.0.0",
        description="A simple web application",
    )


def greet(name: str) -> str:
    """Return a greeting for ``name``, echoed back verbatim."""
    return f"Hello, {name}!"


def create_app(settings: Settings | None = None) -> Flask:
    """Create and configure the Flask application."""

    settings = settings or get_settings()
    setup_logging(settings.log_level, json=settings.log_json)

    app = Flask(__name__)
    app.config.update(DEBUG=settings.debug)
    # Keep AppInfo field order on the wire
    app.json.sort_keys = False

    @app.get("/")
    def index() -> str:
        return render_template("index.html", message=WELCOME_MESSAGE)

    @app.get("/api/hello")
    def hello() -> Response:
        # Repeated ?name= values are comma-joined into one string
        names = request.args.getlist("name")
        name = ",".join(names) if names else DEFAULT_NAME
        return Response(greet(name), mimetype="text/plain")

    @app.get("/api/info")
    def info() -> Response:
        return jsonify(app_info().as_dict())

    @app.after_request
    def log_request(response: Response) -> Response:
        logger.debug(
            "{} {} -> {}", request.method, request.path, response.status_code
        )
        return response

    logger.info("Application created (debug={})", settings.debug)
    return app


def main() -> None:
    """Run the development server when executed as a script."""
    settings = get_settings()
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":  # pragma: no cover
    main()
