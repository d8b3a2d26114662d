"""Minimal Flask web application with a welcome page and two JSON/text APIs."""

from simpleapp.main import AppInfo, create_app, greet

__all__ = ["AppInfo", "create_app", "greet"]
