"""Flask glue: serve an assembled document as JSON.

The document is built once at startup; the view only serializes it.
"""
from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify

from .models import OpenApi
from .settings import OpenApiSettings


def register_openapi_route(app: Flask, document: OpenApi, settings: Optional[OpenApiSettings] = None) -> str:
    """Expose `document` at the configured json path; returns that path."""
    settings = settings or OpenApiSettings.from_mapping(app.config)
    payload = document.to_dict()

    def openapi_spec():
        return jsonify(payload)

    app.add_url_rule(settings.json_path, endpoint="openapi_spec", view_func=openapi_spec, methods=["GET"])
    app.logger.info("OpenAPI document served at %s (%d paths)", settings.json_path, len(document.paths))
    return settings.json_path


__all__ = ["register_openapi_route"]
