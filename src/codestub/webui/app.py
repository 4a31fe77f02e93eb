# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based preview page and REST API for template generation.

The Dash app owns a Flask server; the REST endpoints are registered on that
server so that the preview page and the API share one process and one
configuration.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import dash
from dash import Input, Output, dcc, html
from flask import Flask, jsonify, request

from codestub.api.handlers import (
    Response,
    error_response,
    handle_template,
    handle_type_mappings,
    handle_validate,
    health_response,
    languages_response,
    service_start,
    stats_response,
)
from codestub.config.loader import GeneratorConfig
from codestub.errors import CodestubError

# ###############
# Public Interface
# ###############

API_PREFIX = "/api/v1"

EXAMPLE_REQUEST = {
    "question_id": "two-sum",
    "title": "Two Sum",
    "description": "Return the indices of the two numbers that add up to target.",
    "signature": {
        "function_name": "twoSum",
        "parameters": [
            {"name": "nums", "type": "int[]"},
            {"name": "target", "type": "int"},
        ],
        "returns": {"type": "int[]"},
    },
}


def create_app(config: GeneratorConfig | None = None) -> dash.Dash:
    """Create the codestub web application.

    Args:
        config: Active configuration; defaults to :class:`GeneratorConfig`.

    Returns:
        A Dash app whose ``server`` attribute also serves the REST API.
    """
    config = config if config is not None else GeneratorConfig()
    app = dash.Dash(
        __name__,
        title="Codestub Template Preview",
    )
    app.layout = _build_layout(config)

    @app.callback(
        Output("template-output", "children"),
        Input("language-dropdown", "value"),
        Input("request-input", "value"),
    )
    def _update_preview(language: str | None, request_text: str | None) -> str:
        return render_preview(request_text, language, config)

    _register_api(app.server, config)
    return app


def render_preview(request_text: str | None, language: str | None, config: GeneratorConfig) -> str:
    """Render the preview pane: the generated template or a readable error."""
    if not request_text or not language:
        return ""
    try:
        data = json.loads(request_text)
    except json.JSONDecodeError as exc:
        return f"Error: invalid JSON: {exc}"
    if not isinstance(data, dict):
        return "Error: request must be a JSON object"

    data["language"] = language
    try:
        payload, _ = handle_template(data, config)
    except CodestubError as exc:
        payload, _ = error_response(exc, config)
        return "Error: " + json.dumps(payload, indent=2, default=str)
    return payload["template"]


# ################
# Implementation
# ################


def _build_layout(config: GeneratorConfig) -> html.Div:
    """Build the preview page layout."""
    return html.Div(
        [
            html.H1("Codestub Template Preview"),
            html.P(f"Environment: {config.environment}"),
            html.Hr(),
            html.Label("Language", htmlFor="language-dropdown"),
            dcc.Dropdown(
                id="language-dropdown",
                options=[{"label": language, "value": language} for language in config.languages],
                value=config.languages[0] if config.languages else None,
                clearable=False,
            ),
            html.Label("Request", htmlFor="request-input"),
            dcc.Textarea(
                id="request-input",
                value=json.dumps(EXAMPLE_REQUEST, indent=2),
                style={"width": "100%", "height": "18rem", "fontFamily": "monospace"},
            ),
            html.H2("Template"),
            html.Pre(
                id="template-output",
                style={"background": "#f6f8fa", "padding": "1rem", "whiteSpace": "pre-wrap"},
            ),
        ],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )


def _register_api(server: Flask, config: GeneratorConfig) -> None:
    """Register the REST and health endpoints on the Dash app's Flask server."""
    started_at = service_start()

    @server.route(f"{API_PREFIX}/template", methods=["POST"])
    def api_template():
        return _respond(config, lambda: handle_template(_json_body(), config))

    @server.route(f"{API_PREFIX}/template/validate", methods=["POST"])
    def api_validate():
        return _respond(config, lambda: handle_validate(_json_body(), config))

    @server.route(f"{API_PREFIX}/languages", methods=["GET"])
    def api_languages():
        return jsonify(languages_response(config)), 200

    @server.route(f"{API_PREFIX}/types/<language>", methods=["GET"])
    def api_types(language: str):
        return _respond(config, lambda: handle_type_mappings(language, config))

    @server.route(f"{API_PREFIX}/stats", methods=["GET"])
    def api_stats():
        return jsonify(stats_response(config, started_at)), 200

    @server.route("/health", methods=["GET"])
    def health():
        return jsonify(health_response(config, started_at)), 200

    @server.route("/health/ready", methods=["GET"])
    def health_ready():
        payload = health_response(config, started_at, probe="ready")
        return jsonify(payload), 200 if payload["status"] == "ready" else 503

    @server.route("/health/live", methods=["GET"])
    def health_live():
        return jsonify(health_response(config, started_at, probe="live")), 200

    @server.route(f"{API_PREFIX}/<path:rest>", methods=["GET"])
    def api_unmatched(rest: str):
        return _unmatched_api_route(server)

    @server.errorhandler(404)
    def not_found(exc):
        if not request.path.startswith(API_PREFIX):
            return exc
        return _unmatched_api_route(server)

    @server.errorhandler(405)
    def method_not_allowed(exc):
        if not request.path.startswith(API_PREFIX):
            return exc
        return _unmatched_api_route(server)


class _InvalidJsonBody(Exception):
    """Raised when a POST body is not a JSON object."""


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise _InvalidJsonBody()
    return data


def _respond(config: GeneratorConfig, handler: Callable[[], Response]):
    """Run *handler* and serialize its result, mapping failures to error envelopes."""
    try:
        payload, status = handler()
    except _InvalidJsonBody:
        payload, status = {"error": "Invalid JSON", "message": "Request body must be a valid JSON object"}, 400
    except Exception as exc:  # noqa: BLE001
        payload, status = error_response(exc, config)
    return jsonify(payload), status


def _unmatched_api_route(server: Flask):
    """Answer an API request no endpoint handled: 405 if the path exists for other methods, else 404."""
    allowed: set[str] = set()
    for rule in server.url_map.iter_rules():
        if rule.rule == request.path and rule.methods:
            allowed.update(rule.methods - {"HEAD", "OPTIONS"})
    if not allowed:
        return jsonify({"error": "Not Found", "message": f"No API endpoint at {request.path}"}), 404
    payload = {
        "error": "Method Not Allowed",
        "message": f"Method {request.method} is not allowed for {request.path}",
        "allowed_methods": sorted(allowed),
    }
    return jsonify(payload), 405
