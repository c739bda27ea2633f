"""Flask application factory for ``folioctl serve``.

Routes:
  POST /contact, /api/contact    -> {success, message?, error?}
  GET  /api/projects[?category]  -> project cards
  GET  /api/projects/<key>       -> one case study
  GET  /api/legal/<key>          -> privacy / terms
  GET  /healthz                  -> {"ok": true}
  GET  /, /<path>                -> files from the static directory
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

import structlog
from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from folioctl.config.logging import log_context
from folioctl.domain.contact import ContactSubmission, SubmissionErrorCode
from folioctl.services.catalog import CatalogService
from folioctl.services.contact import ContactService

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from folioctl.infrastructure.site import Site
    from folioctl.services.result import ServiceResult

log = structlog.get_logger(__name__)

SITE_EXTENSION = "folioctl.site"

# Everything except POST is answered with a JSON 405 by the view itself.
_CONTACT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

_CATALOG_STATUS = {"not_found": 404, "unknown_category": 400}


def create_app(site: Site) -> Flask:
    """Build the WSGI app for *site*."""
    app = Flask(__name__, static_folder=None)
    app.extensions[SITE_EXTENSION] = site
    static_dir = site.settings.static_dir

    if site.settings.server.cors:
        CORS(app)

    @app.route("/contact", methods=_CONTACT_METHODS)
    @app.route("/api/contact", methods=_CONTACT_METHODS)
    def contact() -> ResponseReturnValue:
        if request.method != "POST":
            return _error_response("Method not allowed", 405)

        request_id = uuid.uuid4().hex[:12]
        with log_context(request_id=request_id, remote_addr=request.remote_addr):
            submission = ContactSubmission.from_mapping(_request_body())
            result = ContactService(site).submit(submission, remote_addr=request.remote_addr)
            return _contact_response(result)

    @app.get("/api/projects")
    def list_projects() -> ResponseReturnValue:
        return _catalog_response(CatalogService(site).list_projects(request.args.get("category")))

    @app.get("/api/projects/<key>")
    def show_project(key: str) -> ResponseReturnValue:
        return _catalog_response(CatalogService(site).show_project(key))

    @app.get("/api/legal/<key>")
    def show_legal(key: str) -> ResponseReturnValue:
        return _catalog_response(CatalogService(site).show_legal(key))

    @app.get("/healthz")
    def healthz() -> ResponseReturnValue:
        return jsonify({"ok": True})

    @app.get("/")
    def index() -> ResponseReturnValue:
        return send_from_directory(static_dir, "index.html")

    @app.get("/<path:filename>")
    def static_file(filename: str) -> ResponseReturnValue:
        return send_from_directory(static_dir, filename)

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException) -> ResponseReturnValue:
        return _error_response(exc.description or exc.name, exc.code or 500)

    log.debug("web.app_created", static_dir=str(static_dir), cors=site.settings.server.cors)
    return app


def _request_body() -> dict[str, Any]:
    """JSON object or form fields; anything else counts as an empty body."""
    if request.is_json:
        body = request.get_json(silent=True)
        return body if isinstance(body, dict) else {}
    return request.form.to_dict()


def _contact_response(result: ServiceResult) -> ResponseReturnValue:
    if result.ok:
        return jsonify({"success": True, "message": result.data.get("message")})

    assert result.error is not None
    status = 500 if result.error_code == SubmissionErrorCode.TRANSPORT_FAILURE else 400
    body: dict[str, Any] = {
        "success": False,
        "error": result.error.message,
        "code": result.error.code,
    }
    fields = result.error.detail.get("fields")
    if fields:
        body["fields"] = fields
    return jsonify(body), status


def _catalog_response(result: ServiceResult) -> ResponseReturnValue:
    if result.ok:
        return jsonify(result.data)
    assert result.error is not None
    return _error_response(result.error.message, _CATALOG_STATUS.get(result.error_code or "", 400))


def _error_response(message: str, status: int) -> ResponseReturnValue:
    return jsonify({"success": False, "error": message}), status
