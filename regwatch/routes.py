"""
regwatch/routes.py
RegWatch — Flask Blueprint
Read endpoints, single-field annotation endpoints, and the AI refresh.

Routes:
  GET  /api/knowledge-base               → knowledge items, newest first
  GET  /api/updates                      → update items, newest first
  GET  /api/report                       → risk report (stats recalculated)
  GET  /api/status                       → AI credential + usage status
  POST /api/refresh                      → regenerate updates + report
  POST /api/links/knowledge-base         → {id, url}
  POST /api/links/updates                → {id, url}
  POST /api/links/risk-report            → {focusAreaName, eventTitle, url}
  POST /api/links/risk-report/custom     → {focusAreaName, links}
  POST /api/links/updates/custom         → {id, links}
  POST /api/links/knowledge-base/custom  → {id, links}
  POST /api/notes/risk-report            → {focusAreaName, note}
  POST /api/notes/updates                → {id, note}
  POST /api/notes/knowledge-base         → {id, note}
"""
import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from .refresh import CredentialError, find_api_key, is_placeholder, mask_key, refresh
from .schemas import CustomLink
from .usage import get_usage_summary

logger = logging.getLogger(__name__)

regwatch_bp = Blueprint("regwatch", __name__)

STORE_KEY = "regwatch.store"
CLIENT_FACTORY_KEY = "regwatch.client_factory"

# ── helpers ──────────────────────────────────────────────────────────────────

def get_store():
    return current_app.extensions[STORE_KEY]

def ok(message=None, data=None):
    body = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body)

def err(msg, code=400, details=None):
    body = {"error": msg}
    if details:
        body["details"] = details
    return jsonify(body), code

def body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def parse_links(raw):
    """[{name, url}, ...] as CustomLink models. None means the payload was malformed."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        return None
    try:
        return [CustomLink.model_validate(l) for l in raw]
    except ValidationError:
        return None

def patched(record, message, missing="Item not found"):
    if record is None:
        return err(missing, 404)
    return ok(message)

# ── reads ────────────────────────────────────────────────────────────────────

@regwatch_bp.route("/api/knowledge-base", methods=["GET"])
def get_knowledge_base():
    return jsonify(get_store().sorted_knowledge_base())

@regwatch_bp.route("/api/updates", methods=["GET"])
def get_updates():
    return jsonify(get_store().sorted_updates())

@regwatch_bp.route("/api/report", methods=["GET"])
def get_report():
    return jsonify(get_store().report_snapshot())

@regwatch_bp.route("/api/status", methods=["GET"])
def get_status():
    key = find_api_key()
    return jsonify({
        "credential": bool(key) and not is_placeholder(key),
        "masked": mask_key(key),
        "model": current_app.config["REGWATCH_MODEL"],
        "usage": get_usage_summary(current_app.config.get("REGWATCH_USAGE_DIR")),
    })

# ── refresh ──────────────────────────────────────────────────────────────────

@regwatch_bp.route("/api/refresh", methods=["POST"])
def refresh_data():
    cfg = current_app.config
    try:
        data = refresh(
            get_store(),
            current_app.extensions[CLIENT_FACTORY_KEY],
            model=cfg["REGWATCH_MODEL"],
            max_tokens=cfg["REGWATCH_MAX_TOKENS"],
            search_uses=cfg["REGWATCH_WEB_SEARCH_USES"],
            usage_dir=cfg.get("REGWATCH_USAGE_DIR"),
        )
    except CredentialError as e:
        return err(str(e), 500)
    except Exception as e:
        logger.exception("Refresh failed")
        return err("Failed to refresh data", 500, details=str(e))
    return ok(data=data)

# ── knowledge base annotations ───────────────────────────────────────────────

@regwatch_bp.route("/api/links/knowledge-base", methods=["POST"])
def set_knowledge_url():
    d = body()
    if not d.get("id"):
        return err("Missing ID")
    return patched(get_store().set_knowledge_url(d["id"], d.get("url")), "Link updated")

@regwatch_bp.route("/api/notes/knowledge-base", methods=["POST"])
def set_knowledge_note():
    d = body()
    if not d.get("id"):
        return err("Missing ID")
    return patched(get_store().set_knowledge_note(d["id"], d.get("note")), "Note updated")

@regwatch_bp.route("/api/links/knowledge-base/custom", methods=["POST"])
def set_knowledge_links():
    d = body()
    if not d.get("id"):
        return err("Missing ID")
    links = parse_links(d.get("links"))
    if links is None:
        return err("Invalid links")
    return patched(get_store().set_knowledge_links(d["id"], links), "Links updated")

# ── update annotations ───────────────────────────────────────────────────────

@regwatch_bp.route("/api/links/updates", methods=["POST"])
def set_update_url():
    d = body()
    if not d.get("id"):
        return err("Missing ID")
    return patched(get_store().set_update_url(d["id"], d.get("url")), "Link updated")

@regwatch_bp.route("/api/notes/updates", methods=["POST"])
def set_update_note():
    d = body()
    if not d.get("id"):
        return err("Missing ID")
    return patched(get_store().set_update_note(d["id"], d.get("note")), "Note updated")

@regwatch_bp.route("/api/links/updates/custom", methods=["POST"])
def set_update_links():
    d = body()
    if not d.get("id"):
        return err("Missing ID")
    links = parse_links(d.get("links"))
    if links is None:
        return err("Invalid links")
    return patched(get_store().set_update_links(d["id"], links), "Links updated")

# ── risk report annotations ──────────────────────────────────────────────────

@regwatch_bp.route("/api/links/risk-report", methods=["POST"])
def set_event_url():
    d = body()
    if not d.get("focusAreaName") or not d.get("eventTitle"):
        return err("Missing identifiers")
    record = get_store().set_event_url(d["focusAreaName"], d["eventTitle"], d.get("url"))
    return patched(record, "Link updated")

@regwatch_bp.route("/api/notes/risk-report", methods=["POST"])
def set_focus_area_note():
    d = body()
    if not d.get("focusAreaName"):
        return err("Missing focus area name")
    record = get_store().set_focus_area_note(d["focusAreaName"], d.get("note"))
    return patched(record, "Note updated", missing="Focus area not found")

@regwatch_bp.route("/api/links/risk-report/custom", methods=["POST"])
def set_focus_area_links():
    d = body()
    if not d.get("focusAreaName"):
        return err("Missing focus area name")
    links = parse_links(d.get("links"))
    if links is None:
        return err("Invalid links")
    record = get_store().set_focus_area_links(d["focusAreaName"], links)
    return patched(record, "Links updated", missing="Focus area not found")
