"""
RegWatch — Compliance risk dashboard API

Serves the risk report, regulatory updates feed and knowledge base, lets
users annotate records with notes and links, and refreshes content through
the Anthropic API (web search + structured synthesis).

State lives in memory for the life of the process. Run a single worker
thread: the store does no locking.
"""

# ── Config loader: must run before anything reads the environment ──
# Loads /opt/regwatch/config.env (or config.env next to this file) into
# environment variables. Real environment variables win.

import os
from pathlib import Path

for _p in [
    Path("/opt/regwatch/config.env"),
    Path(__file__).parent / "config.env",
]:
    if _p.exists():
        for _line in _p.read_text(encoding="utf-8").splitlines():
            _line = _line.strip()
            if _line and not _line.startswith("#") and "=" in _line:
                _k, _, _v = _line.partition("=")
                os.environ.setdefault(_k.strip(), _v.strip())
        break

# ── END CONFIG LOADER ─────────────────────────────────────────
import logging

import anthropic
from flask import Flask

from regwatch import RecordStore, regwatch_bp
from regwatch.routes import CLIENT_FACTORY_KEY, STORE_KEY

DEFAULT_MODEL = "claude-sonnet-4-20250514"


def configure_logging(level=None):
    level = level or os.environ.get("REGWATCH_LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def load_config():
    """REGWATCH_* environment variables → Flask config."""
    data_path = Path(os.environ.get("REGWATCH_DATA", "/opt/regwatch"))
    return {
        "REGWATCH_MODEL":           os.environ.get("REGWATCH_MODEL", DEFAULT_MODEL),
        "REGWATCH_MAX_TOKENS":      int(os.environ.get("REGWATCH_MAX_TOKENS", "8000")),
        "REGWATCH_WEB_SEARCH_USES": int(os.environ.get("REGWATCH_WEB_SEARCH_USES", "5")),
        "REGWATCH_USAGE_DIR":       str(data_path / "usage"),
        "REGWATCH_SNAPSHOT":        os.environ.get("REGWATCH_SNAPSHOT", ""),
    }


def anthropic_client(api_key):
    return anthropic.Anthropic(api_key=api_key)


def create_app(store=None, client_factory=None, config=None):
    """
    Build the Flask app around one RecordStore.
    Tests pass their own store, a fake client factory and config overrides.
    """
    app = Flask(__name__)
    app.config.update(load_config())
    if config:
        app.config.update(config)

    if store is None:
        snapshot = app.config.get("REGWATCH_SNAPSHOT")
        store = RecordStore.load(snapshot) if snapshot else RecordStore.seeded()

    app.extensions[STORE_KEY] = store
    app.extensions[CLIENT_FACTORY_KEY] = client_factory or anthropic_client
    app.register_blueprint(regwatch_bp)
    return app


# ── Run ───────────────────────────────────────────────────────

if __name__ == "__main__":
    from waitress import serve

    configure_logging()
    app = create_app()
    host = os.environ.get("REGWATCH_HOST", "127.0.0.1")
    port = int(os.environ.get("REGWATCH_PORT", "3000"))
    print(f"\n  RegWatch -- Compliance Dashboard")
    print(f"  Model: {app.config['REGWATCH_MODEL']}")
    print(f"  Snapshot: {app.config['REGWATCH_SNAPSHOT'] or 'off (in-memory only)'}")
    print(f"  Running at http://{host}:{port}\n")
    # one thread: the store is not locked
    serve(app, host=host, port=port, threads=1)
