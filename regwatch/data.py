"""
regwatch/data.py
RegWatch — Data layer
In-memory record store for the knowledge base, updates feed and risk report.

One RecordStore instance owns all three collections for the life of the
process. The Flask app receives it through create_app(), so each test can
build its own. There is no locking: requests are assumed to be handled one
at a time, and nothing is shared across processes.

Optional snapshot: if a snapshot_path is given, every mutation rewrites the
full state to that JSON file (write-to-tmp-then-rename). It is best effort
only and never fails a request.
"""
import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from . import seed
from .schemas import CustomLink, KnowledgeItem, RiskReport, UpdateItem

logger = logging.getLogger(__name__)

# ── helpers ──────────────────────────────────────────────────────────────────

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)

def date_key(value):
    """
    Sort key for loose ISO date/datetime strings, as an aware UTC datetime.
    Times without an offset are taken as UTC. Unparseable dates sort last.
    """
    if not value:
        return _EARLIEST
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        try:
            parsed = datetime.fromisoformat(value[:10])
        except ValueError:
            return _EARLIEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

def sort_by_date(records):
    """Most recent first. Records with equal dates keep their order."""
    return sorted(records, key=lambda r: date_key(r.date), reverse=True)

def _find(records, record_id):
    return next((r for r in records if r.id == record_id), None)

def _atomic_write(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise

def _links(links):
    return [CustomLink.model_validate(l) for l in (links or [])]


class RecordStore:

    def __init__(self, knowledge_base, updates, risk_report, snapshot_path=None):
        self.knowledge_base = list(knowledge_base)
        self.updates = list(updates)
        self.risk_report = risk_report
        self.snapshot_path = Path(snapshot_path) if snapshot_path else None
        self.recalculate_stats()

    # ── construction ─────────────────────────────────────────────────────────

    @classmethod
    def from_json(cls, data, snapshot_path=None):
        """Build a store from wire-format dicts ({knowledgeBase, updates, riskReport})."""
        return cls(
            [KnowledgeItem.model_validate(k) for k in data.get("knowledgeBase", [])],
            [UpdateItem.model_validate(u) for u in data.get("updates", [])],
            RiskReport.model_validate(data["riskReport"]),
            snapshot_path=snapshot_path,
        )

    @classmethod
    def seeded(cls, snapshot_path=None):
        return cls.from_json(
            {
                "knowledgeBase": seed.KNOWLEDGE_BASE,
                "updates": seed.UPDATES,
                "riskReport": seed.RISK_REPORT,
            },
            snapshot_path=snapshot_path,
        )

    @classmethod
    def load(cls, snapshot_path):
        """Restore from a snapshot file, or fall back to seed data."""
        path = Path(snapshot_path)
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(data, dict):
                    raise ValueError("snapshot is not a JSON object")
                store = cls.from_json(data, snapshot_path=path)
                logger.info("Loaded state snapshot from %s", path)
                return store
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.warning("Snapshot %s unreadable (%s); using seed data", path, e)
        return cls.seeded(snapshot_path=path)

    # ── whole-collection writes ──────────────────────────────────────────────

    def replace_knowledge_base(self, items):
        self.knowledge_base = list(items)

    def replace_updates(self, items):
        self.updates = list(items)

    def replace_risk_report(self, report):
        self.risk_report = report

    def recalculate_stats(self):
        stats = self.risk_report.stats
        stats.legislation.count = len(self.knowledge_base)
        stats.enforcement.count = len(self.updates)

    # ── reads ────────────────────────────────────────────────────────────────

    def sorted_knowledge_base(self):
        return [k.to_json() for k in sort_by_date(self.knowledge_base)]

    def sorted_updates(self):
        return [u.to_json() for u in sort_by_date(self.updates)]

    def report_snapshot(self):
        self.recalculate_stats()
        return self.risk_report.to_json()

    def snapshot(self):
        """Full sorted state, the shape returned by a refresh."""
        return {
            "updates": self.sorted_updates(),
            "riskReport": self.report_snapshot(),
            "knowledgeBase": self.sorted_knowledge_base(),
        }

    def save(self):
        if not self.snapshot_path:
            return
        try:
            _atomic_write(self.snapshot_path, self.snapshot())
        except OSError as e:
            logger.warning("Could not write state snapshot to %s: %s", self.snapshot_path, e)

    # ── lookups ──────────────────────────────────────────────────────────────

    def find_knowledge_item(self, record_id):
        return _find(self.knowledge_base, record_id)

    def find_update(self, record_id):
        return _find(self.updates, record_id)

    def find_focus_area(self, name):
        """Focus areas are keyed by their English name."""
        return next((f for f in self.risk_report.focus_areas if f.name.en == name), None)

    # ── single-field mutations ───────────────────────────────────────────────
    # Each returns the patched record, or None when nothing matched.

    def _patch(self, record, field, value):
        if record is None:
            return None
        setattr(record, field, value)
        self.save()
        return record

    def set_knowledge_url(self, record_id, url):
        return self._patch(self.find_knowledge_item(record_id), "url", url)

    def set_knowledge_note(self, record_id, note):
        return self._patch(self.find_knowledge_item(record_id), "note", note)

    def set_knowledge_links(self, record_id, links):
        return self._patch(self.find_knowledge_item(record_id), "custom_links", _links(links))

    def set_update_url(self, record_id, url):
        return self._patch(self.find_update(record_id), "url", url)

    def set_update_note(self, record_id, note):
        return self._patch(self.find_update(record_id), "note", note)

    def set_update_links(self, record_id, links):
        return self._patch(self.find_update(record_id), "custom_links", _links(links))

    def set_event_url(self, focus_area_name, event_title, url):
        area = self.find_focus_area(focus_area_name)
        if area is None:
            return None
        event = next((e for e in area.related_events or [] if e.title.en == event_title), None)
        return self._patch(event, "url", url)

    def set_focus_area_note(self, focus_area_name, note):
        return self._patch(self.find_focus_area(focus_area_name), "note", note)

    def set_focus_area_links(self, focus_area_name, links):
        return self._patch(self.find_focus_area(focus_area_name), "custom_links", _links(links))
