from __future__ import annotations

import json
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from regwatch.data import RecordStore  # noqa: E402
from regwatch.refresh import CREDENTIAL_VARS  # noqa: E402
from server import create_app  # noqa: E402

TEST_KEY = "sk-ant-REDACTED"


def loc(en, cn=""):
    return {"en": en, "cn": cn or en}


def knowledge(id, date, title=None):
    return {
        "id": id,
        "title": loc(title or f"Act {id}"),
        "type": "Legislation",
        "jurisdiction": loc("EU"),
        "date": date,
        "summary": loc("summary"),
        "url": f"https://example.org/{id}",
    }


def update(id, date, title=None):
    return {
        "id": id,
        "date": date,
        "title": loc(title or f"Update {id}"),
        "source": "Regulator",
        "content": loc("content"),
        "analysis": loc("analysis"),
        "parties": [{"name": "DPC", "type": "Regulator"}],
    }


def focus_area(name, event_title="Event"):
    return {
        "name": loc(name),
        "summary": loc("summary"),
        "citation": "GDPR Art. 6",
        "relatedEvents": [{"title": loc(event_title), "url": "https://example.org/event"}],
    }


def report(focus_areas=None):
    return {
        "lastUpdated": "2026-02-21",
        "score": "Medium",
        "summary": {"en": ["a", "b", "c"], "cn": ["甲", "乙", "丙"]},
        "stats": {
            "legislation": {"label": loc("Active Bills/Acts"), "count": 99, "trend": "stable"},
            "enforcement": {"label": loc("Enforcement Actions"), "count": 99, "trend": "up"},
        },
        "focusAreas": focus_areas if focus_areas is not None else [
            focus_area("Prohibited AI", "First AI Act Fine Issued"),
            focus_area("Child Safety", "OpenAI Age Checks"),
        ],
    }


def state(knowledge_base=None, updates=None, risk_report=None):
    return {
        "knowledgeBase": knowledge_base if knowledge_base is not None else [
            knowledge("kb-1", "2024-06-12", "EU AI Act"),
            knowledge("kb-2", "2018-05-25", "GDPR"),
        ],
        "updates": updates if updates is not None else [
            update("up-1", "2026-01-01", "X"),
            update("up-2", "2026-02-01", "Y"),
            update("up-3", "2025-12-01", "Z"),
        ],
        "riskReport": risk_report or report(),
    }


def ai_reply(text, tokens=(10, 20)):
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)],
        usage=SimpleNamespace(input_tokens=tokens[0], output_tokens=tokens[1]),
    )


class FakeMessages:
    """Stands in for anthropic.Anthropic().messages; replays canned replies."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            reply = json.dumps(reply, ensure_ascii=False)
        return ai_reply(reply)


class FakeClient:
    def __init__(self, *replies):
        self.messages = FakeMessages(replies)
        self.api_key = None

    def factory(self, api_key):
        self.api_key = api_key
        return self


@pytest.fixture(autouse=True)
def clean_credentials(monkeypatch):
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", TEST_KEY)
    return TEST_KEY


@pytest.fixture
def store():
    return RecordStore.from_json(state())


@pytest.fixture
def make_client():
    def _make(store, fake=None, **config):
        fake = fake or FakeClient()
        cfg = {"REGWATCH_USAGE_DIR": "", "REGWATCH_SNAPSHOT": ""}
        cfg.update(config)
        app = create_app(store=store, client_factory=fake.factory, config=cfg)
        app.config["TESTING"] = True
        return app.test_client()
    return _make


@pytest.fixture
def client(store, make_client):
    return make_client(store)
