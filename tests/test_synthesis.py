from __future__ import annotations

import json
from datetime import date
from types import SimpleNamespace

import pytest

from conftest import FakeClient, focus_area, loc, update

from regwatch.prompts import build_processing_prompt, long_date
from regwatch.schemas import RiskReport
from regwatch.synthesis import PayloadError, Synthesizer, extract_json, parse_payload, response_text


def report_payload(**extra):
    payload = {
        "riskReport": {
            "lastUpdated": "2026-10-19",
            "score": "Low",
            "summary": {"en": ["only point"], "cn": ["唯一要点"]},
            "focusAreas": [focus_area("Cross-Border Data")],
        }
    }
    payload.update(extra)
    return payload


@pytest.mark.parametrize("text", [
    '{"a": 1}',
    '```json\n{"a": 1}\n```',
    '```\n{"a": 1}\n```',
    'Sure. {"a": 1} Hope that helps.',
])
def test_extract_json_tolerates_wrapping(text):
    assert extract_json(text) == {"a": 1}


@pytest.mark.parametrize("text", ["", "no braces here", "[1, 2]", '{"a": }', None])
def test_extract_json_rejects_non_objects(text):
    with pytest.raises(PayloadError):
        extract_json(text)


def test_parse_payload_defaults_optional_lists():
    payload, quarantined = parse_payload(json.dumps(report_payload()))
    assert quarantined == 0
    assert payload.new_updates == []
    assert payload.updated_knowledge_base_items == []
    assert payload.risk_report.focus_areas[0].name.en == "Cross-Border Data"


def test_parse_payload_counts_quarantined_entries():
    text = json.dumps(report_payload(
        newUpdates=[update("u1", "2026-10-01"), {"id": "broken"}, "not even a dict"],
        updatedKnowledgeBaseItems=[{"id": "kb-x", "title": loc("Half an item")}],
    ))
    payload, quarantined = parse_payload(text)
    assert [u.id for u in payload.new_updates] == ["u1"]
    assert payload.updated_knowledge_base_items == []
    assert quarantined == 3


def test_parse_payload_ignores_non_list_sections():
    payload, quarantined = parse_payload(json.dumps(report_payload(newUpdates={"id": "x"})))
    assert payload.new_updates == []
    assert quarantined == 0


def test_parse_payload_rejects_bad_report():
    bad = report_payload()
    del bad["riskReport"]["score"]
    with pytest.raises(PayloadError, match="Invalid riskReport"):
        parse_payload(json.dumps(bad))


def test_response_text_skips_tool_blocks():
    resp = SimpleNamespace(content=[
        SimpleNamespace(type="server_tool_use", name="web_search"),
        SimpleNamespace(type="text", text="first"),
        SimpleNamespace(type="web_search_tool_result"),
        SimpleNamespace(type="text", text="second"),
    ])
    assert response_text(resp) == "first second"


def test_synthesizer_ok_result():
    fake = FakeClient("findings", report_payload(newUpdates=[update("u1", "2026-10-01")]))
    result = Synthesizer(fake, "claude-test").synthesize(date(2026, 10, 19))
    assert result.degraded is False
    assert result.reason == ""
    assert result.payload.new_updates[0].id == "u1"
    assert len(fake.messages.calls) == 2


def test_synthesizer_degraded_result_carries_reason():
    fake = FakeClient("findings", "I could not find anything.")
    result = Synthesizer(fake, "claude-test").synthesize(date(2026, 10, 19))
    assert result.degraded is True
    assert result.payload is None
    assert "No JSON object" in result.reason


def test_synthesizer_stops_after_failed_search():
    fake = FakeClient(ConnectionError("network unreachable"))
    result = Synthesizer(fake, "claude-test").synthesize(date(2026, 10, 19))
    assert result.degraded is True
    assert result.reason == "network unreachable"
    assert len(fake.messages.calls) == 1


def test_processing_prompt_embeds_dates():
    prompt = build_processing_prompt(date(2026, 2, 1))
    assert "Current Date: February 1, 2026." in prompt
    assert '"lastUpdated": "2026-02-01"' in prompt
    assert long_date(date(2026, 12, 25)) == "December 25, 2026"


def test_report_wire_keys_round_trip_through_aliases():
    report = RiskReport.model_validate({
        "lastUpdated": "2026-02-21",
        "score": "Medium",
        "summary": {"en": ["a"], "cn": ["甲"]},
        "stats": {
            "legislation": {"label": loc("Acts"), "count": 1, "trend": "stable"},
            "enforcement": {"label": loc("Actions"), "count": 2, "trend": "up"},
        },
        "focusAreas": [dict(focus_area("Child Safety"), customLinks=[{"name": "DSA", "url": "https://x"}])],
    })
    assert report.focus_areas[0].custom_links[0].name == "DSA"
    out = report.to_json()
    assert out["lastUpdated"] == "2026-02-21"
    assert "archivedFocusAreas" not in out
    assert out["focusAreas"][0]["relatedEvents"][0]["title"]["en"] == "Event"
