from __future__ import annotations

import json

from conftest import knowledge, state, update

from regwatch.data import RecordStore, date_key, sort_by_date
from regwatch.schemas import KnowledgeItem, UpdateItem


def test_seeded_store_counts_are_derived():
    store = RecordStore.seeded()
    assert len(store.knowledge_base) == 6
    assert len(store.updates) == 7
    assert len(store.risk_report.focus_areas) == 5
    assert store.risk_report.stats.legislation.count == 6
    assert store.risk_report.stats.enforcement.count == 7


def test_recalculate_stats_tracks_collection_sizes(store):
    # the fixture report claims 99/99; construction already corrected it
    assert store.risk_report.stats.legislation.count == 2
    assert store.risk_report.stats.enforcement.count == 3

    store.replace_updates([])
    store.replace_knowledge_base(
        store.knowledge_base + [KnowledgeItem.model_validate(knowledge("kb-9", "2026-01-01"))])
    store.recalculate_stats()
    assert store.risk_report.stats.legislation.count == 3
    assert store.risk_report.stats.enforcement.count == 0


def test_report_snapshot_recalculates_first(store):
    store.replace_updates(store.updates[:1])
    snap = store.report_snapshot()
    assert snap["stats"]["enforcement"]["count"] == 1
    assert snap["stats"]["legislation"]["count"] == 2


def test_sorted_updates_newest_first(store):
    dates = [u["date"] for u in store.sorted_updates()]
    assert dates == ["2026-02-01", "2026-01-01", "2025-12-01"]


def test_sort_is_stable_and_tolerates_bad_dates():
    items = [
        UpdateItem.model_validate(update("a", "not a date")),
        UpdateItem.model_validate(update("b", "2026-01-01")),
        UpdateItem.model_validate(update("c", "2026-01-01T09:00:00Z")),
        UpdateItem.model_validate(update("d", "")),
    ]
    assert [i.id for i in sort_by_date(items)] == ["c", "b", "a", "d"]
    assert date_key("garbage") < date_key("1970-01-01")


def test_same_day_items_ordered_by_time():
    items = [
        UpdateItem.model_validate(update("morning", "2026-03-02T08:00:00Z")),
        UpdateItem.model_validate(update("evening", "2026-03-02T18:30:00Z")),
        UpdateItem.model_validate(update("offset", "2026-03-02T19:00:00+02:00")),
        UpdateItem.model_validate(update("day", "2026-03-02")),
    ]
    assert [i.id for i in sort_by_date(items)] == ["evening", "offset", "morning", "day"]
    assert date_key("2026-03-02T08:00:00") == date_key("2026-03-02T08:00:00Z")


def test_json_uses_wire_keys_and_drops_unset_fields(store):
    store.set_update_links("up-1", [{"name": "A", "url": "http://a"}])
    items = {u["id"]: u for u in store.sorted_updates()}
    assert items["up-1"]["customLinks"] == [{"name": "A", "url": "http://a"}]
    assert "customLinks" not in items["up-2"]
    assert "note" not in items["up-2"]
    assert "focusAreas" in store.report_snapshot()
    assert "relatedEvents" in store.report_snapshot()["focusAreas"][0]


def test_setters_patch_one_field(store):
    rec = store.set_knowledge_url("kb-1", "https://eur-lex.europa.eu/new")
    assert rec is not None
    assert store.find_knowledge_item("kb-1").url == "https://eur-lex.europa.eu/new"
    assert store.find_knowledge_item("kb-1").title.en == "EU AI Act"

    store.set_update_note("up-2", "check with legal")
    assert store.find_update("up-2").note == "check with legal"

    store.set_focus_area_note("Child Safety", "owner: product")
    assert store.find_focus_area("Child Safety").note == "owner: product"


def test_setters_return_none_on_miss(store):
    before = store.snapshot()
    assert store.set_knowledge_url("kb-404", "x") is None
    assert store.set_update_note("up-404", "x") is None
    assert store.set_focus_area_links("Nope", []) is None
    assert store.set_event_url("Prohibited AI", "No such event", "x") is None
    assert store.set_event_url("Nope", "First AI Act Fine Issued", "x") is None
    assert store.snapshot() == before


def test_event_url_matches_by_english_titles(store):
    store.set_event_url("Prohibited AI", "First AI Act Fine Issued", "https://www.aepd.es/fine-1")
    event = store.find_focus_area("Prohibited AI").related_events[0]
    assert event.url == "https://www.aepd.es/fine-1"


def test_custom_links_replace_not_merge(store):
    store.set_knowledge_links("kb-2", [{"name": "A", "url": "http://a"}])
    store.set_knowledge_links("kb-2", [{"name": "B", "url": "http://b"}])
    assert [l.name for l in store.find_knowledge_item("kb-2").custom_links] == ["B"]
    store.set_knowledge_links("kb-2", [])
    assert store.find_knowledge_item("kb-2").custom_links == []


def test_snapshot_written_on_mutation_and_reloaded(tmp_path):
    path = tmp_path / "state.json"
    store = RecordStore.from_json(state(), snapshot_path=path)
    store.set_update_note("up-3", "persisted")

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert {u["id"] for u in saved["updates"]} == {"up-1", "up-2", "up-3"}

    restored = RecordStore.load(path)
    assert restored.find_update("up-3").note == "persisted"
    assert restored.snapshot_path == path


def test_load_falls_back_to_seed(tmp_path):
    missing = RecordStore.load(tmp_path / "missing.json")
    assert len(missing.updates) == 7

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert len(RecordStore.load(broken).knowledge_base) == 6

    not_an_object = tmp_path / "list.json"
    not_an_object.write_text("[]", encoding="utf-8")
    assert len(RecordStore.load(not_an_object).updates) == 7


def test_save_without_path_is_noop(store, tmp_path):
    store.save()
    assert list(tmp_path.iterdir()) == []
