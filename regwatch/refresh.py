"""
regwatch/refresh.py
RegWatch — Refresh orchestration
Resolves the AI credential, asks the Synthesizer for fresh content (or falls
back to canned synthetic content), merges it into the store and returns the
full sorted state.
"""
import logging
import os
import re
import time
from datetime import date

from .schemas import (
    GeneratedReport, LocalizedList, LocalizedString, Party, RefreshPayload, UpdateItem,
)
from .synthesis import Synthesizer

logger = logging.getLogger(__name__)

# First non-empty wins
CREDENTIAL_VARS = ("API_KEY", "ANTHROPIC_API_KEY", "CLAUDE_API_KEY")
PLACEHOLDERS = ("YOUR_API_KEY", "CHANGE_ME")
KEY_PREFIX = "sk-ant-"


class CredentialError(Exception):
    """No usable AI credential in the environment."""


# ── credential ───────────────────────────────────────────────────────────────

def sanitize_key(raw):
    """Strip quotes, whitespace and newlines pasted in with the key."""
    return re.sub(r"['\"\s]", "", raw or "")

def find_api_key(environ=None):
    """Sanitized key from the first configured variable, or ''."""
    environ = os.environ if environ is None else environ
    for name in CREDENTIAL_VARS:
        if environ.get(name):
            return sanitize_key(environ[name])
    return ""

def mask_key(key):
    return ("sk-ant-..." + key[-6:]) if key else ""

def is_placeholder(key):
    return any(p in key.upper() for p in PLACEHOLDERS)

def resolve_api_key(environ=None):
    key = find_api_key(environ)
    if not key:
        logger.error("API key is missing. Checked %s.", ", ".join(CREDENTIAL_VARS))
        raise CredentialError("Server configuration error: Missing API Key")
    if is_placeholder(key):
        logger.error("API key appears to be a placeholder value.")
        raise CredentialError("Server configuration error: Invalid API Key format")
    logger.info("Using API key %s (length %d)", mask_key(key), len(key))
    if not key.startswith(KEY_PREFIX):
        logger.warning("API key does not start with '%s'. It may be invalid.", KEY_PREFIX)
    return key


# ── degraded mode ────────────────────────────────────────────────────────────

def synthetic_payload(today, focus_areas):
    """Canned content used when the AI service is unavailable."""
    iso = today.isoformat()
    return RefreshPayload(
        new_updates=[UpdateItem(
            id=f"sim-{int(time.time() * 1000)}",
            date=iso,
            title=LocalizedString(en="New AI Compliance Guidelines Released (Simulated)",
                                  cn="新AI合规指南发布（模拟）"),
            source="EU AI Office",
            content=LocalizedString(
                en="The EU AI Office has released updated guidelines for general-purpose AI models, emphasizing stricter transparency requirements.",
                cn="欧盟AI办公室发布了通用人工智能模型的更新指南，强调了更严格的透明度要求。",
            ),
            analysis=LocalizedString(
                en="This update clarifies the documentation needed for compliance by Q3 2026.",
                cn="此次更新明确了2026年第三季度合规所需的文件。",
            ),
            parties=[Party(name="EU AI Office", type="Regulator")],
            url="https://digital-strategy.ec.europa.eu/en/policies/ai-office",
        )],
        risk_report=GeneratedReport(
            last_updated=iso,
            score="Medium",
            summary=LocalizedList(
                en=[
                    "The EU AI Office has released new transparency guidelines. We must update our technical documentation by Q3 2026 to include detailed model training data sources.",
                    "Recent fines against RetailCo for emotion recognition show that using AI to analyze customer sentiment in stores is now strictly prohibited.",
                    "With the new age verification rules enforced on OpenAI, we need to verify if our user sign-up flow meets the 'strict age-gating' standard.",
                ],
                cn=[
                    "欧盟AI办公室发布了新的透明度指南。我们必须在2026年第三季度前更新技术文档，详细说明模型训练数据的来源。",
                    "近期RetailCo因情绪识别被罚款，这表明在商店中使用AI分析客户情绪现在是被严格禁止的。",
                    "随着OpenAI被强制执行新的年龄验证规则，我们需要核实我们的用户注册流程是否达到了'严格年龄门槛'的标准。",
                ],
            ),
            # keep the current focus areas so the dashboard stays stable
            focus_areas=list(focus_areas),
        ),
    )


# ── merge ────────────────────────────────────────────────────────────────────

def new_unique_updates(existing, candidates):
    """Candidates whose id and English title are both unseen, in given order."""
    seen_ids = {u.id for u in existing}
    seen_titles = {u.title.en for u in existing}
    fresh = []
    for item in candidates:
        if item.id in seen_ids or item.title.en in seen_titles:
            continue
        seen_ids.add(item.id)
        seen_titles.add(item.title.en)
        fresh.append(item)
    return fresh

def merge_knowledge_base(existing, incoming):
    """Overlay incoming items on matches (by id or English title); append the rest."""
    merged = list(existing)
    for item in incoming:
        idx = next((i for i, k in enumerate(merged)
                    if k.id == item.id or k.title.en == item.title.en), None)
        if idx is None:
            merged.append(item)
            continue
        changes = {f: getattr(item, f) for f in item.model_fields_set
                   if getattr(item, f) is not None}
        # matched records keep their own id
        changes.pop("id", None)
        merged[idx] = merged[idx].model_copy(update=changes)
    return merged

def apply_payload(store, payload):
    fresh = new_unique_updates(store.updates, payload.new_updates)
    if fresh:
        store.replace_updates(fresh + store.updates)

    generated = payload.risk_report
    store.replace_risk_report(store.risk_report.model_copy(update={
        "last_updated": generated.last_updated,
        "score": generated.score,
        "summary": generated.summary,
        "focus_areas": generated.focus_areas,
    }))

    if payload.updated_knowledge_base_items:
        store.replace_knowledge_base(
            merge_knowledge_base(store.knowledge_base, payload.updated_knowledge_base_items))

    store.recalculate_stats()
    return len(fresh)


# ── entry point ──────────────────────────────────────────────────────────────

def refresh(store, client_factory, model, max_tokens=8000, search_uses=5,
            usage_dir=None, environ=None, today=None):
    """
    Run one refresh against the store. Returns the response `data` dict.
    Raises CredentialError before any AI call if no key is configured.
    """
    key = resolve_api_key(environ)
    today = today or date.today()
    synthesizer = Synthesizer(client_factory(key), model, max_tokens=max_tokens,
                              search_uses=search_uses, usage_dir=usage_dir)
    result = synthesizer.synthesize(today)
    if result.degraded:
        logger.warning("Using synthetic refresh data (%s)", result.reason)
        payload = synthetic_payload(today, store.risk_report.focus_areas)
    else:
        payload = result.payload

    added = apply_payload(store, payload)
    store.save()
    logger.info("Refresh merged %d new update(s)%s", added, " [synthetic]" if result.degraded else "")

    data = store.snapshot()
    data["degraded"] = result.degraded
    return data
