"""
regwatch/synthesis.py
RegWatch — AI synthesis
Two calls to the Anthropic Messages API: a web-search pass for recent
regulatory news, then a structured pass that turns those findings into new
update items and a regenerated risk report.

The Synthesizer never raises for upstream trouble. It returns a
SynthesisResult that either carries a validated payload or says why it
could not produce one, and the caller decides what to do about it.
"""
import json
import logging
import re
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from . import prompts
from .schemas import KnowledgeItem, RefreshPayload, UpdateItem
from .usage import log_usage

logger = logging.getLogger(__name__)

WEB_SEARCH_TOOL = {"type": "web_search_20250305", "name": "web_search"}

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class PayloadError(ValueError):
    """The model's reply could not be turned into a refresh payload."""


@dataclass
class SynthesisResult:
    payload: Optional[RefreshPayload] = None
    reason: str = ""
    quarantined: int = 0

    @property
    def degraded(self):
        return self.payload is None


# ── response parsing ─────────────────────────────────────────────────────────

def response_text(resp):
    """Join the text blocks of a Messages API response (tool blocks skipped)."""
    return " ".join(b.text for b in resp.content if hasattr(b, "text") and b.text).strip()

def extract_json(text):
    """Parse a JSON object out of a reply that may carry fences or chatter around it."""
    cleaned = _FENCE_RE.sub("", (text or "").strip())
    start, end = cleaned.find("{"), cleaned.rfind("}")
    if start == -1 or end < start:
        raise PayloadError("No JSON object in model reply")
    try:
        data = json.loads(cleaned[start:end + 1])
    except json.JSONDecodeError as e:
        raise PayloadError(f"Malformed JSON in model reply: {e}") from e
    if not isinstance(data, dict):
        raise PayloadError("Model reply is not a JSON object")
    return data

def _validate_each(model, raw, label):
    """Validate list entries one by one. Bad entries are dropped, not fatal."""
    if not isinstance(raw, list):
        return [], 0
    good, bad = [], 0
    for entry in raw:
        try:
            good.append(model.model_validate(entry))
        except ValidationError as e:
            bad += 1
            logger.warning("Quarantined malformed %s entry: %s", label, e.errors()[:1])
    return good, bad

def parse_payload(text):
    """Returns (RefreshPayload, quarantined_count). Raises PayloadError."""
    data = extract_json(text)
    updates, bad_updates = _validate_each(UpdateItem, data.get("newUpdates"), "newUpdates")
    kb_items, bad_kb = _validate_each(KnowledgeItem, data.get("updatedKnowledgeBaseItems"), "knowledge base")
    try:
        payload = RefreshPayload(
            new_updates=updates,
            risk_report=data.get("riskReport"),
            updated_knowledge_base_items=kb_items,
        )
    except ValidationError as e:
        raise PayloadError(f"Invalid riskReport: {e.error_count()} error(s)") from e
    return payload, bad_updates + bad_kb


# ── client wrapper ───────────────────────────────────────────────────────────

class Synthesizer:

    def __init__(self, client, model, max_tokens=8000, search_uses=5, usage_dir=None):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.search_uses = search_uses
        self.usage_dir = usage_dir

    def _complete(self, event, messages, tools=None):
        kwargs = dict(model=self.model, max_tokens=self.max_tokens,
                      system=prompts.SYSTEM, messages=messages)
        if tools:
            kwargs["tools"] = tools
        resp = self.client.messages.create(**kwargs)
        usage = getattr(resp, "usage", None)
        tokens = (usage.input_tokens + usage.output_tokens) if usage else 0
        log_usage(self.usage_dir, event, tokens, self.model)
        return response_text(resp)

    def search(self):
        tool = dict(WEB_SEARCH_TOOL, max_uses=self.search_uses)
        return self._complete(
            "search",
            [{"role": "user", "content": prompts.SEARCH_PROMPT}],
            tools=[tool],
        )

    def synthesize(self, today):
        """Run both calls. Any failure comes back as a degraded result."""
        try:
            logger.info("Starting search...")
            findings = self.search()
            logger.info("Search complete. Generating content...")
            reply = self._complete("synthesis", [
                {"role": "user", "content": prompts.SEARCH_PROMPT},
                {"role": "assistant", "content": findings or "No search results."},
                {"role": "user", "content": prompts.build_processing_prompt(today)},
            ])
            payload, quarantined = parse_payload(reply)
        except Exception as e:
            logger.warning("AI synthesis failed, falling back to synthetic data: %s", e)
            return SynthesisResult(reason=str(e) or type(e).__name__)
        logger.info("Generation complete: %d new update(s), %d quarantined",
                    len(payload.new_updates), quarantined)
        return SynthesisResult(payload=payload, quarantined=quarantined)
