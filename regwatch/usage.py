"""
regwatch/usage.py
RegWatch — AI usage tracking
Append-only JSONL, one file per day. Timestamps + token counts only;
no prompt or response content is stored.
"""
import datetime
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def log_usage(usage_dir, event_type, tokens_used=0, detail=""):
    """Append a usage record. Never raises: usage tracking must not fail a refresh."""
    if not usage_dir:
        return
    today = datetime.date.today().isoformat()
    path = Path(usage_dir) / f"refresh_{today}.jsonl"
    record = {
        "ts": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "event": event_type,   # search / synthesis
        "tokens": tokens_used,
        "detail": detail[:80],
    }
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(json.dumps(record) + "\n")
    except OSError as e:
        logger.warning("Could not write usage log %s: %s", path, e)


def get_usage_summary(usage_dir, days=30):
    """Aggregate calls and tokens over the last N days."""
    total_calls = total_tokens = 0
    by_event = {}
    if not usage_dir or not Path(usage_dir).exists():
        return {"calls": 0, "tokens": 0, "by_event": {}}
    cutoff = datetime.date.today() - datetime.timedelta(days=days)
    for f in Path(usage_dir).glob("refresh_*.jsonl"):
        try:
            if datetime.date.fromisoformat(f.stem.replace("refresh_", "")) < cutoff:
                continue
            for line in f.read_text(encoding="utf-8").splitlines():
                r = json.loads(line)
                total_calls += 1
                total_tokens += r.get("tokens", 0)
                ev = r.get("event", "other")
                by_event[ev] = by_event.get(ev, 0) + 1
        except (OSError, ValueError) as e:
            logger.warning("Skipping unreadable usage file %s: %s", f, e)
    return {"calls": total_calls, "tokens": total_tokens, "by_event": by_event}
