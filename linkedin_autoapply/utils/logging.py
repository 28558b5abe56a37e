"""Logging utilities"""

import json
from datetime import datetime, timezone


def log_outcome(job_url, index, outcome, log_file=None):
    """Print the outcome line for one listing and append it to the JSONL log"""
    status = outcome.kind.name
    title = outcome.title or "Unknown job title"

    print(f"[{status}] #{index} {title}")
    if outcome.detail:
        print(f"  Reason: {outcome.detail}")

    if not log_file:
        return

    result = {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "job_url": job_url,
        "index": index,
        "title": title,
        "status": status,
    }
    if outcome.detail:
        result["reason"] = outcome.detail

    with open(log_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(result) + "\n")
