"""Context bundle assembly for advisor (brain) queries.

Packages a snapshot of the dashboard alongside the user's question so the
advisor knows where the rollout stands:
  - summary: one-line prose totals
  - stats: the raw DashboardStats counts
  - initiatives / franchise_groups / deliverables: the first few records of each
  - page: identity stub of the dashboard page the question came from
  - image: attached only when the client sent one
"""

from datetime import datetime, timezone
from typing import Any

from rollout.db.memory_store import MemoryStore

# Records per collection included in the bundle
CONTEXT_SLICE = 3

PAGE_URL = "/"
PAGE_TITLE = "Franchise Rollout Dashboard"

BRAIN_MODE = "quick"
BRAIN_HINTS = ["franchise_rollout", "initiatives", "franchise_groups", "deliverables", "issues"]


def summarize_stats(stats: dict[str, int]) -> str:
    """Render dashboard counts as a short prose summary."""
    return (
        f"Initiatives: {stats['totalInitiatives']} ({stats['runningAgents']} running). "
        f"Franchise groups: {stats['franchiseGroupsTotal']} "
        f"({stats['franchiseGroupsCompleted']} completed). "
        f"Deliverables: {stats['deliverables']}. "
        f"Open issues: {stats['openIssues']}."
    )


def _pick(records: list[dict[str, Any]], keys: tuple[str, ...]) -> list[dict[str, Any]]:
    return [{k: r.get(k) for k in keys} for r in records[:CONTEXT_SLICE]]


def build_context_bundle(
    store: MemoryStore,
    image: str | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """
    Build the dashboard snapshot sent with an advisor question.

    Args:
        store: Store to read from
        image: Optional image payload to attach
        now: Timestamp for the page stub (defaults to current UTC time)

    Returns:
        Context bundle dict
    """
    stats = store.get_stats()
    timestamp = (now or datetime.now(timezone.utc)).isoformat()

    bundle: dict[str, Any] = {
        "summary": summarize_stats(stats),
        "stats": stats,
        "initiatives": _pick(store.list_initiatives(), ("id", "name", "type", "status")),
        "franchise_groups": _pick(store.list_franchise_groups(), ("id", "name", "status", "progress")),
        "deliverables": _pick(store.list_deliverables(), ("id", "title", "type", "status")),
        "page": {"url": PAGE_URL, "title": PAGE_TITLE, "timestamp": timestamp},
    }
    if image:
        bundle["image"] = image

    return bundle


def build_query_payload(
    need: str,
    session_id: str,
    user_id: str,
    context: dict[str, Any],
) -> dict[str, Any]:
    """Assemble the JSON body for the advisor's /query endpoint."""
    return {
        "session_id": session_id,
        "user_id": user_id,
        "need": need,
        "mode": BRAIN_MODE,
        "hints": list(BRAIN_HINTS),
        "context": context,
    }
