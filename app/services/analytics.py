"""Analytics and metrics tracking."""
import logging
from datetime import datetime
from typing import Dict, Any
from collections import defaultdict

logger = logging.getLogger(__name__)

# In-memory analytics storage (simple, no database needed)
_analytics = {
    "requests": [],  # Last 1000 highlight/display requests
    "stats": {
        "total_requests": 0,
        "total_matches": 0,
        "empty_queries": 0,
    }
}

MAX_HISTORY = 1000  # Keep last 1000 events


def log_highlight(query: str, mode: str, num_terms: int, num_matches: int,
                  response_time_ms: float, endpoint: str = "highlight"):
    """
    Log a highlighting event.

    Args:
        query: Search syntax query (may be empty for tag highlighting)
        mode: "extract", "terms", "tags" or "none"
        num_terms: Number of display terms extracted
        num_matches: Number of highlighted ranges/elements
        response_time_ms: Response time in milliseconds
        endpoint: Which endpoint handled the request
    """
    event = {
        "query": (query or "")[:100],  # Truncate for privacy
        "timestamp": datetime.now().isoformat(),
        "mode": mode,
        "endpoint": endpoint,
        "num_terms": num_terms,
        "num_matches": num_matches,
        "response_time_ms": round(response_time_ms, 2)
    }

    _analytics["requests"].append(event)
    _analytics["stats"]["total_requests"] += 1
    _analytics["stats"]["total_matches"] += num_matches

    if num_terms == 0 and mode in ("extract", "terms"):
        _analytics["stats"]["empty_queries"] += 1

    # Keep only last MAX_HISTORY
    if len(_analytics["requests"]) > MAX_HISTORY:
        _analytics["requests"] = _analytics["requests"][-MAX_HISTORY:]

    logger.debug(f"Highlight logged: {event['query'][:50]}... ({mode}, {num_matches} matches)")


def get_analytics() -> Dict[str, Any]:
    """
    Get analytics summary.

    Returns:
        Dictionary with analytics data
    """
    requests = _analytics["requests"]
    stats = _analytics["stats"]

    if requests:
        avg_response_time = sum(r["response_time_ms"] for r in requests) / len(requests)
        avg_terms = sum(r["num_terms"] for r in requests) / len(requests)
        avg_matches = sum(r["num_matches"] for r in requests) / len(requests)
    else:
        avg_response_time = 0
        avg_terms = 0
        avg_matches = 0

    # Popular queries (top 10)
    query_counts = defaultdict(int)
    for r in requests:
        if r["query"]:
            query_counts[r["query"]] += 1
    popular_queries = sorted(query_counts.items(), key=lambda x: x[1], reverse=True)[:10]

    modes = defaultdict(int)
    for r in requests:
        modes[r["mode"]] += 1

    return {
        "overview": {
            "total_requests": stats["total_requests"],
            "total_matches": stats["total_matches"],
            "empty_queries": stats["empty_queries"],
            "recent_requests": len(requests)
        },
        "performance": {
            "avg_response_time_ms": round(avg_response_time, 2),
            "avg_terms_per_query": round(avg_terms, 2),
            "avg_matches_per_request": round(avg_matches, 2)
        },
        "popular_queries": [{"query": q, "count": c} for q, c in popular_queries],
        "mode_distribution": dict(modes),
        "recent_requests": requests[-10:]  # Last 10 requests
    }


def clear_analytics():
    """Clear all analytics data."""
    _analytics["requests"].clear()
    _analytics["stats"] = {
        "total_requests": 0,
        "total_matches": 0,
        "empty_queries": 0,
    }
    logger.info("Analytics cleared")
