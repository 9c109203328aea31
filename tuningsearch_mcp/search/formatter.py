"""Plain-text rendering of TuningSearch responses for LLM consumption."""
from __future__ import annotations

import math
from datetime import datetime

from .models import QuotaInfo, SearchResult


ZERO_TOTAL_USAGE = "N/A (total quota is 0)"


def format_search_result(result: SearchResult) -> str:
    blocks = [f'Query: "{result.query}"']
    for item in result.results:
        blocks.append(f"Title: {item.title}\nContent: {item.content}\nLink: {item.url}")
    if result.suggestions:
        blocks.append("Suggested queries: " + ", ".join(result.suggestions))
    return "\n\n".join(blocks)


def usage_percentage(used: float, total: float) -> str:
    """Usage as a rounded percentage; rounds half up, unlike round()."""
    if not total:
        return ZERO_TOTAL_USAGE
    return f"{math.floor(used / total * 100 + 0.5)}%"


def format_timestamp(value: str | None) -> str:
    if not value:
        return "unknown"
    try:
        ts = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if ts.tzinfo is not None:
        ts = ts.astimezone()
    return ts.strftime("%Y-%m-%d %H:%M:%S")


def format_quota(info: QuotaInfo) -> str:
    quota = info.quota
    remaining = quota.total_quota - quota.used_quota
    lines = [
        "TuningSearch Quota Information:",
        "",
        f"Plan: {info.plan.name}",
        f"Monthly Quota: {quota.monthly_quota} queries",
        f"Used Quota: {quota.used_quota} queries",
        f"Remaining Quota: {remaining} queries",
        f"Quota Usage: {usage_percentage(quota.used_quota, quota.total_quota)}",
        f"QPS Limit: {info.plan.features.qps} queries per second",
        "",
        f"Last Updated: {format_timestamp(quota.updated_at)}",
    ]
    return "\n".join(lines)
