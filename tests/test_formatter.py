from tuningsearch_mcp.search.formatter import (
    ZERO_TOTAL_USAGE,
    format_quota,
    format_search_result,
    format_timestamp,
    usage_percentage,
)
from tuningsearch_mcp.search.models import QuotaInfo, SearchResult

from tests.helpers import QUOTA_PAYLOAD


def quota_with(used: int, total: int, updated_at: str = "2024-03-05T10:20:30Z") -> QuotaInfo:
    return QuotaInfo.from_dict(
        {
            "quota": {"monthlyQuota": total, "usedQuota": used, "totalQuota": total, "updatedAt": updated_at},
            "plan": {"name": "Free", "features": {"monthlyQueries": total, "qps": 2}},
        }
    )


def test_single_result_without_suggestions():
    result = SearchResult.from_dict(
        {"query": "x", "results": [{"title": "T", "url": "U", "content": "C"}], "suggestions": []}
    )
    assert format_search_result(result) == 'Query: "x"\n\nTitle: T\nContent: C\nLink: U'


def test_suggestions_are_appended_comma_separated():
    result = SearchResult.from_dict(
        {"query": "x", "results": [{"title": "T", "url": "U", "content": "C"}], "suggestions": ["a", "b"]}
    )
    assert format_search_result(result) == (
        'Query: "x"\n\nTitle: T\nContent: C\nLink: U\n\nSuggested queries: a, b'
    )


def test_multiple_results_are_separated_by_blank_lines():
    result = SearchResult.from_dict(
        {
            "query": "q",
            "results": [
                {"title": "T1", "url": "U1", "content": "C1"},
                {"title": "T2", "url": "U2", "content": "C2"},
            ],
        }
    )
    assert format_search_result(result) == (
        'Query: "q"\n\nTitle: T1\nContent: C1\nLink: U1\n\nTitle: T2\nContent: C2\nLink: U2'
    )


def test_empty_results_yield_header_only():
    assert format_search_result(SearchResult(query="nothing")) == 'Query: "nothing"'


def test_quota_reports_remaining_and_usage():
    text = format_quota(quota_with(used=50, total=100))
    assert "Remaining Quota: 50 queries" in text
    assert "Quota Usage: 50%" in text
    assert "Plan: Free" in text
    assert "QPS Limit: 2 queries per second" in text


def test_quota_from_provider_payload():
    text = format_quota(QuotaInfo.from_dict(QUOTA_PAYLOAD["data"]))
    assert text.startswith("TuningSearch Quota Information:\n\nPlan: Free")
    assert "Monthly Quota: 100 queries" in text
    assert "Used Quota: 50 queries" in text


def test_zero_total_quota_reports_sentinel():
    text = format_quota(quota_with(used=3, total=0))
    assert f"Quota Usage: {ZERO_TOTAL_USAGE}" in text
    assert "Remaining Quota: -3 queries" in text


def test_remaining_quota_is_not_clamped():
    assert "Remaining Quota: -20 queries" in format_quota(quota_with(used=120, total=100))


def test_usage_rounds_half_up():
    assert usage_percentage(1, 8) == "13%"
    assert usage_percentage(1, 3) == "33%"
    assert usage_percentage(0, 0) == ZERO_TOTAL_USAGE


def test_unparseable_timestamp_is_shown_verbatim():
    assert format_timestamp("yesterday-ish") == "yesterday-ish"
    assert format_timestamp("") == "unknown"


def test_naive_timestamp_is_rendered_without_conversion():
    assert format_timestamp("2024-03-05T10:20:30") == "2024-03-05 10:20:30"
