from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from .errors import ValidationError


SUPPORTED_LANGUAGES = ("en", "zh", "zh-CN", "zh-TW", "fr", "de", "ja", "ko", "es")

LANGUAGE_LABELS: Dict[str, str] = {
    "en": "English",
    "zh": "Chinese",
    "zh-CN": "Chinese (Simplified)",
    "zh-TW": "Chinese (Traditional)",
    "fr": "French",
    "de": "German",
    "ja": "Japanese",
    "ko": "Korean",
    "es": "Spanish",
}

TIME_RANGES = ("day", "week", "month", "year")
SAFE_LEVELS = (0, 1, 2)

Language = Literal["en", "zh", "zh-CN", "zh-TW", "fr", "de", "ja", "ko", "es"]
TimeRange = Literal["day", "week", "month", "year"]
SafeLevel = Literal[0, 1, 2]


@dataclass(frozen=True)
class SearchRequest:
    query: str
    language: Optional[str] = None
    page: Optional[int] = None
    safe: Optional[int] = None
    time_range: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        """Outbound query parameters, optionals only when present.

        The provider treats safe search as on/off, so any nonzero level is sent as "1".
        """
        params = {"q": self.query}
        if self.language:
            params["language"] = self.language
        if self.page:
            params["page"] = str(self.page)
        if self.safe is not None:
            params["safe"] = "1" if self.safe else "0"
        if self.time_range:
            params["time_range"] = self.time_range
        return params


def validate_search_request(
    query: Any,
    language: Any = None,
    page: Any = None,
    safe: Any = None,
    time_range: Any = None,
) -> SearchRequest:
    if not isinstance(query, str) or not query.strip():
        raise ValidationError("query must be a non-empty string")
    if language is not None and language not in SUPPORTED_LANGUAGES:
        raise ValidationError(
            f"language must be one of: {', '.join(SUPPORTED_LANGUAGES)} (got {language!r})"
        )
    if page is not None:
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValidationError(f"page must be a positive integer (got {page!r})")
    if safe is not None:
        if isinstance(safe, bool) or safe not in SAFE_LEVELS:
            raise ValidationError(f"safe must be 0, 1 or 2 (got {safe!r})")
    if time_range is not None and time_range not in TIME_RANGES:
        raise ValidationError(
            f"time_range must be one of: {', '.join(TIME_RANGES)} (got {time_range!r})"
        )
    return SearchRequest(query=query, language=language, page=page, safe=safe, time_range=time_range)


@dataclass
class SearchItem:
    title: str
    url: str
    content: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchItem":
        return cls(
            title=str(data.get("title") or ""),
            url=str(data.get("url") or ""),
            content=str(data.get("content") or ""),
        )


@dataclass
class SearchResult:
    query: str
    results: List[SearchItem] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResult":
        return cls(
            query=str(data.get("query") or ""),
            results=[SearchItem.from_dict(item) for item in data.get("results") or []],
            suggestions=[str(s) for s in data.get("suggestions") or []],
        )


@dataclass
class QuotaCounters:
    user_id: str
    monthly_quota: int
    extra_quota: int
    used_quota: int
    total_quota: int
    plan: str
    expires_at: Optional[str]
    created_at: str
    updated_at: str


@dataclass
class PlanFeatures:
    monthly_queries: int
    qps: int


@dataclass
class PlanInfo:
    name: str
    price: float
    features: PlanFeatures


@dataclass
class QuotaInfo:
    quota: QuotaCounters
    plan: PlanInfo

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuotaInfo":
        q = data.get("quota") or {}
        p = data.get("plan") or {}
        features = p.get("features") or {}
        return cls(
            quota=QuotaCounters(
                user_id=str(q.get("userId") or ""),
                monthly_quota=q.get("monthlyQuota", 0),
                extra_quota=q.get("extraQuota", 0),
                used_quota=q.get("usedQuota", 0),
                total_quota=q.get("totalQuota", 0),
                plan=str(q.get("plan") or ""),
                expires_at=q.get("expiresAt"),
                created_at=str(q.get("createdAt") or ""),
                updated_at=str(q.get("updatedAt") or ""),
            ),
            plan=PlanInfo(
                name=str(p.get("name") or ""),
                price=p.get("price", 0),
                features=PlanFeatures(
                    monthly_queries=features.get("monthlyQueries", 0),
                    qps=features.get("qps", 0),
                ),
            ),
        )
