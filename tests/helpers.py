"""Shared payloads and fakes for the test suite."""
import json

import httpx


SEARCH_PAYLOAD = {
    "status": "success",
    "data": {
        "query": "python asyncio",
        "results": [
            {"title": "asyncio docs", "url": "https://docs.python.org/3/library/asyncio.html", "content": "Asynchronous I/O."},
            {"title": "Real Python", "url": "https://realpython.com/async-io-python/", "content": "A walkthrough."},
        ],
        "suggestions": ["python asyncio tutorial", "asyncio gather"],
    },
}

QUOTA_PAYLOAD = {
    "status": "success",
    "data": {
        "quota": {
            "userId": "user-1",
            "monthlyQuota": 100,
            "extraQuota": 0,
            "usedQuota": 50,
            "totalQuota": 100,
            "plan": "free",
            "expiresAt": None,
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-03-05T10:20:30.000Z",
        },
        "plan": {
            "name": "Free",
            "price": 0,
            "features": {"monthlyQueries": 100, "qps": 1},
        },
    },
}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, status_code: int = 200, payload=None, body: bytes | None = None):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if body is not None:
                return httpx.Response(status_code, content=body)
            return httpx.Response(status_code, content=json.dumps(payload or {}).encode())

        super().__init__(handler)


class FailingTransport(httpx.MockTransport):
    """MockTransport whose every request fails to connect."""

    def __init__(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        super().__init__(handler)
