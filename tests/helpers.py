import json
from typing import Any, List, Tuple

import httpx
import requests

ENDPOINT = "https://translation.example.com/api"

MODEL_PAYLOAD = {
    "model_id": "en-es",
    "source": "en",
    "target": "es",
    "base_model_id": "",
    "domain": "news",
    "customizable": True,
    "default_model": True,
    "owner": "service",
    "status": "available",
    "name": "",
}

TRANSLATION_PAYLOAD = {
    "word_count": 2,
    "character_count": 11,
    "translations": [{"translation": "Hola mundo"}],
}

IDENTIFY_PAYLOAD = {
    "languages": [
        {"language": "fr", "confidence": 0.92},
        {"language": "ca", "confidence": 0.05},
        {"language": "it", "confidence": 0.01},
    ]
}


def as_body(payload: Any) -> bytes:
    if isinstance(payload, bytes):
        return payload
    return json.dumps(payload).encode("utf-8")


class FakeSession(requests.Session):
    """``requests.Session`` answering from a queue of ``(status, payload)``.

    A queued exception instance is raised instead of answering.
    """

    def __init__(self, responses: List[Tuple[int, Any]]):
        super().__init__()
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if isinstance(self.responses[0], Exception):
            raise self.responses.pop(0)
        status, payload = self.responses.pop(0)
        resp = requests.Response()
        resp.status_code = status
        resp._content = as_body(payload)
        resp.headers["Content-Type"] = "application/json"
        resp.url = url
        return resp


class RecordingTransport(httpx.MockTransport):
    """``httpx`` mock transport answering from a queue, keeping the requests.

    A queued exception class is raised, bound to the request, instead of
    answering.
    """

    def __init__(self, responses: List[Tuple[int, Any]]):
        self.responses = list(responses)
        self.requests: List[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.responses[0], type):
            raise self.responses.pop(0)("connection refused", request=request)
        status, payload = self.responses.pop(0)
        return httpx.Response(status, content=as_body(payload))


