"""Fake HTTP plumbing shared by the test suites."""

import json
from unittest.mock import Mock

from requests.structures import CaseInsensitiveDict

from elevenlabs_rest import ElevenLabsClient, ElevenLabsSettings


BASE_URL = "https://api.elevenlabs.io/v1/"


def make_response(status_code=200, json_data=None, content=b"", headers=None, chunks=None):
    resp = Mock()
    resp.status_code = status_code
    resp.headers = CaseInsensitiveDict(headers or {})
    resp.json.return_value = json_data
    if json_data is not None:
        resp.text = json.dumps(json_data)
        resp.headers.setdefault("Content-Type", "application/json")
        content = content or resp.text.encode("utf-8")
    else:
        resp.text = content.decode("utf-8", errors="ignore")
    resp.content = content
    resp.iter_content.side_effect = lambda chunk_size=None: iter(
        chunks if chunks is not None else [content]
    )
    return resp


def router(routes):
    """
    Build a ``session.request`` side effect from ``{(method, path): response}``.

    ``path`` is the URL without the base URL and query string. A list value is
    consumed one response per call.
    """
    def handler(method, url, **kwargs):
        path = url.split("?")[0][len(BASE_URL):]
        if (method, path) not in routes:
            raise AssertionError(f"Unexpected request {method} {url}")
        result = routes[(method, path)]
        if isinstance(result, list):
            return result.pop(0)
        return result

    return handler


def make_client(cache_root, routes=None, debug=False):
    session = Mock()
    session.headers = {}
    if routes is not None:
        session.request.side_effect = router(routes)
    client = ElevenLabsClient(
        api_key="test-key",
        settings=ElevenLabsSettings(),
        session=session,
        debug=debug,
        cache_root=cache_root,
    )
    return client, session
