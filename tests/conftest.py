"""Root pytest configuration for all tests.

HTTP traffic is faked at the transport adapter level: RecordingAdapter is
mounted on the client's requests Session, records every prepared request and
answers with queued responses. Header merging, query encoding and body
serialization therefore run exactly as they would against a real server.
"""

import json
import threading
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter

from confluence_rest import ConfluenceClient


class RecordingAdapter(BaseAdapter):
    """Transport adapter that records requests and replays canned responses."""

    def __init__(self):
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self._responses: List[Tuple[int, bytes]] = []
        self._lock = threading.Lock()

    def queue(self, status: int = 200, json_body: Any = None, raw: Optional[bytes] = None) -> None:
        """Queue the next response; raw takes precedence over json_body."""
        if raw is None:
            raw = b"" if json_body is None else json.dumps(json_body).encode("utf-8")
        self._responses.append((status, raw))

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        with self._lock:
            self.requests.append(request)
            status, raw = self._responses.pop(0) if self._responses else (200, b"{}")

        response = requests.Response()
        response.status_code = status
        response._content = raw
        response.headers["Content-Type"] = "application/json"
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass

    @property
    def last(self) -> requests.PreparedRequest:
        return self.requests[-1]

    def last_path(self) -> str:
        return urlsplit(self.last.url).path

    def last_query(self) -> Dict[str, str]:
        return dict(parse_qsl(urlsplit(self.last.url).query))

    def last_json(self) -> Any:
        return json.loads(self.last.body.decode("utf-8"))


def mount(client: ConfluenceClient, adapter: RecordingAdapter) -> None:
    client.api.session.mount("http://", adapter)
    client.api.session.mount("https://", adapter)


@pytest.fixture
def adapter():
    """A fresh RecordingAdapter."""
    return RecordingAdapter()


@pytest.fixture
def client(adapter):
    """A client with default configuration wired to the recording adapter."""
    client = ConfluenceClient.builder().build()
    mount(client, adapter)
    yield client
    client.close()


@pytest.fixture
def make_client(adapter):
    """Factory building clients from a configured builder, wired to the adapter."""
    built = []

    def _make(builder):
        client = builder.build()
        mount(client, adapter)
        built.append(client)
        return client

    yield _make
    for client in built:
        client.close()
