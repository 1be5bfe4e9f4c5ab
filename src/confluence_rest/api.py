"""REST proxy for the Confluence REST API.

Each method of ConfluenceAPI maps to exactly one endpoint: it builds the
request from a fixed method and path template, sends it through a shared
requests Session and deserializes the response into a model. The session
carries the Accept and Authorization headers for every request.

Errors are not translated. HTTP error statuses raise requests.HTTPError,
network failures raise the matching requests exception and malformed JSON
raises ValueError.
"""

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar
from urllib.parse import quote

import requests

from .callback import Callback
from .models import (
    Content,
    ContentResultList,
    NoContent,
    SpaceResultList,
    Storage,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_TIMEOUT = 30
MAX_WORKERS = 4

CONTENT_PATH = "/rest/api/content"
CONVERT_PATH = "/rest/api/contentbody/convert"
SPACE_PATH = "/rest/api/space"


def _segment(value: Any) -> str:
    """Quote a single path segment."""
    return quote(str(value), safe="")


class JsonConverter:
    """Maps models to and from JSON bodies.

    Bodies are written with ensure_ascii=False so that markup and non-ASCII
    text in content bodies are sent exactly as given.
    """

    content_type = "application/json; charset=utf-8"

    def to_body(self, model: Any) -> bytes:
        return json.dumps(model.to_dict(), ensure_ascii=False).encode("utf-8")

    def from_response(self, response: requests.Response, model: Type[T]) -> T:
        if model is NoContent:
            return NoContent(status_code=response.status_code)  # type: ignore[return-value]
        return model.from_dict(response.json())  # type: ignore[attr-defined]


class ConfluenceAPI:
    """Issues HTTP requests against the Confluence REST endpoints.

    Args:
        base_url: Base URL of the Confluence instance, without trailing slash
        authorization: Value of the Authorization header for every request
        timeout: Per-request timeout in seconds
        session: Optional pre-built session (a new one is created otherwise)

    Example:
        >>> api = ConfluenceAPI("http://localhost:8090", "Basic YWRtaW46YWRtaW4=")
        >>> api.get_content_by_id("12345").title
        'Home'
    """

    def __init__(
        self,
        base_url: str,
        authorization: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.converter = JsonConverter()
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "Authorization": authorization,
        })
        self._executor = ThreadPoolExecutor(
            max_workers=MAX_WORKERS,
            thread_name_prefix="confluence-rest",
        )

    def _call(
        self,
        method: str,
        path: str,
        model: Type[T],
        params: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Tuple[T, requests.Response]:
        """Send one request and deserialize the response into model."""
        url = f"{self.base_url}{path}"
        headers = {}
        data = None
        if body is not None:
            data = self.converter.to_body(body)
            headers["Content-Type"] = self.converter.content_type

        logger.debug(f"{method} {url} params={dict(params or {})}")
        response = self.session.request(
            method,
            url,
            params=params,
            data=data,
            headers=headers,
            timeout=self.timeout,
        )
        logger.debug(f"{method} {url} -> {response.status_code}")
        response.raise_for_status()
        return self.converter.from_response(response, model), response

    def get_content_by_id(self, content_id: str) -> Content:
        result, _ = self._call("GET", f"{CONTENT_PATH}/{_segment(content_id)}", Content)
        return result

    def get_content_results(self) -> ContentResultList:
        result, _ = self._call("GET", CONTENT_PATH, ContentResultList)
        return result

    def get_content_by_space_key_and_title(self, key: str, title: str) -> ContentResultList:
        result, _ = self._call(
            "GET",
            CONTENT_PATH,
            ContentResultList,
            params={"spaceKey": key, "title": title},
        )
        return result

    def post_content_conversion(self, storage: Storage, convert_to: str) -> Storage:
        result, _ = self._call(
            "POST",
            f"{CONVERT_PATH}/{_segment(convert_to)}",
            Storage,
            body=storage,
        )
        return result

    def post_content(self, content: Content) -> Content:
        result, _ = self._call("POST", CONTENT_PATH, Content, body=content)
        return result

    def post_content_with_callback(
        self,
        content: Content,
        callback: Callback[Content],
    ) -> "Future[Content]":
        """Create content on a worker thread and report the outcome to callback.

        Returns:
            Future resolving to the created Content, or raising the
            transport error that was passed to callback.failure
        """
        def _post() -> Content:
            try:
                result, response = self._call("POST", CONTENT_PATH, Content, body=content)
            except Exception as e:
                logger.debug(f"Asynchronous content creation failed: {e}")
                callback.failure(e)
                raise
            callback.success(result, response)
            return result

        return self._executor.submit(_post)

    def delete_content_by_id(self, content_id: str) -> NoContent:
        result, _ = self._call("DELETE", f"{CONTENT_PATH}/{_segment(content_id)}", NoContent)
        return result

    def get_spaces(self) -> SpaceResultList:
        result, _ = self._call("GET", SPACE_PATH, SpaceResultList)
        return result

    def get_all_space_content(
        self,
        space_key: str,
        params: Dict[str, str],
    ) -> ContentResultList:
        result, _ = self._call(
            "GET",
            f"{SPACE_PATH}/{_segment(space_key)}/content/page",
            ContentResultList,
            params=params,
        )
        return result

    def get_root_content_by_space_key(self, space_key: str, content_type: str) -> ContentResultList:
        result, _ = self._call(
            "GET",
            f"{SPACE_PATH}/{_segment(space_key)}/content/{_segment(content_type)}",
            ContentResultList,
            params={"depth": "root"},
        )
        return result

    def close(self) -> None:
        """Wait for pending asynchronous requests, then close the session."""
        self._executor.shutdown(wait=True)
        self.session.close()
