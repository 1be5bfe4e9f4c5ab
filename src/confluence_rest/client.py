"""High level client for the Confluence REST API.

Example:
    >>> client = (
    ...     ConfluenceClient.builder()
    ...     .base_url("http://confluence.organisation.org")
    ...     .username("jane")
    ...     .password("secret")
    ...     .build()
    ... )
    >>> search = client.get_content_by_space_key_and_title("DEV", "A page or blog in DEV")
"""

import logging
from concurrent.futures import Future
from typing import List, Optional

from .api import DEFAULT_TIMEOUT, ConfluenceAPI
from .auth import DEFAULT_PASSWORD, DEFAULT_USERNAME, Authenticator, Credentials
from .callback import Callback
from .errors import ConfigurationError
from .models import (
    Content,
    ContentResultList,
    Representation,
    Space,
    Storage,
    Type,
)

logger = logging.getLogger(__name__)

# Local development instance used when no base URL is configured
BASE_URL = "http://localhost:8090"

SPACE_CONTENT_EXPAND = "ancestors,body.storage"
# Only the first page is fetched; larger spaces are truncated
SPACE_CONTENT_LIMIT = "1000"


class ConfluenceClient:
    """Makes requests to the Confluence REST API.

    Instances are created with ConfluenceClient.builder() and hold no mutable
    state, so one client can be shared between threads.
    """

    def __init__(self, api: ConfluenceAPI, credentials: Credentials):
        self._api = api
        self._credentials = credentials

    @staticmethod
    def builder() -> "Builder":
        return Builder()

    @property
    def base_url(self) -> str:
        return self._api.base_url

    @property
    def username(self) -> str:
        return self._credentials.username

    @property
    def authorization(self) -> str:
        """The Authorization header sent with every request."""
        return self._api.session.headers["Authorization"]

    @property
    def api(self) -> ConfluenceAPI:
        return self._api

    def get_content_by_id(self, content_id: str) -> Content:
        """Fetch a single page or blog post by id."""
        return self._api.get_content_by_id(content_id)

    def get_content_results(self) -> ContentResultList:
        """Fetch the first page of content using the server's default paging."""
        return self._api.get_content_results()

    def get_content_by_space_key_and_title(self, key: str, title: str) -> ContentResultList:
        """Search content by space key and title.

        Args:
            key: The space key to search under
            title: Title of the page or blog post to look for

        Returns:
            ContentResultList with the matches, as decided by the server
        """
        return self._api.get_content_by_space_key_and_title(key, title)

    def convert_content(self, storage: Storage, convert_to: Representation) -> Storage:
        """Convert a body from one representation to another.

        Args:
            storage: The body to convert
            convert_to: Target representation

        Returns:
            Storage holding the converted body
        """
        return self._api.post_content_conversion(storage, str(convert_to))

    def post_content_with_callback(
        self,
        content: Content,
        callback: Callback[Content],
    ) -> "Future[Content]":
        """Create a page or blog post without blocking.

        callback.success receives the created Content and the response;
        callback.failure receives the transport error. The returned future
        resolves the same way.
        """
        return self._api.post_content_with_callback(content, callback)

    def post_content(self, content: Content) -> Content:
        """Create a page or blog post and return it as stored by the server."""
        logger.info(f"Posting content: {content}")
        return self._api.post_content(content)

    def delete_content_by_id(self, content_id: str) -> None:
        """Trash or purge a piece of content.

        The server decides what happens based on the content type and status:
        current trashable content is moved to the trash, trashed content
        requested with status=trashed is purged, and content that cannot be
        trashed is deleted permanently.

        Args:
            content_id: Id of the page or blog post to delete
        """
        no_content = self._api.delete_content_by_id(content_id)
        logger.debug(f"Response: {no_content}")

    def get_spaces(self) -> List[Space]:
        """List the spaces visible to the configured user."""
        return self._api.get_spaces().spaces

    def get_all_space_content(self, space_key: str) -> List[Content]:
        """Fetch the content of a space with ancestors and storage bodies expanded.

        Args:
            space_key: Key of the space

        Returns:
            Up to 1000 Content instances, in server order
        """
        results = self._api.get_all_space_content(
            space_key,
            {"expand": SPACE_CONTENT_EXPAND, "limit": SPACE_CONTENT_LIMIT},
        )
        return results.contents

    def get_root_content_by_space_key(self, space_key: str, content_type: Type) -> List[Content]:
        """Fetch the root level content of a space.

        Args:
            space_key: Key of the space
            content_type: Type.PAGE or Type.BLOGPOST

        Returns:
            Content instances at the root of the space
        """
        results = self._api.get_root_content_by_space_key(space_key, str(content_type))
        return results.contents

    def close(self) -> None:
        self._api.close()

    def __enter__(self) -> "ConfluenceClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class Builder:
    """Collects optional settings and builds a ConfluenceClient.

    Settings that are never set fall back to BASE_URL and the default
    admin/admin credentials when build() is called. After the first build()
    the builder is frozen: build() may be called again but the setters raise
    ConfigurationError.
    """

    def __init__(self):
        self._username: Optional[str] = None
        self._password: Optional[str] = None
        self._base_url: Optional[str] = None
        self._timeout: float = DEFAULT_TIMEOUT
        self._built = False

    @classmethod
    def from_env(cls, authenticator: Optional[Authenticator] = None) -> "Builder":
        """Create a builder pre-populated from CONFLUENCE_* environment variables."""
        settings = (authenticator or Authenticator()).get_settings()
        builder = cls()
        if settings.url:
            builder.base_url(settings.url)
        if settings.username:
            builder.username(settings.username)
        if settings.password:
            builder.password(settings.password)
        if settings.timeout:
            builder.timeout(settings.timeout)
        return builder

    def _check_not_built(self, setting: str) -> None:
        if self._built:
            raise ConfigurationError(
                f"Cannot change '{setting}' after build() has been called",
                setting=setting,
            )

    def username(self, username: str) -> "Builder":
        self._check_not_built("username")
        self._username = username
        return self

    def password(self, password: str) -> "Builder":
        self._check_not_built("password")
        self._password = password
        return self

    def base_url(self, url: str) -> "Builder":
        """Send requests to url instead of BASE_URL."""
        self._check_not_built("base_url")
        self._base_url = url
        return self

    def timeout(self, seconds: float) -> "Builder":
        self._check_not_built("timeout")
        if seconds <= 0:
            raise ConfigurationError(
                f"Timeout must be positive, got {seconds}",
                setting="timeout",
            )
        self._timeout = seconds
        return self

    def build(self) -> ConfluenceClient:
        """Build a configured ConfluenceClient.

        The Authorization header is computed here, once, and reused for
        every request made through the returned client.
        """
        url = (self._base_url if self._base_url is not None else BASE_URL).rstrip("/")
        credentials = Credentials(
            username=self._username if self._username is not None else DEFAULT_USERNAME,
            password=self._password if self._password is not None else DEFAULT_PASSWORD,
        )
        api = ConfluenceAPI(
            base_url=url,
            authorization=credentials.authorization_header(),
            timeout=self._timeout,
        )
        self._built = True
        logger.debug(f"Built Confluence client for {url} as {credentials.username}")
        return ConfluenceClient(api, credentials)
