"""Client library for the Confluence REST API.

Builds authenticated requests, maps JSON payloads to typed models and exposes
one method per supported endpoint on ConfluenceClient.
"""

from .api import ConfluenceAPI
from .auth import Authenticator, Credentials, basic_auth_header
from .callback import Callback, FunctionCallback
from .client import BASE_URL, Builder, ConfluenceClient
from .errors import ConfigurationError, ConfluenceError
from .logging_config import configure_logging
from .models import (
    Body,
    Content,
    ContentResultList,
    NoContent,
    Representation,
    Space,
    SpaceResultList,
    Storage,
    Type,
    Version,
)

__all__ = [
    "BASE_URL",
    "Authenticator",
    "Body",
    "Builder",
    "Callback",
    "ConfigurationError",
    "ConfluenceAPI",
    "ConfluenceClient",
    "ConfluenceError",
    "Content",
    "ContentResultList",
    "Credentials",
    "FunctionCallback",
    "NoContent",
    "Representation",
    "Space",
    "SpaceResultList",
    "Storage",
    "Type",
    "Version",
    "basic_auth_header",
    "configure_logging",
]
